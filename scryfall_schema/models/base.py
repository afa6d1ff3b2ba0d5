"""
Scryfall base model and schema export helpers.
"""

from __future__ import annotations

import pathlib
from typing import TYPE_CHECKING, Any

import orjson
from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError


if TYPE_CHECKING:
	import polars as pl


class ScryfallObject(BaseModel):
	"""
	Base for every Scryfall record.

	Records are frozen value objects. Unknown keys are dropped, optional
	keys may be absent but never explicitly null.
	"""

	model_config = ConfigDict(frozen=True, extra="ignore")

	@field_validator("*", mode="before")
	@classmethod
	def reject_null(cls, value: Any, info: ValidationInfo) -> Any:
		if value is None:
			raise PydanticCustomError(
				"null_value",
				"Field '{field}' may be omitted but must not be null",
				{"field": info.field_name, "expected": "a value, or the key omitted"},
			)
		return value

	def to_dict(self) -> dict[str, Any]:
		"""
		Dump to a JSON-compatible dict holding only the keys that were
		present on input, so the result re-validates to an equal record
		"""
		return self.model_dump(mode="json", exclude_unset=True)

	@classmethod
	def json_schema(
		cls,
		ref_template: str = "#/$defs/{model}",
		mode: str = "validation",
	) -> dict[str, Any]:
		"""Generate JSON Schema for this model.

		Args:
		    ref_template: Template for $ref URIs
		    mode: 'validation' (input) or 'serialization' (output)

		Returns:
		    JSON Schema as dict
		"""
		return cls.model_json_schema(ref_template=ref_template, mode=mode)

	@classmethod
	def write_json_schema(cls, path: pathlib.Path, pretty: bool = True) -> None:
		"""Write JSON Schema to file.

		Args:
		    path: Output path
		    pretty: Pretty-print with indentation
		"""
		opts = orjson.OPT_SORT_KEYS
		if pretty:
			opts |= orjson.OPT_INDENT_2
		with path.open("wb") as f:
			f.write(orjson.dumps(cls.json_schema(), option=opts))

	@classmethod
	def polars_schema(cls) -> pl.Struct:
		"""Generate a Polars struct schema matching this model."""
		from .utils import PolarsConverter

		return PolarsConverter.model_to_struct(cls)
