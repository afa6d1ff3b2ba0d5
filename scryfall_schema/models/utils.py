"""
Type conversion utilities for the Scryfall models.
"""

from __future__ import annotations

import types
from enum import Enum
from typing import TYPE_CHECKING, Annotated, Any, Union, get_args, get_origin

import polars as pl
from pydantic import BaseModel


if TYPE_CHECKING:
	from polars.datatypes import DataType, Struct


def is_union_type(python_type: Any) -> bool:
	"""Check for both typing.Union and PEP 604 unions."""
	origin = get_origin(python_type)
	return origin is Union or origin is types.UnionType


class PolarsConverter:
	"""Converts Pydantic field annotations to Polars types."""

	@classmethod
	def python_to_polars(cls, python_type: Any) -> DataType:
		"""Map Python type to Polars dtype."""
		origin = get_origin(python_type)
		args = get_args(python_type)

		# Strict scalars and enum checkers wrap the real type
		if origin is Annotated:
			return cls.python_to_polars(args[0])

		if is_union_type(python_type):
			non_none = [a for a in args if a is not type(None)]
			if len(non_none) == 1:
				return cls.python_to_polars(non_none[0])
			return pl.String

		if origin is list:
			inner = cls.python_to_polars(args[0]) if args else pl.String
			return pl.List(inner)

		# Open-ended mappings become key/value lists
		if origin is dict:
			value = cls.python_to_polars(args[1]) if args else pl.String
			return pl.List(pl.Struct([pl.Field("key", pl.String), pl.Field("value", value)]))

		if isinstance(python_type, type) and issubclass(python_type, BaseModel):
			return cls.model_to_struct(python_type)

		if isinstance(python_type, type) and issubclass(python_type, Enum):
			return pl.String
		if python_type is bool:
			return pl.Boolean
		if python_type is int:
			return pl.Int64
		if python_type is float:
			return pl.Float64

		return pl.String

	@classmethod
	def model_to_struct(cls, model: type[BaseModel]) -> Struct:
		"""Convert Pydantic model to Polars Struct, keeping declaration order."""
		fields = []
		for name, info in model.model_fields.items():
			fields.append(pl.Field(info.alias or name, cls.python_to_polars(info.annotation)))
		return pl.Struct(fields)
