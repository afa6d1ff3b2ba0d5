"""
Scalar and enumeration types shared by the Scryfall models.

Scryfall documents are decoded JSON, so scalars are validated strictly:
no coercion between strings, numbers and booleans.
"""

from enum import Enum
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    AnyUrl,
    BeforeValidator,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
)
from pydantic_core import PydanticCustomError


class Rarity(str, Enum):
    """Card rarity levels."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    SPECIAL = "special"
    MYTHIC = "mythic"
    BONUS = "bonus"


class ImageStatus(str, Enum):
    """Scryfall image availability status."""

    MISSING = "missing"
    PLACEHOLDER = "placeholder"
    LOWRES = "lowres"
    HIGHRES_SCAN = "highres_scan"


class Legality(str, Enum):
    """Format legality status values."""

    LEGAL = "legal"
    NOT_LEGAL = "not_legal"
    RESTRICTED = "restricted"
    BANNED = "banned"


class SecurityStamp(str, Enum):
    """Holographic security stamp shapes."""

    OVAL = "oval"
    TRIANGLE = "triangle"
    ACORN = "acorn"
    CIRCLE = "circle"
    ARENA = "arena"
    HEART = "heart"


class Component(str, Enum):
    """Role a related card plays in a relationship."""

    TOKEN = "token"
    MELD_PART = "meld_part"
    MELD_RESULT = "meld_result"
    COMBO_PIECE = "combo_piece"


_ANY_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    """
    Confirm a string parses as an absolute URL
    :param value: Candidate URL
    :return: The input string, unchanged
    """
    try:
        _ANY_URL_ADAPTER.validate_python(value)
    except ValidationError as error:
        raise PydanticCustomError(
            "invalid_url_format",
            "{reason}",
            {"reason": error.errors()[0]["msg"]},
        ) from None
    return value


def _closed_enum_checker(enum_cls: type[Enum]) -> Any:
    allowed = tuple(member.value for member in enum_cls)
    expected = ", ".join(repr(value) for value in allowed)

    def check(value: Any) -> Any:
        # Non-strings fall through to the enum validator as type errors
        if isinstance(value, str) and not isinstance(value, enum_cls):
            if value not in allowed:
                raise PydanticCustomError(
                    "invalid_enum_value",
                    "Input should be one of {expected}",
                    {"allowed": allowed, "actual": value, "expected": expected},
                )
        return value

    return BeforeValidator(check)


Url = Annotated[StrictStr, AfterValidator(_check_url)]
Number = StrictFloat
Identifier = StrictInt
Flag = StrictBool
Text = StrictStr

RarityField = Annotated[Rarity, _closed_enum_checker(Rarity)]
ImageStatusField = Annotated[ImageStatus, _closed_enum_checker(ImageStatus)]
LegalityField = Annotated[Legality, _closed_enum_checker(Legality)]
SecurityStampField = Annotated[SecurityStamp, _closed_enum_checker(SecurityStamp)]
ComponentField = Annotated[Component, _closed_enum_checker(Component)]
