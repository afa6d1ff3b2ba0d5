"""
Card document validation.

Every entry point either returns a fully typed record or raises
ShapeError listing every violation found, in field declaration order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, TypeVar, Union

import orjson
from pydantic import ValidationError

from .errors import ShapeError, Violation, ViolationKind
from .models import Card, CardFace, ImageUris, RelatedCard
from .models.adapters import get_card_adapter, get_cards_adapter
from .schema_config import ScryfallSchemaConfig
from .utils import describe_type, format_path

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

_KIND_BY_ERROR_TYPE: dict[str, ViolationKind] = {
    "missing": ViolationKind.MISSING_REQUIRED_FIELD,
    "invalid_url_format": ViolationKind.INVALID_URL_FORMAT,
    "invalid_enum_value": ViolationKind.INVALID_ENUM_VALUE,
    "model_type": ViolationKind.INVALID_NESTED_SHAPE,
    "model_attributes_type": ViolationKind.INVALID_NESTED_SHAPE,
    "dict_type": ViolationKind.INVALID_NESTED_SHAPE,
}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a non-raising validation call."""

    card: Optional[Card] = None
    violations: tuple[Violation, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.card is not None

    def unwrap(self) -> Card:
        """Return the card or raise the collected violations."""
        if self.card is None:
            raise ShapeError(self.violations)
        return self.card


def to_violations(error: ValidationError) -> list[Violation]:
    """
    Translate a Pydantic ValidationError into shape violations
    :param error: Error raised by a model or adapter
    :return: One violation per elementary error
    """
    violations = []
    for details in error.errors():
        kind = _KIND_BY_ERROR_TYPE.get(details["type"], ViolationKind.WRONG_TYPE)
        ctx = details.get("ctx") or {}
        path = format_path(details["loc"])

        if kind is ViolationKind.MISSING_REQUIRED_FIELD:
            violations.append(
                Violation(path, kind, "Required field is missing", expected="present")
            )
            continue

        actual = details.get("input")
        expected = ctx.get("expected")
        if expected is None and kind is ViolationKind.WRONG_TYPE:
            expected = details["msg"].removeprefix("Input should be ").strip()
        if kind is ViolationKind.INVALID_ENUM_VALUE:
            message = f"{details['msg']}, got {actual!r}"
        else:
            message = f"{details['msg']} (got {describe_type(actual)})"
        violations.append(
            Violation(
                path=path,
                kind=kind,
                message=message,
                actual=actual,
                expected=expected,
                allowed=tuple(ctx.get("allowed", ())),
            )
        )
    return violations


def image_uris_violations(card: Card, prefix: tuple = ()) -> list[Violation]:
    """
    Check that imagery lives either on the card or on every face, not both
    :param card: Validated card
    :param prefix: Location segments to prepend to the path
    :return: Violations, empty when the card is unambiguous
    """
    faces = card.card_faces or []
    faces_with_images = [i for i, face in enumerate(faces) if face.image_uris is not None]
    path = format_path(prefix + ("image_uris",))

    if card.image_uris is not None and faces_with_images:
        return [
            Violation(
                path,
                ViolationKind.AMBIGUOUS_IMAGE_URIS,
                "Card has top-level image_uris and per-face image_uris "
                f"on faces {faces_with_images}",
                expected="image_uris on the card or on every face, not both",
            )
        ]

    if card.image_uris is None and faces and len(faces_with_images) != len(faces):
        missing = [i for i in range(len(faces)) if i not in faces_with_images]
        return [
            Violation(
                path,
                ViolationKind.AMBIGUOUS_IMAGE_URIS,
                f"Card has no top-level image_uris and faces {missing} have none either",
                expected="image_uris on the card or on every face",
            )
        ]

    return []


def _strict_mode(strict_image_uris: Optional[bool]) -> bool:
    if strict_image_uris is None:
        return ScryfallSchemaConfig().strict_image_uris
    return strict_image_uris


def _reject(raw: Any, violations: list[Violation]) -> ShapeError:
    if ScryfallSchemaConfig().log_violations:
        card_id = raw.get("id") if isinstance(raw, dict) else None
        LOGGER.debug(
            f"Rejected card {card_id or '<unknown>'}: {len(violations)} violation(s), "
            f"first at '{violations[0].path}'"
        )
    return ShapeError(violations)


def _run(validate: Callable[[Any], T], raw: Any) -> T:
    try:
        return validate(raw)
    except ValidationError as error:
        raise _reject(raw, to_violations(error)) from None


def validate_card(raw: Any, strict_image_uris: Optional[bool] = None) -> Card:
    """
    Validate one decoded Scryfall card document
    :param raw: Decoded JSON value, normally a dict
    :param strict_image_uris: Also enforce top-level vs per-face imagery
    exclusivity; defaults to the configured value
    :return: Validated card
    :raises ShapeError: with every violation found
    """
    card: Card = _run(get_card_adapter().validate_python, raw)

    if _strict_mode(strict_image_uris):
        violations = image_uris_violations(card)
        if violations:
            raise _reject(raw, violations)

    return card


def check_card(raw: Any, strict_image_uris: Optional[bool] = None) -> ValidationResult:
    """
    Validate one card document without raising on shape problems
    :param raw: Decoded JSON value
    :param strict_image_uris: See validate_card
    :return: Result holding either the card or its violations
    """
    try:
        return ValidationResult(card=validate_card(raw, strict_image_uris))
    except ShapeError as error:
        return ValidationResult(violations=error.violations)


def validate_cards(raws: Any, strict_image_uris: Optional[bool] = None) -> list[Card]:
    """
    Validate a list of card documents in one pass
    :param raws: Decoded JSON array of card documents
    :param strict_image_uris: See validate_card
    :return: Validated cards, in input order
    :raises ShapeError: with violation paths prefixed by element index
    """
    cards: list[Card] = _run(get_cards_adapter().validate_python, raws)

    if _strict_mode(strict_image_uris):
        violations = []
        for index, card in enumerate(cards):
            violations.extend(image_uris_violations(card, prefix=(index,)))
        if violations:
            raise _reject(raws, violations)

    LOGGER.debug(f"Validated {len(cards)} cards")
    return cards


def validate_card_json(
    data: Union[str, bytes], strict_image_uris: Optional[bool] = None
) -> Card:
    """
    Decode and validate a card document from JSON text
    :param data: JSON document
    :param strict_image_uris: See validate_card
    :return: Validated card
    :raises orjson.JSONDecodeError: if the text is not JSON
    :raises ShapeError: if the decoded value is not a card
    """
    return validate_card(orjson.loads(data), strict_image_uris)


def validate_image_uris(raw: Any) -> ImageUris:
    """Validate a standalone image_uris object."""
    return _run(ImageUris.model_validate, raw)


def validate_related_card(raw: Any) -> RelatedCard:
    """Validate a standalone all_parts entry."""
    return _run(RelatedCard.model_validate, raw)


def validate_card_face(raw: Any) -> CardFace:
    """Validate a standalone card_faces entry."""
    return _run(CardFace.model_validate, raw)
