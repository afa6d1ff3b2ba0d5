"""
Scryfall Schema, runtime validation for Scryfall card documents
https://scryfall.com/docs/api/cards
MIT License
"""

from .errors import ShapeError, Violation, ViolationKind
from .models import Card, CardFace, ImageUris, Preview, RelatedCard
from .validator import (
    ValidationResult,
    check_card,
    validate_card,
    validate_card_face,
    validate_card_json,
    validate_cards,
    validate_image_uris,
    validate_related_card,
)

__all__ = [
    "Card",
    "CardFace",
    "ImageUris",
    "Preview",
    "RelatedCard",
    "ShapeError",
    "ValidationResult",
    "Violation",
    "ViolationKind",
    "check_card",
    "validate_card",
    "validate_card_face",
    "validate_card_json",
    "validate_cards",
    "validate_image_uris",
    "validate_related_card",
]
