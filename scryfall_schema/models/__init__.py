from .adapters import get_card_adapter, get_cards_adapter
from .models import Card, CardFace, ImageUris, Preview, RelatedCard
from .submodels import (
    ScryfallCard,
    ScryfallCardFace,
    ScryfallImageUris,
    ScryfallPreview,
    ScryfallRelatedCard,
)
from .types import Component, ImageStatus, Legality, Rarity, SecurityStamp


__all__ = [
    "Card",
    "CardFace",
    "Component",
    "ImageStatus",
    "ImageUris",
    "Legality",
    "Preview",
    "Rarity",
    "RelatedCard",
    "ScryfallCard",
    "ScryfallCardFace",
    "ScryfallImageUris",
    "ScryfallPreview",
    "ScryfallRelatedCard",
    "SecurityStamp",
    "get_card_adapter",
    "get_cards_adapter",
]
