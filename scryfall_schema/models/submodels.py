"""
Scryfall TypedDict definitions for raw card documents.

Use these to type decoded JSON that has not been through validation,
or the output of ``Card.to_dict()``. For validated parsing, use the
Pydantic models via ``scryfall_schema.validator``.
"""

from typing import Literal, Required, TypedDict


ComponentValue = Literal["token", "meld_part", "meld_result", "combo_piece"]
ImageStatusValue = Literal["missing", "placeholder", "lowres", "highres_scan"]
LegalityValue = Literal["legal", "not_legal", "restricted", "banned"]
RarityValue = Literal["common", "uncommon", "rare", "special", "mythic", "bonus"]
SecurityStampValue = Literal["oval", "triangle", "acorn", "circle", "arena", "heart"]


class ScryfallImageUris(TypedDict):
    """Available imagery for a card."""

    png: str
    border_crop: str
    art_crop: str
    large: str
    normal: str
    small: str


class ScryfallRelatedCard(TypedDict):
    """Related card reference."""

    id: str
    object: str
    component: ComponentValue
    name: str
    type_line: str
    uri: str


class ScryfallCardFace(TypedDict, total=False):
    """Single face of a multi-face card."""

    artist: str
    artist_id: str
    cmc: float
    color_indicator: list[str]
    colors: list[str]
    defense: str
    flavor_text: str
    illustration_id: str
    image_uris: ScryfallImageUris
    layout: str
    loyalty: str
    mana_cost: str
    name: Required[str]
    object: Required[str]
    oracle_id: str
    oracle_text: str
    power: str
    printed_name: str
    printed_text: str
    printed_type_line: str
    toughness: str
    type_line: str
    watermark: str


class ScryfallPreview(TypedDict, total=False):
    """Preview/spoiler information."""

    previewed_at: str
    source_uri: str
    source: str


class ScryfallCard(TypedDict, total=False):
    """Scryfall Card object."""

    # Core
    arena_id: int
    id: Required[str]
    lang: Required[str]
    mtgo_id: int
    mtgo_foil_id: int
    multiverse_ids: list[int]
    tcgplayer_id: int
    tcgplayer_etched_id: int
    cardmarket_id: int
    object: Required[str]
    layout: Required[str]
    oracle_id: str
    prints_search_uri: Required[str]
    rulings_uri: Required[str]
    scryfall_uri: Required[str]
    uri: Required[str]

    # Gameplay
    all_parts: list[ScryfallRelatedCard]
    card_faces: list[ScryfallCardFace]
    cmc: Required[float]
    color_identity: Required[list[str]]
    color_indicator: list[str]
    colors: list[str]
    defense: str
    edhrec_rank: int
    hand_modifier: str
    keywords: Required[list[str]]
    legalities: Required[dict[str, LegalityValue]]
    life_modifier: str
    loyalty: str
    mana_cost: str
    name: Required[str]
    oracle_text: str
    penny_rank: int
    power: str
    produced_mana: list[str]
    reserved: Required[bool]
    toughness: str
    type_line: Required[str]

    # Print
    artist: str
    artist_ids: list[str]
    attraction_lights: list[str]
    booster: Required[bool]
    border_color: Required[str]
    card_back_id: str
    collector_number: Required[str]
    content_warning: bool
    digital: Required[bool]
    finishes: Required[list[str]]
    flavor_name: str
    flavor_text: str
    frame_effects: list[str]
    frame: Required[str]
    full_art: Required[bool]
    games: Required[list[str]]
    highres_image: Required[bool]
    illustration_id: str
    image_status: Required[ImageStatusValue]
    image_uris: ScryfallImageUris
    oversized: Required[bool]
    prices: Required[dict[str, str | None]]
    printed_name: str
    printed_text: str
    printed_type_line: str
    promo: Required[bool]
    promo_types: list[str]
    purchase_uris: dict[str, str]
    rarity: Required[RarityValue]
    related_uris: Required[dict[str, str]]
    released_at: Required[str]
    reprint: Required[bool]
    scryfall_set_uri: Required[str]
    set_name: Required[str]
    set_search_uri: Required[str]
    set_type: Required[str]
    set_uri: Required[str]
    set: Required[str]
    set_id: Required[str]
    story_spotlight: Required[bool]
    textless: Required[bool]
    variation: Required[bool]
    variation_of: str
    security_stamp: SecurityStampValue
    watermark: str
    preview: ScryfallPreview


# =============================================================================
# Registry
# =============================================================================

SCRYFALL_TYPEDDICT_REGISTRY: list[type] = [
    ScryfallImageUris,
    ScryfallRelatedCard,
    ScryfallCardFace,
    ScryfallPreview,
    ScryfallCard,
]
