"""Scryfall card data models."""

from pydantic import Field

from .base import ScryfallObject
from .types import (
    ComponentField,
    Flag,
    Identifier,
    ImageStatusField,
    LegalityField,
    Number,
    RarityField,
    SecurityStampField,
    Text,
    Url,
)


class ImageUris(ScryfallObject):
    """Available imagery for a card."""

    png: Url = Field(
        description="A transparent, rounded full card PNG (745x1040 pixels).",
    )
    border_crop: Url = Field(
        description="A full card image with most of the border cropped off (480x680 pixels).",
    )
    art_crop: Url = Field(
        description="A rectangular crop of the card's art only (variable dimensions).",
    )
    large: Url = Field(
        description="A large full card image (672x936 pixels).",
    )
    normal: Url = Field(
        description="A medium-sized full card image (488x680 pixels).",
    )
    small: Url = Field(
        description="A small full card image (146x204 pixels).",
    )


class RelatedCard(ScryfallObject):
    """
    A card closely related to another card, because it calls it by name,
    creates it as a token, melds with it, etc.
    """

    id: Text = Field(description="A unique ID for this card in Scryfall's database.")
    object: Text = Field(description="A content type for this object, always related_card.")
    component: ComponentField = Field(
        description="A field explaining what role this card plays in this relationship."
    )
    name: Text = Field(description="The name of this particular related card.")
    type_line: Text = Field(description="The type line of this card.")
    uri: Url = Field(
        description="A URI where you can retrieve a full object describing this card."
    )


class CardFace(ScryfallObject):
    """A single face of a multiface card."""

    artist: Text | None = Field(
        default=None, description="The name of the illustrator of this card face."
    )
    artist_id: Text | None = Field(
        default=None, description="The ID of the illustrator of this card face."
    )
    cmc: Number | None = Field(
        default=None, description="The mana value of this particular face."
    )
    color_indicator: list[Text] | None = Field(
        default=None, description="The colors in this face's color indicator."
    )
    colors: list[Text] | None = Field(default=None, description="This face's colors.")
    defense: Text | None = Field(default=None, description="This face's defense.")
    flavor_text: Text | None = Field(
        default=None, description="The flavor text printed on this face."
    )
    illustration_id: Text | None = Field(
        default=None, description="A unique identifier for the card face artwork."
    )
    image_uris: ImageUris | None = Field(
        default=None, description="URIs to imagery for this face."
    )
    layout: Text | None = Field(default=None, description="The layout of this card face.")
    loyalty: Text | None = Field(default=None, description="This face's loyalty.")
    mana_cost: Text | None = Field(
        default=None, description="The mana cost for this face, empty string if absent."
    )
    name: Text = Field(description="The name of this particular face.")
    object: Text = Field(description="A content type for this object, always card_face.")
    oracle_id: Text | None = Field(
        default=None, description="The Oracle ID of this particular face."
    )
    oracle_text: Text | None = Field(
        default=None, description="The Oracle text for this face."
    )
    power: Text | None = Field(default=None, description="This face's power.")
    printed_name: Text | None = Field(
        default=None, description="The localized name printed on this face."
    )
    printed_text: Text | None = Field(
        default=None, description="The localized text printed on this face."
    )
    printed_type_line: Text | None = Field(
        default=None, description="The localized type line printed on this face."
    )
    toughness: Text | None = Field(default=None, description="This face's toughness.")
    type_line: Text | None = Field(
        default=None, description="The type line of this particular face."
    )
    watermark: Text | None = Field(
        default=None, description="The watermark on this particular card face."
    )


class Preview(ScryfallObject):
    """Preview information for a newly spoiled card."""

    previewed_at: Text | None = Field(
        default=None, description="The date this card was previewed."
    )
    source_uri: Text | None = Field(
        default=None, description="A link to the preview for this card."
    )
    source: Text | None = Field(
        default=None, description="The name of the source that previewed this card."
    )


class Card(ScryfallObject):
    """
    Scryfall Card object.

    Card objects represent individual Magic: The Gathering cards that players
    could obtain and add to their collection (with a few minor exceptions).
    Multiface cards carry their per-face data in ``card_faces``.
    """

    # Core fields
    arena_id: Identifier | None = Field(default=None, description="This card's Arena ID.")
    id: Text = Field(description="A unique ID for this card in Scryfall's database.")
    lang: Text = Field(description="A language code for this printing.")
    mtgo_id: Identifier | None = Field(
        default=None, description="This card's Magic Online ID."
    )
    mtgo_foil_id: Identifier | None = Field(
        default=None, description="This card's foil Magic Online ID."
    )
    multiverse_ids: list[Identifier] | None = Field(
        default=None, description="This card's multiverse IDs on Gatherer."
    )
    tcgplayer_id: Identifier | None = Field(
        default=None, description="This card's ID on TCGplayer's API."
    )
    tcgplayer_etched_id: Identifier | None = Field(
        default=None, description="This card's etched version ID on TCGplayer."
    )
    cardmarket_id: Identifier | None = Field(
        default=None, description="This card's ID on Cardmarket's API."
    )
    object: Text = Field(description="A content type for this object, always card.")
    layout: Text = Field(description="A code for this card's layout.")
    oracle_id: Text | None = Field(
        default=None,
        description=(
            "A unique ID for this card's oracle identity. Absent for the "
            "reversible_card layout, where each face carries its own."
        ),
    )
    prints_search_uri: Url = Field(
        description="A link to paginate all re/prints for this card."
    )
    rulings_uri: Url = Field(description="A link to this card's rulings list.")
    scryfall_uri: Url = Field(description="A link to this card's permapage on Scryfall.")
    uri: Url = Field(description="A link to this card object on Scryfall's API.")

    # Gameplay fields
    all_parts: list[RelatedCard] | None = Field(
        default=None, description="Related cards if closely related."
    )
    card_faces: list[CardFace] | None = Field(
        default=None, description="Card Face objects if multifaced."
    )
    cmc: Number = Field(description="The card's mana value.")
    color_identity: list[Text] = Field(description="This card's color identity.")
    color_indicator: list[Text] | None = Field(
        default=None, description="The colors in this card's color indicator."
    )
    colors: list[Text] | None = Field(default=None, description="This card's colors.")
    defense: Text | None = Field(default=None, description="This card's defense.")
    edhrec_rank: Identifier | None = Field(
        default=None, description="This card's rank/popularity on EDHREC."
    )
    hand_modifier: Text | None = Field(
        default=None, description="This card's hand modifier if Vanguard."
    )
    keywords: list[Text] = Field(description="Keywords that this card uses.")
    legalities: dict[str, LegalityField] = Field(
        description="Legality across play formats, keyed by format name."
    )
    life_modifier: Text | None = Field(
        default=None, description="This card's life modifier if Vanguard."
    )
    loyalty: Text | None = Field(default=None, description="This card's loyalty.")
    mana_cost: Text | None = Field(
        default=None,
        description=(
            "The mana cost for this card, empty string if absent. "
            "Multi-faced cards report this on each face."
        ),
    )
    name: Text = Field(description="The name of this card.")
    oracle_text: Text | None = Field(
        default=None, description="The Oracle text for this card."
    )
    penny_rank: Identifier | None = Field(
        default=None, description="This card's rank on Penny Dreadful."
    )
    power: Text | None = Field(default=None, description="This card's power.")
    produced_mana: list[Text] | None = Field(
        default=None, description="Colors of mana this card could produce."
    )
    reserved: Flag = Field(description="True if this card is on the Reserved List.")
    toughness: Text | None = Field(default=None, description="This card's toughness.")
    type_line: Text = Field(description="The type line of this card.")

    # Print fields
    artist: Text | None = Field(default=None, description="The name of the illustrator.")
    artist_ids: list[Text] | None = Field(
        default=None, description="The IDs of the artists."
    )
    attraction_lights: list[Text] | None = Field(
        default=None, description="Unfinity attraction lights."
    )
    booster: Flag = Field(description="Whether this card is found in boosters.")
    border_color: Text = Field(description="This card's border color.")
    card_back_id: Text | None = Field(
        default=None, description="The Scryfall ID for the card back design."
    )
    collector_number: Text = Field(description="This card's collector number.")
    content_warning: Flag | None = Field(
        default=None, description="True if avoiding use is recommended."
    )
    digital: Flag = Field(description="True if only released in a video game.")
    finishes: list[Text] = Field(
        description="Available finishes: foil, nonfoil, etched, glossy."
    )
    flavor_name: Text | None = Field(
        default=None, description="The flavor name (e.g., Godzilla series)."
    )
    flavor_text: Text | None = Field(default=None, description="The flavor text.")
    frame_effects: list[Text] | None = Field(
        default=None, description="This card's frame effects."
    )
    frame: Text = Field(description="This card's frame layout.")
    full_art: Flag = Field(
        description="True if this card's artwork is larger than normal."
    )
    games: list[Text] = Field(description="Game platforms: paper, arena, mtgo.")
    highres_image: Flag = Field(description="True if imagery is high resolution.")
    illustration_id: Text | None = Field(
        default=None, description="A unique identifier for the card artwork."
    )
    image_status: ImageStatusField = Field(description="The state of this card's image.")
    image_uris: ImageUris | None = Field(
        default=None, description="Available imagery for this card."
    )
    oversized: Flag = Field(description="True if this card is oversized.")
    prices: dict[str, Text | None] = Field(
        description=(
            "Daily price information keyed by currency "
            "(usd, usd_foil, usd_etched, eur, eur_foil, eur_etched, tix)."
        )
    )
    printed_name: Text | None = Field(
        default=None, description="The localized name printed on this card."
    )
    printed_text: Text | None = Field(
        default=None, description="The localized text printed on this card."
    )
    printed_type_line: Text | None = Field(
        default=None, description="The localized type line printed on this card."
    )
    promo: Flag = Field(description="True if this card is a promotional print.")
    promo_types: list[Text] | None = Field(
        default=None, description="Categories of promo cards this falls into."
    )
    purchase_uris: dict[str, Url] | None = Field(
        default=None, description="URIs to marketplace listings."
    )
    rarity: RarityField = Field(description="This card's rarity.")
    related_uris: dict[str, Url] = Field(description="URIs to other Magic resources.")
    released_at: Text = Field(description="The date this card was first released.")
    reprint: Flag = Field(description="True if this card is a reprint.")
    scryfall_set_uri: Url = Field(description="A link to this card's set on Scryfall.")
    set_name: Text = Field(description="This card's full set name.")
    set_search_uri: Url = Field(description="A link to paginate this card's set.")
    set_type: Text = Field(description="The type of set this printing is in.")
    set_uri: Url = Field(description="A link to this card's set object.")
    set: Text = Field(description="This card's set code.")
    set_id: Text = Field(description="This card's Set object UUID.")
    story_spotlight: Flag = Field(description="True if this card is a Story Spotlight.")
    textless: Flag = Field(description="True if the card is printed without text.")
    variation: Flag = Field(
        description="Whether this card is a variation of another printing."
    )
    variation_of: Text | None = Field(
        default=None, description="The printing ID this card is a variation of."
    )
    security_stamp: SecurityStampField | None = Field(
        default=None, description="The security stamp on this card."
    )
    watermark: Text | None = Field(default=None, description="This card's watermark.")
    preview: Preview | None = Field(
        default=None, description="Preview information for this card."
    )

    @property
    def is_multiface(self) -> bool:
        """True when the card carries per-face data."""
        return bool(self.card_faces)
