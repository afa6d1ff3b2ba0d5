import json

import orjson
import pytest

from scryfall_schema import ShapeError, ViolationKind, validate_card_json, validate_cards


def test_validate_cards_keeps_order(minimal_card, single_faced_card, modal_dfc_card):
    cards = validate_cards([minimal_card, single_faced_card, modal_dfc_card])

    assert [card.name for card in cards] == [
        "Lightning Bolt",
        "Ghired, Conclave Exile",
        "Valakut Awakening // Valakut Stoneforge",
    ]


def test_validate_cards_prefixes_paths_with_index(minimal_card, single_faced_card, adventure_card):
    del single_faced_card["all_parts"][0]["uri"]
    adventure_card["card_faces"][1]["name"] = None

    with pytest.raises(ShapeError) as excinfo:
        validate_cards([minimal_card, single_faced_card, adventure_card])

    assert excinfo.value.paths == [
        "[1].all_parts[0].uri",
        "[2].card_faces[1].name",
    ]


def test_validate_cards_needs_a_list(minimal_card):
    with pytest.raises(ShapeError) as excinfo:
        validate_cards(minimal_card)

    (violation,) = excinfo.value.violations
    assert violation.path == ""
    assert violation.kind is ViolationKind.WRONG_TYPE


def test_validate_cards_empty():
    assert validate_cards([]) == []


@pytest.mark.parametrize("encode", [json.dumps, lambda data: json.dumps(data).encode("utf-8")])
def test_validate_card_json(single_faced_card, encode):
    card = validate_card_json(encode(single_faced_card))

    assert card.name == "Ghired, Conclave Exile"
    assert card.preview.source == "Wizards of the Coast"


def test_validate_card_json_shape_error(minimal_card):
    minimal_card["rarity"] = "legendary"

    with pytest.raises(ShapeError) as excinfo:
        validate_card_json(json.dumps(minimal_card))

    assert excinfo.value.paths == ["rarity"]


def test_validate_card_json_malformed():
    with pytest.raises(orjson.JSONDecodeError):
        validate_card_json('{"object": "card", ')
