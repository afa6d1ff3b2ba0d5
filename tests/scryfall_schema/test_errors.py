import pytest

from scryfall_schema import ShapeError, Violation, ViolationKind, validate_card
from scryfall_schema.utils import describe_type, format_path


@pytest.mark.parametrize(
    "loc, expected",
    [
        [(), ""],
        [("name",), "name"],
        [("legalities", "standard"), "legalities.standard"],
        [("card_faces", 1, "mana_cost"), "card_faces[1].mana_cost"],
        [("card_faces", 0, "image_uris", "png"), "card_faces[0].image_uris.png"],
        [(3, "all_parts", 0, "uri"), "[3].all_parts[0].uri"],
    ],
)
def test_format_path(loc, expected):
    assert format_path(loc) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        [None, "null"],
        [True, "boolean"],
        [1, "number"],
        [1.5, "number"],
        ["1", "string"],
        [[], "array"],
        [{}, "object"],
    ],
)
def test_describe_type(value, expected):
    assert describe_type(value) == expected


def test_shape_error_requires_violations():
    with pytest.raises(ValueError):
        ShapeError([])


def test_shape_error_message_lists_every_violation():
    error = ShapeError(
        [
            Violation("name", ViolationKind.MISSING_REQUIRED_FIELD, "Required field is missing"),
            Violation("", ViolationKind.INVALID_NESTED_SHAPE, "Input should be an object"),
        ]
    )

    message = str(error)
    assert message.startswith("2 shape violations:")
    assert "name: [missing_required_field]" in message
    assert "<root>: [invalid_nested_shape]" in message


def test_nested_returns_relative_paths(modal_dfc_card):
    del modal_dfc_card["name"]
    del modal_dfc_card["card_faces"][1]["name"]
    modal_dfc_card["card_faces"][1]["image_uris"]["small"] = "small.jpg"
    modal_dfc_card["card_faces"][0]["power"] = 4

    with pytest.raises(ShapeError) as excinfo:
        validate_card(modal_dfc_card)

    error = excinfo.value
    second_face = error.nested("card_faces[1]")
    assert second_face.paths == ["image_uris.small", "name"]

    faces = error.nested("card_faces")
    assert faces.paths == ["[0].power", "[1].image_uris.small", "[1].name"]

    assert error.nested("card_faces[2]") is None
    assert error.nested("card_faces[1].image_uris").paths == ["small"]


def test_nested_does_not_match_sibling_prefixes():
    error = ShapeError(
        [
            Violation("set", ViolationKind.WRONG_TYPE, "bad"),
            Violation("set_id", ViolationKind.WRONG_TYPE, "bad"),
        ]
    )

    assert error.nested("set").paths == [""]


def test_of_kind(minimal_card):
    del minimal_card["name"]
    minimal_card["rarity"] = "legendary"
    minimal_card["image_status"] = "blurry"

    with pytest.raises(ShapeError) as excinfo:
        validate_card(minimal_card)

    enum_paths = [v.path for v in excinfo.value.of_kind(ViolationKind.INVALID_ENUM_VALUE)]
    assert enum_paths == ["image_status", "rarity"]
