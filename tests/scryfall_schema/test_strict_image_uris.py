import pytest

from scryfall_schema import ShapeError, ViolationKind, check_card, validate_card, validate_cards


def test_lenient_mode_accepts_both_representations(modal_dfc_card):
    modal_dfc_card["image_uris"] = modal_dfc_card["card_faces"][0]["image_uris"]

    card = validate_card(modal_dfc_card, strict_image_uris=False)

    assert card.image_uris == card.card_faces[0].image_uris


def test_strict_ignores_single_faced_cards_without_imagery(minimal_card):
    assert validate_card(minimal_card, strict_image_uris=True).image_uris is None


@pytest.mark.parametrize(
    "fixture_name",
    ["single_faced_card", "modal_dfc_card", "adventure_card"],
)
def test_strict_accepts_one_representation(fixture_loader, fixture_name):
    assert validate_card(fixture_loader(fixture_name), strict_image_uris=True)


def test_strict_rejects_both_representations(modal_dfc_card):
    modal_dfc_card["image_uris"] = modal_dfc_card["card_faces"][0]["image_uris"]

    with pytest.raises(ShapeError) as excinfo:
        validate_card(modal_dfc_card, strict_image_uris=True)

    (violation,) = excinfo.value.violations
    assert violation.path == "image_uris"
    assert violation.kind is ViolationKind.AMBIGUOUS_IMAGE_URIS
    assert "[0, 1]" in violation.message


def test_strict_rejects_faces_without_imagery(modal_dfc_card):
    del modal_dfc_card["card_faces"][1]["image_uris"]

    result = check_card(modal_dfc_card, strict_image_uris=True)

    assert not result.ok
    assert result.violations[0].kind is ViolationKind.AMBIGUOUS_IMAGE_URIS
    assert "[1]" in result.violations[0].message


def test_strict_runs_after_shape_checks(modal_dfc_card):
    modal_dfc_card["image_uris"] = modal_dfc_card["card_faces"][0]["image_uris"]
    del modal_dfc_card["name"]

    with pytest.raises(ShapeError) as excinfo:
        validate_card(modal_dfc_card, strict_image_uris=True)

    assert excinfo.value.paths == ["name"]


def test_strict_batch_paths_carry_index(single_faced_card, modal_dfc_card):
    modal_dfc_card["image_uris"] = single_faced_card["image_uris"]

    with pytest.raises(ShapeError) as excinfo:
        validate_cards([single_faced_card, modal_dfc_card], strict_image_uris=True)

    assert excinfo.value.paths == ["[1].image_uris"]
