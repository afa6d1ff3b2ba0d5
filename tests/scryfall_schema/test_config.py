import logging

import pytest

from scryfall_schema import ShapeError, validate_card
from scryfall_schema.schema_config import ScryfallSchemaConfig


def test_defaults_from_packaged_file(reset_config_singleton):
    config = ScryfallSchemaConfig()

    assert config.version == "1.0.0"
    assert config.strict_image_uris is False
    assert config.log_violations is True
    assert config.has_section("Validation")
    assert ScryfallSchemaConfig() is config


def test_custom_file(reset_config_singleton, tmp_path):
    path = tmp_path / "custom.properties"
    path.write_text("[Validation]\nstrict_image_uris = true\nlog_violations =\n")

    config = ScryfallSchemaConfig(path)

    assert config.strict_image_uris is True
    # Empty values fall back to defaults
    assert config.log_violations is True
    assert not config.has_option("Validation", "log_violations")
    assert config.version == "0.0.0+unknown"


def test_missing_file_uses_defaults(reset_config_singleton, tmp_path):
    config = ScryfallSchemaConfig(tmp_path / "nope.properties")

    assert config.strict_image_uris is False
    assert config.get("Validation", "strict_image_uris", "fallback") == "fallback"


def test_strict_mode_follows_config(reset_config_singleton, tmp_path, modal_dfc_card):
    path = tmp_path / "strict.properties"
    path.write_text("[Validation]\nstrict_image_uris = true\n")
    ScryfallSchemaConfig(path)
    modal_dfc_card["image_uris"] = modal_dfc_card["card_faces"][0]["image_uris"]

    with pytest.raises(ShapeError) as excinfo:
        validate_card(modal_dfc_card)
    assert excinfo.value.paths == ["image_uris"]

    assert validate_card(modal_dfc_card, strict_image_uris=False).is_multiface


def test_rejections_are_logged(reset_config_singleton, minimal_card, caplog):
    del minimal_card["name"]

    with caplog.at_level(logging.DEBUG, logger="scryfall_schema.validator"):
        with pytest.raises(ShapeError):
            validate_card(minimal_card)

    assert "Rejected card e3285e6b-3e79-4d7c-bf96-d920f973b80c: 1 violation(s)" in caplog.text
