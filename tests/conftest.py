"""Pytest configuration and fixtures for Scryfall Schema tests."""

import json
from pathlib import Path
from typing import Any, Callable, Dict, Generator

import pytest

from scryfall_schema.schema_config import ScryfallSchemaConfig

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "scryfall"


def load_fixture(name: str) -> Dict[str, Any]:
    """Load a JSON fixture file and return parsed data."""
    return json.loads((FIXTURES_DIR / f"{name}.json").read_text(encoding="utf-8"))


@pytest.fixture
def fixture_loader() -> Callable[[str], Dict[str, Any]]:
    """Give tests a fresh copy of any fixture by name."""
    return load_fixture


@pytest.fixture
def minimal_card() -> Dict[str, Any]:
    """Card with every required field and no optional ones."""
    return load_fixture("minimal_card")


@pytest.fixture
def single_faced_card() -> Dict[str, Any]:
    """Single-faced card with top-level imagery, related parts and a preview."""
    return load_fixture("single_faced_card")


@pytest.fixture
def modal_dfc_card() -> Dict[str, Any]:
    """Double-faced card whose imagery lives on each face."""
    return load_fixture("modal_dfc_card")


@pytest.fixture
def adventure_card() -> Dict[str, Any]:
    """Two-face card whose imagery lives only on the card."""
    return load_fixture("adventure_card")


@pytest.fixture
def reset_config_singleton() -> Generator[None, None, None]:
    """Reset the ScryfallSchemaConfig singleton between tests."""
    ScryfallSchemaConfig._instance = None
    yield
    ScryfallSchemaConfig._instance = None
