"""
Scryfall TypeAdapters for validated parsing.

Built lazily so importing the package stays cheap, then shared for the
life of the process.
"""

from __future__ import annotations

from pydantic import TypeAdapter


# Lazy init to avoid import-time cost
_card_adapter: TypeAdapter | None = None
_cards_adapter: TypeAdapter | None = None


def get_card_adapter() -> TypeAdapter:
	"""Get or create card TypeAdapter."""
	global _card_adapter
	if _card_adapter is None:
		from .models import Card

		_card_adapter = TypeAdapter(Card)
	return _card_adapter


def get_cards_adapter() -> TypeAdapter:
	"""Get or create cards list TypeAdapter."""
	global _cards_adapter
	if _cards_adapter is None:
		from .models import Card

		_cards_adapter = TypeAdapter(list[Card])
	return _cards_adapter
