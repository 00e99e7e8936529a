"""Playing card and deck primitives."""

from cards.cards import (
    COLORS,
    NUM_FULL_CARDS,
    NUM_STANDARD_CARDS,
    RANKS,
    SUITS,
    Card,
    Color,
    IterCards,
    JokerCard,
    Rank,
    Suit,
    SuitCard,
    card_from_index,
    iter_full,
    iter_standard,
    parse_card,
)
from cards.deck import Deck

__all__ = [
    "COLORS",
    "NUM_FULL_CARDS",
    "NUM_STANDARD_CARDS",
    "RANKS",
    "SUITS",
    "Card",
    "Color",
    "Deck",
    "IterCards",
    "JokerCard",
    "Rank",
    "Suit",
    "SuitCard",
    "card_from_index",
    "iter_full",
    "iter_standard",
    "parse_card",
]
