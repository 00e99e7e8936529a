"""Deck: an ordered, mutable collection of cards."""

import logging
from random import Random
from typing import Iterable, Iterator

from cards.cards import Card, JokerCard, SuitCard, iter_full, iter_standard

logger = logging.getLogger(__name__)


class Deck:
    """A "deck" of cards is an ordered collection.

    The last card in order is the top of the deck: ``draw`` and ``put``
    both work on that end. Duplicates are allowed, so a deck built from
    an arbitrary sequence is not checked against a canonical set.
    """

    def __init__(
        self,
        cards: Iterable[Card] | None = None,
        seed: int | None = None,
        rng: Random | None = None,
    ) -> None:
        """Initialize deck.

        Args:
            cards: Cards from bottom to top (empty deck if None)
            seed: Seed for a reproducible shuffle source
            rng: Shuffle source to use instead of a new one (overrides seed)
        """
        self._rng = rng if rng is not None else Random(seed)
        self._cards: list[Card] = []
        if cards is not None:
            for card in cards:
                self.put(card)

    @classmethod
    def standard(cls, seed: int | None = None) -> "Deck":
        """Make a new standard 52-card deck in canonical order."""
        return cls(iter_standard(), seed=seed)

    @classmethod
    def full(cls, seed: int | None = None) -> "Deck":
        """Make a new standard deck with jokers, in canonical order."""
        return cls(iter_full(), seed=seed)

    @classmethod
    def from_cards(cls, cards: Iterable[Card], seed: int | None = None) -> "Deck":
        """Make a list of cards into a deck."""
        return cls(cards, seed=seed)

    def cards(self) -> list[Card]:
        """Copy of the current contents, bottom to top."""
        return list(self._cards)

    def shuffle(self) -> None:
        """Shuffle the deck in place."""
        self._rng.shuffle(self._cards)
        logger.debug("Shuffled deck of %d cards", len(self._cards))

    def draw(self) -> Card | None:
        """Pop the top card off the deck, or None if it is empty."""
        if not self._cards:
            return None
        return self._cards.pop()

    def peek(self) -> Card | None:
        """Top card without removing it, or None if the deck is empty."""
        return self._cards[-1] if self._cards else None

    def put(self, card: Card) -> None:
        """Put `card` on top of the deck."""
        if not isinstance(card, (SuitCard, JokerCard)):
            raise TypeError(f"Expected a card, got {type(card).__name__}")
        self._cards.append(card)

    def append(self, other: "Deck") -> None:
        """Move all the cards of `other` onto the top of this deck.

        The moved cards keep their order and `other` is left empty.
        """
        if other is self:
            raise ValueError("Cannot append a deck to itself")
        self._cards.extend(other._cards)
        other._cards.clear()
        logger.debug("Appended deck, now %d cards", len(self._cards))

    def reverse(self) -> None:
        """Reverse the order of cards in this deck."""
        self._cards.reverse()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return self._cards == other._cards

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"

    def __str__(self) -> str:
        return " ".join(str(card) for card in self._cards)
