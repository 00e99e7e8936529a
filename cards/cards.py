"""Suit, Rank, Color and Card definitions for playing cards."""

from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import Iterator, TypeAlias


class Color(IntEnum):
    """Card colors."""

    BLACK = 0
    RED = 1

    def __str__(self) -> str:
        return {0: "B", 1: "R"}[self.value]


class Suit(IntEnum):
    """Card suits."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    def __str__(self) -> str:
        return {0: "C", 1: "D", 2: "H", 3: "S"}[self.value]

    @property
    def color(self) -> Color:
        """Color of the suit: clubs and spades are black."""
        if self in (Suit.DIAMONDS, Suit.HEARTS):
            return Color.RED
        return Color.BLACK


class Rank(IntEnum):
    """Card ranks (2-14, where 14 is Ace and 15 is Joker)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14
    JOKER = 15

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {11: "J", 12: "Q", 13: "K", 14: "A", 15: "?"}[self.value]


SUITS: tuple[Suit, ...] = tuple(Suit)
RANKS: tuple[Rank, ...] = tuple(Rank)
COLORS: tuple[Color, ...] = tuple(Color)

# Ranks a suited card can carry.
SUIT_RANKS: tuple[Rank, ...] = RANKS[:-1]

NUM_STANDARD_CARDS = len(SUITS) * len(SUIT_RANKS)
NUM_FULL_CARDS = NUM_STANDARD_CARDS + len(COLORS)


@total_ordering
@dataclass(frozen=True, slots=True)
class SuitCard:
    """A standard card: a suit and a rank."""

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        if self.rank == Rank.JOKER:
            raise ValueError("A suited card cannot have the joker rank; use JokerCard")

    @property
    def color(self) -> Color:
        return self.suit.color

    def to_index(self) -> int:
        """Position in the full canonical sequence.

        Index = (rank - 2) * 4 + suit
        """
        return (self.rank - Rank.TWO) * len(SUITS) + self.suit

    def __str__(self) -> str:
        return str(self.rank) + str(self.suit)

    def __repr__(self) -> str:
        return f"SuitCard({self.suit.name}, {self.rank.name})"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (SuitCard, JokerCard)):
            return NotImplemented
        return _sort_key(self) < _sort_key(other)


@total_ordering
@dataclass(frozen=True, slots=True)
class JokerCard:
    """A red or black joker."""

    color: Color

    @property
    def rank(self) -> Rank:
        return Rank.JOKER

    @property
    def suit(self) -> None:
        return None

    def to_index(self) -> int:
        """Position in the full canonical sequence (after all suited cards)."""
        return NUM_STANDARD_CARDS + self.color

    def __str__(self) -> str:
        return str(self.color) + str(Rank.JOKER)

    def __repr__(self) -> str:
        return f"JokerCard({self.color.name})"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (SuitCard, JokerCard)):
            return NotImplemented
        return _sort_key(self) < _sort_key(other)


Card: TypeAlias = SuitCard | JokerCard


def _sort_key(card: Card) -> tuple[int, ...]:
    """Shape tag first (suited before jokers), then fields in order."""
    match card:
        case SuitCard(suit=suit, rank=rank):
            return (0, suit, rank)
        case JokerCard(color=color):
            return (1, color)


def card_from_index(index: int) -> Card:
    """Create card from its 0-53 canonical index."""
    if not 0 <= index < NUM_FULL_CARDS:
        raise ValueError(f"Card index out of range: {index}")
    if index >= NUM_STANDARD_CARDS:
        return JokerCard(COLORS[index - NUM_STANDARD_CARDS])
    return SuitCard(suit=SUITS[index % len(SUITS)], rank=SUIT_RANKS[index // len(SUITS)])


def parse_card(s: str) -> Card:
    """Parse card from string like 'AS', '10h', 'Td' or 'R?'."""
    rank_map = {str(rank): rank for rank in SUIT_RANKS}
    rank_map["T"] = Rank.TEN
    suit_map = {str(suit): suit for suit in SUITS}
    color_map = {str(color): color for color in COLORS}

    text = s.strip().upper()
    if len(text) < 2:
        raise ValueError(f"Invalid card string: {s!r}")
    head, tail = text[:-1], text[-1]
    if tail == str(Rank.JOKER):
        if head not in color_map:
            raise ValueError(f"Invalid joker color: {head!r}")
        return JokerCard(color_map[head])
    if head not in rank_map:
        raise ValueError(f"Invalid rank: {head!r}")
    if tail not in suit_map:
        raise ValueError(f"Invalid suit: {tail!r}")
    return SuitCard(suit=suit_map[tail], rank=rank_map[head])


class IterCards:
    """Iterator delivering the possible cards in rank-suit order.

    Every suit of Two comes first, then every suit of Three, up to Ace.
    A full iterator then yields one joker per color. Instances are
    single-use; build a fresh one to start over.
    """

    def __init__(self, jokers: bool = False) -> None:
        self.jokers = jokers
        self._rank = 0
        self._suit = 0

    @classmethod
    def standard(cls) -> "IterCards":
        """Iterator over the 52 standard cards."""
        return cls(jokers=False)

    @classmethod
    def full(cls) -> "IterCards":
        """Iterator over the standard cards and jokers."""
        return cls(jokers=True)

    def __iter__(self) -> Iterator[Card]:
        return self

    def __next__(self) -> Card:
        if self._rank >= len(SUIT_RANKS):
            if not self.jokers or self._suit >= len(COLORS):
                raise StopIteration
            card: Card = JokerCard(COLORS[self._suit])
            self._suit += 1
            return card

        card = SuitCard(suit=SUITS[self._suit], rank=SUIT_RANKS[self._rank])
        self._suit += 1
        if self._suit >= len(SUITS):
            self._suit = 0
            self._rank += 1
        return card

    def __length_hint__(self) -> int:
        total = NUM_FULL_CARDS if self.jokers else NUM_STANDARD_CARDS
        if self._rank >= len(SUIT_RANKS):
            return total - NUM_STANDARD_CARDS - self._suit
        return total - (self._rank * len(SUITS) + self._suit)


def iter_standard() -> IterCards:
    """Get an iterator over the standard cards."""
    return IterCards.standard()


def iter_full() -> IterCards:
    """Get an iterator over the standard cards and jokers."""
    return IterCards.full()
