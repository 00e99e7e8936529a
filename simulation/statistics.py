"""Position-frequency statistics for deck shuffling."""

from dataclasses import dataclass, field
from pathlib import Path
from random import Random

import matplotlib.pyplot as plt
import numpy as np
from tqdm import tqdm

from cards.cards import Card, IterCards, card_from_index
from cards.deck import Deck


@dataclass
class UniformityReport:
    """Summary of a shuffle uniformity run."""

    trials: int
    num_cards: int
    expected_count: float
    chi_square: float
    degrees_of_freedom: int
    max_deviation: float
    tolerance: float

    @property
    def passed(self) -> bool:
        return self.max_deviation <= self.tolerance


@dataclass
class ShuffleStatistics:
    """Track how often each card lands in each deck position.

    counts[i, j] is the number of shuffles that left the card with
    canonical index i at position j (0 = bottom of the deck).

    Usage:
        stats = ShuffleStatistics(jokers=True, seed=7)
        stats.run(10000)
        report = stats.report(tolerance=0.1)
    """

    jokers: bool = True
    seed: int | None = None
    counts: np.ndarray = field(init=False, repr=False)
    trials: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self._rng = Random(self.seed)
        n = len(self._fresh_deck())
        self.counts = np.zeros((n, n), dtype=np.int64)

    def _fresh_deck(self) -> Deck:
        return Deck(IterCards(jokers=self.jokers), rng=self._rng)

    @property
    def num_cards(self) -> int:
        return self.counts.shape[0]

    def record(self, deck: Deck) -> None:
        """Add one shuffled deck's positions to the counts."""
        if len(deck) != self.num_cards:
            raise ValueError(f"Expected {self.num_cards} cards, got {len(deck)}")
        indices = np.fromiter((card.to_index() for card in deck), dtype=np.int64, count=len(deck))
        self.counts[indices, np.arange(len(deck))] += 1
        self.trials += 1

    def run(self, trials: int, show_progress: bool = False) -> None:
        """Shuffle a fresh canonical deck `trials` times and record each."""
        if trials <= 0:
            raise ValueError(f"Trials must be positive, got {trials}")

        iterator = range(trials)
        if show_progress:
            iterator = tqdm(iterator, desc="Shuffling", unit="decks")

        for _ in iterator:
            deck = self._fresh_deck()
            deck.shuffle()
            self.record(deck)

    @property
    def expected_count(self) -> float:
        """Expected count per cell under a uniform shuffle."""
        return self.trials / self.num_cards

    def frequencies(self) -> np.ndarray:
        """Observed fraction of trials for each card/position cell."""
        if self.trials == 0:
            return np.zeros_like(self.counts, dtype=np.float64)
        return self.counts / self.trials

    def chi_square(self) -> float:
        """Pearson chi-square statistic of the count matrix."""
        if self.trials == 0:
            return 0.0
        expected = self.expected_count
        return float(np.sum((self.counts - expected) ** 2 / expected))

    def max_deviation(self) -> float:
        """Largest relative deviation of any cell from the expected count."""
        if self.trials == 0:
            return 0.0
        expected = self.expected_count
        return float(np.max(np.abs(self.counts - expected)) / expected)

    def is_uniform(self, tolerance: float) -> bool:
        return self.max_deviation() <= tolerance

    def most_frequent(self, position: int) -> tuple[Card, int]:
        """Card seen most often at `position`, with its count."""
        index = int(np.argmax(self.counts[:, position]))
        return card_from_index(index), int(self.counts[index, position])

    def report(self, tolerance: float) -> UniformityReport:
        # Each row and column sums to `trials`, leaving (n-1)^2 free cells.
        return UniformityReport(
            trials=self.trials,
            num_cards=self.num_cards,
            expected_count=self.expected_count,
            chi_square=self.chi_square(),
            degrees_of_freedom=(self.num_cards - 1) ** 2,
            max_deviation=self.max_deviation(),
            tolerance=tolerance,
        )

    def plot_heatmap(self, save_path: str | Path, show: bool = False) -> None:
        """Plot card/position frequencies as a heatmap."""
        if self.trials == 0:
            print("No trials to plot")
            return

        fig, ax = plt.subplots(figsize=(10, 9))

        image = ax.imshow(self.frequencies(), cmap="viridis", aspect="auto")
        fig.colorbar(image, ax=ax, label="Frequency")

        labels = [str(card_from_index(i)) for i in range(self.num_cards)]
        ax.set_yticks(range(self.num_cards))
        ax.set_yticklabels(labels, fontsize=6)
        ax.set_xlabel("Position (0 = bottom)")
        ax.set_ylabel("Card")
        ax.set_title(f"Shuffle Position Frequencies ({self.trials} trials)")

        plt.tight_layout()

        save_path = Path(save_path)
        save_path.parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150)

        if show:
            plt.show()
        plt.close(fig)
