"""Display utilities for terminal card output."""

from rich.table import Table

from cards.cards import Card, Color
from cards.deck import Deck
from simulation.statistics import ShuffleStatistics, UniformityReport


CARD_COLORS = {
    Color.RED: "red",
    Color.BLACK: "white",
}


def render_card(card: Card) -> str:
    """Render a single card with color (red for hearts/diamonds/red joker)."""
    color = CARD_COLORS[card.color]
    return f"[{color}]{card}[/{color}]"


def render_deck(deck: Deck, columns: int = 13, color: bool = True) -> Table:
    """Render deck contents as a grid, bottom card first."""
    if columns < 1:
        raise ValueError(f"Columns must be at least 1, got {columns}")

    grid = Table(show_header=False, box=None, padding=(0, 1))
    for _ in range(columns):
        grid.add_column(justify="right")

    row: list[str] = []
    for card in deck:
        row.append(render_card(card) if color else str(card))
        if len(row) == columns:
            grid.add_row(*row)
            row = []
    if row:
        grid.add_row(*row)

    return grid


def render_uniformity_report(report: UniformityReport, stats: ShuffleStatistics) -> Table:
    """Render a shuffle uniformity summary."""
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Label", style="dim")
    table.add_column("Value", style="bold")

    table.add_row("Trials", str(report.trials))
    table.add_row("Cards", str(report.num_cards))
    table.add_row("Expected per cell", f"{report.expected_count:.1f}")
    table.add_row("Chi-square", f"{report.chi_square:.1f} (df={report.degrees_of_freedom})")
    table.add_row("Max deviation", f"{report.max_deviation * 100:.1f}%")
    table.add_row("Tolerance", f"{report.tolerance * 100:.1f}%")

    top_card, top_count = stats.most_frequent(report.num_cards - 1)
    table.add_row("Most frequent top", f"{render_card(top_card)} ({top_count}x)")

    verdict = "[green]uniform[/green]" if report.passed else "[red]not uniform[/red]"
    table.add_row("Result", verdict)

    return table
