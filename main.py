"""Playing cards: build, shuffle and print decks."""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer
from rich.console import Console
from rich.table import Table

from cards.deck import Deck
from config.settings import Config, load_config
from simulation.statistics import ShuffleStatistics
from ui.display import render_card, render_deck, render_uniformity_report

app = typer.Typer(
    name="playing-cards",
    help="Build, shuffle and print decks of playing cards.",
)
console = Console()
logger = logging.getLogger(__name__)

# Loggers routed to --log-file: deck operations and this driver.
_LOGGER_NAMES = ("cards", __name__)


def _load(config_path: Optional[Path]) -> Config:
    """Load config from YAML, or defaults when no path is given."""
    if config_path is None:
        return Config()
    try:
        return load_config(config_path)
    except (FileNotFoundError, ValueError, TypeError) as e:
        console.print(f"[red]Invalid config: {e}[/red]")
        raise typer.Exit(1)


@contextmanager
def _log_to_file(log_file: Optional[Path], verbose: bool) -> Iterator[None]:
    """Send deck and driver logs to `log_file` for the duration of a command."""
    if log_file is None:
        yield
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file, mode="w")
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )

    loggers = [logging.getLogger(name) for name in _LOGGER_NAMES]
    previous_levels = [lg.level for lg in loggers]
    for lg in loggers:
        lg.setLevel(logging.DEBUG if verbose else logging.INFO)
        lg.addHandler(file_handler)
    try:
        yield
    finally:
        for lg, level in zip(loggers, previous_levels):
            lg.removeHandler(file_handler)
            lg.setLevel(level)
        file_handler.close()


def _build_deck(config: Config, jokers: Optional[bool]) -> Deck:
    use_jokers = config.deck.jokers if jokers is None else jokers
    if use_jokers:
        return Deck.full(seed=config.deck.seed)
    return Deck.standard(seed=config.deck.seed)


@app.command()
def show(
    mode: Optional[str] = typer.Argument(None, help="'bare' for an unshuffled deck"),
    jokers: Optional[bool] = typer.Option(None, "--jokers/--no-jokers", help="Include the two jokers"),
    color: Optional[bool] = typer.Option(None, "--color/--plain", help="Color red cards"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Write debug log to file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at debug level"),
) -> None:
    """Print a deck, one card per line, shuffled unless MODE is 'bare'."""
    config = _load(config_path)

    if mode is None:
        shuffle = config.deck.shuffle
    elif mode == "bare":
        shuffle = False
    else:
        console.print(f"[red]Unknown argument: {mode}[/red]")
        console.print("Usage: playing-cards show [bare]", markup=False)
        raise typer.Exit(2)

    with _log_to_file(log_file, verbose):
        deck = _build_deck(config, jokers)
        if shuffle:
            deck.shuffle()
        logger.info("Printing %d cards (shuffled=%s)", len(deck), shuffle)

        use_color = config.display.color if color is None else color
        if config.display.columns > 1:
            console.print(render_deck(deck, columns=config.display.columns, color=use_color))
            return

        for card in deck:
            if use_color:
                console.print(render_card(card))
            else:
                console.print(str(card), markup=False, highlight=False)


@app.command()
def draw(
    count: int = typer.Argument(5, help="Number of cards to draw"),
    jokers: Optional[bool] = typer.Option(None, "--jokers/--no-jokers", help="Include the two jokers"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
) -> None:
    """Shuffle a deck and draw cards from the top."""
    if count < 0:
        console.print(f"[red]Count must not be negative: {count}[/red]")
        raise typer.Exit(2)

    config = _load(config_path)
    deck = _build_deck(config, jokers)
    deck.shuffle()

    for i in range(count):
        card = deck.draw()
        if card is None:
            console.print(f"[yellow]Deck is empty after {i} cards[/yellow]")
            break
        console.print(str(card), markup=False, highlight=False)

    console.print(f"[dim]{len(deck)} cards remaining[/dim]")


@app.command()
def uniformity(
    trials: Optional[int] = typer.Option(None, "--trials", "-n", help="Number of shuffles"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    jokers: Optional[bool] = typer.Option(None, "--jokers/--no-jokers", help="Include the two jokers"),
    plot: Optional[Path] = typer.Option(None, "--plot", help="Save a position heatmap to this path"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
) -> None:
    """Check that shuffling puts every card in every position equally often."""
    config = _load(config_path)
    analysis = config.analysis
    trials = trials if trials is not None else analysis.trials
    seed = seed if seed is not None else analysis.seed
    use_jokers = config.deck.jokers if jokers is None else jokers

    console.print("\n[bold blue]Shuffle Uniformity[/bold blue]")
    console.print("=" * 50)

    stats = ShuffleStatistics(jokers=use_jokers, seed=seed)
    try:
        stats.run(trials, show_progress=analysis.show_progress)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(2)

    report = stats.report(tolerance=analysis.tolerance)
    console.print(render_uniformity_report(report, stats))

    if plot is not None:
        stats.plot_heatmap(plot)
        console.print(f"\n[green]Heatmap saved to {plot}[/green]")

    if not report.passed:
        raise typer.Exit(1)


@app.command()
def info(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
) -> None:
    """Show the active configuration."""
    config = _load(config_path)

    console.print("\n[bold]Configuration:[/bold]")

    table = Table()
    table.add_column("Category", style="cyan")
    table.add_column("Setting", style="white")
    table.add_column("Value", style="green")

    table.add_row("Deck", "Jokers", str(config.deck.jokers))
    table.add_row("Deck", "Shuffle", str(config.deck.shuffle))
    table.add_row("Deck", "Seed", str(config.deck.seed))

    table.add_row("Display", "Color", str(config.display.color))
    table.add_row("Display", "Columns", str(config.display.columns))

    table.add_row("Analysis", "Trials", str(config.analysis.trials))
    table.add_row("Analysis", "Seed", str(config.analysis.seed))
    table.add_row("Analysis", "Tolerance", str(config.analysis.tolerance))

    console.print(table)


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
