"""Tests for the command-line driver (main.py)."""

from typer.testing import CliRunner

from cards.cards import iter_full, iter_standard
from main import app

runner = CliRunner()


def _lines(output: str) -> list[str]:
    return [line.strip() for line in output.splitlines() if line.strip()]


class TestShowCommand:
    """Test printing decks."""

    def test_bare_prints_canonical_full_deck(self):
        result = runner.invoke(app, ["show", "bare"])
        assert result.exit_code == 0
        assert _lines(result.output) == [str(card) for card in iter_full()]

    def test_bare_without_jokers(self):
        result = runner.invoke(app, ["show", "bare", "--no-jokers"])
        assert result.exit_code == 0
        assert _lines(result.output) == [str(card) for card in iter_standard()]

    def test_default_is_shuffled(self):
        result = runner.invoke(app, ["show"])
        assert result.exit_code == 0
        lines = _lines(result.output)
        assert sorted(lines) == sorted(str(card) for card in iter_full())
        assert lines != [str(card) for card in iter_full()]

    def test_seeded_config_is_reproducible(self, config_file):
        first = runner.invoke(app, ["show", "--config", str(config_file)])
        second = runner.invoke(app, ["show", "--config", str(config_file)])
        assert first.exit_code == 0
        assert first.output == second.output

    def test_unknown_mode_is_usage_error(self):
        result = runner.invoke(app, ["show", "sorted"])
        assert result.exit_code == 2
        assert "Unknown argument" in result.output

    def test_bad_config(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("cards:\n  count: 3\n")
        result = runner.invoke(app, ["show", "--config", str(path)])
        assert result.exit_code == 1
        assert "Invalid config" in result.output

    def test_wrong_typed_config_value(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("display:\n  columns: wide\n")
        result = runner.invoke(app, ["show", "bare", "--config", str(path)])
        assert result.exit_code == 1
        assert "Invalid config" in result.output

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "deck.log"
        result = runner.invoke(app, ["show", "--log-file", str(log_file), "--verbose"])
        assert result.exit_code == 0
        text = log_file.read_text()
        assert "Printing 54 cards" in text
        assert "Shuffled deck of 54 cards" in text

    def test_log_file_scoped_to_one_run(self, tmp_path):
        """A second run logs only to its own file."""
        first_log = tmp_path / "a.log"
        second_log = tmp_path / "b.log"
        assert runner.invoke(app, ["show", "bare", "--log-file", str(first_log)]).exit_code == 0
        result = runner.invoke(app, ["show", "bare", "--no-jokers", "--log-file", str(second_log)])
        assert result.exit_code == 0

        first_text = first_log.read_text()
        assert "Printing 54 cards" in first_text
        assert "Printing 52 cards" not in first_text
        assert "Printing 52 cards" in second_log.read_text()


class TestDrawCommand:
    """Test drawing from the top."""

    def test_draw_count(self):
        result = runner.invoke(app, ["draw", "3"])
        assert result.exit_code == 0
        lines = _lines(result.output)
        assert len(lines) == 4
        assert lines[-1] == "51 cards remaining"

    def test_draw_past_empty(self):
        result = runner.invoke(app, ["draw", "60", "--no-jokers"])
        assert result.exit_code == 0
        assert "Deck is empty after 52 cards" in result.output
        assert "0 cards remaining" in result.output

    def test_negative_count(self):
        result = runner.invoke(app, ["draw", "--", "-1"])
        assert result.exit_code == 2


class TestOtherCommands:
    def test_uniformity(self, config_file, tmp_path):
        plot = tmp_path / "heatmap.png"
        result = runner.invoke(
            app, ["uniformity", "--config", str(config_file), "--plot", str(plot)]
        )
        assert result.exit_code == 0
        assert "Shuffle Uniformity" in result.output
        assert plot.exists()

    def test_uniformity_bad_trials(self, config_file):
        result = runner.invoke(app, ["uniformity", "--config", str(config_file), "-n", "0"])
        assert result.exit_code == 2

    def test_info(self, config_file):
        result = runner.invoke(app, ["info", "--config", str(config_file)])
        assert result.exit_code == 0
        assert "Configuration" in result.output
        assert "Tolerance" in result.output

    def test_uniformity_wrong_typed_trials(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("analysis:\n  trials: lots\n")
        result = runner.invoke(app, ["uniformity", "--config", str(path)])
        assert result.exit_code == 1
        assert "Invalid config" in result.output
