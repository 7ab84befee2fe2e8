"""Tests for the klondike-play command."""

from click.testing import CliRunner

from klondike.cli.play import main
from klondike.rules.solver import DEFAULT_SOLVE_INTERVAL


class TestPlayCommand:
    """Tests for the play CLI."""

    def test_show_prints_deal(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--show", "--seed", "42"])

        assert result.exit_code == 0
        assert "=== Klondike (draw 1) ===" in result.output
        assert "Deck: 24 cards" in result.output

    def test_show_is_reproducible(self):
        runner = CliRunner()
        first = runner.invoke(main, ["--show", "--seed", "7", "-d", "3"])
        second = runner.invoke(main, ["--show", "--seed", "7", "-d", "3"])

        assert first.output == second.output
        assert "(draw 3)" in first.output

    def test_interactive_draw_and_undo(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--seed", "42"], input="d\nu\nu\nq\n")

        assert result.exit_code == 0
        assert "Seed: 42" in result.output
        assert "Drew 1 card" in result.output
        assert "Undid: Drew 1 card" in result.output
        assert "Nothing to undo." in result.output
        assert "Thanks for playing!" in result.output

    def test_end_of_input_quits(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--seed", "3"], input="")

        assert result.exit_code == 0
        assert "Thanks for playing!" in result.output

    def test_rejects_non_positive_interval(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--solve-interval", "0"])

        assert result.exit_code == 2

    def test_invalid_draw_mode(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--draw-mode", "2", "--show"])

        assert result.exit_code != 0

    def test_solve_interval_default_matches_engine(self):
        option = next(p for p in main.params if p.name == "solve_interval")
        assert option.default == DEFAULT_SOLVE_INTERVAL
