"""
CLI unit tests
"""
import pytest
from datetime import date
from typer.testing import CliRunner

from airac.cli import app
from airac.utils.clock import reset_default_clock, set_default_clock


class TestCli:
    """airac command"""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    @pytest.fixture
    def fixed_today(self):
        set_default_clock(lambda: date(2026, 10, 18))
        yield
        reset_default_clock()

    def test_date_argument(self, runner):
        result = runner.invoke(app, ["2022-05-23"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "2205  2022-05-19  2022-06-16"

    def test_count(self, runner):
        # When
        result = runner.invoke(app, ["20221201", "--count", "3"])

        # Then
        assert result.exit_code == 0
        lines = result.stdout.strip().splitlines()
        assert [line.split()[0] for line in lines] == ["2212", "2213", "2301"]

    def test_defaults_to_today(self, runner, fixed_today):
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert result.stdout.startswith("2610  2026-10-01  2026-10-29")

    def test_invalid_date(self, runner):
        result = runner.invoke(app, ["not-a-date"])

        assert result.exit_code == 1
        assert "2205" not in result.output
