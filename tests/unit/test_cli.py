"""
Unit tests для CLI (click).
"""

from click.testing import CliRunner

from cli import cli


def test_keywords_command():
    runner = CliRunner()

    result = runner.invoke(cli, ["keywords", "word word word other other single", "--banned", ""])

    assert result.exit_code == 0
    assert "word, other, single" in result.output


def test_keywords_command_reports_banned():
    runner = CliRunner()

    result = runner.invoke(cli, ["keywords", "This Has BANNED1", "--banned", "banned1"])

    assert result.exit_code == 0
    assert "banned1" in result.output
    assert "this, has" in result.output
