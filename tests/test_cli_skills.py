"""Tests for the skills listing command."""

from pathlib import Path

from skill_lint.__main__ import cli


def test_skills_lists_loaded_and_skipped(
    tmp_path: Path, make_skill, skill_text, good_rule, cli_runner
) -> None:
    make_skill("alpha", skill=skill_text("alpha"), rules={"js-a.md": good_rule})
    make_skill("beta", guide="# Guide\n")
    result = cli_runner.invoke(cli, ["skills", str(tmp_path)])
    assert result.exit_code == 0
    assert "alpha" in result.output
    assert "beta" in result.output
    assert "skipped" in result.output


def test_skills_empty(tmp_path: Path, cli_runner) -> None:
    (tmp_path / "skills").mkdir()
    result = cli_runner.invoke(cli, ["skills", str(tmp_path)])
    assert result.exit_code == 0
    assert "No skills found" in result.output


def test_skills_shows_names_literally(
    tmp_path: Path, make_skill, skill_text, cli_runner
) -> None:
    make_skill("[red]odd", skill=skill_text("odd-skill"))
    result = cli_runner.invoke(cli, ["skills", str(tmp_path)])
    assert result.exit_code == 0
    assert "[red]odd" in result.output
