"""Tests for .skill-lint.yaml loading."""

from pathlib import Path

import pytest

from skill_lint.config import LintConfig, load_config
from skill_lint.errors import (
    InvalidConfigSchemaError,
    InvalidYamlFormatError,
    MissingConfigFileError,
)


def test_defaults_without_file(tmp_path: Path) -> None:
    assert load_config(tmp_path) == LintConfig()


def test_load_values(tmp_path: Path) -> None:
    (tmp_path / ".skill-lint.yaml").write_text(
        "skills_dir: docs/skills\n"
        "skill_max_lines: 120\n"
        "strict_fields: true\n"
        "ignore: [draft-skill]\n",
        encoding="utf-8",
    )
    config = load_config(tmp_path)
    assert config.skills_dir == "docs/skills"
    assert config.skill_max_lines == 120
    assert config.guide_max_lines == 500
    assert config.strict_fields is True
    assert config.ignore == frozenset({"draft-skill"})


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    (tmp_path / ".skill-lint.yaml").write_text("", encoding="utf-8")
    assert load_config(tmp_path) == LintConfig()


def test_schema_violation(tmp_path: Path) -> None:
    (tmp_path / ".skill-lint.yaml").write_text(
        "skill_max_lines: lots\n", encoding="utf-8"
    )
    with pytest.raises(InvalidConfigSchemaError) as exc_info:
        load_config(tmp_path)
    assert "skill_max_lines" in exc_info.value.detail


def test_unknown_key_rejected(tmp_path: Path) -> None:
    (tmp_path / ".skill-lint.yaml").write_text("colour: red\n", encoding="utf-8")
    with pytest.raises(InvalidConfigSchemaError):
        load_config(tmp_path)


def test_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / ".skill-lint.yaml").write_text("ignore: [a\n", encoding="utf-8")
    with pytest.raises(InvalidYamlFormatError):
        load_config(tmp_path)


def test_explicit_missing_config(tmp_path: Path) -> None:
    with pytest.raises(MissingConfigFileError):
        load_config(tmp_path, tmp_path / "nope.yaml")


def test_with_overrides_ignores_none() -> None:
    config = LintConfig(strict_fields=False).with_overrides(
        strict_fields=None, skill_max_lines=5
    )
    assert config.strict_fields is False
    assert config.skill_max_lines == 5
