"""Optional per-repository settings read from ``.skill-lint.yaml``."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator
from loguru import logger

from skill_lint.constants import (
    CONFIG_FILENAME,
    GUIDE_MAX_LINES,
    SKILL_MAX_LINES,
    SKILLS_DIRNAME,
)
from skill_lint.errors import (
    InvalidConfigSchemaError,
    InvalidYamlFormatError,
    MissingConfigFileError,
)

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "skills_dir": {"type": "string", "minLength": 1},
        "skill_max_lines": {"type": "integer", "minimum": 1},
        "guide_max_lines": {"type": "integer", "minimum": 1},
        "strict_fields": {"type": "boolean"},
        "ignore": {"type": "array", "items": {"type": "string"}},
    },
}

_VALIDATOR = Draft202012Validator(CONFIG_SCHEMA)


@dataclass(frozen=True)
class LintConfig:
    skills_dir: str = SKILLS_DIRNAME
    skill_max_lines: int = SKILL_MAX_LINES
    guide_max_lines: int = GUIDE_MAX_LINES
    strict_fields: bool = False
    ignore: frozenset[str] = field(default_factory=frozenset)

    def with_overrides(self, **overrides: Any) -> "LintConfig":
        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values)


def validate_config(path: Path, payload: Any) -> None:
    error = next(iter(_VALIDATOR.iter_errors(payload)), None)
    if error is None:
        return
    location = ".".join(str(part) for part in error.absolute_path) or "<root>"
    raise InvalidConfigSchemaError(path, f"{location}: {error.message}")


def load_config(root: Path, config_path: Path | None = None) -> LintConfig:
    if config_path is not None and not config_path.exists():
        raise MissingConfigFileError(config_path)

    path = config_path or root / CONFIG_FILENAME
    if not path.exists():
        logger.debug("No config file at {}, using defaults", path)
        return LintConfig()

    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise InvalidYamlFormatError(path, str(exc).splitlines()[0]) from exc

    if payload is None:
        payload = {}
    validate_config(path, payload)
    logger.debug("Loaded config from {}: {}", path, payload)

    return LintConfig(
        skills_dir=payload.get("skills_dir", SKILLS_DIRNAME),
        skill_max_lines=payload.get("skill_max_lines", SKILL_MAX_LINES),
        guide_max_lines=payload.get("guide_max_lines", GUIDE_MAX_LINES),
        strict_fields=payload.get("strict_fields", False),
        ignore=frozenset(payload.get("ignore", [])),
    )
