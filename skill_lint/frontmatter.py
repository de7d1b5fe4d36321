"""Split Markdown documents into YAML front matter and body."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

import yaml

from skill_lint.errors import MalformedFrontMatterError, UnknownFieldError

_DELIMITER = "---"
_BOM = "\ufeff"


@dataclass(frozen=True)
class FrontMatter:
    fields: dict[str, Any] = field(default_factory=dict)
    body: str = ""


def parse_front_matter(
    text: str,
    *,
    path: str = "<document>",
    strict: bool = False,
    allowed_fields: Iterable[str] | None = None,
) -> FrontMatter:
    if text.startswith(_BOM):
        text = text[len(_BOM) :]

    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != _DELIMITER:
        return FrontMatter(fields={}, body=text)

    closing = next(
        (
            index
            for index in range(1, len(lines))
            if lines[index].rstrip() == _DELIMITER
        ),
        None,
    )
    if closing is None:
        raise MalformedFrontMatterError(path, "unterminated '---' block")

    header = "".join(lines[1:closing])
    body = "".join(lines[closing + 1 :])

    try:
        raw = yaml.safe_load(header)
    except yaml.YAMLError as exc:
        detail = str(exc).splitlines()[0] if str(exc) else type(exc).__name__
        raise MalformedFrontMatterError(path, detail) from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise MalformedFrontMatterError(path, "header is not a key-value mapping")

    fields = {str(key): value for key, value in raw.items()}

    if strict and allowed_fields is not None:
        unknown = set(fields) - set(allowed_fields)
        if unknown:
            raise UnknownFieldError(path, unknown)

    return FrontMatter(fields=fields, body=body)


def as_text(value: Any) -> str:
    """Render a scalar front matter value the way it was most likely written."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
