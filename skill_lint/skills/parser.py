"""Parse SKILL.md documents and AGENTS.md guides."""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import unquote

from skill_lint.constants import (
    ABSTRACT_HEADING,
    AGENTS_FILENAME,
    ALLOWED_SKILL_FIELDS,
    SKILL_FILENAME,
    TOC_HEADING,
)
from skill_lint.frontmatter import as_text, parse_front_matter
from skill_lint.rules.parser import parse_sections
from skill_lint.skills.models import SkillDocument, SkillGuide, TocEntry

_TOC_LINK_RE = re.compile(r"\[([^\]]+)\]\(#([^)\s]+)\)")


def _metadata(raw: Any) -> dict[str, str]:
    if not isinstance(raw, dict):
        return {}
    return {str(key): as_text(value) for key, value in raw.items()}


def parse_skill_document(
    directory: str, text: str, *, strict: bool = False
) -> SkillDocument:
    front_matter = parse_front_matter(
        text,
        path=f"{directory}/{SKILL_FILENAME}",
        strict=strict,
        allowed_fields=ALLOWED_SKILL_FIELDS,
    )
    raw = front_matter.fields
    return SkillDocument(
        directory=directory,
        name=as_text(raw.get("name", directory)) or directory,
        description=as_text(raw.get("description", "")),
        license=as_text(raw.get("license", "")),
        metadata=_metadata(raw.get("metadata")),
        fields=dict(raw),
        line_count=len(text.splitlines()),
        content=front_matter.body,
    )


def parse_guide(directory: str, text: str) -> SkillGuide:
    body = parse_front_matter(text, path=f"{directory}/{AGENTS_FILENAME}").body
    sections = parse_sections(body)

    abstract = None
    toc = None
    for section in sections:
        heading = section.title.strip().lower()
        if heading == ABSTRACT_HEADING and abstract is None:
            abstract = section.content
        elif heading == TOC_HEADING and toc is None:
            toc = tuple(
                TocEntry(label=label.strip(), anchor=unquote(anchor).lower())
                for label, anchor in _TOC_LINK_RE.findall(section.content)
            )

    return SkillGuide(
        abstract=abstract,
        sections=tuple(sections),
        table_of_contents=toc,
        line_count=len(text.splitlines()),
    )
