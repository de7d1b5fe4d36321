"""Parse rule files and Markdown rule sections."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Optional

from skill_lint.constants import ALLOWED_RULE_FIELDS, RULES_DIRNAME
from skill_lint.frontmatter import as_text, parse_front_matter
from skill_lint.rules.models import RuleFile, RuleSection

_HEADING_RE = re.compile(r"^(#{1,6})\s+(.+?)\s*#*\s*$")
_IMPACT_RE = re.compile(
    r"^\*\*Impact:?\s*(?:\*\*\s*)?([A-Za-z-]+)(?:\s*\(([^)]*)\))?\s*(?:\*\*)?\s*$",
    re.IGNORECASE,
)
_EXAMPLE_LABEL_RE = re.compile(r"^\*\*(Incorrect|Correct)\b[^*]*\*\*", re.IGNORECASE)
_PREFIX_HEADING_RE = re.compile(r"\(([a-z0-9][a-z0-9-]*)\)\s*$")
_SLUG_STRIP_RE = re.compile(r"[^\w\- ]")
_FENCES = ("```", "~~~")


@dataclass
class _RawSection:
    level: int
    title: str
    lines: list[str] = field(default_factory=list)


def slugify(title: str) -> str:
    """GitHub-style heading anchor."""
    text = _SLUG_STRIP_RE.sub("", title.strip().lower())
    return text.replace(" ", "-")


def _fence_marker(stripped: str) -> Optional[str]:
    for marker in _FENCES:
        if stripped.startswith(marker):
            return marker
    return None


def _split_sections(body: str) -> list[_RawSection]:
    sections: list[_RawSection] = []
    fence: Optional[str] = None
    for line in body.splitlines():
        stripped = line.strip()
        if fence is not None:
            if stripped.startswith(fence):
                fence = None
            if sections:
                sections[-1].lines.append(line)
            continue

        match = _HEADING_RE.match(line)
        if match:
            level = len(match.group(1))
            sections.append(_RawSection(level=level, title=match.group(2)))
            continue

        fence = _fence_marker(stripped)
        if sections:
            sections[-1].lines.append(line)
    return sections


def _example_text(lines: list[str]) -> Optional[str]:
    block: list[str] = []
    fence: Optional[str] = None
    for line in lines:
        stripped = line.strip()
        if fence is None:
            fence = _fence_marker(stripped)
            continue
        if stripped.startswith(fence):
            break
        block.append(line)
    if fence is not None:
        text = "\n".join(block).strip()
    else:
        text = "\n".join(lines).strip()
    return text or None


def _scan_content(lines: list[str]) -> dict[str, Any]:
    found: dict[str, Any] = {"impact": None, "impact_description": ""}
    examples: dict[str, Optional[str]] = {}
    label: Optional[str] = None
    buffer: list[str] = []
    fence: Optional[str] = None

    def _store() -> None:
        if label is not None and not examples.get(label):
            examples[label] = _example_text(buffer)

    for line in lines:
        stripped = line.strip()
        if fence is None:
            label_match = _EXAMPLE_LABEL_RE.match(stripped)
            if label_match:
                _store()
                label = label_match.group(1).lower()
                buffer = []
                continue
            impact_match = _IMPACT_RE.match(stripped)
            if impact_match and found["impact"] is None:
                found["impact"] = impact_match.group(1)
                found["impact_description"] = (impact_match.group(2) or "").strip()
                continue
            fence = _fence_marker(stripped)
        elif stripped.startswith(fence):
            fence = None
        if label is not None:
            buffer.append(line)
    _store()

    found["incorrect"] = examples.get("incorrect")
    found["correct"] = examples.get("correct")
    return found


def parse_sections(body: str) -> list[RuleSection]:
    raw_sections = _split_sections(body)
    sections: list[RuleSection] = []
    for index, raw in enumerate(raw_sections):
        following = raw_sections[index + 1] if index + 1 < len(raw_sections) else None
        is_leaf = following is None or following.level <= raw.level
        scanned = _scan_content(raw.lines)
        sections.append(
            RuleSection(
                title=raw.title,
                anchor=slugify(raw.title),
                level=raw.level,
                impact_label=scanned["impact"],
                impact_description=scanned["impact_description"],
                incorrect_example=scanned["incorrect"],
                correct_example=scanned["correct"],
                is_leaf=is_leaf,
                content="\n".join(raw.lines).strip(),
            )
        )
    return sections


def _parse_tags(raw: Any) -> frozenset[str]:
    if isinstance(raw, str):
        items = raw.split(",")
    elif isinstance(raw, list):
        items = [as_text(item) for item in raw]
    else:
        items = []
    return frozenset(item.strip() for item in items if item.strip())


def parse_rule_file(file_name: str, text: str, *, strict: bool = False) -> RuleFile:
    front_matter = parse_front_matter(
        text,
        path=f"{RULES_DIRNAME}/{file_name}",
        strict=strict,
        allowed_fields=ALLOWED_RULE_FIELDS,
    )
    raw = front_matter.fields
    scanned = _scan_content(front_matter.body.splitlines())

    title = as_text(raw.get("title", ""))
    impact_label = as_text(raw["impact"]) if "impact" in raw else scanned["impact"]

    section = RuleSection(
        title=title,
        anchor=slugify(title),
        level=2,
        impact_label=impact_label or None,
        impact_description=as_text(raw.get("impactDescription", "")),
        incorrect_example=scanned["incorrect"],
        correct_example=scanned["correct"],
        tags=_parse_tags(raw.get("tags")),
        is_leaf=True,
        content=front_matter.body.strip(),
    )
    return RuleFile(
        file_name=file_name,
        fields=dict(raw),
        section=section,
        line_count=len(text.splitlines()),
    )


def parse_declared_prefixes(text: str) -> frozenset[str]:
    """Category prefixes declared by headings such as ``## 1. Title (async)``."""
    body = parse_front_matter(text, path=f"{RULES_DIRNAME}/_sections.md").body
    prefixes: set[str] = set()
    for section in _split_sections(body):
        match = _PREFIX_HEADING_RE.search(section.title)
        if match:
            prefixes.add(match.group(1))
    return frozenset(prefixes)
