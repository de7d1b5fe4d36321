"""Rule data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Impact(str, Enum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

    @classmethod
    def parse(cls, label: str | None) -> Optional["Impact"]:
        if not label:
            return None
        try:
            return cls(label.strip().upper())
        except ValueError:
            return None

    @property
    def requires_examples(self) -> bool:
        return self in (Impact.CRITICAL, Impact.HIGH)


@dataclass(frozen=True)
class RuleSection:
    title: str
    anchor: str
    level: int = 2
    impact_label: Optional[str] = None
    impact_description: str = ""
    incorrect_example: Optional[str] = None
    correct_example: Optional[str] = None
    tags: frozenset[str] = field(default_factory=frozenset)
    is_leaf: bool = True
    content: str = ""

    @property
    def impact(self) -> Optional[Impact]:
        return Impact.parse(self.impact_label)

    @property
    def has_example_pair(self) -> bool:
        return bool(self.incorrect_example) and bool(self.correct_example)


@dataclass(frozen=True)
class RuleFile:
    file_name: str
    fields: dict[str, object]
    section: RuleSection
    line_count: int = 0

    @property
    def stem(self) -> str:
        if self.file_name.endswith(".md"):
            return self.file_name[: -len(".md")]
        return self.file_name

    @property
    def title(self) -> str:
        return self.section.title

    @property
    def impact(self) -> Optional[Impact]:
        return self.section.impact

    @property
    def tags(self) -> frozenset[str]:
        return self.section.tags
