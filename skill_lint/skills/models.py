"""Skill data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from skill_lint.errors import SkillFileError
from skill_lint.rules.models import RuleFile, RuleSection


@dataclass(frozen=True)
class SkillDocument:
    directory: str
    name: str
    description: str = ""
    license: str = ""
    metadata: dict[str, str] = field(default_factory=dict)
    fields: dict[str, Any] = field(default_factory=dict)
    line_count: int = 0
    content: str = ""


@dataclass(frozen=True)
class TocEntry:
    label: str
    anchor: str


@dataclass(frozen=True)
class SkillGuide:
    abstract: Optional[str]
    sections: tuple[RuleSection, ...]
    table_of_contents: Optional[tuple[TocEntry, ...]]
    line_count: int = 0

    def resolve(self, entry: TocEntry) -> list[RuleSection]:
        return [section for section in self.sections if section.anchor == entry.anchor]


@dataclass(frozen=True)
class FileLoadError:
    file_name: str
    error: SkillFileError


@dataclass(frozen=True)
class SkillBundle:
    document: SkillDocument
    guide: Optional[SkillGuide] = None
    rules: tuple[RuleFile, ...] = ()
    ignored_files: tuple[str, ...] = ()
    declared_prefixes: frozenset[str] = frozenset()
    load_errors: tuple[FileLoadError, ...] = ()

    @property
    def directory(self) -> str:
        return self.document.directory

    @property
    def name(self) -> str:
        return self.document.name


@dataclass(frozen=True)
class SkippedSkill:
    directory: str
    error: SkillFileError


@dataclass(frozen=True)
class SkillRepository:
    skills: tuple[SkillBundle, ...] = ()
    skipped: tuple[SkippedSkill, ...] = ()
