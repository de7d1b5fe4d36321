"""Aggregate findings into the final validation report."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from skill_lint.constants import SKILL_FILENAME
from skill_lint.models import Finding, Severity, ValidationReport
from skill_lint.skills.models import SkillRepository
from skill_lint.validator import sort_findings


def skipped_findings(repository: SkillRepository) -> list[Finding]:
    return [
        Finding(
            severity=Severity.ERROR,
            skill_name=item.directory,
            file=SKILL_FILENAME,
            message=f"skill skipped: {item.error.message}",
        )
        for item in repository.skipped
    ]


def promote_warnings(findings: Iterable[Finding]) -> list[Finding]:
    return [
        replace(item, severity=Severity.ERROR)
        if item.severity == Severity.WARNING
        else item
        for item in findings
    ]


def build_report(
    repository: SkillRepository,
    findings: Iterable[Finding],
    *,
    strict: bool = False,
) -> ValidationReport:
    collected = list(findings) + skipped_findings(repository)
    if strict:
        collected = promote_warnings(collected)

    return ValidationReport(
        findings=tuple(sort_findings(collected)),
        validated=tuple(sorted(bundle.directory for bundle in repository.skills)),
        skipped=tuple(sorted(item.directory for item in repository.skipped)),
    )
