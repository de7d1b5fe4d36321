"""Structural checks over loaded skill bundles.

Checks never raise for content problems; every violation becomes a
:class:`Finding`. Findings for one skill are emitted in file order
(``AGENTS.md``, ``SKILL.md``, then ``rules/*``), check order within a file.
"""

from __future__ import annotations

import re
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

from loguru import logger

from skill_lint.config import LintConfig
from skill_lint.constants import (
    AGENTS_FILENAME,
    REQUIRED_RULE_FIELDS,
    REQUIRED_SKILL_FIELDS,
    RULES_DIRNAME,
    SKILL_FILENAME,
)
from skill_lint.frontmatter import as_text
from skill_lint.models import Finding, Severity
from skill_lint.rules.models import Impact, RuleFile, RuleSection
from skill_lint.skills.models import SkillBundle, SkillGuide, SkillRepository

KEBAB_CASE_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
RULE_FILE_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)+\.md$")
SEMVER_RE = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?$"
)
TRIGGER_RE = re.compile(
    r",|\b(?:when|whenever|if|before|after|during|use)\b", re.IGNORECASE
)

_IMPACT_LEVELS = ", ".join(level.value for level in Impact)


class _Collector:
    def __init__(self, skill_name: str) -> None:
        self.skill_name = skill_name
        self.findings: list[Finding] = []

    def error(self, file: str, message: str) -> None:
        self.findings.append(Finding(Severity.ERROR, self.skill_name, file, message))

    def warning(self, file: str, message: str) -> None:
        self.findings.append(Finding(Severity.WARNING, self.skill_name, file, message))


def is_kebab_case(value: str) -> bool:
    return bool(KEBAB_CASE_RE.match(value))


def _check_document(bundle: SkillBundle, config: LintConfig, out: _Collector) -> None:
    document = bundle.document
    fields = document.fields

    for key in REQUIRED_SKILL_FIELDS:
        if key not in fields:
            out.error(SKILL_FILENAME, f"missing required front matter key '{key}'")

    if "name" in fields and not as_text(fields["name"]).strip():
        out.error(SKILL_FILENAME, "name is empty")
    elif "name" in fields:
        if not is_kebab_case(document.name):
            out.error(SKILL_FILENAME, f"name '{document.name}' is not kebab-case")
        if document.name != document.directory:
            out.error(
                SKILL_FILENAME,
                f"name '{document.name}' does not match directory "
                f"'{document.directory}'",
            )
    elif not is_kebab_case(document.directory):
        out.error(
            SKILL_FILENAME, f"directory name '{document.directory}' is not kebab-case"
        )

    if "description" in fields:
        description = document.description.strip()
        if not description:
            out.warning(SKILL_FILENAME, "description is empty")
        elif not TRIGGER_RE.search(description):
            out.warning(
                SKILL_FILENAME,
                "description does not state when the skill applies",
            )

    if "metadata" in fields:
        metadata = fields["metadata"]
        if not isinstance(metadata, dict):
            out.error(SKILL_FILENAME, "metadata must be a key-value mapping")
        elif "version" in document.metadata and not SEMVER_RE.match(
            document.metadata["version"]
        ):
            out.warning(
                SKILL_FILENAME,
                f"metadata version '{document.metadata['version']}' is not "
                "a semantic version",
            )

    if document.line_count > config.skill_max_lines:
        out.warning(
            SKILL_FILENAME,
            f"{document.line_count} lines exceeds the {config.skill_max_lines} "
            "line budget",
        )


def _check_examples(
    section: RuleSection, file: str, out: _Collector, where: str
) -> None:
    impact = section.impact
    if section.impact_label and impact is None:
        out.error(
            file,
            f"{where} has unknown impact '{section.impact_label}' "
            f"(expected one of {_IMPACT_LEVELS})",
        )
        return
    if impact is None or not impact.requires_examples or section.has_example_pair:
        return

    missing = []
    if not section.incorrect_example:
        missing.append("incorrect")
    if not section.correct_example:
        missing.append("correct")
    if missing:
        out.error(
            file,
            f"{where} has {impact.value} impact but no "
            f"{' or '.join(missing)} example",
        )


def _check_guide(guide: SkillGuide, config: LintConfig, out: _Collector) -> None:
    if guide.abstract is None:
        out.error(AGENTS_FILENAME, "missing 'Abstract' section")
    elif not guide.abstract.strip():
        out.error(AGENTS_FILENAME, "'Abstract' section is empty")

    if guide.table_of_contents is None:
        out.error(AGENTS_FILENAME, "missing 'Table of Contents' section")
    else:
        for entry in guide.table_of_contents:
            matches = guide.resolve(entry)
            if not matches:
                out.error(
                    AGENTS_FILENAME,
                    f"table of contents entry '{entry.label}' points to "
                    f"missing section '#{entry.anchor}'",
                )
            elif len(matches) > 1:
                out.error(
                    AGENTS_FILENAME,
                    f"table of contents entry '{entry.label}' matches "
                    f"{len(matches)} sections '#{entry.anchor}'",
                )

    for section in guide.sections:
        if section.is_leaf:
            _check_examples(section, AGENTS_FILENAME, out, f"section '{section.title}'")

    if guide.line_count > config.guide_max_lines:
        out.warning(
            AGENTS_FILENAME,
            f"{guide.line_count} lines exceeds the {config.guide_max_lines} "
            "line budget",
        )


def _matches_declared_prefix(stem: str, prefixes: Iterable[str]) -> bool:
    return any(
        stem.startswith(f"{prefix}-") and len(stem) > len(prefix) + 1
        for prefix in prefixes
    )


def _check_rule(rule: RuleFile, bundle: SkillBundle, out: _Collector) -> None:
    file = f"{RULES_DIRNAME}/{rule.file_name}"

    if not RULE_FILE_RE.match(rule.file_name):
        out.error(
            file,
            f"file name '{rule.file_name}' does not match "
            "'{prefix}-{rule-name}.md'",
        )
    elif bundle.declared_prefixes and not _matches_declared_prefix(
        rule.stem, bundle.declared_prefixes
    ):
        out.error(
            file,
            f"file name '{rule.file_name}' uses an undeclared category prefix "
            f"(declared: {', '.join(sorted(bundle.declared_prefixes))})",
        )

    for key in REQUIRED_RULE_FIELDS:
        if key not in rule.fields:
            out.error(file, f"missing required front matter key '{key}'")
    if "impact" in rule.fields and not rule.section.impact_label:
        out.error(file, "impact is empty")

    _check_examples(rule.section, file, out, "rule")


def validate_skill(
    bundle: SkillBundle, config: LintConfig | None = None
) -> list[Finding]:
    config = config or LintConfig()
    out = _Collector(bundle.directory)

    for item in bundle.load_errors:
        out.error(item.file_name, item.error.message)

    if bundle.guide is not None:
        _check_guide(bundle.guide, config, out)
    _check_document(bundle, config, out)
    for rule in bundle.rules:
        _check_rule(rule, bundle, out)

    return sort_findings(out.findings)


def sort_findings(findings: Iterable[Finding]) -> list[Finding]:
    """Stable order: skill, then file, then emission order."""
    return sorted(findings, key=lambda item: (item.skill_name, item.file))


def validate_repository(
    repository: SkillRepository, config: LintConfig | None = None, jobs: int = 1
) -> list[Finding]:
    config = config or LintConfig()
    bundles = list(repository.skills)

    if jobs > 1 and len(bundles) > 1:
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            results = list(
                pool.map(lambda bundle: validate_skill(bundle, config), bundles)
            )
    else:
        results = [validate_skill(bundle, config) for bundle in bundles]

    findings = [finding for batch in results for finding in batch]
    logger.debug("Validated {} skills, {} findings", len(bundles), len(findings))
    return sort_findings(findings)
