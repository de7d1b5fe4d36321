"""Tests for report aggregation."""

import json

from skill_lint.models import Finding, Severity, ValidationResult
from skill_lint.report import build_report
from skill_lint.skills.loader import load_repository
from skill_lint.validator import validate_repository


def _run(directories: dict, strict: bool = False):
    repository = load_repository(directories)
    return build_report(repository, validate_repository(repository), strict=strict)


def test_warnings_do_not_fail(skill_text) -> None:
    report = _run({"foo-bar": {"SKILL.md": skill_text("foo-bar", description="")}})
    assert report.result == ValidationResult.PASS
    assert report.counts() == {"error": 0, "warning": 1}
    assert report.summary_line() == (
        "PASS: 0 errors, 1 warning across 1 skill (1 validated, 0 skipped)"
    )


def test_strict_promotes_warnings(skill_text) -> None:
    report = _run(
        {"foo-bar": {"SKILL.md": skill_text("foo-bar", description="")}}, strict=True
    )
    assert report.result == ValidationResult.FAIL
    assert [item.severity for item in report.findings] == [Severity.ERROR]


def test_skipped_skill_is_reported_and_rest_validated(skill_text) -> None:
    report = _run(
        {
            "good-skill": {"SKILL.md": skill_text("good-skill")},
            "no-skill-md": {"AGENTS.md": "# Guide\n"},
        }
    )
    assert report.validated == ("good-skill",)
    assert report.skipped == ("no-skill-md",)
    assert report.result == ValidationResult.FAIL
    assert report.findings == (
        Finding(
            severity=Severity.ERROR,
            skill_name="no-skill-md",
            file="SKILL.md",
            message="skill skipped: Missing required file",
        ),
    )
    assert "(1 validated, 1 skipped)" in report.summary_line()


def test_critical_without_examples_fails(skill_text) -> None:
    report = _run(
        {
            "x": {
                "SKILL.md": skill_text("x"),
                "rules/core-rule.md": "---\ntitle: R\nimpact: CRITICAL\n---\n",
            }
        }
    )
    assert report.result == ValidationResult.FAIL
    assert report.errors == 1


def test_report_is_deterministic(skill_text, good_guide) -> None:
    directories = {
        "b-skill": {"SKILL.md": skill_text("b-skill", description="")},
        "a-skill": {"SKILL.md": skill_text("a-skill"), "AGENTS.md": "# Empty\n"},
        "c-skill": {"AGENTS.md": good_guide},
    }
    first = json.dumps(_run(directories).as_dict(), indent=2)
    reordered = dict(reversed(list(directories.items())))
    second = json.dumps(_run(reordered).as_dict(), indent=2)
    assert first == second


def test_as_dict_shape(skill_text) -> None:
    directories = {"foo-bar": {"SKILL.md": skill_text("foo-bar", description="")}}
    payload = _run(directories).as_dict()
    assert payload["result"] == "PASS"
    assert payload["validated"] == ["foo-bar"]
    assert payload["skipped"] == []
    assert payload["findings"] == [
        {
            "skill": "foo-bar",
            "file": "SKILL.md",
            "severity": "warning",
            "message": "description is empty",
        }
    ]
