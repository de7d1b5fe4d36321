from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class ValidationResult(str, Enum):
    PASS = "PASS"
    FAIL = "FAIL"


@dataclass(frozen=True)
class Finding:
    severity: Severity
    skill_name: str
    file: str
    message: str

    def as_dict(self) -> dict[str, str]:
        return {
            "skill": self.skill_name,
            "file": self.file,
            "severity": self.severity.value,
            "message": self.message,
        }


@dataclass(frozen=True)
class ValidationReport:
    findings: tuple[Finding, ...]
    validated: tuple[str, ...]
    skipped: tuple[str, ...]

    @property
    def errors(self) -> int:
        return sum(1 for item in self.findings if item.severity == Severity.ERROR)

    @property
    def warnings(self) -> int:
        return sum(1 for item in self.findings if item.severity == Severity.WARNING)

    @property
    def result(self) -> ValidationResult:
        return ValidationResult.FAIL if self.errors else ValidationResult.PASS

    @property
    def passed(self) -> bool:
        return self.result == ValidationResult.PASS

    def counts(self) -> dict[str, int]:
        return {
            Severity.ERROR.value: self.errors,
            Severity.WARNING.value: self.warnings,
        }

    def summary_line(self) -> str:
        total = len(self.validated) + len(self.skipped)
        return (
            f"{self.result.value}: {_plural(self.errors, 'error')}, "
            f"{_plural(self.warnings, 'warning')} across {_plural(total, 'skill')} "
            f"({len(self.validated)} validated, {len(self.skipped)} skipped)"
        )

    def as_dict(self) -> dict:
        return {
            "result": self.result.value,
            "summary": self.summary_line(),
            "counts": self.counts(),
            "validated": list(self.validated),
            "skipped": list(self.skipped),
            "findings": [item.as_dict() for item in self.findings],
        }


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"
