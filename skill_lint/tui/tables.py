from collections import Counter

from rich.table import Column, Table
from rich.text import Text

from skill_lint.models import Finding, ValidationReport
from skill_lint.skills.models import SkillRepository
from skill_lint.tui.enums import RESULT_STYLE, SEVERITY_STYLE, UIStyle


class ReportTable:
    @staticmethod
    def summary_block(report: ValidationReport, root: str):
        counts = Counter(item.severity.value for item in report.findings)
        chips = [f"{key}={value}" for key, value in sorted(counts.items()) if value > 0]
        if not chips:
            chips = ["none"]

        style = RESULT_STYLE[report.result]
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Root", Text(root))
        table.add_row("Validated", str(len(report.validated)))
        table.add_row("Skipped", str(len(report.skipped)))
        table.add_row("Findings", "  ".join(chips))
        table.add_row("Result", f"[{style}]{report.result.value}[/{style}]")
        return table

    @staticmethod
    def findings_table(findings: list[Finding]) -> Table:
        table = Table(
            Column(header="Skill", overflow="fold", max_width=28),
            Column(header="File", overflow="fold", max_width=32),
            Column(header="Severity", width=8),
            Column(header="Message", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for item in findings:
            style = SEVERITY_STYLE.get(item.severity, UIStyle.WHITE.value)
            table.add_row(
                Text(item.skill_name),
                Text(item.file),
                f"[{style}]{item.severity.value}[/{style}]",
                Text(item.message),
            )
        return table


class SkillsTable:
    @staticmethod
    def skills_table(repository: SkillRepository) -> Table:
        table = Table(
            Column(header="Skill", overflow="fold"),
            Column(header="Guide", width=6),
            Column(header="Rules", width=6, justify="right"),
            Column(header="Status", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for bundle in repository.skills:
            guide = "yes" if bundle.guide is not None else "no"
            status = f"[{UIStyle.GREEN.value}]loaded[/{UIStyle.GREEN.value}]"
            if bundle.load_errors:
                status = (
                    f"[{UIStyle.YELLOW.value}]"
                    f"{len(bundle.load_errors)} unreadable file(s)"
                    f"[/{UIStyle.YELLOW.value}]"
                )
            table.add_row(
                Text(bundle.directory), guide, str(len(bundle.rules)), status
            )
        for item in repository.skipped:
            table.add_row(
                Text(item.directory),
                "-",
                "-",
                Text(f"skipped: {item.error.message}", style=UIStyle.RED.value),
            )
        return table
