from rich.console import Console

from skill_lint.models import ValidationReport
from skill_lint.skills.models import SkillRepository
from skill_lint.tui.enums import RESULT_STYLE, UIStyle
from skill_lint.tui.sections import UISection
from skill_lint.tui.tables import ReportTable, SkillsTable
from skill_lint.utils import compact_home_path


class LintConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_report(self, report: ValidationReport, root: str) -> None:
        result_style = RESULT_STYLE[report.result]

        self.console.print(
            UISection.wrap(
                "validation overview",
                ReportTable.summary_block(report, root=compact_home_path(root)),
                style=UIStyle.BLUE.value,
            )
        )

        if report.findings:
            self.console.print(
                UISection.wrap(
                    "findings",
                    ReportTable.findings_table(list(report.findings)),
                    style=result_style,
                )
            )
        else:
            self.console.print(
                UISection.note("findings", "No findings.", style=UIStyle.DIM.value)
            )

        if report.skipped:
            skipped_text = "\n".join([f"- {item}" for item in report.skipped])
            self.console.print(
                UISection.note("skipped", skipped_text, style=UIStyle.YELLOW.value)
            )

        self.console.print(UISection.banner(report.summary_line(), result_style))

    def render_skills(self, repository: SkillRepository, root: str) -> None:
        if not repository.skills and not repository.skipped:
            self.console.print(
                UISection.note(
                    "skills",
                    f"No skills found under {compact_home_path(root)}.",
                    style=UIStyle.YELLOW.value,
                )
            )
            return

        self.console.print(
            UISection.wrap(
                "skills",
                SkillsTable.skills_table(repository),
                style=UIStyle.BLUE.value,
            )
        )
