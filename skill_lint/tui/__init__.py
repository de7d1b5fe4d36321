from skill_lint.tui.renderers import LintConsoleUI

__all__ = ["LintConsoleUI"]
