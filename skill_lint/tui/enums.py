from enum import Enum

from skill_lint.models import Severity, ValidationResult


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    DIM = "dim"
    WHITE = "white"


SEVERITY_STYLE = {
    Severity.ERROR: UIStyle.RED.value,
    Severity.WARNING: UIStyle.YELLOW.value,
}

RESULT_STYLE = {
    ValidationResult.PASS: UIStyle.GREEN.value,
    ValidationResult.FAIL: UIStyle.RED.value,
}
