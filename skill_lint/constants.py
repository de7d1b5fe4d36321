from typing import Final


SKILL_FILENAME: Final[str] = "SKILL.md"
AGENTS_FILENAME: Final[str] = "AGENTS.md"
CONFIG_FILENAME: Final[str] = ".skill-lint.yaml"

SKILLS_DIRNAME: Final[str] = "skills"
RULES_DIRNAME: Final[str] = "rules"
SECTIONS_FILENAME: Final[str] = "_sections.md"

SKILL_MAX_LINES: Final[int] = 100
GUIDE_MAX_LINES: Final[int] = 500

REQUIRED_SKILL_FIELDS: Final[tuple[str, ...]] = ("name", "description", "license")
ALLOWED_SKILL_FIELDS: Final[frozenset[str]] = frozenset(
    {
        "name",
        "description",
        "license",
        "metadata",
        "allowed-tools",
        "compatibility",
    }
)

REQUIRED_RULE_FIELDS: Final[tuple[str, ...]] = ("title", "impact")
ALLOWED_RULE_FIELDS: Final[frozenset[str]] = frozenset(
    {"title", "impact", "impactDescription", "tags"}
)

ABSTRACT_HEADING: Final[str] = "abstract"
TOC_HEADING: Final[str] = "table of contents"
