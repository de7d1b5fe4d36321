import sys
from pathlib import Path
from typing import Callable, Optional

from click.testing import CliRunner
from loguru import logger
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture(autouse=True)
def quiet_logs():
    yield
    logger.remove()
    logger.disable("skill_lint")


def skill_md(
    name: str,
    description: str = "Async patterns. Use when writing coroutines",
    license: str = "MIT",
    extra: str = "",
    body: str = "# Skill\n\nGuidance.\n",
) -> str:
    return (
        "---\n"
        f"name: {name}\n"
        f'description: "{description}"\n'
        f"license: {license}\n"
        f"{extra}"
        "---\n"
        "\n"
        f"{body}"
    )


GOOD_RULE = (
    "---\n"
    "title: Defer Await Until Needed\n"
    "impact: HIGH\n"
    "impactDescription: avoids blocking unused code paths\n"
    "tags: async, await\n"
    "---\n"
    "\n"
    "## Defer Await Until Needed\n"
    "\n"
    "**Incorrect (blocks both branches):**\n"
    "\n"
    "```python\n"
    "data = await fetch()\n"
    "```\n"
    "\n"
    "**Correct (only blocks when needed):**\n"
    "\n"
    "```python\n"
    "if needed:\n"
    "    data = await fetch()\n"
    "```\n"
)


GOOD_GUIDE = (
    "# Async Patterns\n"
    "\n"
    "## Abstract\n"
    "\n"
    "Conventions for asynchronous code.\n"
    "\n"
    "## Table of Contents\n"
    "\n"
    "1. [Eliminating Waterfalls](#1-eliminating-waterfalls)\n"
    "   - 1.1 [Defer Await Until Needed](#11-defer-await-until-needed)\n"
    "\n"
    "## 1. Eliminating Waterfalls\n"
    "\n"
    "**Impact: CRITICAL**\n"
    "\n"
    "### 1.1 Defer Await Until Needed\n"
    "\n"
    "**Impact: HIGH (avoids blocking unused code paths)**\n"
    "\n"
    "**Incorrect:**\n"
    "\n"
    "```python\n"
    "# await everything up front\n"
    "data = await fetch()\n"
    "```\n"
    "\n"
    "**Correct:**\n"
    "\n"
    "```python\n"
    "data = await fetch() if needed else None\n"
    "```\n"
)


@pytest.fixture
def skill_text() -> Callable[..., str]:
    return skill_md


@pytest.fixture
def make_skill(tmp_path: Path) -> Callable[..., Path]:
    def _make(
        directory: str,
        skill: Optional[str] = None,
        guide: Optional[str] = None,
        rules: Optional[dict[str, str]] = None,
        root: Optional[Path] = None,
    ) -> Path:
        skill_dir = (root or tmp_path) / "skills" / directory
        skill_dir.mkdir(parents=True, exist_ok=True)
        if skill is not None:
            (skill_dir / "SKILL.md").write_text(skill, encoding="utf-8")
        if guide is not None:
            (skill_dir / "AGENTS.md").write_text(guide, encoding="utf-8")
        for file_name, text in (rules or {}).items():
            rules_dir = skill_dir / "rules"
            rules_dir.mkdir(exist_ok=True)
            (rules_dir / file_name).write_text(text, encoding="utf-8")
        return skill_dir

    return _make


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def good_rule() -> str:
    return GOOD_RULE


@pytest.fixture
def good_guide() -> str:
    return GOOD_GUIDE
