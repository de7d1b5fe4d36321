"""Read skill directories from disk into plain ``{name: text}`` mappings."""

from pathlib import Path
from typing import Union

from loguru import logger

from skill_lint.constants import RULES_DIRNAME
from skill_lint.errors import MissingSkillsRootError

# Files that are not valid UTF-8 keep their raw bytes; the loader reports them.
FileContent = Union[str, bytes]


def _is_hidden(path: Path) -> bool:
    return path.name.startswith(".")


def _read_file(path: Path) -> FileContent:
    raw = path.read_bytes()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("File is not valid UTF-8: {}", path)
        return raw


def _read_markdown(directory: Path) -> dict[str, FileContent]:
    return {
        child.name: _read_file(child)
        for child in sorted(directory.iterdir())
        if child.is_file() and child.suffix == ".md" and not _is_hidden(child)
    }


def read_skill_directory(path: Path) -> dict[str, FileContent]:
    files = _read_markdown(path)
    rules_dir = path / RULES_DIRNAME
    if rules_dir.is_dir():
        for name, text in _read_markdown(rules_dir).items():
            files[f"{RULES_DIRNAME}/{name}"] = text
    return files


def read_skill_directories(
    root: Path, skills_dir: str, ignore: frozenset[str] = frozenset()
) -> dict[str, dict[str, FileContent]]:
    skills_root = root / skills_dir
    if not skills_root.is_dir():
        raise MissingSkillsRootError(skills_root)

    directories: dict[str, dict[str, FileContent]] = {}
    for child in sorted(skills_root.iterdir()):
        if not child.is_dir() or _is_hidden(child):
            continue
        if child.name in ignore:
            logger.debug("Ignoring skill directory {}", child.name)
            continue
        directories[child.name] = read_skill_directory(child)
    logger.debug("Discovered {} skill directories in {}", len(directories), skills_root)
    return directories
