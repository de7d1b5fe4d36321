"""Build the in-memory skill repository from raw directory contents."""

from __future__ import annotations

from typing import Mapping, Union

from loguru import logger

from skill_lint.constants import (
    AGENTS_FILENAME,
    RULES_DIRNAME,
    SECTIONS_FILENAME,
    SKILL_FILENAME,
)
from skill_lint.errors import (
    DuplicateSkillNameError,
    InvalidEncodingError,
    MissingRequiredFileError,
    SkillFileError,
)
from skill_lint.rules.models import RuleFile
from skill_lint.rules.parser import parse_declared_prefixes, parse_rule_file
from skill_lint.skills.models import (
    FileLoadError,
    SkillBundle,
    SkillGuide,
    SkillRepository,
    SkippedSkill,
)
from skill_lint.skills.parser import parse_guide, parse_skill_document

RULES_PREFIX = f"{RULES_DIRNAME}/"


def _text(directory: str, key: str, content: Union[str, bytes]) -> str:
    if isinstance(content, str):
        return content
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidEncodingError(
            f"{directory}/{key}", f"{exc.reason} at byte {exc.start}"
        ) from exc


def load_skill(
    directory: str, files: Mapping[str, Union[str, bytes]], *, strict: bool = False
) -> SkillBundle:
    """Parse one skill directory.

    ``files`` maps names relative to the skill directory to raw text; rule
    files are keyed as ``rules/<file>.md``. Content that could not be decoded
    stays as ``bytes``. Only a broken ``SKILL.md`` is fatal for the skill;
    other broken files are kept as load errors.
    """
    if SKILL_FILENAME not in files:
        raise MissingRequiredFileError(f"{directory}/{SKILL_FILENAME}")

    document = parse_skill_document(
        directory,
        _text(directory, SKILL_FILENAME, files[SKILL_FILENAME]),
        strict=strict,
    )
    load_errors: list[FileLoadError] = []

    guide: SkillGuide | None = None
    if AGENTS_FILENAME in files:
        try:
            guide = parse_guide(
                directory, _text(directory, AGENTS_FILENAME, files[AGENTS_FILENAME])
            )
        except SkillFileError as exc:
            logger.debug("Failed to parse {}/{}: {}", directory, AGENTS_FILENAME, exc)
            load_errors.append(FileLoadError(file_name=AGENTS_FILENAME, error=exc))

    rules: list[RuleFile] = []
    ignored: list[str] = []
    declared_prefixes: frozenset[str] = frozenset()
    for key in sorted(files):
        if not key.startswith(RULES_PREFIX):
            continue
        file_name = key[len(RULES_PREFIX) :]
        if file_name.startswith("_") and file_name != SECTIONS_FILENAME:
            ignored.append(file_name)
            continue
        try:
            text = _text(directory, key, files[key])
            if file_name == SECTIONS_FILENAME:
                declared_prefixes = parse_declared_prefixes(text)
                ignored.append(file_name)
            else:
                rules.append(parse_rule_file(file_name, text, strict=strict))
        except SkillFileError as exc:
            logger.debug("Failed to parse {}/{}: {}", directory, key, exc)
            load_errors.append(FileLoadError(file_name=key, error=exc))

    logger.debug(
        "Loaded skill {} (guide={}, rules={}, errors={})",
        directory,
        guide is not None,
        len(rules),
        len(load_errors),
    )
    return SkillBundle(
        document=document,
        guide=guide,
        rules=tuple(rules),
        ignored_files=tuple(ignored),
        declared_prefixes=declared_prefixes,
        load_errors=tuple(load_errors),
    )


def load_repository(
    skill_directories: Mapping[str, Mapping[str, Union[str, bytes]]],
    *,
    strict: bool = False,
) -> SkillRepository:
    bundles: list[SkillBundle] = []
    skipped: list[SkippedSkill] = []

    for directory in sorted(skill_directories):
        try:
            bundles.append(
                load_skill(directory, skill_directories[directory], strict=strict)
            )
        except SkillFileError as exc:
            logger.debug("Skipping skill {}: {}", directory, exc)
            skipped.append(SkippedSkill(directory=directory, error=exc))

    owners: dict[str, list[str]] = {}
    for bundle in bundles:
        owners.setdefault(bundle.name, []).append(bundle.directory)
    for name, directories in sorted(owners.items()):
        if len(directories) > 1:
            raise DuplicateSkillNameError(name, directories)

    return SkillRepository(skills=tuple(bundles), skipped=tuple(skipped))
