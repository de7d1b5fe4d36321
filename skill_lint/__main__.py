import json
from pathlib import Path
from typing import Optional

import click
from loguru import logger
from rich.console import Console

from skill_lint.config import LintConfig, load_config
from skill_lint.errors import SkillLintError
from skill_lint.filesystem import read_skill_directories
from skill_lint.log import configure_logging
from skill_lint.report import build_report
from skill_lint.skills.loader import load_repository
from skill_lint.skills.models import SkillRepository
from skill_lint.tui import LintConsoleUI
from skill_lint.utils import compact_home_path
from skill_lint.validator import validate_repository


class FatalError(click.ClickException):
    exit_code = 2


def _root_argument():
    return click.argument(
        "root",
        required=False,
        default=".",
        type=click.Path(exists=True, file_okay=False, path_type=Path),
    )


def _config_option():
    return click.option(
        "-c",
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Config file (defaults to <root>/.skill-lint.yaml).",
    )


def _load(
    root: Path, config_path: Optional[Path], strict_fields: bool
) -> tuple[LintConfig, SkillRepository]:
    try:
        config = load_config(root, config_path).with_overrides(
            strict_fields=True if strict_fields else None
        )
        directories = read_skill_directories(root, config.skills_dir, config.ignore)
        repository = load_repository(directories, strict=config.strict_fields)
    except SkillLintError as exc:
        logger.debug("Fatal: {}", exc)
        raise FatalError(compact_home_path(str(exc)))
    return config, repository


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Log diagnostics to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Validate skill documentation bundles."""
    ctx.obj = {"verbose": verbose}
    configure_logging(verbose)


@cli.command(help="Validate every skill under ROOT and report findings.")
@_root_argument()
@_config_option()
@click.option("--strict", is_flag=True, help="Treat warnings as errors.")
@click.option(
    "--strict-fields",
    is_flag=True,
    help="Reject unknown front matter keys.",
)
@click.option("--json", "as_json", is_flag=True, help="Emit a JSON report.")
@click.option(
    "-j",
    "--jobs",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Validate skills on this many threads.",
)
def check(
    root: Path,
    config_path: Optional[Path],
    strict: bool,
    strict_fields: bool,
    as_json: bool,
    jobs: int,
) -> None:
    config, repository = _load(root, config_path, strict_fields)
    findings = validate_repository(repository, config, jobs=jobs)
    report = build_report(repository, findings, strict=strict)

    if as_json:
        click.echo(json.dumps(report.as_dict(), indent=2))
    else:
        LintConsoleUI(Console()).render_report(report, root=str(root))

    if not report.passed:
        raise click.exceptions.Exit(1)


@cli.command(help="List skills discovered under ROOT.")
@_root_argument()
@_config_option()
def skills(root: Path, config_path: Optional[Path]) -> None:
    _, repository = _load(root, config_path, strict_fields=False)
    LintConsoleUI(Console()).render_skills(repository, root=str(root))


def main() -> int:
    try:
        # Non-standalone click returns the code of a raised Exit instead of re-raising.
        rv = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
