"""Root CLI command for randclass.

No arguments: loads every library file in the current directory.
One argument, e.g. ``"models.py, views.py"``: loads exactly these files.
Their own imports must already be resolvable.
"""

from __future__ import annotations

import logging

import click

from randclass import __version__
from randclass.commands._base import RandclassCommand
from randclass.commands._context import AppContext
from randclass.config.settings import RandclassSettings

logger = logging.getLogger(__name__)


def parse_whitelist(argument: str) -> list[str]:
    """Split a comma-separated whitelist argument into trimmed file names."""
    return [name.strip() for name in argument.split(",")]


@click.command(
    cls=RandclassCommand,
    examples="""\
  randclass
  randclass "models.py, views.py"
  randclass --seed 42 models.py
  randclass -v --json""",
)
@click.version_option(version=__version__, prog_name="randclass")
@click.argument("libraries", nargs=-1)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--seed", type=int, default=None, help="Seed the random picks for a repeatable run.")
def cli(
    libraries: tuple[str, ...],
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    seed: int | None,
) -> None:
    """Print the fully-qualified name of a random class from a set of libraries.

    LIBRARIES is a single comma-separated list of library files. Without
    it, every library file in the current directory is loaded.
    """
    # Flags are only forwarded when set so TOML and env values still apply.
    settings = RandclassSettings.from_cli(
        config_path=config_path,
        json_output=json_output or None,
        verbose=verbose or None,
        log_json=log_json or None,
        seed=seed,
    )
    app = AppContext(settings)
    processor = app.build_processor()

    if len(libraries) == 1:
        result = processor.process_whitelist(parse_whitelist(libraries[0]))
    else:
        if libraries:
            logger.warning(
                "Expected one comma-separated library list, got %d arguments; "
                "scanning the current directory instead",
                len(libraries),
            )
        result = processor.process_all()
    app.emit(result)
