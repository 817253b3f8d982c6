"""AppContext: settings, logging, and result emission for one invocation.

Created once by the CLI entry point. Builds the loader and processor
from settings and owns the stdout / exit-code semantics.
"""

from __future__ import annotations

import random
import sys
from typing import TYPE_CHECKING

import click

from randclass.config.logging import configure_logging
from randclass.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from randclass.config.settings import RandclassSettings
    from randclass.services.processor import Processor
    from randclass.services.result import ServiceResult

# -1 as the original tool reports it; the OS truncates it to 255.
FAILURE_EXIT_CODE = 255


class AppContext:
    """Shared state for one randclass run."""

    def __init__(self, settings: RandclassSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def build_processor(self) -> Processor:
        """Wire a Processor from settings; the generator is seeded when a seed is configured."""
        from randclass.infrastructure.loader import Loader
        from randclass.services.processor import Processor

        loader = Loader(
            suffixes=self.settings.loader.suffixes,
            skip_private=self.settings.loader.skip_private,
        )
        return Processor(
            loader,
            rng=random.Random(self.settings.seed),
            include_nested=self.settings.classes.include_nested,
        )

    def emit(self, result: ServiceResult) -> None:
        """Write a ServiceResult to stdout with the matching exit semantics.

        * Success: writes the result, returns normally.
        * Failure: writes the error report, exits with FAILURE_EXIT_CODE.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            verbose=self.settings.verbose,
            color=sys.stdout.isatty(),
        )
        click.echo(format_result(result, settings=settings))
        if not result.ok:
            raise SystemExit(FAILURE_EXIT_CODE)
