"""Human/JSON rendering of a ServiceResult.

Success renders as the bare class name so the output can be piped.
Failure renders as exactly three labelled lines: the error kind, its
message, and the chain of causes (empty when there is none). Multi-line
messages are folded onto their line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel
from rich.markup import escape

from randclass.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from randclass.services.result import ServiceResult

CAUSE_SEPARATOR = " <- "


class OutputSettings(BaseModel):
    """Output switches taken from the CLI settings."""

    model_config = {"frozen": True}

    json_output: bool = False
    verbose: bool = False
    color: bool = False


def _field(console: Console, key: str, value: object) -> None:
    console.print(f"[rc.key]{key}:[/rc.key] {escape(str(value))}")


def _render_ok(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    console.print(f"[rc.name]{escape(result.data['name'])}[/rc.name]")
    if verbose:
        _field(console, "module", result.data.get("module", ""))
        path = escape(result.data.get("path", ""))
        console.print(f"[rc.key]path:[/rc.key] [rc.path]{path}[/rc.path]")
        _field(console, "modules loaded", result.data.get("module_count", 0))


def _one_line(text: str) -> str:
    return " ".join(text.split())


def _render_error(result: ServiceResult, console: Console) -> None:
    error = result.error
    code = error.code if error else "UnknownError"
    message = _one_line(error.message) if error else "Unknown error"
    causes = [_one_line(c) for c in error.detail.get("causes", [])] if error else []
    console.print(f"[rc.error]Error:[/rc.error] {escape(code)}")
    console.print(f"Message: {escape(message)}")
    console.print(f"Cause: {escape(CAUSE_SEPARATOR.join(causes))}".rstrip())


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display, without a trailing newline."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    console = create_console(color=settings.color)
    if result.ok:
        _render_ok(result, console, verbose=settings.verbose)
    else:
        _render_error(result, console)
    return get_output(console).rstrip("\n")
