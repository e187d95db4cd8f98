"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

import click

from .display.CLIDisplay import CLIDisplay
from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)

DISPLAY_FORMATS = ("yaml", "json", "text")


def _extract_display_format() -> str:
    """Get the display format from the active Typer/Click context, defaulting to yaml."""
    current: click.Context | None = click.get_current_context(silent=True)
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in DISPLAY_FORMATS:
            return obj["display_format"]
        current = current.parent
    return "yaml"


def _handle_stage_result(func: F) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout, as yaml, json or a text report)
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        _run_single_execution(func, args, kwargs, CLIDisplay(), _extract_display_format())

    return wrapper  # type: ignore[return-value]
