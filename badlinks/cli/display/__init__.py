"""Display utilities for the CLI."""

from .CLIDisplay import CLIDisplay
from .Display import Display
from .render_report import render_report

__all__ = ["CLIDisplay", "Display", "render_report"]
