"""Create the main Typer CLI app."""

import typer

from badlinks.api.link.cmd_check import cmd_check
from badlinks.api.link.cmd_scan import cmd_scan
from badlinks.cli._handle_stage_result import DISPLAY_FORMATS, _handle_stage_result
from badlinks.constants import BADLINKS_HOME_DISPLAY


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help=f"Find bad local links in markdown documents (configured in {BADLINKS_HOME_DISPLAY}/config.json)",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: yaml, json or text"),
    ) -> None:
        if display not in DISPLAY_FORMATS:
            typer.echo(f"Error: --display must be one of {', '.join(DISPLAY_FORMATS)}, got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    @app.command(name="scan")
    def scan_cmd(
        path: str = typer.Argument(".", help="Directory to scan recursively"),
    ) -> None:
        """Find bad links in every markdown file under a directory."""
        _handle_stage_result(cmd_scan)(path=path)

    @app.command(name="check")
    def check_cmd(
        path: str = typer.Argument(..., help="Markdown file to check"),
        root: str | None = typer.Option(None, "--root", "-r", help="Directory absolute links resolve against"),
    ) -> None:
        """Find bad links in a single markdown file."""
        _handle_stage_result(cmd_check)(path=path, root=root)

    return app
