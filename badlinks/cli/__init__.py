"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from badlinks.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from badlinks.api.config.get_package_version import get_package_version

        print(f"badlinks {get_package_version()}")
        return 0

    app = _create_app()
    try:
        exit_code = app(argv, standalone_mode=False)
        return exit_code if isinstance(exit_code, int) else 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except click.exceptions.Exit as e:
        return e.exit_code
    except click.exceptions.ClickException as e:
        e.show()
        return e.exit_code
    except click.exceptions.Abort:
        typer.echo("Aborted!", err=True)
        return 1


__all__ = ["main"]
