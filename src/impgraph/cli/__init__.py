"""impgraph CLI: render and inspect registry graphs.

Entry point for the `impgraph` command. Requires ``pip install impgraph[cli]``.

Commands:
    render      Write the interactive HTML page
    inspect     Show nodes, sinks and link counts
    legend      List groups with their resolved colors
"""

from __future__ import annotations

import logging


def _require_typer():
    """Check that typer is available."""
    try:
        import typer  # noqa: F401
    except ImportError:
        import sys

        print("Error: typer is required for the CLI. Install with: pip install impgraph[cli]", file=sys.stderr)
        raise SystemExit(1) from None


def create_app():
    """Create the Typer app with all subcommands."""
    _require_typer()

    import typer

    from impgraph.cli.commands import register_commands

    app = typer.Typer(
        name="impgraph",
        help="Interactive force-directed graphs of the imp registry.",
        no_args_is_help=True,
    )

    @app.callback()
    def _root(
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
    ):
        if verbose:
            logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    register_commands(app)
    return app


def main():
    """CLI entry point."""
    app = create_app()
    app()
