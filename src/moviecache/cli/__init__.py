"""CLI commands for movie-cache.

Provides command-line interface using Typer:
- moviecache serve: Run the API server

Usage:
    moviecache --help
    moviecache serve --port 8080
"""

import typer

from moviecache.cli.serve import app as serve_app

app = typer.Typer(
    name="moviecache",
    help="movie-cache: two-tier movie cache service",
    no_args_is_help=True,
)

app.add_typer(serve_app, name="serve")


@app.callback()
def callback() -> None:
    """movie-cache: two-tier movie cache service."""
    pass


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
