"""pgn-tally CLI -- Count game results in a directory of PGN files."""

import logging
from pathlib import Path

import click


def _configure_logging(verbosity: int) -> None:
    """Send package logs to stderr through rich when -v is given."""
    if verbosity <= 0:
        return

    from rich.console import Console
    from rich.logging import RichHandler

    pkg_logger = logging.getLogger("pgn_tally")
    for handler in list(pkg_logger.handlers):
        if isinstance(handler, RichHandler):
            pkg_logger.removeHandler(handler)
    pkg_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    pkg_logger.setLevel(logging.DEBUG if verbosity > 1 else logging.INFO)


@click.command()
@click.version_option(package_name="pgn-tally")
@click.argument("directory", type=click.Path())
@click.option("--workers", "-w", type=int, default=None, help="Number of parallel workers.")
@click.option("--pattern", "-p", default=None, help="Filename glob to match (default: *.pgn).")
@click.option("--skip-errors", is_flag=True, help="Skip unreadable files instead of aborting.")
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["line", "json", "table"]),
    default="line",
    help="Output style.",
)
@click.option("--verbose", "-v", count=True, help="Log progress to stderr (-vv for debug).")
def cli(directory, workers, pattern, skip_errors, output_format, verbose):
    """Tally the results of every game recorded under DIRECTORY.

    Prints one line: total games, white wins, black wins, draws.
    """
    from pydantic import ValidationError
    from rich.console import Console
    from rich.markup import escape

    from .config import TallySettings
    from .tally import ReportFormatter, tally_directory

    _configure_logging(verbose)
    err_console = Console(stderr=True)

    def fail(message: str) -> None:
        err_console.print(f"[red]pgn-tally: ERROR[/red] - {escape(message)}", soft_wrap=True)
        raise SystemExit(1)

    if not Path(directory).is_dir():
        fail(f"'{directory}' is not a directory")

    try:
        settings = TallySettings.from_env()
        overrides = {}
        if workers is not None:
            overrides["max_workers"] = workers
        if pattern is not None:
            overrides["pattern"] = pattern
        if skip_errors:
            overrides["fail_fast"] = False
        if overrides:
            settings = TallySettings(**{**settings.model_dump(), **overrides})
    except ValidationError as exc:
        fail(f"invalid settings: {exc.errors()[0]['msg']}")

    try:
        if output_format == "table":
            with err_console.status("Tallying games..."):
                report = tally_directory(directory, settings=settings)
        else:
            report = tally_directory(directory, settings=settings)
    except OSError as exc:
        detail = f"{exc} ({exc.__cause__})" if exc.__cause__ else str(exc)
        fail(detail)

    formatter = ReportFormatter()
    if output_format == "json":
        click.echo(formatter.format_json(report))
    elif output_format == "table":
        formatter.render_table(report, Console())
    else:
        click.echo(formatter.format_line(report.tally))


def main():
    cli(prog_name="pgn-tally")


if __name__ == "__main__":
    main()
