"""Report building and rendering for tally runs.

The default rendering is a single line of four integers:
total games, white wins, black wins, draws.
"""
from __future__ import annotations

import json
from typing import Any, Optional

from ._types import Tally, TallyReport, TallyRun


class ReportFormatter:
    """Build a ``TallyReport`` from a run and render it."""

    def build_report(
        self,
        directory: str,
        run: TallyRun,
        duration_seconds: float,
    ) -> TallyReport:
        failed = run.failed
        found = len(run.files)
        fps = found / duration_seconds if duration_seconds > 0 else 0.0

        return TallyReport(
            directory=directory,
            tally=run.tally,
            files_found=found,
            files_tallied=found - len(failed),
            files_failed=len(failed),
            failed_files=[f.file_path for f in failed],
            duration_seconds=round(duration_seconds, 2),
            files_per_second=round(fps, 2),
        )

    # ------------------------------------------------------------------
    # Renderers
    # ------------------------------------------------------------------

    def format_line(self, tally: Tally) -> str:
        return f"{tally.total} {tally.white_wins} {tally.black_wins} {tally.draws}"

    def format_json(self, report: TallyReport) -> str:
        return json.dumps(report.model_dump(mode="json"), indent=2, ensure_ascii=False)

    def render_table(self, report: TallyReport, console: Optional[Any] = None) -> None:
        """Print a rich summary panel and outcome table."""
        from rich.console import Console
        from rich.markup import escape
        from rich.panel import Panel
        from rich.table import Table

        console = console or Console()
        tally = report.tally

        console.print(Panel(
            f"[bold]{escape(report.directory)}[/bold]\n"
            f"Files: {report.files_found}  |  Tallied: {report.files_tallied}  |  "
            f"Failed: {report.files_failed}  |  {report.duration_seconds:.2f}s",
            title="Game Results",
        ))

        table = Table(title="Outcomes")
        table.add_column("Outcome", style="cyan")
        table.add_column("Games", justify="right", style="bold")
        table.add_column("Share", justify="right", style="green")

        for label, count in (
            ("White wins", tally.white_wins),
            ("Black wins", tally.black_wins),
            ("Draws", tally.draws),
        ):
            share = 100.0 * count / tally.total if tally.total else 0.0
            table.add_row(label, str(count), f"{share:.1f}%")
        table.add_row("Total", str(tally.total), "", style="bold")

        console.print(table)

        for path in report.failed_files:
            console.print(f"[red]Skipped:[/red] {escape(path)}")
