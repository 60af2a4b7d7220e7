"""CLI entrypoint using typer."""

from __future__ import annotations

import json
from pathlib import Path
from uuid import uuid4

import structlog
import typer
from rich.console import Console
from rich.table import Table

from resume_match_core.config.settings import Settings
from resume_match_core.constants import FACTOR_DESCRIPTIONS, FACTOR_WEIGHTS, SCORING_MODEL_VERSION
from resume_match_core.exceptions import AnalysisPayloadError, PayloadFileError
from resume_match_engine.observability import (
    bind_request_context,
    clear_request_context,
    configure_logging,
)
from resume_match_engine.service import ScoreReport, ScoringService

app = typer.Typer(
    name="resume-match",
    help="Deterministic resume/job compatibility scoring",
)
console = Console()
logger = structlog.get_logger()

__version__ = "0.1.0"


def load_payload(path: Path) -> object:
    """Read and decode a JSON analyzer payload file."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise PayloadFileError(f"cannot read {path}: {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise PayloadFileError(f"{path} is not valid JSON: {e}") from e


@app.command()
def score(
    payload: Path = typer.Argument(..., help="JSON file with analyzer outputs", exists=True),
    as_json: bool = typer.Option(False, "--json", help="Print the wire-format JSON report"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Score a resume/job analyzer payload."""
    settings = Settings()
    if verbose:
        settings.log_level = "DEBUG"
    configure_logging(settings)
    bind_request_context(str(uuid4()))

    try:
        report = ScoringService(settings).score_payload(load_payload(payload))
    except (PayloadFileError, AnalysisPayloadError) as exc:
        logger.error("score_failed", payload=str(payload), error=str(exc))
        console.print(f"[red]Error:[/red] {exc}", style="bold")
        raise typer.Exit(code=1) from exc
    finally:
        clear_request_context()

    if as_json:
        typer.echo(json.dumps(report.to_wire(), indent=2))
        return

    _print_report(report)


@app.command()
def weights() -> None:
    """Show the versioned factor weight table."""
    table = Table(title=f"Scoring weights ({SCORING_MODEL_VERSION})")
    table.add_column("Factor")
    table.add_column("Category")
    table.add_column("Weight", justify="right")
    table.add_column("Description")
    for factor, weight in FACTOR_WEIGHTS.items():
        table.add_row(
            factor.value,
            factor.category.value,
            f"{weight:.3f}",
            FACTOR_DESCRIPTIONS[factor],
        )
    console.print(table)


@app.command()
def version() -> None:
    """Show version."""
    console.print(f"resume-match v{__version__} (scoring {SCORING_MODEL_VERSION})")


def _print_report(report: ScoreReport) -> None:
    """Render a score report for humans."""
    result = report.result
    color = report.interpretation.color
    console.print(
        f"[bold {color}]Overall: {result.overall}[/bold {color}] "
        f"± {result.band}  ({report.interpretation.level})"
    )
    console.print(f"[dim]{report.interpretation.description}[/dim]")
    console.print(
        f"Confidence: {result.confidence}% "
        f"({result.meta.signals_used}/{result.meta.signals_total} signals)"
    )
    if result.meta.reallocation_applied:
        console.print(
            f"[yellow]Market data {result.meta.market_state.value}: "
            f"weight reallocated to categories A and B[/yellow]"
        )

    breakdown = Table(title="Breakdown")
    breakdown.add_column("Category")
    breakdown.add_column("Points", justify="right")
    for key, value in result.breakdown.model_dump(by_alias=True).items():
        breakdown.add_row(key, f"{value:.1f}")
    console.print(breakdown)

    if report.top_fixes:
        console.print("\n[bold]Top fixes:[/bold]")
        for fix in report.top_fixes:
            console.print(
                f"  {fix.factor.value} {fix.description}: "
                f"score {fix.score:.0f}, +{fix.impact:.1f} potential"
            )

    if report.recommended_skills:
        console.print("\n[bold]Skills to add:[/bold] " + ", ".join(report.recommended_skills))


if __name__ == "__main__":
    app()
