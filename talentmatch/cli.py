"""
TalentMatch Command Line Interface

Provides CLI commands for ranking jobs and candidates from JSON files
or from the database, and for running the HTTP service.
"""

import json
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from talentmatch.utils.constants import DEFAULT_PREFERENCE_WEIGHT, DEFAULT_RESULT_LIMIT

app = typer.Typer(
    name="talentmatch",
    help="Candidate and job matching engine CLI",
    add_completion=False,
)
console = Console()

LEVEL_COLORS = {
    "excellent": "green",
    "good": "blue",
    "fair": "yellow",
}


def _read_json(path: Path) -> Any:
    """Read a JSON document, exiting with an error message on failure."""
    if not path.exists():
        console.print(f"[red]Error: File not found: {path}[/red]")
        raise typer.Exit(1)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: Invalid JSON in {path}: {e}[/red]")
        raise typer.Exit(1)


def _read_json_list(path: Path) -> list[Any]:
    data = _read_json(path)
    if not isinstance(data, list):
        console.print(f"[red]Error: Expected a JSON array in {path}[/red]")
        raise typer.Exit(1)
    return data


def _validate_documents(model: Any, documents: list[Any], path: Path) -> list[Any]:
    """Validate fixture documents, exiting with an error message on failure."""
    try:
        return [model.model_validate(item) for item in documents]
    except ValidationError as e:
        console.print(f"[red]Error: Invalid {model.__name__.lower()} in {path}: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def _require_database() -> None:
    from talentmatch.data.database import get_database_manager

    if not get_database_manager().ping():
        console.print("[red]Error: Could not connect to MongoDB.[/red]")
        console.print("[dim]Pass JSON files instead, or check the DB_* settings.[/dim]")
        raise typer.Exit(1)


def _level_cell(level: Any) -> str:
    level = getattr(level, "value", level)
    color = LEVEL_COLORS.get(level, "red")
    return f"[{color}]{level.upper()}[/{color}]"


def _print_json(payload: dict[str, Any]) -> None:
    typer.echo(json.dumps(payload, indent=2, default=str))


@app.command()
def version():
    """Show application version."""
    from talentmatch import __app_name__, __version__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show configuration."""
    from talentmatch.utils.config import get_settings

    settings = get_settings()

    table = Table(title="TalentMatch Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Database Host", settings.database.host)
    table.add_row("Database Name", settings.database.name)
    table.add_row("API Address", f"{settings.api.host}:{settings.api.port}")
    table.add_row("Default Limit", str(settings.matching.default_limit))
    table.add_row("Max Limit", str(settings.matching.max_limit))
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def rank_jobs(
    candidate_id: Optional[str] = typer.Argument(None, help="Candidate ID in the database"),
    candidate_file: Optional[Path] = typer.Option(
        None, "--candidate-file", "-c", help="Candidate JSON document"
    ),
    jobs_file: Optional[Path] = typer.Option(
        None, "--jobs-file", "-j", help="JSON array of jobs (defaults to the database)"
    ),
    limit: int = typer.Option(DEFAULT_RESULT_LIMIT, "--limit", "-n", min=1, help="Number of results"),
    as_json: bool = typer.Option(False, "--json", help="Print the API response shape as JSON"),
):
    """Rank jobs for a candidate."""
    from talentmatch.core.matching import Ranker
    from talentmatch.data.models import Candidate, Job

    if candidate_file is None and candidate_id is None:
        console.print("[red]Error: Give a candidate ID or --candidate-file.[/red]")
        raise typer.Exit(1)

    if candidate_file is not None:
        candidate = _validate_documents(Candidate, [_read_json(candidate_file)], candidate_file)[0]
    else:
        from talentmatch.data.repositories import get_candidate_repository

        _require_database()
        candidate = get_candidate_repository().get_by_id(candidate_id)
        if candidate is None:
            console.print(f"[red]Error: Candidate not found: {candidate_id}[/red]")
            raise typer.Exit(1)

    if jobs_file is not None:
        jobs = _validate_documents(Job, _read_json_list(jobs_file), jobs_file)
    else:
        from talentmatch.data.repositories import get_job_repository

        _require_database()
        jobs = get_job_repository().get_all()

    ranking = Ranker().rank_jobs_for_candidate(candidate, jobs, limit)

    if as_json:
        _print_json(
            {
                "candidate": candidate.summary_projection(),
                "suitableJobs": ranking.to_list(),
                "totalJobs": ranking.total_considered,
            }
        )
        return

    if not ranking.results:
        console.print("[yellow]No comparable jobs found.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Top {len(ranking.results)} Jobs for {candidate.name or 'candidate'}")
    table.add_column("Rank", style="dim", width=4)
    table.add_column("Job", style="cyan")
    table.add_column("Organization")
    table.add_column("Score", justify="right")
    table.add_column("Level", justify="center")

    for i, match in enumerate(ranking.results, 1):
        table.add_row(
            str(i),
            match.entity.title or "-",
            match.entity.organization or "-",
            str(match.result.score),
            _level_cell(match.result.score_level),
        )

    console.print(table)
    console.print(f"[dim]{ranking.total_considered} comparable job(s)[/dim]")

    top = ranking.results[0]
    console.print("\n[bold]Top Match Details:[/bold]")
    for detail in top.result.match_details:
        console.print(f"  • {detail}")


@app.command()
def rank_candidates(
    job_id: Optional[str] = typer.Argument(None, help="Job ID in the database"),
    job_file: Optional[Path] = typer.Option(None, "--job-file", "-j", help="Job JSON document"),
    candidates_file: Optional[Path] = typer.Option(
        None, "--candidates-file", "-c", help="JSON array of candidates (defaults to the database)"
    ),
    limit: int = typer.Option(DEFAULT_RESULT_LIMIT, "--limit", "-n", min=1, help="Number of results"),
    skills: float = typer.Option(
        DEFAULT_PREFERENCE_WEIGHT, "--skills", min=0, max=100, help="Skills vs description weight"
    ),
    experience: float = typer.Option(
        DEFAULT_PREFERENCE_WEIGHT, "--experience", min=0, max=100,
        help="Experience titles vs description weight",
    ),
    years: float = typer.Option(
        DEFAULT_PREFERENCE_WEIGHT, "--years", min=0, max=100, help="Years of experience weight"
    ),
    location: float = typer.Option(
        DEFAULT_PREFERENCE_WEIGHT, "--location", min=0, max=100, help="Location weight"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the API response shape as JSON"),
):
    """Rank candidates for a job with recruiter preferences."""
    from talentmatch.api.schemas import MatchPreferences
    from talentmatch.core.matching import Ranker
    from talentmatch.data.models import Candidate, Job

    if job_file is None and job_id is None:
        console.print("[red]Error: Give a job ID or --job-file.[/red]")
        raise typer.Exit(1)

    if job_file is not None:
        job = _validate_documents(Job, [_read_json(job_file)], job_file)[0]
    else:
        from talentmatch.data.repositories import get_job_repository

        _require_database()
        job = get_job_repository().get_by_id(job_id)
        if job is None:
            console.print(f"[red]Error: Job not found: {job_id}[/red]")
            raise typer.Exit(1)

    if candidates_file is not None:
        candidates = _validate_documents(Candidate, _read_json_list(candidates_file), candidates_file)
    else:
        from talentmatch.data.repositories import get_candidate_repository

        _require_database()
        candidates = get_candidate_repository().get_all()

    preferences = MatchPreferences(
        skills_vs_description=skills,
        experience_vs_description=experience,
        years_of_experience=years,
        location=location,
    )
    ranking = Ranker().rank_candidates_for_job(
        job,
        candidates,
        weights=preferences.to_weights(),
        limit=limit,
        preferences=preferences.to_response(),
    )

    if as_json:
        _print_json(
            {
                "job": job.public_projection(),
                "suitableCandidates": ranking.to_list(),
                "totalCandidates": ranking.total_considered,
            }
        )
        return

    if not ranking.results:
        console.print("[yellow]No comparable candidates found.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Top {len(ranking.results)} Candidates for {job.title or 'job'}")
    table.add_column("Rank", style="dim", width=4)
    table.add_column("Candidate", style="cyan")
    table.add_column("Preferred Location")
    table.add_column("Score", justify="right")
    table.add_column("Level", justify="center")
    table.add_column("Skills", justify="right")

    for i, match in enumerate(ranking.results, 1):
        preferred = match.entity.preferred_locations
        table.add_row(
            str(i),
            match.entity.name or "-",
            preferred[0].display_string if preferred else "-",
            str(match.result.score),
            _level_cell(match.result.score_level),
            str(len(match.result.matched_skills)),
        )

    console.print(table)
    console.print(f"[dim]{ranking.total_considered} comparable candidate(s)[/dim]")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port"),
    reload: Optional[bool] = typer.Option(
        None, "--reload/--no-reload", help="Reload on code changes (defaults to API_RELOAD)"
    ),
):
    """Run the HTTP matching service."""
    from talentmatch.main import run_server

    run_server(host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
