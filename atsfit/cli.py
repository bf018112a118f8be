"""
atsfit Command Line Interface

Parses résumés and job descriptions from text files, scores them against
each other and runs the résumé-only quick scan.
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="atsfit",
    help="Deterministic résumé parsing and ATS scoring",
    add_completion=False,
)
console = Console()


@app.callback()
def main():
    """Configure logging before any command runs."""
    from atsfit.utils.logger import setup_logging

    setup_logging()


def _read_text(path: Path, label: str) -> str:
    """Read a UTF-8 text file or exit with a red error message."""
    if not path.exists():
        console.print(f"[red]Error: {label} not found: {path}[/red]")
        raise typer.Exit(1)
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        console.print(f"[red]Error reading {label}: {e}[/red]")
        raise typer.Exit(1)


def _print_json(data: dict) -> None:
    console.print_json(json.dumps(data, ensure_ascii=False))


def _score_style(score: int) -> str:
    if score >= 75:
        return "green"
    if score >= 50:
        return "yellow"
    return "red"


@app.command()
def version():
    """Show application version."""
    from atsfit import __app_name__, __version__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show configuration."""
    from atsfit.utils.config import get_settings

    settings = get_settings()

    table = Table(title="atsfit Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Résumé Max Chars", str(settings.parser.resume_max_chars))
    table.add_row("JD Max Chars", str(settings.parser.jd_max_chars))
    table.add_row(
        "Score Weights",
        f"skills {settings.scoring.skill_weight}, keywords {settings.scoring.keyword_weight}, "
        f"seniority {settings.scoring.seniority_weight}, impact {settings.scoring.impact_weight}",
    )
    table.add_row("Classifier Min Confidence", str(settings.classifier.min_confidence))
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def parse(
    resume_file: Path = typer.Argument(..., help="Résumé text file"),
    as_json: bool = typer.Option(False, "--json", help="Print the profile as JSON"),
):
    """Parse a résumé and show the extracted profile."""
    from atsfit.ml.nlp import detect_resume, parse_resume

    text = _read_text(resume_file, "Résumé file")

    detection = detect_resume(text)
    if not detection.is_likely_resume:
        console.print(f"[yellow]Warning: {detection.message}[/yellow]")

    profile = parse_resume(text)
    if as_json:
        _print_json(profile.model_dump(by_alias=True, mode="json"))
        return

    console.print(f"[bold]{profile.name or 'Unknown Candidate'}[/bold]")
    for label, value in (
        ("Headline", profile.headline),
        ("Email", profile.email),
        ("Phone", profile.phone),
        ("Location", profile.location),
    ):
        if value:
            console.print(f"  {label}: [cyan]{value}[/cyan]")
    if profile.links:
        console.print(f"  Links: {', '.join(profile.links)}")
    if profile.skills:
        console.print(f"  Skills: {', '.join(profile.skills)}")

    if profile.experience:
        table = Table(title="Experience")
        table.add_column("Title", style="cyan")
        table.add_column("Company")
        table.add_column("Dates", style="dim")
        table.add_column("Bullets", justify="right")
        for entry in profile.experience:
            dates = " - ".join(d for d in (entry.start, entry.end) if d)
            table.add_row(entry.title or "", entry.company or "", dates, str(len(entry.bullets)))
        console.print(table)

    for edu in profile.education:
        console.print(f"  Education: {', '.join(v for v in (edu.degree, edu.school, edu.end) if v)}")


@app.command()
def analyze(
    resume_file: Path = typer.Argument(..., help="Résumé text file"),
    jd_file: Path = typer.Argument(..., help="Job description text file"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """Score a résumé against a job description."""
    from atsfit.core.domain import classify_job_family, get_strategy
    from atsfit.core.matching import (
        check_relevance,
        generate_gaps,
        generate_rewrite_previews,
        generate_strengths,
        score_ats,
        score_radar,
    )
    from atsfit.ml.nlp import parse_job_description, parse_resume, validate_jd

    resume_text = _read_text(resume_file, "Résumé file")
    jd_text = _read_text(jd_file, "Job description file")

    validation = validate_jd(jd_text)
    if not validation.valid:
        console.print(f"[red]Error: {validation.reason}[/red]")
        raise typer.Exit(1)

    candidate = parse_resume(resume_text)
    job = parse_job_description(jd_text)

    result = score_ats(candidate, job)
    family = classify_job_family(candidate, job)
    strengths = generate_strengths(candidate, job)
    gaps = generate_gaps(candidate, job, list(result.missing_keywords))
    previews = generate_rewrite_previews(candidate, get_strategy(family.family))
    radar = score_radar(candidate, job)
    relevance = check_relevance(candidate, job)

    if as_json:
        _print_json({
            "result": result.model_dump(by_alias=True, mode="json"),
            "jobFamily": {"family": family.family.value, "confidence": family.confidence},
            "strengths": strengths,
            "gaps": gaps,
            "rewritePreviews": [p.model_dump(by_alias=True) for p in previews],
            "radar": radar.model_dump(by_alias=True, mode="json"),
            "relevance": {"relevant": relevance.relevant, "score": relevance.score, "reason": relevance.reason},
            "warnings": list(validation.warnings),
        })
        return

    for warning in validation.warnings:
        console.print(f"[yellow]Warning: {warning}[/yellow]")

    style = _score_style(result.score)
    console.print(f"\nATS score: [bold {style}]{result.score}[/bold {style}] / 100")
    console.print(f"Job family: [cyan]{family.family.value}[/cyan] (confidence {family.confidence:.2f})")
    console.print(f"Radar score: {radar.score} ({radar.label})")
    if not relevance.relevant:
        console.print(f"[yellow]{relevance.reason}[/yellow]")

    table = Table(title="Breakdown")
    table.add_column("Component", style="cyan")
    table.add_column("Score", justify="right")
    breakdown = result.breakdown
    table.add_row("Skill overlap", str(breakdown.skill_overlap))
    table.add_row("Keyword coverage", str(breakdown.keyword_coverage))
    table.add_row("Seniority match", str(breakdown.seniority_match))
    table.add_row("Impact strength", str(breakdown.impact_strength))
    console.print(table)

    if result.matched_keywords:
        console.print(f"[green]Matched:[/green] {', '.join(result.matched_keywords)}")
    if result.missing_keywords:
        console.print(f"[red]Missing:[/red] {', '.join(result.missing_keywords)}")

    _print_list("Strengths", strengths, "green")
    _print_list("Gaps", gaps, "red")
    _print_list("Suggestions", list(result.suggestions), "yellow")
    _print_list("Blockers", [f"{b.title}: {b.why}" for b in radar.blockers], "yellow")

    if previews:
        console.print("\n[bold]Rewrite previews:[/bold]")
        for preview in previews:
            console.print(f"  [dim]{preview.original}[/dim]")
            console.print(f"  [green]→ {preview.improved}[/green]")


def _print_list(title: str, items: list[str], style: str) -> None:
    if not items:
        return
    console.print(f"\n[bold]{title}:[/bold]")
    for item in items:
        console.print(f"  [{style}]•[/{style}] {item}")


@app.command("quick-scan")
def quick_scan(
    resume_file: Path = typer.Argument(..., help="Résumé text file"),
    limit: int = typer.Option(5, "--limit", "-n", help="Number of roles to show"),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Only roles in this category"),
):
    """Match a résumé against the reference role library."""
    from atsfit.core.role_profiles import extract_target_role, find_role_matches
    from atsfit.ml.nlp import parse_resume

    candidate = parse_resume(_read_text(resume_file, "Résumé file"))
    target = extract_target_role(candidate)
    console.print(f"Target role: [cyan]{target.title}[/cyan] ({target.seniority.value})")

    matches = find_role_matches(candidate, limit=limit, category=category)
    if not matches:
        console.print("[yellow]No matching roles found.[/yellow]")
        raise typer.Exit(0)

    table = Table(title="Role Matches")
    table.add_column("Role", style="cyan")
    table.add_column("Category")
    table.add_column("Level")
    table.add_column("Score", justify="right")
    table.add_column("Radar", justify="right")
    table.add_column("Missing", style="dim")
    for match in matches:
        style = _score_style(match.score)
        table.add_row(
            match.profile.normalized_title,
            match.profile.category,
            match.profile.seniority,
            f"[{style}]{match.score}[/{style}]",
            f"{match.radar.score} ({match.radar.label})" if match.radar else "",
            ", ".join(match.missing_keywords[:4]),
        )
    console.print(table)


@app.command("validate-jd")
def validate_jd_command(
    jd_file: Path = typer.Argument(..., help="Job description text file"),
):
    """Check whether a job description is usable."""
    from atsfit.ml.nlp import validate_jd

    result = validate_jd(_read_text(jd_file, "Job description file"))
    if result.valid:
        console.print("[green]✓ Job description looks usable[/green]")
    else:
        console.print(f"[red]✗ {result.reason}[/red]")
    for warning in result.warnings:
        console.print(f"  [yellow]Warning: {warning}[/yellow]")
    if not result.valid:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
