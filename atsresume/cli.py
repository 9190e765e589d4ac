#!/usr/bin/env python3
"""
Command-line interface for atsresume.

Commands:
    parse    - Decode and parse a resume document into JSON
    score    - Print an ATS score report for a parsed resume
    suggest  - Print prioritized optimization suggestions
    template - Write an empty "start fresh" resume
    store    - Show or clear the saved resume/job description
"""

import json
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from atsresume.contexts.intake.exceptions import UnsupportedFormatError
from atsresume.contexts.intake.job_data_structure import JobDescription
from atsresume.contexts.intake.logger import setup_intake_logger
from atsresume.contexts.intake.resume_data_structure import ResumeData
from atsresume.contexts.intake.resume_parser import parse_resume_file
from atsresume.contexts.scoring.ats_scoring import ATSScore, calculate_ats_score
from atsresume.contexts.scoring.logger import setup_scoring_logger
from atsresume.contexts.scoring.suggestions import generate_optimization_suggestions
from atsresume.utils.ai_suggestions import MockSuggestionProvider
from atsresume.utils.document_decoder import MIME_BY_SUFFIX
from atsresume.utils.report_formatter import Column, TableFormatter, format_score_bar
from atsresume.utils.resume_store import ResumeStore
from atsresume.utils.text_processing import truncate_display

app = typer.Typer(
    add_completion=False,
    help="Parse resumes and score them for ATS compatibility",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


# =============================================================================
# HELPERS
# =============================================================================


def _load_resume(resume_json: Optional[Path], store: ResumeStore) -> ResumeData:
    """Resume from a JSON file, or the stored one when no file is given."""
    if resume_json is None:
        resume = store.load_resume()
        if resume is None:
            typer.secho("No resume given and none saved (run 'parse --save' first)", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
        return resume

    try:
        return ResumeData.from_json(resume_json.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, AttributeError, KeyError, TypeError, ValueError) as e:
        typer.secho(f"Could not read resume JSON {resume_json}: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _load_job(
    job: Optional[Path], title: Optional[str], company: Optional[str], store: ResumeStore
) -> Optional[JobDescription]:
    if job is None:
        return store.load_job_description()
    return JobDescription.from_file(job, title=title, company=company)


def format_score_report(score: ATSScore, job: Optional[JobDescription] = None) -> str:
    """Render an ATSScore as a text report."""
    columns = [Column("Category", 16), Column("Score", 7, ">"), Column("", 22)]
    report = TableFormatter(columns, total_width=48)

    title = "ATS SCORE"
    if job is not None and job.title:
        title += f" - {job.title}"
        if job.company:
            title += f" @ {job.company}"

    report.add_section_header(title)
    report.add_table_header().add_separator()
    for name, value in (
        ("Overall", score.overall),
        ("Keyword match", score.keyword_match),
        ("Formatting", score.formatting),
        ("Structure", score.structure),
    ):
        report.add_row([name, f"{value}%", format_score_bar(value)])

    details = score.details
    if job is not None:
        report.add_bullets("Matched keywords", details.matched_keywords, marker="+")
        report.add_bullets("Missing keywords", details.missing_keywords, marker="x")
    report.add_bullets("Suggestions", details.suggestions)
    report.add_bullets("Warnings", details.warnings, marker="!")

    return report.render()


# =============================================================================
# COMMANDS
# =============================================================================


@app.command("parse")
def parse_command(
    file: Annotated[Path, typer.Argument(exists=True, dir_okay=False, help="Resume document (.pdf, .docx, .txt)")],
    mime: Annotated[Optional[str], typer.Option("--mime", help="MIME type (default: from file extension)")] = None,
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write JSON here instead of stdout")] = None,
    save: Annotated[bool, typer.Option("--save", help="Also keep the result in the resume store")] = False,
):
    """
    Decode and parse a resume document.

    Examples:\n

        $ atsresume parse resume.pdf

        $ atsresume parse resume.txt --output resume.json --save
    """
    setup_intake_logger(source=file.name)

    mime_type = mime or MIME_BY_SUFFIX.get(file.suffix.lower(), "application/octet-stream")

    try:
        resume = parse_resume_file(file.read_bytes(), mime_type, file.name)
    except UnsupportedFormatError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    payload = resume.to_json()
    if output:
        output.write_text(payload, encoding="utf-8")
        typer.secho(f"✓ Wrote {output}", fg=typer.colors.GREEN, err=True)
    else:
        typer.echo(payload)

    if save:
        path = ResumeStore().save_resume(resume)
        typer.secho(f"✓ Saved to {path}", fg=typer.colors.GREEN, err=True)


@app.command("score")
def score_command(
    resume_json: Annotated[Optional[Path], typer.Argument(exists=True, dir_okay=False, help="Parsed resume JSON")] = None,
    job: Annotated[Optional[Path], typer.Option("--job", "-j", exists=True, help="Job description text file")] = None,
    title: Annotated[Optional[str], typer.Option("--title", help="Job title (default: first line of job file)")] = None,
    company: Annotated[Optional[str], typer.Option("--company", help="Hiring company")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the score as JSON")] = False,
):
    """
    Score a parsed resume, optionally against a job description.

    Without RESUME_JSON the saved resume is scored; without --job the saved
    job description (if any) is used.

    Examples:\n

        $ atsresume score resume.json --job posting.txt --company Acme
    """
    store = ResumeStore()
    resume = _load_resume(resume_json, store)
    job_description = _load_job(job, title, company, store)

    setup_scoring_logger(job_title=job_description.title if job_description else None)

    score = calculate_ats_score(resume, job_description)

    if as_json:
        typer.echo(json.dumps(score.to_dict(), indent=2))
    else:
        typer.echo(format_score_report(score, job_description))


@app.command("suggest")
def suggest_command(
    resume_json: Annotated[Optional[Path], typer.Argument(exists=True, dir_okay=False, help="Parsed resume JSON")] = None,
    job: Annotated[Optional[Path], typer.Option("--job", "-j", exists=True, help="Job description text file")] = None,
    ai: Annotated[bool, typer.Option("--ai", help="Also run the offline AI suggestion provider")] = False,
):
    """
    Print prioritized optimization suggestions.
    """
    store = ResumeStore()
    resume = _load_resume(resume_json, store)
    job_description = _load_job(job, None, None, store)

    setup_scoring_logger(job_title=job_description.title if job_description else None)

    suggestions = generate_optimization_suggestions(resume, job_description)
    if not suggestions:
        typer.secho("✓ No high-priority suggestions", fg=typer.colors.GREEN)

    for s in suggestions:
        color = typer.colors.RED if s.severity.value == "high" else typer.colors.YELLOW
        typer.secho(f"[{s.severity.value.upper()}] {s.message}", fg=color, bold=True)
        typer.echo(f"    {s.suggestion}")

    if ai:
        bundle = MockSuggestionProvider().optimize(resume, job_description)
        typer.secho(f"\nAI review score: {bundle.overall_score}/100", fg=typer.colors.BLUE, bold=True)
        for s in bundle.suggestions:
            typer.echo(f"  • ({s.type.value}) {s.suggestion}")


@app.command("template")
def template_command(
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write JSON here instead of stdout")] = None,
):
    """Write an empty "start fresh" resume."""
    payload = ResumeData.empty().to_json()
    if output:
        output.write_text(payload, encoding="utf-8")
        typer.secho(f"✓ Wrote {output}", fg=typer.colors.GREEN, err=True)
    else:
        typer.echo(payload)


@app.command("store")
def store_command(
    clear: Annotated[bool, typer.Option("--clear", help="Delete the saved resume and job description")] = False,
    job: Annotated[Optional[Path], typer.Option("--job", "-j", exists=True, help="Save this job description text")] = None,
):
    """Show, fill or clear the resume store."""
    store = ResumeStore()

    if clear:
        store.clear()
        typer.secho("✓ Store cleared", fg=typer.colors.GREEN)
        return

    if job is not None:
        path = store.save_job_description(JobDescription.from_file(job))
        typer.secho(f"✓ Saved job description to {path}", fg=typer.colors.GREEN)

    resume = store.load_resume()
    job_description = store.load_job_description()
    resume_label = (resume.contact.full_name or "(unnamed)") if resume else "(none)"
    job_label = (truncate_display(job_description.title, 40) or "(untitled)") if job_description else "(none)"

    typer.echo(f"Store: {store.store_path}")
    typer.echo(f"  Resume:          {resume_label}")
    typer.echo(f"  Job description: {job_label}")
    typer.echo(f"  Size:            {store.storage_size()}")


if __name__ == "__main__":
    app()
