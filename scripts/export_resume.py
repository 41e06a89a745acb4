#!/usr/bin/env python3
"""
Resume Export CLI

Exports resume records (YAML/JSON) to DOCX and PDF using the exporting context.

Commands:
    export   - Export a resume record to DOCX, PDF, or both
    preview  - Print a markdown preview of a resume record
    inspect  - Show page count and text of a generated DOCX/PDF
    template - Write a blank resume record to start from
    events   - Show recent export events

Examples:\n

    export_resume.py export data/asha_verma.yaml                     # DOCX + PDF

    export_resume.py export data/asha_verma.yaml --format pdf        # PDF only

    export_resume.py export data/asha_verma.yaml -o outs/tmp -v      # Custom directory, verbose

    export_resume.py preview data/asha_verma.yaml                    # Markdown preview

    export_resume.py inspect outs/exports/2026-10-19/Asha_Resume.docx

    export_resume.py template data/new_resume.yaml                   # Blank record
"""

import asyncio
import json
from pathlib import Path
from typing import List, Optional

import typer
from omegaconf import OmegaConf
from typing_extensions import Annotated

from resumekit.contexts.exporting import export_resume
from resumekit.contexts.exporting.logger import setup_export_logger
from resumekit.contexts.modeling import load_resume_record, new_resume_record
from resumekit.contexts.planning import render_markdown
from resumekit.utils.document_text import docx_text, page_count, pdf_text
from resumekit.utils.event_logging import LOGS_PATH, get_recent_events
from resumekit.utils.logger import close_logger
from resumekit.utils.timestamp import format_timestamp, now

FORMAT_CHOICES = {"docx": ["docx"], "pdf": ["pdf"], "both": ["docx", "pdf"]}

app = typer.Typer(
    help="Export resume records to DOCX and PDF",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load(record_file: Path):
    try:
        return load_resume_record(record_file)
    except (FileNotFoundError, ValueError) as e:
        # InvalidResumeRecordError is a ValueError
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("export")
def export_command(
    record_file: Annotated[
        Path,
        typer.Argument(help="Resume record file (.yaml, .yml or .json)"),
    ],
    fmt: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output format: docx, pdf or both",
        ),
    ] = "both",
    output_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory for exported files (default: RESUMEKIT_EXPORTS_PATH/YYYY-MM-DD)",
        ),
    ] = None,
    badge: Annotated[
        Optional[str],
        typer.Option(
            "--badge",
            help="Badge image URL or path for the DOCX header",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug messages on the console",
        ),
    ] = False,
):
    """
    Export a resume record.

    Examples:\n

        $ export_resume.py export data/asha_verma.yaml                # Both formats

        $ export_resume.py export data/asha_verma.yaml -f docx        # DOCX only
    """
    formats: List[str] = FORMAT_CHOICES.get(fmt.lower(), [])
    if not formats:
        typer.secho(
            f"Error: unknown format '{fmt}' (choose docx, pdf or both)\n", fg=typer.colors.RED, err=True
        )
        raise typer.Exit(code=1)

    record = _load(record_file)

    log_dir = LOGS_PATH / f"export_{now()}"
    setup_export_logger(log_dir, badge_location=badge or "", verbose=verbose)

    typer.secho(f"\nExporting: {record.display_name}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Formats: {', '.join(formats)}")
    typer.echo("")

    all_succeeded = True
    for export_format in formats:
        result = asyncio.run(
            export_resume(record, export_format, output_dir=output_dir, badge_location=badge)
        )

        if result.success:
            typer.secho(f"✓ {export_format.upper()} export succeeded", fg=typer.colors.GREEN, bold=True)
            typer.echo(f"  File: {result.output_path}")
            typer.echo(f"  Size: {result.size_bytes} bytes")
            if result.page_count is not None:
                typer.echo(f"  Pages: {result.page_count}")
        else:
            all_succeeded = False
            typer.secho(f"✗ {export_format.upper()} export failed", fg=typer.colors.RED, bold=True)
            for error in result.errors:
                typer.secho(f"  - {error}", fg=typer.colors.RED)

    close_logger()
    typer.echo(f"\n  Log: {log_dir / 'export.log'}")
    typer.echo("")

    raise typer.Exit(code=0 if all_succeeded else 1)


@app.command("preview")
def preview_command(
    record_file: Annotated[
        Path,
        typer.Argument(help="Resume record file (.yaml, .yml or .json)"),
    ],
):
    """Print a markdown preview of a resume record."""
    record = _load(record_file)
    typer.echo(render_markdown(record))


@app.command("inspect")
def inspect_command(
    document: Annotated[
        Path,
        typer.Argument(help="Generated .pdf or .docx file"),
    ],
):
    """
    Show the text of a generated document.

    For PDFs the page count is shown and text is grouped by page.
    """
    suffix = document.suffix.lower()
    if not document.exists() or suffix not in (".pdf", ".docx"):
        typer.secho(f"Error: not a .pdf or .docx file: {document}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"\nInspecting: {document}", fg=typer.colors.BLUE, bold=True)

    if suffix == ".pdf":
        typer.echo(f"Pages: {page_count(document)}")
        for index, lines in enumerate(pdf_text(document), 1):
            typer.secho(f"\n--- Page {index} ---", bold=True)
            for line in lines:
                typer.echo(line)
    else:
        typer.echo("")
        for line in docx_text(document):
            typer.echo(line)
    typer.echo("")


@app.command("template")
def template_command(
    output: Annotated[
        Optional[Path],
        typer.Argument(help="Where to write the blank record (default: print to stdout)"),
    ] = None,
):
    """Write a blank resume record (YAML) with the default declaration text."""
    content = OmegaConf.to_yaml(OmegaConf.create(new_resume_record().to_dict()))

    if output is None:
        typer.echo(content)
        return

    if output.exists():
        typer.secho(f"Error: file already exists: {output}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    typer.secho(f"✓ Template written to {output}", fg=typer.colors.GREEN)


@app.command("events")
def events_command(
    n: int = typer.Option(10, "--num", "-n", help="Number of recent events to show"),
    resume: Optional[str] = typer.Option(
        None, "--resume", "-r", help="Filter to events for this resume name"
    ),
    event_type: Optional[str] = typer.Option(
        None, "--event-type", "-e", help="Filter to events of this type"
    ),
    compact: bool = typer.Option(
        False, "--compact", "-c", help="Print one event per line (no pretty formatting)"
    ),
):
    """
    Show the last n events from the export event log.

    Examples:\n

        $ export_resume.py events                          # Last 10 events

        $ export_resume.py events -e export_failed         # Recent failures

        $ export_resume.py events -n 5 -r "Asha Verma"     # Last 5 events for one resume
    """
    events = get_recent_events(n=n, resume_name=resume, event_type=event_type)

    if not events:
        typer.secho("No events found", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)

    if not compact:
        typer.secho(f"\nShowing last {len(events)} event(s):", fg=typer.colors.BLUE)
        typer.echo("")

    for event in events:
        if compact:
            typer.echo(json.dumps(event))
            continue
        typer.secho(
            f"{format_timestamp(event.get('timestamp', ''))}  {event.get('event_type')}  "
            f"{event.get('resume_name')}",
            bold=True,
        )
        details = {k: v for k, v in event.items() if k not in ("timestamp", "event_type", "resume_name")}
        typer.echo(json.dumps(details, indent=2))
        typer.echo("")


if __name__ == "__main__":
    app()
