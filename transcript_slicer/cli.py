"""Command line interface for fetching and slicing transcripts.

Usage:
    transcript-slicer get dQw4w9WgXcQ --last-minutes 5
    transcript-slicer get https://youtu.be/dQw4w9WgXcQ --start-index 100 --max-segments 50 --json
    transcript-slicer search dQw4w9WgXcQ "never gonna"
    transcript-slicer mcp
    transcript-slicer api --port 3002
"""

import asyncio
import json
import sys
import uuid
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from transcript_slicer.lib.config_manager import config
from transcript_slicer.lib.logging_config import setup_logging
from transcript_slicer.services.segmentation import SelectionCriteria
from transcript_slicer.services.youtube import TranscriptError, get_transcript_service

app = typer.Typer(help="Segmented YouTube transcripts sized for LLM context windows")
console = Console()


def _time_option(value: Optional[str]):
    """Plain numbers are seconds; anything else is a clock string."""
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return value


@app.command()
def get(
    video: str = typer.Argument(..., help="Video ID or YouTube URL"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Transcript language"),
    start_time: Optional[str] = typer.Option(None, help="Window start (seconds, MM:SS or HH:MM:SS)"),
    end_time: Optional[str] = typer.Option(None, help="Window end (seconds, MM:SS or HH:MM:SS)"),
    last_minutes: Optional[float] = typer.Option(None, help="Keep the last N minutes"),
    first_minutes: Optional[float] = typer.Option(None, help="Keep the first N minutes"),
    start_index: Optional[int] = typer.Option(None, help="First segment index"),
    end_index: Optional[int] = typer.Option(None, help="Last segment index (inclusive)"),
    max_segments: Optional[int] = typer.Option(None, help="Maximum segments to return"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON"),
):
    """Fetch a transcript and print the selected segments."""
    criteria = SelectionCriteria(
        start_time=_time_option(start_time),
        end_time=_time_option(end_time),
        last_minutes=last_minutes,
        first_minutes=first_minutes,
        start_index=start_index,
        end_index=end_index,
        max_segments=max_segments,
    )

    try:
        with console.status("[bold yellow]Fetching transcript..."):
            result = get_transcript_service().get_timestamped_transcript(
                video, language=language, criteria=criteria
            )
    except (TranscriptError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(result, indent=2))
        return

    meta = result["metadata"]
    table = Table(title=f"{result['videoId']} ({result['language']})")
    table.add_column("Time", style="cyan", no_wrap=True)
    table.add_column("Text")
    for seg in result["timestampedTranscript"]:
        table.add_row(seg["timestamp"], seg["text"])

    console.print(table)
    console.print(
        f"[bold green]{meta['segmentCount']}[/bold green] of {meta['totalSegments']} segments, "
        f"span {meta['filteredDuration']:.1f}s of {meta['totalDuration']:.1f}s"
    )


@app.command()
def search(
    video: str = typer.Argument(..., help="Video ID or YouTube URL"),
    query: str = typer.Argument(..., help="Text to search for"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Transcript language"),
):
    """List segments containing QUERY."""
    try:
        with console.status("[bold yellow]Searching transcript..."):
            result = get_transcript_service().search_transcript(video, query, language=language)
    except (TranscriptError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    table = Table(title=f"'{query}' in {result['videoId']}")
    table.add_column("Index", justify="right")
    table.add_column("Time", style="cyan", no_wrap=True)
    table.add_column("Text")
    for match in result["matches"]:
        table.add_row(str(match["index"]), match["timestamp"], match["text"])

    console.print(table)
    console.print(f"[bold green]{result['totalMatches']}[/bold green] matches")


@app.command()
def mcp():
    """Run the MCP server over stdio."""
    from transcript_slicer.mcp.server import main

    asyncio.run(main())


@app.command()
def api(
    host: Optional[str] = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Port (default: API_PORT)"),
):
    """Serve the HTTP API."""
    from transcript_slicer.api.main import run

    run(host=host, port=port)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")):
    """Configure logging for every command."""
    level = "DEBUG" if verbose else config.get("LOG_LEVEL")
    # Keep stdout clean for --json output and the MCP protocol
    correlation = setup_logging(config.get("SERVICE_NAME"), level, stream=sys.stderr)
    correlation.set_correlation_id(str(uuid.uuid4()))


if __name__ == "__main__":
    app()
