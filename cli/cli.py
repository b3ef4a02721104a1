"""CLI for the Overload sync relay.

Developer CLI to run the relay locally, inspect today's plan from a
snapshot file and merge or sync snapshot files by hand.
"""

import json
from pathlib import Path

import typer
import uvicorn
from loguru import logger
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from overload.catalog.registry import get_program, get_program_profile
from overload.config.settings import settings
from overload.core.logger import setup_logger
from overload.main import create_app
from overload.plans.day_plan import plan_today
from overload.plans.progress import get_cycle_index, get_week_number
from overload.plans.types import GlobalState
from overload.sync.client import SyncClient, sync_now
from overload.sync.migration import dump_state, load_state
from overload.sync.reconcile import merge_state
from overload.utils.calendar import parse_iso_date, today_utc
from overload.utils.units import format_duration, format_weight

# Initialize Rich console for output
console = Console()

# Initialize Typer app
app = typer.Typer(
    name="overload-cli",
    help="Overload CLI - sync relay and snapshot tools",
    add_completion=False,
)


def _read_snapshot(path: Path) -> GlobalState:
    """Load a snapshot file, exiting with an error if it cannot be parsed."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        console.print(f"[red]Error:[/red] Could not read snapshot {path}: {e}", style="bold red")
        raise typer.Exit(1) from e
    return load_state(raw)


def _write_or_print(state: GlobalState, output: Path | None) -> None:
    payload = json.dumps(dump_state(state), indent=2)
    if output is None:
        console.print(JSON(payload))
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(payload, encoding="utf-8")
    console.print(f"[green]Wrote merged snapshot to {output}[/green]")


@app.command()
def serve(
    host: str = typer.Option(settings.sync_host, "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(settings.sync_port, "--port", "-p", help="Port to bind to"),
    file: str = typer.Option(settings.sync_data_file, "--file", "-f", help="Snapshot file persisted by the relay"),
    log_file: str = typer.Option(settings.log_file, "--log-file", help="Also write logs to this file (LOG_FILE)"),
) -> None:
    """Run the sync relay.

    Serves GET /sync/state and POST /sync/push backed by a JSON file.
    """
    log_path = setup_logger(log_file=log_file)
    logger.info(f"Starting sync relay on {host}:{port} (state file: {file}, log file: {log_path or 'stderr'})")
    uvicorn.run(create_app(data_file=file), host=host, port=port)


@app.command()
def plan(
    snapshot: Path = typer.Argument(..., help="Snapshot JSON file"),
    profile_id: str | None = typer.Option(None, "--profile", help="Profile to plan for (defaults to the active one)"),
    on: str | None = typer.Option(None, "--date", help="Date to report against (YYYY-MM-DD, default today UTC)"),
) -> None:
    """Print today's training plan for a profile."""
    on_date = parse_iso_date(on) if on else today_utc()
    if on_date is None:
        console.print(f"[red]Error:[/red] Invalid date: {on}", style="bold red")
        raise typer.Exit(1)
    state = _read_snapshot(snapshot)
    profile_id = profile_id or state.active_profile_id
    profile = state.profiles.get(profile_id) if profile_id else None
    if profile is None:
        console.print(f"[red]Error:[/red] Unknown profile: {profile_id}", style="bold red")
        raise typer.Exit(1)

    today = plan_today(profile, get_program(profile.program_id))
    if today.day_key is None:
        console.print(Panel(Text("No training day available", style="bold yellow"), border_style="yellow"))
        return

    profile_config = get_program_profile(profile.program_id)
    program_title = (profile_config.short_title or profile_config.title) if profile_config else profile.program_id
    table = Table(
        title=f"{profile.name} ({program_title}) - {today.day_key} (week {today.week_number})",
        caption=f"Rest {format_duration(profile.settings.rest_seconds)} between sets",
    )
    table.add_column("Exercise")
    table.add_column("Weight", justify="right")
    table.add_column("Sets x Reps", justify="right")
    for exercise in today.exercises:
        weight = "bodyweight" if exercise.uses_bodyweight and not exercise.weight_kg else format_weight(exercise.weight_kg)
        table.add_row(exercise.name, weight, f"{today.sets_per_exercise} x {exercise.target_reps}")
    console.print(table)
    if profile.program_start_date is not None and on_date >= profile.program_start_date:
        week = get_week_number(profile.program_start_date, on_date)
        day = get_cycle_index(profile.program_start_date, on_date) + 1
        console.print(f"Calendar week {week}, day {day} of 7 since {profile.program_start_date.isoformat()}")


@app.command()
def merge(
    local: Path = typer.Argument(..., help="Local snapshot JSON file"),
    remote: Path = typer.Argument(..., help="Remote snapshot JSON file"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the merged snapshot here instead of printing"),
) -> None:
    """Merge two snapshot files."""
    merged = merge_state(_read_snapshot(local), _read_snapshot(remote))
    _write_or_print(merged, output)


@app.command()
def sync(
    snapshot: Path = typer.Argument(..., help="Local snapshot JSON file, rewritten on success"),
    url: str | None = typer.Option(None, "--url", help="Relay base URL (defaults to the snapshot's, then SYNC_URL)"),
) -> None:
    """Pull, merge and push a local snapshot file against a relay."""
    local = _read_snapshot(snapshot)
    client = SyncClient(base_url=url or local.settings.sync_url or settings.sync_url)
    result = sync_now(local, client)
    if not result.ok:
        console.print(Panel(Text("Sync failed", style="bold red"), subtitle=result.error, border_style="red"))
        raise typer.Exit(1)
    _write_or_print(result.state, snapshot)
