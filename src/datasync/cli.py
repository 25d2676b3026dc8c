from __future__ import annotations

import json
import sys
from datetime import UTC, datetime
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from .fingerprint import FingerprintError, compute_md5
from .formatting import format_bytes, format_mod_time
from .grouping import group_by_directory
from .models import LocalStatusCode, Remote, RemoteStatusCode, StatusEntry
from .render import print_status, print_table

app = typer.Typer(help="Data file fingerprinting and sync status reports")
console = Console()


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def _display_path(path: Path) -> str:
    text = path.as_posix()
    return text if "/" in text else f"./{text}"


def _md5_entry(path: Path) -> StatusEntry:
    st = path.stat()
    digest = compute_md5(path)
    mod_time = datetime.fromtimestamp(st.st_mtime, tz=UTC)
    return StatusEntry(
        local_status=LocalStatusCode.CURRENT,
        cols=(
            _display_path(path),
            format_bytes(st.st_size),
            format_mod_time(mod_time),
            digest or "-",
        ),
    )


def load_snapshot(path: Path) -> tuple[list[StatusEntry], dict[str, Remote]]:
    """Read a status snapshot written by whatever assembled the entries."""
    data = json.loads(path.read_text(encoding="utf-8"))
    entries: list[StatusEntry] = []
    for raw in data.get("entries", []):
        remote_status = raw.get("remote_status")
        cols = raw.get("cols")
        tracked = raw.get("tracked")
        if cols is not None and not isinstance(cols, list):
            raise TypeError(f"cols must be a list, got {type(cols).__name__}")
        if tracked is not None and not isinstance(tracked, bool):
            raise TypeError(f"tracked must be true, false or null, got {tracked!r}")
        entries.append(
            StatusEntry(
                local_status=LocalStatusCode(str(raw["local_status"])),
                tracked=tracked,
                remote_status=(
                    RemoteStatusCode(str(remote_status))
                    if remote_status is not None
                    else None
                ),
                cols=tuple(str(col) for col in cols) if cols is not None else None,
            )
        )
    remotes = {
        str(key): Remote(name=str(name))
        for key, name in (data.get("remotes") or {}).items()
    }
    return entries, remotes


@app.callback()
def _main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    _configure_logging(verbose)


@app.command()
def md5(
    paths: list[Path] = typer.Argument(..., help="Files to fingerprint"),
) -> None:
    """Print size, modification time and MD5 for each file, grouped by directory."""
    entries: list[StatusEntry] = []
    for path in paths:
        if not path.is_file():
            console.print(f"[red]Not a file:[/red] {escape(str(path))}")
            raise typer.Exit(1)
        try:
            entries.append(_md5_entry(path))
        except FingerprintError as exc:
            console.print(f"[red]Could not read file:[/red] {escape(str(exc))}")
            raise typer.Exit(1)
    print_table(group_by_directory(entries), console)


@app.command()
def status(
    snapshot: Path = typer.Argument(..., help="JSON snapshot of status entries"),
    color: bool = typer.Option(True, "--color/--no-color", help="Color rows by status"),
) -> None:
    """Render a grouped, color-coded status report from a snapshot."""
    if not snapshot.is_file():
        console.print(f"[red]Snapshot not found:[/red] {escape(str(snapshot))}")
        raise typer.Exit(1)
    try:
        entries, remotes = load_snapshot(snapshot)
    except (OSError, ValueError, KeyError, TypeError, AttributeError) as exc:
        console.print(f"[red]Invalid snapshot:[/red] {escape(str(exc))}")
        raise typer.Exit(1)
    print_status(entries, remotes or None, console=console, styled=color)


if __name__ == "__main__":
    app()
