from __future__ import annotations

from rich.console import Console

from datasync.models import LocalStatusCode, RemoteStatusCode, StatusEntry


def mk_entry(
    *cols: str,
    tracked: bool | None = True,
    local_status: LocalStatusCode = LocalStatusCode.CURRENT,
    remote_status: RemoteStatusCode | None = None,
) -> StatusEntry:
    return StatusEntry(
        local_status=local_status,
        tracked=tracked,
        remote_status=remote_status,
        cols=tuple(cols) if cols else None,
    )


def mk_console(width: int = 200) -> Console:
    return Console(record=True, width=width, force_terminal=True, color_system="standard")
