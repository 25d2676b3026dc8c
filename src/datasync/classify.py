from __future__ import annotations

from enum import Enum

from .models import LocalStatusCode, RemoteStatusCode, StatusEntry


class Severity(str, Enum):
    OK = "ok"
    UNTRACKED_SYNCED = "untracked_synced"
    UNTRACKED_UNSYNCED = "untracked_unsynced"
    DRIFTED = "drifted"
    REMOTE_DIVERGED = "remote_diverged"
    AMBIGUOUS = "ambiguous"

    @property
    def is_caution(self) -> bool:
        return self in {Severity.UNTRACKED_UNSYNCED, Severity.REMOTE_DIVERGED}


def classify(
    tracked: bool | None,
    local: LocalStatusCode,
    remote: RemoteStatusCode | None,
) -> Severity:
    """Map a (tracked, local, remote) triple to a display severity.

    Rules are checked in order and the first match wins. Anything no rule
    covers, including status codes added later, is AMBIGUOUS.
    """
    current = local == LocalStatusCode.CURRENT

    if tracked is True and current and remote in {RemoteStatusCode.CURRENT, None}:
        return Severity.OK
    if tracked is False and current and remote == RemoteStatusCode.CURRENT:
        return Severity.UNTRACKED_SYNCED
    if tracked is False and current and remote in {None, RemoteStatusCode.NOT_EXISTS}:
        return Severity.UNTRACKED_UNSYNCED
    if tracked is not None and local == LocalStatusCode.MODIFIED:
        return Severity.DRIFTED
    if tracked is True and current and remote in {
        RemoteStatusCode.NOT_EXISTS,
        RemoteStatusCode.MD5_MISMATCH,
    }:
        return Severity.REMOTE_DIVERGED
    if tracked is False and current:
        return Severity.REMOTE_DIVERGED
    if tracked is None and current and remote is None:
        return Severity.OK
    return Severity.AMBIGUOUS


def classify_entry(entry: StatusEntry) -> Severity:
    return classify(entry.tracked, entry.local_status, entry.remote_status)
