from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import PurePosixPath

from loguru import logger

from .models import Remote, StatusEntry


def _parent_dir(path: str) -> str | None:
    # lexical only: "a.csv" has no parent, "data/a.csv" -> "data"
    if "/" not in path:
        return None
    return PurePosixPath(path).parent.as_posix()


def group_by_directory(entries: Iterable[StatusEntry]) -> dict[str, list[StatusEntry]]:
    """Bucket entries by the parent directory of their first column.

    Entries without columns, or whose first column has no directory part, are
    dropped. Keys come back sorted; each bucket keeps the input order.
    """
    buckets: dict[str, list[StatusEntry]] = {}
    dropped = 0
    for entry in entries:
        path = entry.path
        parent = _parent_dir(path) if path is not None else None
        if parent is None:
            dropped += 1
            continue
        buckets.setdefault(parent, []).append(entry)

    if dropped:
        logger.debug(f"group_by_directory: dropped {dropped} entries without a directory")
    return {key: buckets[key] for key in sorted(buckets)}


def merge_remote_names(
    groups: Mapping[str, list[StatusEntry]],
    remotes: Mapping[str, Remote] | None,
) -> dict[str, list[StatusEntry]]:
    """Rename groups that have a remote to `"<dir> > <remote name>"`.

    If two keys collapse onto the same name the later one wins.
    """
    if remotes is None:
        return dict(groups)

    merged: dict[str, list[StatusEntry]] = {}
    for key, rows in groups.items():
        remote = remotes.get(key)
        if remote is None:
            merged[key] = rows
            continue
        new_key = f"{key} > {remote.display_name}"
        logger.debug(f"merge_remote_names: {key!r} -> {new_key!r}")
        merged[new_key] = rows
    return {key: merged[key] for key in sorted(merged)}
