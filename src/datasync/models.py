from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LocalStatusCode(str, Enum):
    CURRENT = "current"
    MODIFIED = "modified"
    MISSING = "missing"


class RemoteStatusCode(str, Enum):
    CURRENT = "current"
    NOT_EXISTS = "not_exists"
    MD5_MISMATCH = "md5_mismatch"


@dataclass(frozen=True)
class StatusEntry:
    local_status: LocalStatusCode
    tracked: bool | None = None
    remote_status: RemoteStatusCode | None = None
    cols: tuple[str, ...] | None = None

    @property
    def path(self) -> str | None:
        if not self.cols:
            return None
        return self.cols[0]


@dataclass(frozen=True)
class Remote:
    name: str
    location: str | None = None

    @property
    def display_name(self) -> str:
        return self.name
