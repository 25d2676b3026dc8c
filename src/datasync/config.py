from __future__ import annotations

from dataclasses import dataclass

FINGERPRINT_BUFFER_SIZE = 1024
DEFAULT_COLUMN_SPACING = 6
DEFAULT_INDENT = 0


@dataclass(frozen=True)
class TableConfig:
    column_spacing: int = DEFAULT_COLUMN_SPACING
    indent: int = DEFAULT_INDENT
    styled: bool = False

    @property
    def spacer(self) -> str:
        return " " * self.column_spacing
