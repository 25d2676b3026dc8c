from __future__ import annotations

from collections.abc import Iterable, Mapping

from rich.cells import cell_len
from rich.console import Console
from rich.text import Text

from .classify import Severity, classify_entry
from .config import DEFAULT_COLUMN_SPACING, DEFAULT_INDENT, TableConfig
from .grouping import group_by_directory, merge_remote_names
from .models import Remote, StatusEntry

CAUTION_STYLE = "yellow"
_BASE_STYLES: dict[Severity, str] = {
    Severity.OK: "green",
    Severity.UNTRACKED_SYNCED: "cyan",
    Severity.DRIFTED: "red",
    Severity.AMBIGUOUS: "cyan",
}
SEVERITY_STYLES: dict[Severity, str] = {
    severity: CAUTION_STYLE if severity.is_caution else _BASE_STYLES[severity]
    for severity in Severity
}


def _all_rows(groups: Mapping[str, list[StatusEntry]]) -> Iterable[StatusEntry]:
    for rows in groups.values():
        yield from rows


def column_widths(groups: Mapping[str, list[StatusEntry]]) -> list[int]:
    """Widest visual width of each column index across every group."""
    widths: list[int] = []
    for entry in _all_rows(groups):
        if entry.cols is None:
            continue
        for index, col in enumerate(entry.cols):
            if index == len(widths):
                widths.append(0)
            widths[index] = max(widths[index], cell_len(col))
    return widths


def _pad(text: str, width: int) -> str:
    return text + " " * max(0, width - cell_len(text))


def _compose_row(entry: StatusEntry, widths: list[int], config: TableConfig) -> str:
    cells: list[str] = []
    for index, col in enumerate(entry.cols or ()):
        lead = " " if config.styled and index == 0 else ""
        cells.append(lead + _pad(col, widths[index]))
    return " " * config.indent + config.spacer.join(cells)


def render_table(
    groups: Mapping[str, list[StatusEntry]],
    column_spacing: int = DEFAULT_COLUMN_SPACING,
    indent: int = DEFAULT_INDENT,
    styled: bool = False,
    *,
    config: TableConfig | None = None,
) -> list[Text]:
    """Lay out grouped entries as aligned, optionally colored, lines.

    Each group yields a `[key]` header, one line per entry and a blank line.
    Styling only adds rich styles; `Text.plain` is identical either way apart
    from the leading space the styled layout puts before the first cell.
    """
    if config is None:
        config = TableConfig(column_spacing=column_spacing, indent=indent, styled=styled)
    widths = column_widths(groups)

    lines: list[Text] = []
    for key in sorted(groups):
        header_style = "bold" if config.styled else ""
        lines.append(Text.assemble("[", (key, header_style), "]"))
        for entry in groups[key]:
            row = _compose_row(entry, widths, config)
            if config.styled:
                style = SEVERITY_STYLES[classify_entry(entry)]
                lines.append(Text(row, style=style))
            else:
                lines.append(Text(row))
        lines.append(Text(""))
    return lines


def print_table(
    groups: Mapping[str, list[StatusEntry]],
    console: Console,
    column_spacing: int = DEFAULT_COLUMN_SPACING,
    indent: int = DEFAULT_INDENT,
    styled: bool = False,
) -> None:
    for line in render_table(groups, column_spacing, indent, styled):
        console.print(line, soft_wrap=True)


def print_status(
    entries: list[StatusEntry],
    remotes: Mapping[str, Remote] | None = None,
    console: Console | None = None,
    styled: bool = True,
) -> None:
    console = console or Console()
    total = len(entries)
    console.print(Text("Project data status:", style="bold" if styled else ""))
    console.print(
        f"{total} data file{'' if total == 1 else 's'} registered.\n", highlight=False
    )

    groups = merge_remote_names(group_by_directory(entries), remotes)
    print_table(groups, console, styled=styled)
