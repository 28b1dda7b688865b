from typing import IO, Sequence

import humanize

from tabulate import tabulate

from .report import ReportRow

COLUMN_ALIGNMENT = ("left", "right", "right", "left")


def format_size(size: int, binary: bool = False) -> str:
    return humanize.naturalsize(size, binary=binary)


def format_percentage(percentage: float) -> str:
    return f"{percentage:>2.0f}%"


def format_details(row: ReportRow) -> str:
    return f"({', '.join(row.details)})"


def format_rows(rows: Sequence[ReportRow], binary: bool = False) -> list[str]:
    """
    Lay out ``rows`` as aligned lines of text, one per row.

    Columns are the column path, its size, its share of the total and the
    encodings (and codec) it was written with.
    """
    if not rows:
        return []
    cells = [
        (
            row.path,
            format_size(row.size, binary=binary),
            format_percentage(row.percentage),
            format_details(row),
        )
        for row in rows
    ]
    table = tabulate(
        cells,
        tablefmt="plain",
        colalign=COLUMN_ALIGNMENT,
        disable_numparse=True,
    )
    return [line.rstrip() for line in table.splitlines()]


def render_table(rows: Sequence[ReportRow], stream: IO[str], binary: bool = False):
    for line in format_rows(rows, binary=binary):
        stream.write(line)
        stream.write("\n")
    stream.flush()


__all__ = [
    "format_size",
    "format_percentage",
    "format_details",
    "format_rows",
    "render_table",
]
