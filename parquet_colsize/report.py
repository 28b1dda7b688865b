import logging

from dataclasses import dataclass, field
from collections.abc import Iterable

from .metadata import Codec, ColumnChunk, RowGroup

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


@dataclass
class ColumnAccumulator:
    path: str
    encodings: tuple[str, ...] = field(default_factory=tuple)
    codec: Codec | None = None
    size: int = 0
    row_groups: int = 0

    def update(self, chunk: ColumnChunk, uncompressed: bool = False):
        if self.row_groups:
            if chunk.encodings != self.encodings:
                logger.warning(
                    "Column %r changed encodings from %r to %r, only the last will be reported",
                    self.path,
                    self.encodings,
                    chunk.encodings,
                )
            if chunk.codec != self.codec:
                logger.warning(
                    "Column %r changed codec from %s to %s, only the last will be reported",
                    self.path,
                    self.codec,
                    chunk.codec,
                )
        self.encodings = chunk.encodings
        self.codec = chunk.codec
        self.size += chunk.size(uncompressed)
        self.row_groups += 1


@dataclass(frozen=True)
class ReportRow:
    path: str
    encodings: tuple[str, ...]
    codec: Codec | None
    size: int
    percentage: float

    @property
    def details(self) -> list[str]:
        parts = list(self.encodings)
        if self.codec is not None:
            parts.append(self.codec.label)
        return parts


class SizeReport:
    """
    Accumulates the per-column storage footprint of a sequence of row groups.

    Attributes
    ----------
    uncompressed : bool
        Whether to sum the sizes before compression instead of the on-disk sizes
    total : int
        The running grand total over all row groups seen so far
    columns : dict[str, :class:`ColumnAccumulator`]
        The per-column totals, in order of first appearance
    """

    uncompressed: bool
    total: int
    columns: dict[str, ColumnAccumulator]

    def __init__(self, uncompressed: bool = False):
        self.uncompressed = uncompressed
        self.total = 0
        self.columns = {}

    def add_row_group(self, row_group: RowGroup):
        self.total += row_group.size(self.uncompressed)
        for chunk in row_group:
            try:
                acc = self.columns[chunk.path]
            except KeyError:
                acc = self.columns[chunk.path] = ColumnAccumulator(chunk.path)
            acc.update(chunk, self.uncompressed)

    def extend(self, row_groups: Iterable[RowGroup]):
        for row_group in row_groups:
            self.add_row_group(row_group)
        return self

    def percentage_of(self, size: int) -> float:
        if self.total == 0:
            return 0.0
        return 100.0 * size / self.total

    def _codec_for(self, acc: ColumnAccumulator) -> Codec | None:
        if self.uncompressed or acc.codec is None or not acc.codec.is_compressed:
            return None
        return acc.codec

    def rows(self) -> list[ReportRow]:
        """
        Build the report rows, largest column first.

        Ties are ordered by column path.
        """
        rows = [
            ReportRow(
                acc.path,
                acc.encodings,
                self._codec_for(acc),
                acc.size,
                self.percentage_of(acc.size),
            )
            for acc in self.columns.values()
        ]
        rows.sort(key=lambda row: (-row.size, row.path))
        return rows

    def __len__(self):
        return len(self.columns)

    def __repr__(self):
        return f"{self.__class__.__name__}({len(self)} columns, total={self.total}, uncompressed={self.uncompressed})"


def summarize(row_groups: Iterable[RowGroup], uncompressed: bool = False) -> list[ReportRow]:
    return SizeReport(uncompressed).extend(row_groups).rows()


__all__ = ["ColumnAccumulator", "ReportRow", "SizeReport", "summarize"]
