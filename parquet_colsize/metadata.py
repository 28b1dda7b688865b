import logging

from dataclasses import dataclass, field
from enum import StrEnum
from os import PathLike

from pyarrow import parquet as pq

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class CodecKind(StrEnum):
    Uncompressed = "UNCOMPRESSED"
    Snappy = "SNAPPY"
    Gzip = "GZIP"
    Lzo = "LZO"
    Brotli = "BROTLI"
    Lz4 = "LZ4"
    Zstd = "ZSTD"
    Lz4Raw = "LZ4_RAW"
    Other = "OTHER"

    @classmethod
    def get(cls, value: str):
        try:
            return cls(value.upper())
        except ValueError:
            return cls.Other

    @property
    def parameterized(self) -> bool:
        return self in (CodecKind.Gzip, CodecKind.Brotli, CodecKind.Zstd)


@dataclass(frozen=True)
class Codec:
    """
    The compression codec of a column chunk.

    Attributes
    ----------
    name : str
        The codec name as reported by the file footer, e.g. ``"ZSTD"``
    level : int or :const:`None`
        The compression level for codecs which take one, when it is known
    """

    name: str
    level: int | None = None

    @classmethod
    def from_name(cls, name: str, level: int | None = None) -> "Codec":
        name = name.upper()
        if level is not None and not CodecKind.get(name).parameterized:
            level = None
        return cls(name, level)

    @property
    def kind(self) -> CodecKind:
        return CodecKind.get(self.name)

    @property
    def is_compressed(self) -> bool:
        return self.kind != CodecKind.Uncompressed

    @property
    def label(self) -> str:
        if self.level is not None:
            return f"{self.name}({self.level})"
        return self.name

    def __str__(self):
        return self.label


UNCOMPRESSED = Codec(CodecKind.Uncompressed.value)


@dataclass(frozen=True)
class ColumnChunk:
    path: str
    encodings: tuple[str, ...]
    codec: Codec
    uncompressed_size: int
    compressed_size: int

    @classmethod
    def from_arrow(cls, meta: pq.ColumnChunkMetaData) -> "ColumnChunk":
        return cls(
            meta.path_in_schema,
            tuple(meta.encodings),
            Codec.from_name(meta.compression),
            meta.total_uncompressed_size,
            meta.total_compressed_size,
        )

    def size(self, uncompressed: bool = False) -> int:
        return self.uncompressed_size if uncompressed else self.compressed_size


@dataclass(frozen=True)
class RowGroup:
    """
    The sizing information of a single row group.

    ``total_byte_size`` is read from the footer as-is, while the compressed
    size is the sum over the column chunks, which is how the footer would
    define it had it recorded one.
    """

    total_byte_size: int
    columns: list[ColumnChunk] = field(default_factory=list)

    @property
    def total_compressed_size(self) -> int:
        return sum(col.compressed_size for col in self.columns)

    def size(self, uncompressed: bool = False) -> int:
        return self.total_byte_size if uncompressed else self.total_compressed_size

    def __iter__(self):
        return iter(self.columns)

    def __len__(self):
        return len(self.columns)

    @classmethod
    def from_arrow(cls, meta: pq.RowGroupMetaData) -> "RowGroup":
        columns = [
            ColumnChunk.from_arrow(meta.column(i)) for i in range(meta.num_columns)
        ]
        return cls(meta.total_byte_size, columns)


def read_row_groups(path: str | PathLike) -> list[RowGroup]:
    """
    Read the row group metadata from the footer of the Parquet file at ``path``.

    The file is closed before this function returns. Column data is never read.

    Raises
    ------
    :class:`OSError`
        If ``path`` cannot be opened
    :class:`pyarrow.ArrowException`
        If the file is not a valid Parquet file
    """
    with open(path, "rb") as fh:
        meta = pq.ParquetFile(fh).metadata
        row_groups = [
            RowGroup.from_arrow(meta.row_group(i)) for i in range(meta.num_row_groups)
        ]
    logger.debug(
        "Read %d row groups with %d columns from %s",
        len(row_groups),
        meta.num_columns,
        path,
    )
    return row_groups


__all__ = [
    "CodecKind",
    "Codec",
    "UNCOMPRESSED",
    "ColumnChunk",
    "RowGroup",
    "read_row_groups",
]
