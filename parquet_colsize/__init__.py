from parquet_colsize.metadata import Codec, ColumnChunk, RowGroup, read_row_groups
from parquet_colsize.report import ReportRow, SizeReport, summarize
from parquet_colsize.util import render_table

__all__ = [
    "Codec",
    "ColumnChunk",
    "RowGroup",
    "read_row_groups",
    "ReportRow",
    "SizeReport",
    "summarize",
    "render_table",
]
