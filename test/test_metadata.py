from pathlib import Path

import pyarrow as pa
import pytest

from pyarrow import parquet as pq

from parquet_colsize.metadata import Codec, CodecKind, read_row_groups
from parquet_colsize.report import SizeReport


def make_table(n: int = 1000) -> pa.Table:
    return pa.table(
        {
            "index": pa.array(range(n), type=pa.int64()),
            "point": pa.StructArray.from_arrays(
                [
                    pa.array([i * 0.5 for i in range(n)], type=pa.float64()),
                    pa.array([f"label-{i % 7}" for i in range(n)]),
                ],
                names=["mz", "label"],
            ),
        }
    )


@pytest.fixture
def zstd_path(tmp_path: Path) -> Path:
    path = tmp_path / "points.parquet"
    pq.write_table(make_table(), path, compression="zstd", row_group_size=250)
    return path


def test_codec_from_name():
    assert Codec.from_name("zstd", 3).label == "ZSTD(3)"
    assert Codec.from_name("gzip").label == "GZIP"
    # Only parameterized codecs keep a level
    assert Codec.from_name("snappy", 3) == Codec("SNAPPY")
    assert not Codec.from_name("uncompressed").is_compressed
    assert Codec.from_name("lz4_raw").kind == CodecKind.Lz4Raw
    assert Codec.from_name("mystery").kind == CodecKind.Other
    assert Codec.from_name("mystery").label == "MYSTERY"


def test_read_row_groups(zstd_path: Path):
    row_groups = read_row_groups(zstd_path)
    assert len(row_groups) == 4
    for rg in row_groups:
        assert [c.path for c in rg] == ["index", "point.mz", "point.label"]
        for col in rg:
            assert col.codec.kind == CodecKind.Zstd
            assert col.codec.level is None
            assert col.encodings
            assert col.compressed_size > 0
            assert col.uncompressed_size > 0
        assert rg.total_compressed_size == sum(c.compressed_size for c in rg)
        assert rg.size() == rg.total_compressed_size
        assert rg.size(uncompressed=True) == rg.total_byte_size


def test_read_matches_footer(zstd_path: Path):
    meta = pq.ParquetFile(zstd_path).metadata
    row_groups = read_row_groups(zstd_path)
    report = SizeReport().extend(row_groups)
    expected = sum(
        meta.row_group(i).column(j).total_compressed_size
        for i in range(meta.num_row_groups)
        for j in range(meta.num_columns)
    )
    assert report.total == expected
    assert sum(r.size for r in report.rows()) == expected


def test_read_uncompressed_file(tmp_path: Path):
    path = tmp_path / "plain.parquet"
    pq.write_table(make_table(100), path, compression="none")
    (rg,) = read_row_groups(path)
    assert all(not c.codec.is_compressed for c in rg)
    assert all(c.codec.name == "UNCOMPRESSED" for c in rg)


def test_read_missing_file(tmp_path: Path):
    with pytest.raises(OSError):
        read_row_groups(tmp_path / "missing.parquet")


def test_read_corrupt_file(tmp_path: Path):
    path = tmp_path / "corrupt.parquet"
    path.write_bytes(b"this is not a parquet file at all")
    with pytest.raises(pa.ArrowException):
        read_row_groups(path)
