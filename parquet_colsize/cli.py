import logging

import click
import pyarrow as pa

from parquet_colsize.metadata import read_row_groups
from parquet_colsize.report import SizeReport
from parquet_colsize.util import format_rows

logger = logging.getLogger("parquet_colsize")


@click.command()
@click.option(
    "-u",
    "--uncompressed",
    is_flag=True,
    help="Show size after encoding but before heavyweight compression",
)
@click.option("-b", "--binary", is_flag=True, help="Use binary (KiB, MiB) size units")
@click.option("-v", "--verbose", is_flag=True, help="Log debugging information to stderr")
@click.argument(
    "path", type=click.Path(exists=True, dir_okay=False, readable=True)
)
def main(path: str, uncompressed: bool, binary: bool, verbose: bool):
    """Show the storage footprint of each column of the Parquet file at PATH."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=click.get_text_stream("stderr"),
        format="%(asctime)s | %(levelname)-6s | %(name)-9s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    try:
        row_groups = read_row_groups(path)
    except (OSError, pa.ArrowException) as err:
        raise click.ClickException(f"{path}: {err}") from err

    report = SizeReport(uncompressed).extend(row_groups)
    logger.debug("Built %r", report)
    for line in format_rows(report.rows(), binary=binary):
        click.echo(line)


if __name__ == "__main__":
    main.main()
