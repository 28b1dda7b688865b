from parquet_colsize.cli import main

main.main(prog_name="parquet-colsize")
