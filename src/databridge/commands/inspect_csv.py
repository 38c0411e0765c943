"""Command line interface for inspecting and converting CSV files.

This module provides a command line interface that loads a CSV file
through :class:`databridge.dataframe.Dataframe`, prints what it contains
and converts it with :mod:`databridge.bridge`.

The results are printed to the console in a tabular format
using the :mod:`databridge.utils.tabulate` module.
"""

import argparse
import logging
import sys
from typing import Sequence

import pyarrow as pa

from databridge.bridge import (
    ConversionError,
    UnsupportedKindPolicy,
    matrix_to_vectors,
    standardize,
)
from databridge.dataframe import CSVOptions, Dataframe
from databridge.dataframe.datasources import DEFAULT_NULL_VALUES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bridge-inspect", description="Inspect and convert a CSV file."
    )
    parser.add_argument("filename", type=str, help="The CSV file to load.")
    parser.add_argument(
        "-d", "--delimiter", default=",", help="The field separator, defaults to ','."
    )
    parser.add_argument(
        "--no-header",
        action="store_true",
        help="The first row is data, column names will be generated.",
    )
    parser.add_argument(
        "-n",
        "--null-value",
        action="append",
        help="A string marking a missing value. Can be provided multiple times.",
    )
    parser.add_argument(
        "-r", "--rows", type=int, default=5, help="How many rows to preview."
    )
    parser.add_argument(
        "-t",
        "--to",
        choices=("matrix", "vectors"),
        help="Convert the data to a numeric matrix or to labeled vectors.",
    )
    parser.add_argument(
        "--coerce",
        action="store_true",
        help="Convert boolean and date columns to numbers instead of rejecting them.",
    )
    parser.add_argument(
        "--standardize",
        action="store_true",
        help="Standardize the columns of the matrix before labeling them.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Parse the command line arguments, load the file and inspect it."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    options = CSVOptions(
        delimiter=args.delimiter,
        header=not args.no_header,
        null_values=tuple(args.null_value) if args.null_value else DEFAULT_NULL_VALUES,
    )
    try:
        df = Dataframe.open_csv(args.filename, options)
    except (OSError, pa.ArrowInvalid) as e:
        print(f"Unable to load {args.filename}, {e}")
        sys.exit(1)

    rows, columns = df.shape
    print(f"Shape: {rows} rows x {columns} columns")
    print(f"\nStructure:\n{df.structure()}")
    print(f"\nFirst {args.rows} rows:\n{df.head(args.rows)}")

    missing = {name: count for name, count in df.missing_counts().items() if count}
    print("\nMissing values:")
    for name, count in missing.items():
        print(f"  {name}: {count} missing")
    if not missing:
        print("  No missing values found")

    if args.to is None:
        return

    policy = (
        UnsupportedKindPolicy.COERCE if args.coerce else UnsupportedKindPolicy.REJECT
    )
    try:
        if args.to == "matrix":
            matrix = df.to_matrix(policy)
            if args.standardize:
                matrix = standardize(matrix)
            print(f"\nMatrix {matrix.shape}:\n{matrix}")
        else:
            if args.standardize:
                vectors = matrix_to_vectors(
                    standardize(df.to_matrix(policy)), df.column_names
                )
            else:
                vectors = df.to_vectors(policy)
            print(f"\nLabeled vectors {vectors.shape}:\n{vectors}")
            print(f"\nSchema:\n{vectors.dtypes.to_string()}")
    except (ConversionError, ValueError) as e:
        print(f"Conversion failed, {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
