"""Loading and saving tables from files.

Real world CSV files come in many flavours: different separators,
files without an header, different ways to mark missing values...

:class:`CSVOptions` collects the options that are usually
needed to read them, the actual parsing is done by :mod:`pyarrow.csv`,
which also takes care of detecting the type of each column.
"""

import dataclasses
import logging
from typing import Sequence

import pyarrow as pa
import pyarrow.csv

logger = logging.getLogger(__name__)

DEFAULT_NULL_VALUES = ("NA", "?", "null", "")


@dataclasses.dataclass(frozen=True)
class CSVOptions:
    """How to parse a CSV file.

    :param delimiter: The character separating the fields.
    :param header: If the first row contains the column names,
                   when ``False`` names are generated as ``f0``, ``f1``, ...
    :param null_values: The strings that mark a missing value.
    :param column_types: Force the type of some columns instead of detecting it.
    :param block_size: How many bytes to parse at once.
    """

    delimiter: str = ","
    header: bool = True
    null_values: Sequence[str] = DEFAULT_NULL_VALUES
    column_types: dict[str, pa.DataType] | None = None
    block_size: int | None = None

    def read_options(self) -> pa.csv.ReadOptions:
        return pa.csv.ReadOptions(
            autogenerate_column_names=not self.header, block_size=self.block_size
        )

    def parse_options(self) -> pa.csv.ParseOptions:
        return pa.csv.ParseOptions(delimiter=self.delimiter)

    def convert_options(self) -> pa.csv.ConvertOptions:
        return pa.csv.ConvertOptions(
            null_values=list(self.null_values),
            strings_can_be_null=True,
            column_types=self.column_types,
        )


def read_csv(filename: str, options: CSVOptions | None = None) -> pa.Table:
    """Load a CSV file in memory.

    :param filename: The path of the local CSV file.
    :param options: How to parse the file, defaults to :class:`CSVOptions`.
    """
    options = options or CSVOptions()
    table = pa.csv.read_csv(
        filename,
        read_options=options.read_options(),
        parse_options=options.parse_options(),
        convert_options=options.convert_options(),
    )
    logger.debug(
        "Loaded %s: %d rows, columns %s", filename, table.num_rows, table.column_names
    )
    return table


def write_csv(table: pa.Table, filename: str, delimiter: str = ",") -> None:
    """Save a table to a CSV file, with an header row.

    :param table: The data to save.
    :param filename: The path of the CSV file to create.
    :param delimiter: The character separating the fields.
    """
    pa.csv.write_csv(
        table, filename, write_options=pa.csv.WriteOptions(delimiter=delimiter)
    )
    logger.debug("Saved %d rows to %s", table.num_rows, filename)
