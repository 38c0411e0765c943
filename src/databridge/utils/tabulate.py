"""Format tabular data into a text table for print.

The `tabulate` function takes a `pyarrow.Table` or `pyarrow.RecordBatch`
and formats it into a text table. It will truncate long strings,
format floats to 2 decimal places, and limit the number of rows to display.
It's used to display data in the console by the Dataframe and the commands.

Example:

    >>> import datetime
    >>> import pyarrow as pa
    >>> data = {
    ...     "product": ["Laptop", "Mouse", None],
    ...     "price": [999.99, 25.5, 89.99],
    ...     "order_date": [datetime.date(2025, 11, 1)] * 3,
    ... }
    >>> print(tabulate(pa.table(data)))
    product | price  | order_date
    ------- | ------ | ----------
    Laptop  | 999.99 | 2025-11-01
    Mouse   | 25.50  | 2025-11-01
    null    | 89.99  | 2025-11-01
"""

import datetime
from typing import Any

import pyarrow as pa


def tabulate(data: pa.Table | pa.RecordBatch, max_rows: int = 20) -> str:
    """Format a Table or RecordBatch into a text table.

    Will produce a string like::

        name    | department  | salary
        ------- | ----------- | --------
        Alice   | Engineering | 75000.00
        Bob     | Sales       | 55000.00
    """
    cols = data.column_names
    rows = [
        [format_value(row[c]) for c in cols]
        for row in data.slice(length=max_rows).to_pylist()
    ]

    colsizes = compute_max_colsize(cols, rows)
    header = [maketablerow(cols, colsizes=colsizes)]
    separator = [maketablerow(["-"] * len(cols), colsizes=colsizes, fillvalue="-")]
    textrows = [maketablerow(row, colsizes=colsizes) for row in rows]

    table = "\n".join(header + separator + textrows)
    if data.num_rows > max_rows:
        table += f"\n... and {data.num_rows - max_rows} more rows"
    return table


def compute_max_colsize(cols: list[str], rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table."""
    return [
        max([len(row[colidx]) for row in rows] + [len(cols[colidx])])
        for colidx, _ in enumerate(cols)
    ]


def maketablerow(cols: list[str], colsizes: list[int], fillvalue: str = " ") -> str:
    """Make a table row with the given column sizes."""
    row = " | ".join(
        [col.ljust(colsizes[idx], fillvalue) for idx, col in enumerate(cols)]
    )
    return row.rstrip(" ")


def format_value(v: Any) -> str:
    """Format a value to be printed in the table.

    Floats are formatted to 2 decimal places, dates in ISO format,
    missing values as ``null`` and long strings are truncated.
    """
    if v is None:
        return "null"
    elif isinstance(v, bool):
        return "true" if v else "false"
    elif isinstance(v, float):
        return f"{v:.2f}"
    elif isinstance(v, (datetime.date, datetime.datetime)):
        return v.isoformat()

    v = str(v)
    if len(v) > 30:
        v = v[:27] + "..."
    return v
