"""The Dataframe object itself."""

from typing import Any, Callable, Iterable, Mapping, Self, Sequence

import numpy as np
import pandas as pd
import pyarrow as pa
import pyarrow.compute as pc

from ..bridge import (
    ColumnKind,
    UnsupportedKindPolicy,
    matrix_to_table,
    schema_kinds,
    table_to_matrix,
    table_to_vectors,
    vectors_to_table,
)
from ..utils import tabulate
from .datasources import CSVOptions, read_csv


class Dataframe:
    """Data structure that handles data in rows and columns.

    The Dataframe object allows to represent in-memory data
    and perform transformations over it.

    The Dataframe is immutable, every transformation
    returns a new Dataframe and the data of the original one
    is left untouched. The data itself is kept in a
    :class:`pyarrow.Table` and all the work is delegated to pyarrow.

    >>> df = Dataframe.from_columns({"name": ["Alice", "Bob"], "age": [20, 22]})
    >>> df.shape
    (2, 2)
    >>> print(df)
    name  | age
    ----- | ---
    Alice | 20
    Bob   | 22
    """

    def __init__(self, table: pa.Table | pa.RecordBatch) -> None:
        """
        :param table: The `pyarrow.Table` or `pyarrow.RecordBatch`
                      with the data of the dataframe.
        """
        if isinstance(table, pa.RecordBatch):
            table = pa.Table.from_batches([table])

        if not isinstance(table, pa.Table):
            raise ValueError("Invalid input, expected a PyArrow Table or RecordBatch")

        self.table = table

    @classmethod
    def open_csv(cls, filename: str, options: CSVOptions | None = None) -> Self:
        """Open a CSV file and create a Dataframe out of its data.

        :param filename: The path to a local CSV file.
        :param options: How to parse the file.
        """
        return cls(read_csv(filename, options))

    @classmethod
    def from_columns(
        cls,
        columns: Mapping[str, Iterable[Any]],
        types: Mapping[str, pa.DataType] | None = None,
    ) -> Self:
        """Create a Dataframe from the values of each column.

        :param columns: The values in the form of ``{"column_name": [values]}``.
        :param types: The type of some of the columns,
                      the others will be inferred from their values.
        """
        types = types or {}
        arrays = {
            name: pa.array(list(values), type=types.get(name))
            for name, values in columns.items()
        }
        lengths = {name: len(array) for name, array in arrays.items()}
        if len(set(lengths.values())) > 1:
            raise ValueError(f"All columns must have the same length, got {lengths}")
        return cls(pa.table(arrays))

    @classmethod
    def from_matrix(cls, matrix: Any, names: Sequence[str]) -> Self:
        """Create a Dataframe of floating point columns from a 2-D matrix.

        :param matrix: Any 2-D array-like of numbers.
        :param names: The name for each column of the matrix.
        """
        return cls(matrix_to_table(matrix, names))

    @classmethod
    def from_vectors(cls, vectors: pd.DataFrame) -> Self:
        """Create a Dataframe from a set of labeled vectors.

        :param vectors: A :class:`pandas.DataFrame` of numeric or categorical columns.
        """
        return cls(vectors_to_table(vectors))

    def __str__(self) -> str:
        return tabulate.tabulate(self.table)

    def __len__(self) -> int:
        return self.table.num_rows

    @property
    def shape(self) -> tuple[int, int]:
        """The number of rows and columns."""
        return (self.table.num_rows, self.table.num_columns)

    @property
    def num_rows(self) -> int:
        return self.table.num_rows

    @property
    def num_columns(self) -> int:
        return self.table.num_columns

    @property
    def column_names(self) -> list[str]:
        return self.table.column_names

    def kinds(self) -> dict[str, ColumnKind]:
        """The kind of each column."""
        return schema_kinds(self.table.schema)

    def structure(self) -> Self:
        """Describe the columns, one row for each column.

        >>> df = Dataframe.from_columns({"name": ["Alice"], "remote": [True]})
        >>> df.structure().to_arrow().to_pydict()
        {'index': [0, 1], 'column': ['name', 'remote'], 'kind': ['text', 'boolean']}
        """
        kinds = self.kinds()
        return self.__class__(
            pa.table(
                {
                    "index": pa.array(list(range(len(kinds))), type=pa.int64()),
                    "column": pa.array(list(kinds.keys()), type=pa.string()),
                    "kind": pa.array(
                        [kind.value for kind in kinds.values()], type=pa.string()
                    ),
                }
            )
        )

    def head(self, n: int = 5) -> Self:
        """The first ``n`` rows."""
        return self.__class__(self.table.slice(0, n))

    def tail(self, n: int = 5) -> Self:
        """The last ``n`` rows."""
        return self.__class__(self.table.slice(max(0, self.table.num_rows - n)))

    def take(self, indices: Sequence[int]) -> Self:
        """The rows at the given positions, in the given order."""
        return self.__class__(self.table.take(pa.array(indices, type=pa.int64())))

    def select(self, *names: str) -> Self:
        """Keep only the given columns, in the given order."""
        return self.__class__(self.table.select(list(names)))

    def filter(self, expression: pc.Expression) -> Self:
        """Keep only the rows matching the predicate.

        Predicates are built with :func:`pyarrow.compute.field`
        and can be combined with ``&``, ``|`` and ``~``::

            df.filter((pc.field("department") == "Engineering") & (pc.field("salary") > 60000))

        :param expression: The expression representing the predicate.
        """
        return self.__class__(self.table.filter(expression))

    def sort(self, *keys: str, descending: bool | Sequence[bool] = False) -> Self:
        """Sort the rows by one or more columns.

        >>> df = Dataframe.from_columns({"dept": ["HR", "Sales", "HR"], "salary": [50, 55, 52]})
        >>> df.sort("dept", "salary", descending=[False, True]).to_arrow()["salary"].to_pylist()
        [52, 50, 55]

        :param keys: The columns to sort by in the order they should be sorted.
        :param descending: If the columns should be sorted in a descending order,
                           either one flag for all the columns or one for each column.
        """
        if isinstance(descending, bool):
            descending = [descending] * len(keys)
        if len(keys) != len(descending):
            raise ValueError("Keys and descending must have the same length")

        sorting = [
            (key, "descending" if desc else "ascending")
            for key, desc in zip(keys, descending)
        ]
        return self.__class__(self.table.sort_by(sorting))

    def with_column(self, name: str, values: Iterable[Any] | pa.Array) -> Self:
        """Add a new column at the end of the Dataframe.

        :param name: The name of the new column, must not exist yet.
        :param values: One value for each row.
        """
        if name in self.table.column_names:
            raise ValueError(f"Column {name} already exists")
        if not isinstance(values, (pa.Array, pa.ChunkedArray)):
            values = pa.array(list(values))
        if len(values) != self.table.num_rows:
            raise ValueError(
                f"Column {name} has {len(values)} values, expected {self.table.num_rows}"
            )
        return self.__class__(self.table.append_column(name, values))

    def map_column(self, column: str, func: Callable[[Any], Any], name: str) -> Self:
        """Add a new column computed applying ``func`` to each value of ``column``.

        >>> df = Dataframe.from_columns({"years": [2, 5, 7]})
        >>> level = lambda years: "Junior" if years < 3 else "Mid" if years < 6 else "Senior"
        >>> df.map_column("years", level, "level").to_arrow()["level"].to_pylist()
        ['Junior', 'Mid', 'Senior']

        :param column: The column providing the values.
        :param func: The function to apply, receives one value at the time.
        :param name: The name of the new column.
        """
        values = [func(value) for value in self.table.column(column).to_pylist()]
        return self.with_column(name, values)

    def summarize(self, column: str, functions: Sequence[str], by: Sequence[str]) -> Self:
        """Group the rows and compute aggregations of a column for each group.

        The result has the grouping columns followed by one column
        for each function, named ``<column>_<function>``.
        Groups are sorted in the order they first appear.

        :param column: The column to aggregate.
        :param functions: The pyarrow aggregation functions,
                          like ``"mean"``, ``"sum"``, ``"count"``, ``"min"``, ``"max"``.
        :param by: The columns to group by.
        """
        keys = list(by)
        result = self.table.group_by(keys, use_threads=False).aggregate(
            [(column, function) for function in functions]
        )
        return self.__class__(
            result.select(keys + [f"{column}_{function}" for function in functions])
        )

    def count_by(self, *columns: str) -> Self:
        """Count the rows for each distinct combination of values of ``columns``."""
        keys = list(columns)
        result = self.table.group_by(keys, use_threads=False).aggregate(
            [([], "count_all")]
        )
        return self.__class__(
            result.select(keys + ["count_all"]).rename_columns(keys + ["count"])
        )

    def missing_counts(self) -> dict[str, int]:
        """How many values are missing in each column."""
        return {
            name: column.null_count
            for name, column in zip(self.table.column_names, self.table.columns)
        }

    def unique(self, column: str) -> list[Any]:
        """The distinct values of a column, in the order they first appear."""
        return pc.unique(self.table.column(column)).to_pylist()

    def describe(self) -> Self:
        """Summary statistics of the numeric columns.

        One row for each numeric column, with the count of values,
        the count of missing values, mean, standard deviation, min and max.
        """
        stats: dict[str, list[Any]] = {
            "column": [],
            "count": [],
            "missing": [],
            "mean": [],
            "std": [],
            "min": [],
            "max": [],
        }
        for name, kind in self.kinds().items():
            if not kind.is_numeric:
                continue
            column = self.table.column(name)
            stats["column"].append(name)
            stats["count"].append(pc.count(column).as_py())
            stats["missing"].append(column.null_count)
            stats["mean"].append(pc.mean(column).as_py())
            stats["std"].append(pc.stddev(column, ddof=1).as_py())
            stats["min"].append(_as_float(pc.min(column).as_py()))
            stats["max"].append(_as_float(pc.max(column).as_py()))
        return self.__class__(
            pa.table(
                {
                    "column": pa.array(stats["column"], type=pa.string()),
                    "count": pa.array(stats["count"], type=pa.int64()),
                    "missing": pa.array(stats["missing"], type=pa.int64()),
                    **{
                        stat: pa.array(stats[stat], type=pa.float64())
                        for stat in ("mean", "std", "min", "max")
                    },
                }
            )
        )

    def to_arrow(self) -> pa.Table:
        """The data of the Dataframe as a pyarrow.Table"""
        return self.table

    def to_matrix(
        self, policy: UnsupportedKindPolicy = UnsupportedKindPolicy.REJECT
    ) -> np.ndarray:
        """Convert the data to a numeric matrix.

        See :func:`databridge.bridge.table_to_matrix`.
        """
        return table_to_matrix(self.table, policy=policy)

    def to_vectors(
        self, policy: UnsupportedKindPolicy = UnsupportedKindPolicy.REJECT
    ) -> pd.DataFrame:
        """Convert the data to a set of labeled vectors.

        See :func:`databridge.bridge.table_to_vectors`.
        """
        return table_to_vectors(self.table, policy=policy)


def _as_float(value: Any) -> float | None:
    return None if value is None else float(value)
