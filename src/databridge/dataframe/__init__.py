"""Dataframe library built on top of pyarrow.

A dataframe library is a tool designed to handle and manipulate structured data,
typically in the form of tables (i.e., rows and columns).
It allows users to load data from various sources (like CSV files or databases),
explore it, apply transformations, and analyze it.

Before data can be converted to a numeric matrix or to labeled vectors
for a model, it usually has to be loaded, inspected and cleaned.
The :class:`Dataframe` provides the operations needed for that:

* Selecting columns and rows (``select``, ``head``, ``tail``, ``take``)
* Filtering rows with predicates (``filter``)
* Sorting (``sort``)
* Deriving new columns (``with_column``, ``map_column``)
* Grouping and aggregating (``summarize``, ``count_by``)
* Inspecting the data (``structure``, ``describe``, ``missing_counts``, ``unique``)

Each one of them is a thin layer over the equivalent pyarrow
functionality, the Dataframe only takes care of offering them
through a consistent interface and of converting the result
with :mod:`databridge.bridge` when requested.
"""

from .dataframe import Dataframe
from .datasources import CSVOptions, read_csv, write_csv

__all__ = ("Dataframe", "CSVOptions", "read_csv", "write_csv")
