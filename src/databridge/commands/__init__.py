"""Shell commands exposing DataBridge functionalities.

This module contains the shell commands that can be used to interact with DataBridge.

Inspect
=======

``bridge-inspect`` loads a CSV file, describes its content and optionally
converts it to a numeric matrix or to labeled vectors::

    bridge-inspect iris_sample.csv --to vectors

Columns that can't be converted are reported, booleans and dates
can be coerced to numbers with ``--coerce``::

    bridge-inspect employees.csv --to matrix --coerce --standardize

EnvCheck
========

``bridge-envcheck`` verifies that pyarrow, numpy and pandas are installed
and working, which is the first thing to check when setting up
a new environment::

    bridge-envcheck
"""
