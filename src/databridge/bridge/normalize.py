"""Numerical transformations applied to matrices.

Numeric matrices are the representation where numerical
transformations happen before the data is labeled again
for a model. The most common one is standardization,
which moves every column to have zero mean and unit
standard deviation::

    normalized = (matrix - matrix.mean(axis=0)) / matrix.std(axis=0)

The work is entirely done by numpy, this module only takes
care of the corner cases: empty matrices and constant columns.
"""

import logging
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)


def standardize(matrix: Any, *, ddof: int = 1) -> np.ndarray:
    """Subtract the mean of each column and divide by its standard deviation.

    Columns with a standard deviation of zero are only centered,
    as there is no spread of values to scale.

    >>> standardize([[1.0, 5.0], [3.0, 5.0]]).tolist()
    [[-0.7071067811865475, 0.0], [0.7071067811865475, 0.0]]

    :param matrix: Any 2-D array-like of numbers, it's never modified.
    :param ddof: Delta degrees of freedom of the standard deviation,
                 the default computes the sample standard deviation.
    """
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.ndim != 2:
        raise ValueError(f"Expected a 2-D matrix, got {matrix.ndim} dimensions")

    num_rows = matrix.shape[0]
    if num_rows == 0:
        return matrix.copy()
    if num_rows <= ddof:
        raise ValueError(
            f"Can't compute standard deviation with ddof={ddof} over {num_rows} rows"
        )

    mean = matrix.mean(axis=0)
    std = matrix.std(axis=0, ddof=ddof)
    constant = std == 0
    if constant.any():
        logger.debug(
            "Columns %s are constant, only centering them",
            np.flatnonzero(constant).tolist(),
        )
        std = np.where(constant, 1.0, std)
    return (matrix - mean) / std
