"""Verify that the libraries DataBridge relies on are working.

Each check exercises one of the libraries with a small
computation, so that a broken installation (for example
a numpy built against the wrong BLAS) is detected before
running any real analysis.
"""

import logging
import platform
import sys
from typing import Callable

import numpy as np
import pandas as pd
import pyarrow as pa
import pyarrow.compute as pc

from databridge.bridge import matrix_to_vectors, table_to_matrix

logger = logging.getLogger(__name__)


def check_system() -> str:
    return f"Python {platform.python_version()} on {platform.system()} {platform.machine()}"


def check_pyarrow() -> str:
    table = pa.table({"feature1": [1.1, 2.2, 3.3], "feature2": [4.4, 5.5, 6.6]})
    mean = pc.mean(table["feature1"]).as_py()
    return f"pyarrow {pa.__version__}, table {table.num_rows}x{table.num_columns}, mean of feature1 {mean:.2f}"


def check_numpy() -> str:
    array = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    product = array @ array.T
    normalized = array / array.max()
    if normalized.max() != 1.0:
        raise ValueError("Normalization produced unexpected values")
    return f"numpy {np.__version__}, matrix product shape {product.shape}"


def check_pandas() -> str:
    df = pd.DataFrame([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    return f"pandas {pd.__version__}, dataframe shape {df.shape}"


def check_bridge() -> str:
    table = pa.table({"x1": [1.0, 2.0], "x2": [3, 4]})
    vectors = matrix_to_vectors(table_to_matrix(table), table.column_names)
    return f"bridge round trip shape {vectors.shape}"


CHECKS: list[tuple[str, Callable[[], str]]] = [
    ("System", check_system),
    ("PyArrow", check_pyarrow),
    ("NumPy", check_numpy),
    ("Pandas", check_pandas),
    ("Bridge", check_bridge),
]


def run_checks() -> bool:
    """Run all the checks, printing the outcome of each one."""
    all_passed = True
    for idx, (name, check) in enumerate(CHECKS, start=1):
        print(f"[{idx}] {name}:")
        try:
            print(f"    OK {check()}")
        except Exception as e:
            logger.debug("Check %s failed", name, exc_info=True)
            print(f"    FAILED {e}")
            all_passed = False
    return all_passed


def main() -> None:
    logging.basicConfig(level=logging.WARNING)
    print("=" * 60)
    print("DataBridge Environment Check")
    print("=" * 60)
    passed = run_checks()
    print("=" * 60)
    print("All checks passed" if passed else "Some checks failed")
    print("=" * 60)
    sys.exit(0 if passed else 1)


if __name__ == "__main__":
    main()
