"""DataBridge

Moving data between the most common Python data libraries,
built for learning and teaching purposes.

A typical analysis touches data in three different shapes:

* A table of heterogeneous columns, as loaded from a CSV file,
  here represented by a :class:`pyarrow.Table`.
* A dense numeric matrix, suitable for linear algebra and
  numerical transformations, here a :class:`numpy.ndarray`.
* A set of labeled vectors, numeric or categorical, which is what
  most machine learning libraries expect as their input,
  here a :class:`pandas.DataFrame`.

The project is constituted by few components, each isolated within its own
package and each self documented in literate programming style.

The primary components are:

* The Bridge, in charge of converting data between the three shapes.
* The Dataframe API, which provides an high level API to load,
  inspect and transform tables before converting them.

For the user guide and code documentation of each component, refer to the
component itself.
"""

from . import bridge, dataframe

__all__ = ("bridge", "dataframe")
