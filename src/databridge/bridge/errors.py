"""Errors raised by the bridge.

Conversions validate their input before producing any output,
when the input can't be converted they raise one of the
errors in this module and no result is returned at all.

All of them inherit from :class:`ConversionError`, so callers
that don't care about the reason can catch only that one.
"""

from typing import Any, Sequence


class ConversionError(Exception):
    """Base class for all errors raised by a conversion."""


class UnsupportedColumnKindError(ConversionError):
    """A column has a kind that the requested conversion can't represent.

    For example a text column can't be converted to a numeric matrix
    and a boolean column is rejected unless coercion was requested.
    """

    def __init__(self, column: str, kind: Any, target: str) -> None:
        """
        :param column: The name of the column that was rejected.
        :param kind: The :class:`ColumnKind` of the column, or the
                     original data type when it has no known kind.
        :param target: Name of the representation being built.
        """
        self.column = column
        self.kind = kind
        self.target = target
        kind_name = getattr(kind, "value", kind)
        super().__init__(
            f"Column '{column}' of kind '{kind_name}' can't be converted to {target}"
        )


class ShapeMismatchError(ConversionError):
    """The shape of the data doesn't match what was provided alongside it.

    Typically raised when the column names provided for a matrix
    are more or less than the columns of the matrix.
    """

    def __init__(
        self, message: str, expected: int | None = None, actual: int | None = None
    ) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class DuplicateColumnError(ConversionError):
    """The same column name appears more than once."""

    def __init__(self, names: Sequence[str]) -> None:
        """
        :param names: The names that appear more than once.
        """
        self.names = list(names)
        super().__init__(f"Duplicate column names: {', '.join(self.names)}")
