"""Kinds of columns understood by the bridge.

Arrow supports a wide variety of data types, integers of
any width, floats, strings, dictionary encoded strings, dates,
timestamps with any unit and so on...

The bridge doesn't care about the width or unit of a type,
it only needs to know what *kind* of values a column holds
to decide how it should be converted. So each Arrow type
is reduced to one of the members of :class:`ColumnKind`.

>>> import pyarrow as pa
>>> column_kind(pa.field("n_legs", pa.int8()))
<ColumnKind.INTEGER: 'integer'>
>>> column_kind(pa.field("animal", pa.dictionary(pa.int32(), pa.string())))
<ColumnKind.TEXT: 'text'>

Types that don't map to any kind are rejected right away:

>>> column_kind(pa.field("tags", pa.list_(pa.string())))
Traceback (most recent call last):
    ...
databridge.bridge.errors.UnsupportedColumnKindError: Column 'tags' of kind 'list<item: string>' can't be converted to any known column kind
"""

import enum

import pyarrow as pa

from .errors import UnsupportedColumnKindError


class ColumnKind(enum.Enum):
    """The closed set of column kinds.

    Every conversion must declare how it handles each
    one of these, adding a new kind requires updating
    all the conversions.
    """

    FLOAT = "float"
    INTEGER = "integer"
    TEXT = "text"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"

    @property
    def is_numeric(self) -> bool:
        return self in (ColumnKind.FLOAT, ColumnKind.INTEGER)


def column_kind(field: pa.Field) -> ColumnKind:
    """Detect the kind of a column from its schema field.

    :param field: The :class:`pyarrow.Field` describing the column.
    """
    datatype = field.type
    if pa.types.is_dictionary(datatype):
        # Dictionary encoding is only a storage detail,
        # what matters is the type of the values.
        datatype = datatype.value_type

    if pa.types.is_floating(datatype):
        return ColumnKind.FLOAT
    elif pa.types.is_integer(datatype):
        return ColumnKind.INTEGER
    elif pa.types.is_string(datatype) or pa.types.is_large_string(datatype):
        return ColumnKind.TEXT
    elif pa.types.is_boolean(datatype):
        return ColumnKind.BOOLEAN
    elif pa.types.is_date(datatype):
        return ColumnKind.DATE
    elif pa.types.is_timestamp(datatype):
        return ColumnKind.DATETIME
    raise UnsupportedColumnKindError(field.name, str(field.type), "any known column kind")


def schema_kinds(schema: pa.Schema) -> dict[str, ColumnKind]:
    """Detect the kind of each column of a schema.

    >>> import pyarrow as pa
    >>> kinds = schema_kinds(pa.schema([("a", pa.float32()), ("b", pa.bool_())]))
    >>> [kind.value for kind in kinds.values()]
    ['float', 'boolean']
    """
    return {field.name: column_kind(field) for field in schema}
