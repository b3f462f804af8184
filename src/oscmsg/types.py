from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Union

from .errors import UnsupportedScalarKindError

__all__ = (
    "OSCAddress",
    "OSCScalar",
    "ScalarKind",
    "ValueTree",
    "classify",
    "is_collection",
)

#: Type alias for OSC address patterns
OSCAddress = str

#: Type specification for atomic values that may appear in an OSC message
OSCScalar = Union[bool, int, float, str, None]

#: Type specification for the (arbitrarily nested) input of the message builder
ValueTree = Union[OSCScalar, Sequence["ValueTree"], Mapping[Any, "ValueTree"]]


class ScalarKind(Enum):
    """The closed set of scalar kinds that have an OSC type tag."""

    INTEGER = "integer"
    DOUBLE = "double"
    TEXT = "text"
    BOOLEAN = "boolean"
    NULL = "null"


def classify(value: Any) -> ScalarKind:
    """Returns the scalar kind of the given atomic value.

    Raises:
        UnsupportedScalarKindError: if the value is not one of the supported
            scalar types
    """
    # bool must be checked before int because it is a subclass of int
    if isinstance(value, bool):
        return ScalarKind.BOOLEAN
    elif value is None:
        return ScalarKind.NULL
    elif isinstance(value, int):
        return ScalarKind.INTEGER
    elif isinstance(value, float):
        return ScalarKind.DOUBLE
    elif isinstance(value, str):
        return ScalarKind.TEXT
    else:
        raise UnsupportedScalarKindError(value)


def is_collection(value: Any) -> bool:
    """Returns whether the given value is a collection that the flattener
    should descend into.

    Strings and byte sequences are atomic even though they are sequences.
    """
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, (Sequence, Mapping))
