"""Assembly of OSC messages from an address pattern and arbitrary user data.

The result is a transport-agnostic, human-readable representation in the
form ``ADDRESS_PATTERN TYPE_TAG_STRING ARGUMENTS``. Binary encoding of the
message is left to the consumer of the representation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from .errors import EmptyAddressError
from .flatten import flatten
from .logger import log as base_log
from .tags import DEFAULT_ALPHABET, TypeTagAlphabet, derive_type_tags
from .types import OSCAddress, ScalarKind, ValueTree, classify

__all__ = (
    "AUTO",
    "BooleanCoercion",
    "OSCMessage",
    "build_message",
    "format_message",
    "render_argument",
)

log = base_log.getChild("message")

#: Sentinel value for the type tags of a message, meaning that the type tags
#: should be derived from the data
AUTO = "auto"


class BooleanCoercion(Enum):
    """Conversions that may be applied to boolean values before they are
    tagged.
    """

    NONE = "none"
    """Booleans are kept as they are and tagged with ``T`` or ``F``."""

    INTEGER = "integer"
    """Booleans are converted to the integers 0 and 1."""

    DOUBLE = "double"
    """Booleans are converted to the floats 0.0 and 1.0."""

    @classmethod
    def from_string(cls, value: str) -> BooleanCoercion:
        """Returns the coercion mode corresponding to the given name.

        ``"logical"`` is accepted as an alias of ``"none"``.

        Raises:
            ValueError: if the name is not known
        """
        name = str(value).strip().lower()
        if name == "logical":
            name = "none"
        return cls(name)

    def apply(self, value: Any) -> Any:
        """Applies the coercion to a single value; non-boolean values are
        returned intact.
        """
        if self is BooleanCoercion.NONE or not isinstance(value, bool):
            return value
        elif self is BooleanCoercion.INTEGER:
            return int(value)
        else:
            return float(value)


@dataclass(frozen=True)
class OSCMessage:
    """Simple data class representing the textual form of an OSC message."""

    #: The OSC address pattern where the message will be sent to
    address: OSCAddress

    #: The OSC type tag string of the message; may be empty
    type_tags: str

    #: The rendered arguments of the message. Values tagged with ``T``,
    #: ``F`` or ``N`` carry no payload and have no token here
    arguments: Tuple[str, ...] = ()

    @property
    def argument_text(self) -> str:
        """The arguments of the message, separated by single spaces."""
        return " ".join(self.arguments)

    def __str__(self) -> str:
        # Trailing empty fields are omitted; an empty type tag string followed
        # by arguments keeps its slot so the fields stay positional
        if self.argument_text:
            return f"{self.address} {self.type_tags} {self.argument_text}"
        elif self.type_tags:
            return f"{self.address} {self.type_tags}"
        else:
            return self.address


def render_argument(value: Any) -> Optional[str]:
    """Renders a single scalar value as an OSC argument token.

    Returns:
        the textual form of the value, or ``None`` for booleans and null
        values since these are represented by their type tags alone

    Raises:
        UnsupportedScalarKindError: if the value has no type tag
    """
    kind = classify(value)
    if kind is ScalarKind.INTEGER:
        return str(int(value))
    elif kind is ScalarKind.DOUBLE:
        return repr(float(value))
    elif kind is ScalarKind.TEXT:
        return value
    elif kind is ScalarKind.BOOLEAN or kind is ScalarKind.NULL:
        return None
    else:
        raise AssertionError(f"Unhandled scalar kind: {kind!r}")


def build_message(
    address: OSCAddress = "/",
    data: ValueTree = None,
    type_tags: Optional[str] = AUTO,
    alphabet: TypeTagAlphabet = DEFAULT_ALPHABET,
    *,
    leading_comma: Optional[bool] = None,
    boolean_coercion: BooleanCoercion = BooleanCoercion.NONE,
) -> OSCMessage:
    """Builds an OSC message from an address pattern and arbitrary data.

    Parameters:
        address: the OSC address pattern. It is used verbatim; wildcards are
            neither validated nor interpreted.
        data: the arguments of the message; nested collections are flattened.
            ``None`` means that the message has no arguments.
        type_tags: explicit type tag string to use verbatim, or ``AUTO`` (or
            ``None``) to derive it from the data. Explicit type tags are not
            validated against the data; this allows tags like ``r`` or ``S``
            that have no scalar kind of their own.
        alphabet: the type tag alphabet to use when deriving the type tags
        leading_comma: whether derived type tags start with a comma; ``None``
            means to use the setting of the alphabet
        boolean_coercion: conversion to apply to boolean values before
            tagging and rendering them

    Returns:
        the assembled message

    Raises:
        EmptyAddressError: if the address pattern is empty
        UnsupportedScalarKindError: if the data contains a value with no
            OSC type tag
    """
    if not address or address.isspace():
        raise EmptyAddressError()

    values = [] if data is None else flatten(data)
    if boolean_coercion is not BooleanCoercion.NONE:
        values = [boolean_coercion.apply(value) for value in values]

    if type_tags is None or type_tags == AUTO:
        type_tags = derive_type_tags(values, alphabet, leading_comma)
    else:
        num_tags = len(type_tags[1:] if type_tags.startswith(",") else type_tags)
        if num_tags != len(values):
            log.debug(
                f"Type tag string {type_tags!r} has {num_tags} tag(s) for "
                f"{len(values)} value(s) sent to {address!r}"
            )

    tokens = (render_argument(value) for value in values)
    arguments = tuple(token for token in tokens if token is not None)

    return OSCMessage(address=address, type_tags=type_tags, arguments=arguments)


def format_message(*args, **kwds) -> str:
    """Builds an OSC message and returns its textual representation.

    Accepts the same arguments as `build_message()`.
    """
    return str(build_message(*args, **kwds))
