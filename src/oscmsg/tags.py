"""Derivation of OSC type tag strings from scalar values."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional

from .errors import InvalidTypeTagError
from .flatten import iter_flattened
from .types import ScalarKind, ValueTree, classify

__all__ = ("DEFAULT_ALPHABET", "TypeTagAlphabet", "derive_type_tags", "tag_for")


@dataclass(frozen=True)
class TypeTagAlphabet:
    """Mapping from configurable scalar kinds to OSC type tags.

    Booleans are not configurable; they always map to ``T`` or ``F``.
    """

    integer: str = "i"
    """Tag for signed integers; 32-bit signed integer in OSC 1.0."""

    double: str = "d"
    """Tag for floating-point numbers; 64-bit IEEE 754 double in OSC 1.0.
    Use ``f`` for receivers that only understand 32-bit floats.
    """

    text: str = "s"
    """Tag for strings. Use ``S`` for receivers that distinguish symbols
    from strings.
    """

    null: str = "N"
    """Tag for null values."""

    leading_comma: bool = True
    """Whether the type tag string starts with a comma. Omitting the comma
    is non-standard; use it only if the consumer of the message expects so.
    """

    def __post_init__(self) -> None:
        for name in ("integer", "double", "text", "null"):
            tag = getattr(self, name)
            if not isinstance(tag, str) or len(tag) != 1 or tag.isspace():
                raise InvalidTypeTagError(
                    f"Type tag for {name} values must be a single "
                    f"non-whitespace character, got {tag!r}"
                )

    def replace(self, **changes: Any) -> TypeTagAlphabet:
        """Returns a copy of this alphabet with the given fields replaced."""
        return replace(self, **changes)


DEFAULT_ALPHABET = TypeTagAlphabet()
"""The default type tag alphabet (``i``, ``d``, ``s``, ``N``, with comma)."""


def tag_for(value: Any, alphabet: TypeTagAlphabet = DEFAULT_ALPHABET) -> str:
    """Returns the OSC type tag of a single scalar value.

    Raises:
        UnsupportedScalarKindError: if the value has no type tag
    """
    kind = classify(value)
    if kind is ScalarKind.BOOLEAN:
        return "T" if value else "F"
    elif kind is ScalarKind.INTEGER:
        return alphabet.integer
    elif kind is ScalarKind.DOUBLE:
        return alphabet.double
    elif kind is ScalarKind.TEXT:
        return alphabet.text
    elif kind is ScalarKind.NULL:
        return alphabet.null
    else:
        raise AssertionError(f"Unhandled scalar kind: {kind!r}")


def derive_type_tags(
    values: ValueTree,
    alphabet: TypeTagAlphabet = DEFAULT_ALPHABET,
    leading_comma: Optional[bool] = None,
) -> str:
    """Derives the OSC type tag string of the given values.

    The input is flattened first, so nested data may be passed directly.
    ``None`` as the entire input means "no data" and yields an empty string.

    Parameters:
        values: the scalar values to tag, or a value tree
        alphabet: the type tag alphabet to use
        leading_comma: whether to prepend a comma to the type tag string;
            ``None`` means to use the setting of the alphabet

    Returns:
        one tag per value, e.g. ``",iis"``. An empty input yields an empty
        string even if a leading comma was requested.

    Raises:
        UnsupportedScalarKindError: if one of the values has no type tag
    """
    if values is None:
        return ""

    tags = "".join(tag_for(value, alphabet) for value in iter_flattened(values))
    if not tags:
        return ""

    if leading_comma is None:
        leading_comma = alphabet.leading_comma

    return f",{tags}" if leading_comma else tags
