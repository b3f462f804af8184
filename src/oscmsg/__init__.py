"""Builds textual representations of Open Sound Control messages from
arbitrarily nested data.
"""

from .errors import (
    EmptyAddressError,
    InvalidTypeTagError,
    OSCMessageError,
    UnsupportedScalarKindError,
)
from .flatten import flatten, iter_flattened
from .message import (
    AUTO,
    BooleanCoercion,
    OSCMessage,
    build_message,
    format_message,
    render_argument,
)
from .tags import DEFAULT_ALPHABET, TypeTagAlphabet, derive_type_tags, tag_for
from .types import ScalarKind, classify
from .version import __version__

__all__ = (
    "AUTO",
    "BooleanCoercion",
    "DEFAULT_ALPHABET",
    "EmptyAddressError",
    "InvalidTypeTagError",
    "OSCMessage",
    "OSCMessageError",
    "ScalarKind",
    "TypeTagAlphabet",
    "UnsupportedScalarKindError",
    "__version__",
    "build_message",
    "classify",
    "derive_type_tags",
    "flatten",
    "format_message",
    "iter_flattened",
    "render_argument",
    "tag_for",
)
