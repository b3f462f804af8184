"""Flattening of arbitrarily nested user data into a single sequence of
scalar values that can be tagged and rendered as OSC arguments.
"""

from collections.abc import Mapping
from typing import Any, Iterator, List, Optional, Set, Tuple

from .types import ValueTree, is_collection

__all__ = ("flatten", "iter_flattened")


def iter_flattened(tree: ValueTree) -> Iterator[Any]:
    """Yields the atomic values of the given value tree in depth-first,
    left-to-right order.

    Lists, tuples and other non-string sequences are descended into; mappings
    contribute their values and their keys are dropped. Empty collections
    contribute nothing, an explicit ``None`` contributes a single ``None``.
    Values that are not collections are yielded as-is, even if they have no
    OSC type tag; rejecting them is up to the consumer.

    The traversal uses an explicit stack so arbitrarily deep nesting does not
    hit the recursion limit of the interpreter. A collection that contains
    itself, directly or indirectly, contributes nothing at the point where it
    recurs; the same collection appearing more than once without a cycle is
    flattened each time.

    Parameters:
        tree: the value tree to flatten. It is not modified.
    """
    # Entries are (item, None) for values to visit and (None, id) for markers
    # that take a collection off the current descent path
    stack: List[Tuple[Any, Optional[int]]] = [(tree, None)]
    on_path: Set[int] = set()
    while stack:
        item, leaving = stack.pop()
        if leaving is not None:
            on_path.discard(leaving)
        elif is_collection(item):
            key = id(item)
            if key in on_path:
                continue

            on_path.add(key)
            stack.append((None, key))

            children = item.values() if isinstance(item, Mapping) else item
            # Pushed in reverse so the leftmost child is popped first
            stack.extend((child, None) for child in reversed(list(children)))
        else:
            yield item


def flatten(tree: ValueTree) -> List[Any]:
    """Flattens the given value tree into a list of atomic values.

    Parameters:
        tree: the value tree to flatten

    Returns:
        the atomic values of the tree in pre-order, e.g. ``[1, 2, "x"]`` for
        ``[[1, 2], "x"]``
    """
    return list(iter_flattened(tree))
