from copy import deepcopy
from pytest import mark

from oscmsg.flatten import flatten, iter_flattened
from oscmsg.types import is_collection


NESTED = [[[3, 4], "apple"], True, [[5.1, "sphere"], None]]


@mark.parametrize(
    ("input", "output"),
    [
        (7, [7]),
        ("foo", ["foo"]),
        (None, [None]),
        ([], []),
        ((), []),
        ([[], [[]]], []),
        ([7, 8, 9], [7, 8, 9]),
        (["foo", "gorp"], ["foo", "gorp"]),
        ([[[[1, 2, 3, 4, 5]]]], [1, 2, 3, 4, 5]),
        ([[1, 2], "x"], [1, 2, "x"]),
        ([None, [None]], [None, None]),
        (NESTED, [3, 4, "apple", True, 5.1, "sphere", None]),
        (range(3), [0, 1, 2]),
        ((1, (2.5, ("a",))), [1, 2.5, "a"]),
    ],
)
def test_flatten(input, output):
    assert flatten(input) == output


def test_flatten_drops_mapping_keys():
    data = {"position": [1.0, 2.0, 3.0], "name": "uav", "active": True}
    assert flatten(data) == [1.0, 2.0, 3.0, "uav", True]
    assert flatten([{"a": 1}, {"b": [2, {"c": 3}]}]) == [1, 2, 3]


def test_flatten_keeps_strings_and_bytes_atomic():
    assert flatten(["hello", b"world"]) == ["hello", b"world"]
    assert flatten([bytearray(b"ab")]) == [bytearray(b"ab")]


def test_flatten_passes_through_unknown_values():
    marker = object()
    assert flatten([1, [marker]]) == [1, marker]
    assert flatten([1 + 2j]) == [1 + 2j]


def test_flatten_is_idempotent():
    flat = flatten(NESTED)
    assert flatten(flat) == flat
    assert flatten([flat]) == flat


def test_flatten_result_contains_no_collections():
    data = [[(1, 2), {"x": ["y", [None, []]]}], range(2), "z", [[[False]]]]
    result = flatten(data)
    assert result == [1, 2, "y", None, 0, 1, "z", False]
    assert not any(is_collection(item) for item in result)


def test_flatten_preserves_concatenation_order():
    a, b, c = [1, [2]], "b", [[3.5], [None, True]]
    assert flatten([a, b, c]) == flatten(a) + flatten(b) + flatten(c)


def test_flatten_does_not_modify_input():
    data = deepcopy(NESTED)
    flatten(data)
    assert data == NESTED


def test_flatten_deeply_nested_input():
    tree = ["bottom"]
    for index in range(20000):
        tree = [index, tree] if index % 2 else [tree]
    result = flatten(tree)
    assert len(result) == 10001
    assert result[-1] == "bottom"
    assert result[:3] == [19999, 19997, 19995]


def test_iter_flattened_is_lazy():
    it = iter_flattened([1, [2, [3]]])
    assert next(it) == 1
    assert list(it) == [2, 3]


def test_flatten_skips_self_references():
    data = [1]
    data.append(data)
    assert flatten(data) == [1]

    outer = [1, {"inner": ["x"]}]
    outer[1]["inner"].append(outer)
    outer.append(2)
    assert flatten(outer) == [1, "x", 2]


def test_flatten_repeats_shared_references():
    shared = [1, None]
    assert flatten([shared, [shared], "z"]) == [1, None, 1, None, "z"]
