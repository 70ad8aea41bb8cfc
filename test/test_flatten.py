import pytest

from docgate.core.errors import InvalidRequest
from docgate.core.update import build_set_instruction, flatten, unflatten


def test_nested_objects_are_flattened_and_arrays_are_leaves():
    assert flatten({"a": {"b": 1, "c": [1, 2]}, "d": "x"}) == {
        "a.b": 1,
        "a.c": [1, 2],
        "d": "x",
    }


def test_flat_object_is_unchanged():
    flat = {"name": "Ada", "age": 36, "tags": ["x"], "note": None}
    assert flatten(flat) == flat


def test_arrays_of_objects_are_not_traversed():
    payload = {"items": [{"sku": "a"}, {"sku": "b"}]}
    assert flatten(payload) == {"items": [{"sku": "a"}, {"sku": "b"}]}


def test_null_and_empty_objects():
    assert flatten({"a": None}) == {"a": None}
    assert flatten({"a": {}, "b": 1}) == {"b": 1}


def test_deep_nesting_builds_full_paths():
    assert flatten({"a": {"b": {"c": {"d": True}}}}) == {"a.b.c.d": True}


def test_prefix_is_applied_to_every_path():
    assert flatten({"x": 1, "y": {"z": 2}}, "root") == {"root.x": 1, "root.y.z": 2}


def test_no_flattened_key_prefixes_another():
    flat = flatten({"a": {"b": 1, "c": {"d": 2}}, "e": [{"f": 3}]})
    keys = list(flat)
    for key in keys:
        assert not any(other.startswith(key + ".") for other in keys if other != key)


@pytest.mark.parametrize(
    "tree",
    [
        {"a": {"b": 1, "c": [1, 2]}, "d": "x"},
        {"profile": {"address": {"city": "Oslo", "zip": "0150"}}, "active": False},
        {"flat": 1},
    ],
)
def test_unflatten_restores_the_tree(tree):
    assert unflatten(flatten(tree)) == tree


def test_set_instruction_drops_identifier():
    assert build_set_instruction({"_id": "u1", "name": "Ada", "meta": {"v": 2}}) == {
        "name": "Ada",
        "meta.v": 2,
    }


@pytest.mark.parametrize("payload", [None, [1, 2], "text", {}, {"_id": "u1"}, {"a": {}}])
def test_set_instruction_rejects_unusable_payloads(payload):
    with pytest.raises(InvalidRequest):
        build_set_instruction(payload)
