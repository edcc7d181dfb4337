from __future__ import annotations

"""
Unit tests for Translation Tree Operations.

Verifies flattening, navigation, in-place pruning and the alignment of a
secondary locale to the primary locale's shape.
"""

import copy
import logging

import pytest

from localesweep.core.locale.tree import (
    align_to_template,
    delete_path,
    flatten_keys,
    prune_tree,
    resolve_path,
)

TREE = {
    "common": {"save": "Save", "cancel": "Cancel"},
    "guests": {"list": {"title": "Guests", "empty": "None"}},
    "date": {"months": ["Jan", "Feb"]},
    "version": 2,
}


def test_flatten_depth_first_insertion_order():
    """TC-01: Paths are listed depth-first in insertion order."""
    assert flatten_keys(TREE) == [
        "common.save",
        "common.cancel",
        "guests.list.title",
        "guests.list.empty",
        "date.months",
        "version",
    ]


def test_flatten_empty_tree():
    """TC-02: An empty tree has an empty key space."""
    assert flatten_keys({}) == []


def test_flatten_treats_arrays_and_empty_mappings_as_shapes():
    """TC-03: Arrays are leaves; an empty mapping has no leaves at all."""
    assert flatten_keys({"a": [], "b": {}}) == ["a"]


def test_every_flattened_path_resolves_to_a_leaf():
    """TC-04: Every flattened path navigates back to a leaf."""
    for path in flatten_keys(TREE):
        node = resolve_path(TREE, path)
        assert node is not None
        assert not isinstance(node, dict)


def test_resolve_path_missing():
    """TC-05: Missing or over-long paths resolve to None."""
    assert resolve_path(TREE, "common.nope") is None
    assert resolve_path(TREE, "common.save.length") is None


def test_delete_path_removes_leaf_only():
    """TC-06: Deleting a leaf keeps its siblings."""
    tree = copy.deepcopy(TREE)

    assert delete_path(tree, "guests.list.empty") is True
    assert tree["guests"]["list"] == {"title": "Guests"}


def test_delete_path_through_leaf_is_skipped_without_mutation(caplog):
    """TC-07: A path that runs through a string is a shape mismatch: skip and warn."""
    tree = copy.deepcopy(TREE)

    with caplog.at_level(logging.WARNING):
        assert delete_path(tree, "common.save.length") is False

    assert tree == TREE
    assert "not a mapping" in caplog.text


def test_delete_path_missing_branch_is_skipped():
    """TC-08: Absent branches or leaves are skipped silently."""
    tree = copy.deepcopy(TREE)

    assert delete_path(tree, "nav.home") is False
    assert delete_path(tree, "common.unknown") is False
    assert tree == TREE


def test_prune_tree_is_idempotent():
    """TC-09: Re-applying the same prune changes nothing."""
    tree = copy.deepcopy(TREE)
    unused = ["common.cancel", "guests.list.empty"]

    removed, skipped = prune_tree(tree, unused)
    snapshot = copy.deepcopy(tree)
    removed_again, skipped_again = prune_tree(tree, unused)

    assert (removed, skipped) == (2, [])
    assert (removed_again, skipped_again) == (0, unused)
    assert tree == snapshot


def test_prune_keeps_emptied_parent_mapping():
    """TC-10: A parent emptied by pruning stays as an empty mapping."""
    tree = {"a": {"x": "1"}}
    prune_tree(tree, ["a.x"])

    assert tree == {"a": {}}


def test_align_drops_extras_and_backfills_missing():
    """TC-11: Alignment drops extra keys and backfills missing ones."""
    template = {"a": {"x": "hi", "y": "bye"}, "b": "plain"}
    target = {"a": {"x": "hola", "z": "extra"}, "c": "solo"}

    aligned = align_to_template(target, template)

    assert aligned == {"a": {"x": "hola", "y": "bye"}, "b": "plain"}


def test_align_falls_back_when_kinds_differ():
    """TC-12: A value of the wrong kind is replaced by the template value."""
    template = {"months": ["Jan"], "nested": {"k": "v"}, "leaf": "text"}
    target = {"months": "Enero", "nested": "flat", "leaf": {"oops": "x"}}

    aligned = align_to_template(target, template)

    assert aligned == {"months": ["Jan"], "nested": {"k": "v"}, "leaf": "text"}


def test_align_keeps_translated_arrays():
    """TC-13: A translated array is kept whatever its length."""
    aligned = align_to_template({"months": ["Ene"]}, {"months": ["Jan", "Feb"]})

    assert aligned == {"months": ["Ene"]}


def test_align_does_not_modify_inputs():
    """TC-14: Alignment builds a new tree."""
    template = {"a": {"x": "hi"}}
    target = {"a": {"x": "hola", "z": "extra"}}
    before = copy.deepcopy(target)

    align_to_template(target, template)

    assert target == before


@pytest.mark.parametrize(
    "template, target",
    [
        ({"a": {"b": {"c": "x"}}, "l": ["1"]}, {}),
        ({"a": {"b": "x"}}, {"a": "flat"}),
        ({"a": ["x"], "b": {"c": "y"}}, {"a": {"nested": "z"}, "b": ["w"]}),
    ],
)
def test_aligned_paths_match_template_kinds(template, target):
    """TC-15: Aligned paths and value kinds match the template exactly."""
    aligned = align_to_template(target, template)

    assert flatten_keys(aligned) == flatten_keys(template)
    for path in flatten_keys(template):
        assert type(resolve_path(aligned, path)) is type(resolve_path(template, path))


def test_concrete_prune_and_align_scenario():
    """TC-16: Pruning a.y then aligning drops a.z from the secondary tree."""
    primary = {"a": {"x": "hi", "y": "bye"}}
    secondary = {"a": {"x": "hola", "z": "extra"}}

    prune_tree(primary, ["a.y"])
    aligned = align_to_template(secondary, primary)

    assert primary == {"a": {"x": "hi"}}
    assert aligned == {"a": {"x": "hola"}}
