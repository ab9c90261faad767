from __future__ import annotations

import dataclasses

import pytest

from pdf_compare.policy import DEFAULT_POLICY, IgnorePolicy


def test_default_policy_prefixes():
    assert DEFAULT_POLICY.array_prefixes == {"/ID", "<</ID"}
    assert "/CreationDate" in DEFAULT_POLICY.scalar_prefixes
    assert "<</Root" in DEFAULT_POLICY.scalar_prefixes
    assert "%" in DEFAULT_POLICY.scalar_prefixes
    assert len(DEFAULT_POLICY.scalar_prefixes) == 11


def test_none_entries_are_dropped():
    policy = IgnorePolicy(array_prefixes={"/ID", None}, scalar_prefixes=[None, "/Foo"])
    assert policy.array_prefixes == frozenset({"/ID"})
    assert policy.scalar_prefixes == frozenset({"/Foo"})


def test_none_sets_become_empty():
    policy = IgnorePolicy(array_prefixes=None, scalar_prefixes=None)
    assert policy.array_prefixes == frozenset()
    assert not policy.skips_scalar("/Foo 1", "/Foo 2")


def test_policy_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_POLICY.scalar_prefixes = frozenset()
    assert isinstance(DEFAULT_POLICY.scalar_prefixes, frozenset)


def test_skips_require_prefix_on_both_lines():
    assert DEFAULT_POLICY.skips_scalar("/Producer a", "/Producer b")
    assert not DEFAULT_POLICY.skips_scalar("/Producer a", "/Title b")
    assert DEFAULT_POLICY.skips_array("<</ID [<01>", "<</ID [<02>")
    assert not DEFAULT_POLICY.skips_array("/Producer a", "/Producer b")


def test_extended_leaves_original_untouched():
    policy = DEFAULT_POLICY.extended(array_prefixes=["/Kids"], scalar_prefixes=[None, "/ModDate"])
    assert "/Kids" in policy.array_prefixes
    assert "/ModDate" in policy.scalar_prefixes
    assert "/Kids" not in DEFAULT_POLICY.array_prefixes
    assert DEFAULT_POLICY.scalar_prefixes <= policy.scalar_prefixes
