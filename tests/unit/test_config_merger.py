"""Unit tests for theme/customization merging."""

import copy

import pytest

from resumark.contexts.theming import UNSET, merge_dsl


@pytest.fixture
def base():
    return {
        "version": "1.1.0",
        "layout": {"type": "two-column", "margins": "normal", "columnDistribution": "70-30"},
        "tokens": {"colors": {"colors": {"primary": "#3B82F6", "text": {"primary": "#111111"}}}},
        "sections": [{"id": "experience", "visible": True, "order": 0, "column": "main"}],
    }


@pytest.mark.unit
def test_empty_overrides_is_identity(base):
    """Test empty overrides return an equal copy of base."""
    assert merge_dsl(base, {}) == base


@pytest.mark.unit
def test_nested_objects_merge(base):
    """Test nested mappings merge leaf by leaf."""
    merged = merge_dsl(base, {"layout": {"margins": "wide"}, "tokens": {"colors": {"colors": {"primary": "#000000"}}}})

    assert merged["layout"] == {"type": "two-column", "margins": "wide", "columnDistribution": "70-30"}
    assert merged["tokens"]["colors"]["colors"] == {"primary": "#000000", "text": {"primary": "#111111"}}


@pytest.mark.unit
def test_arrays_are_replaced(base):
    """Test arrays in overrides replace base arrays wholesale."""
    merged = merge_dsl(base, {"sections": []})
    assert merged["sections"] == []


@pytest.mark.unit
def test_none_replaces_and_unset_skips(base):
    """Test None replaces a base value while UNSET leaves it alone."""
    merged = merge_dsl(base, {"layout": {"margins": None, "type": UNSET}})

    assert merged["layout"]["margins"] is None
    assert merged["layout"]["type"] == "two-column"


@pytest.mark.unit
def test_scalar_replaces_object(base):
    """Test a scalar override replaces a mapping."""
    assert merge_dsl(base, {"layout": "compact"})["layout"] == "compact"


@pytest.mark.unit
def test_new_keys_are_added(base):
    """Test keys only in overrides are added."""
    merged = merge_dsl(base, {"itemOverrides": {"experience": [{"itemId": "x", "visible": False}]}})
    assert merged["itemOverrides"]["experience"][0]["itemId"] == "x"


@pytest.mark.unit
def test_merge_is_idempotent(base):
    """Test merging the same overrides twice changes nothing."""
    overrides = {"layout": {"margins": "wide"}, "sections": []}

    once = merge_dsl(base, overrides)

    assert merge_dsl(once, overrides) == once


@pytest.mark.unit
def test_inputs_are_not_mutated_or_shared(base):
    """Test inputs are untouched and share no containers with the result."""
    overrides = {"layout": {"margins": "wide"}, "sections": [{"id": "skills"}]}
    base_snapshot = copy.deepcopy(base)
    overrides_snapshot = copy.deepcopy(overrides)

    merged = merge_dsl(base, overrides)
    merged["layout"]["type"] = "magazine"
    merged["sections"][0]["id"] = "changed"
    merged["tokens"]["colors"]["colors"]["primary"] = "#FFFFFF"

    assert base == base_snapshot
    assert overrides == overrides_snapshot


@pytest.mark.unit
def test_unset_is_a_singleton():
    """Test UNSET is a singleton."""
    assert type(UNSET)() is UNSET
    assert repr(UNSET) == "UNSET"
    assert not UNSET


@pytest.mark.unit
def test_unset_dropped_when_base_has_no_mapping():
    """Test UNSET inside an override subtree never reaches the result when base lacks the key."""
    merged = merge_dsl({"version": "1.1.0"}, {"layout": {"type": UNSET, "margins": "wide"}})

    assert merged == {"version": "1.1.0", "layout": {"margins": "wide"}}


@pytest.mark.unit
def test_unset_dropped_when_replacing_scalar_and_inside_arrays(base):
    """Test UNSET is stripped from replacing subtrees, including mappings inside arrays."""
    merged = merge_dsl(
        {**base, "layout": "compact"},
        {
            "layout": {"type": "magazine", "paperSize": UNSET},
            "sections": [{"id": "skills", "column": UNSET}, UNSET],
        },
    )

    assert merged["layout"] == {"type": "magazine"}
    assert merged["sections"] == [{"id": "skills"}]
