"""Unit tests for section compilers and item overrides."""

import copy

import pytest

from resumark.contexts.compilation.section_compilers import (
    SectionCompiler,
    SectionCompilerRegistry,
    apply_item_overrides,
    map_experience,
)


@pytest.fixture
def items():
    return [
        {"id": "a", "title": "Alpha"},
        {"id": "b", "title": "Beta"},
        {"id": "c", "title": "Gamma"},
    ]


@pytest.mark.unit
def test_no_overrides_keeps_items(items):
    """Test no overrides returns the items unchanged."""
    assert apply_item_overrides(items, []) == items
    assert apply_item_overrides(items, None) == items


@pytest.mark.unit
def test_hide_item_by_id(items):
    """Test visible false removes the matched item."""
    result = apply_item_overrides(items, [{"itemId": "b", "visible": False}])
    assert [item["id"] for item in result] == ["a", "c"]


@pytest.mark.unit
def test_match_by_index(items):
    """Test overrides without an itemId match by index."""
    result = apply_item_overrides(items, [{"index": 2, "title": "Third"}])
    assert result[2] == {"id": "c", "title": "Third"}


@pytest.mark.unit
def test_reorder_items(items):
    """Test order overrides re-sort items."""
    result = apply_item_overrides(items, [{"itemId": "c", "order": -1}, {"itemId": "a", "order": 5}])
    assert [item["id"] for item in result] == ["c", "b", "a"]


@pytest.mark.unit
def test_field_patch_leaves_other_fields(items):
    """Test field patches change only the named fields."""
    result = apply_item_overrides(items, [{"itemId": "a", "title": "Renamed", "highlight": True}])

    assert result[0] == {"id": "a", "title": "Renamed", "highlight": True}
    assert result[1] == items[1]


@pytest.mark.unit
def test_unmatched_overrides_are_ignored(items):
    """Test overrides matching nothing are ignored."""
    result = apply_item_overrides(items, [{"itemId": "zzz", "visible": False}, {"index": 10}, {"title": "?"}])
    assert result == items


@pytest.mark.unit
def test_overrides_do_not_mutate_inputs(items):
    """Test applying overrides leaves items and overrides untouched."""
    overrides = [{"itemId": "a", "title": "Renamed"}]
    items_snapshot = copy.deepcopy(items)
    overrides_snapshot = copy.deepcopy(overrides)

    apply_item_overrides(items, overrides)

    assert items == items_snapshot
    assert overrides == overrides_snapshot


@pytest.mark.unit
def test_map_experience_renames_fields():
    """Test experience records are mapped to section item fields."""
    item = map_experience(
        {
            "id": "exp-1",
            "position": "Engineer",
            "company": "Acme",
            "startDate": "2020-01-15T00:00:00.000Z",
            "endDate": None,
            "isCurrent": True,
        }
    )

    assert item["title"] == "Engineer"
    assert item["company"] == "Acme"
    assert item["dateRange"] == {"startDate": "2020-01-15", "endDate": None, "isCurrent": True}
    assert item["skills"] == []


@pytest.mark.unit
def test_placeholders_without_resume_data():
    """Test sections compile to placeholders when no resume data is given."""
    registry = SectionCompilerRegistry()

    assert registry.compile_section("experience", None) == {"type": "experience", "items": []}
    assert registry.compile_section("summary", None) == {"type": "summary", "data": {"content": ""}}
    assert registry.compile_section("hobbies", None) == {"type": "custom", "items": []}


@pytest.mark.unit
def test_compile_with_resume_data(resume_data):
    """Test sections compile from resume records."""
    registry = SectionCompilerRegistry()

    experience = registry.compile_section("experience", resume_data)
    summary = registry.compile_section("summary", resume_data)

    assert experience["type"] == "experience"
    assert [item["title"] for item in experience["items"]] == ["Senior Engineer", "Engineer"]
    assert summary == {"type": "summary", "data": {"content": resume_data["summary"]}}


@pytest.mark.unit
def test_aliases_and_missing_records(resume_data):
    """Test section aliases resolve and missing records give empty data."""
    registry = SectionCompilerRegistry()

    assert registry.compile_section("experiences", resume_data)["type"] == "experience"
    assert registry.compile_section("references", resume_data) == {"type": "references", "items": []}
    assert registry.compile_section("volunteer", resume_data) == {"type": "volunteer", "items": []}
    assert registry.compile_section("hobbies", resume_data) == {"type": "custom", "items": []}


@pytest.mark.unit
def test_register_custom_compiler(resume_data):
    """Test a registered compiler handles its section type."""
    registry = SectionCompilerRegistry()
    registry.register(
        "talks",
        SectionCompiler("talks", source_key="talks", map_item=lambda r: {"id": r["id"], "title": r["title"]}),
        "presentations",
    )

    payload = registry.compile_section("presentations", {**resume_data, "talks": [{"id": "t1", "title": "Streams"}]})

    assert registry.has("talks")
    assert payload == {"type": "talks", "items": [{"id": "t1", "title": "Streams"}]}
