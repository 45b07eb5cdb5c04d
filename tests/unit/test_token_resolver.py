"""Unit tests for design token resolution."""

import pytest

from resumark.contexts.compilation import token_tables as tables
from resumark.contexts.compilation.token_resolver import (
    _round_px,
    resolve,
    resolve_heading_style,
)
from resumark.contexts.schema import DesignTokens


def _tokens(**sections):
    return DesignTokens.model_validate(sections)


@pytest.mark.unit
def test_resolve_modern_tokens(modern_dsl):
    """Test the Modern tokens resolve to concrete values."""
    resolved = resolve(DesignTokens.model_validate(modern_dsl["tokens"]))

    assert resolved.typography.heading_font_family == tables.FONT_FAMILIES["inter"]
    assert resolved.typography.base_font_size_px == 16
    assert resolved.typography.heading_font_size_px == 22
    assert resolved.typography.line_height == 1.5
    assert resolved.typography.body_font_weight == 400
    assert resolved.colors.primary == "#3B82F6"
    assert resolved.colors.text_primary == "#0F172A"
    assert resolved.spacing.section_gap_px == 24
    assert resolved.spacing.item_gap_px == 16
    assert resolved.effects.border_radius_px == 8
    assert resolved.effects.box_shadow == tables.SHADOWS["subtle"]


@pytest.mark.unit
def test_missing_tokens_resolve_to_fallbacks():
    """Test the resolver is total: nothing given, every fallback used."""
    resolved = resolve(None)

    assert resolved.typography.body_font_family == tables.DEFAULT_FONT_FAMILY
    assert resolved.typography.base_font_size_px == 16
    assert resolved.typography.heading_font_weight == 700
    assert resolved.typography.heading_border_bottom is None
    assert resolved.colors.primary is None
    assert resolved.spacing.section_gap_px == 24
    assert resolved.spacing.item_gap_px == 16
    assert resolved.spacing.content_padding_px == 16
    assert resolved.spacing.density_factor == 1
    assert resolved.effects.border_radius_px == 8
    assert resolved.effects.box_shadow == "none"


@pytest.mark.unit
def test_unknown_values_fall_back():
    """Test unknown token values fall back to defaults."""
    resolved = resolve(
        _tokens(
            typography={"fontFamily": {"heading": "comic-sans"}, "fontSize": "huge", "headingStyle": "fancy"},
            colors={"borderRadius": "blob", "shadows": "neon"},
            spacing={"density": "cramped", "sectionGap": "xxl"},
        )
    )

    assert resolved.typography.heading_font_family == tables.DEFAULT_FONT_FAMILY
    assert resolved.typography.base_font_size_px == 16
    assert resolved.typography.heading_font_weight == 700
    assert resolved.typography.heading_text_transform == "none"
    assert resolved.effects.border_radius_px == 8
    assert resolved.effects.box_shadow == "none"
    assert resolved.spacing.density_factor == 1
    assert resolved.spacing.section_gap_px == 24


@pytest.mark.unit
@pytest.mark.parametrize(
    "density, size, expected",
    [
        ("compact", "sm", 9),
        ("comfortable", "md", 16),
        ("spacious", "md", 20),
        ("relaxed", "xs", 12),
        ("relaxed", "xl", 48),
    ],
)
def test_density_scales_spacing(density, size, expected):
    """Test density scales spacing sizes."""
    resolved = resolve(_tokens(spacing={"density": density, "itemGap": size}))
    assert resolved.spacing.item_gap_px == expected


@pytest.mark.unit
def test_round_px_rounds_half_up():
    """Test pixel rounding goes half up."""
    assert _round_px(2.5) == 3
    assert _round_px(3.5) == 4
    assert _round_px(9.49) == 9


@pytest.mark.unit
@pytest.mark.parametrize(
    "style, weight, transform, bottom, left, padding",
    [
        ("bold", 700, "none", None, None, 0),
        ("underline", 600, "none", "2px solid #FF0000", None, 0),
        ("uppercase", 600, "uppercase", None, None, 0),
        ("accent-border", 700, "none", None, "4px solid #FF0000", 12),
        ("minimal", 500, "none", None, None, 0),
        (None, 700, "none", None, None, 0),
    ],
)
def test_heading_styles(style, weight, transform, bottom, left, padding):
    """Test each heading style resolves its decoration."""
    heading = resolve_heading_style(style, "#FF0000")

    assert heading["font_weight"] == weight
    assert heading["text_transform"] == transform
    assert heading["border_bottom"] == bottom
    assert heading["border_left"] == left
    assert heading["padding_left"] == padding


@pytest.mark.unit
def test_font_sizes():
    """Test font size tokens map to heading and body sizes."""
    assert resolve(_tokens(typography={"fontSize": "sm"})).typography.heading_font_size_px == 18
    assert resolve(_tokens(typography={"fontSize": "lg"})).typography.base_font_size_px == 18
