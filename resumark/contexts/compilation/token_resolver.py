"""
Design Token Resolution

Maps every enumerated design-token value to a concrete value:
- "fontSize: base"     -> base 16px / heading 22px
- "density: compact"   -> every gap scaled by 0.75
- "borderRadius: lg"   -> 12px
- "headingStyle: underline" -> weight 600 + "2px solid <primary>" bottom border

Resolution is total: any input, including unrecognised or missing values,
yields a defined fallback. It never raises.
"""

import math
from dataclasses import dataclass
from typing import Optional

from resumark.contexts.compilation import token_tables as tables
from resumark.contexts.compilation.logger import log_fallback
from resumark.contexts.schema.dsl_data_structure import DesignTokens


@dataclass(frozen=True)
class ResolvedTypography:
    heading_font_family: str
    body_font_family: str
    base_font_size_px: int
    heading_font_size_px: int
    line_height: float
    heading_font_weight: int
    body_font_weight: int
    heading_text_transform: str
    heading_border_bottom: Optional[str]
    heading_border_left: Optional[str]
    heading_padding_left: int


@dataclass(frozen=True)
class ResolvedColors:
    primary: Optional[str]
    secondary: Optional[str]
    background: Optional[str]
    surface: Optional[str]
    text_primary: Optional[str]
    text_secondary: Optional[str]
    text_accent: Optional[str]
    border: Optional[str]
    divider: Optional[str]


@dataclass(frozen=True)
class ResolvedSpacing:
    section_gap_px: int
    item_gap_px: int
    content_padding_px: int
    density_factor: float


@dataclass(frozen=True)
class ResolvedEffects:
    border_radius_px: int
    box_shadow: str


@dataclass(frozen=True)
class ResolvedTokens:
    """
    Fully concrete design values; no enumerated names remain.

    Attributes:
        typography: Font stacks, px sizes, weights and heading decoration
        colors: Pass-through hex values, flattened
        spacing: Density-scaled px gaps and padding
        effects: Border radius px and CSS box-shadow
    """

    typography: ResolvedTypography
    colors: ResolvedColors
    spacing: ResolvedSpacing
    effects: ResolvedEffects


def _lookup(table, key, fallback, token_name: str):
    """Table lookup with an explicit fallback arm."""
    if key in table:
        return table[key]
    if key is not None:
        log_fallback(token_name, key, fallback)
    return fallback


def _round_px(value: float) -> int:
    """Round half up to the nearest integer pixel."""
    return int(math.floor(value + 0.5))


def resolve_font_family(name: Optional[str]) -> str:
    return _lookup(tables.FONT_FAMILIES, name, tables.DEFAULT_FONT_FAMILY, "font family")


def resolve_heading_style(style: Optional[str], accent_color: Optional[str]) -> dict:
    """
    Resolve a heading style name to its decoration.

    underline and accent-border substitute the accent color into their border
    declaration.

    Returns:
        Dict with font_weight, text_transform, border_bottom, border_left, padding_left
    """
    heading = _lookup(tables.HEADING_STYLES, style, tables.DEFAULT_HEADING_STYLE, "heading style")
    accent = accent_color or ""

    return {
        "font_weight": heading["font_weight"],
        "text_transform": heading["text_transform"],
        "border_bottom": (
            heading["border_bottom"].format(accent=accent) if heading["border_bottom"] else None
        ),
        "border_left": (
            heading["border_left"].format(accent=accent) if heading["border_left"] else None
        ),
        "padding_left": heading["padding_left"],
    }


def _resolve_spacing(spacing) -> ResolvedSpacing:
    density = _lookup(
        tables.DENSITY_FACTORS, spacing.density, tables.DEFAULT_DENSITY_FACTOR, "density"
    )

    def scaled(name: Optional[str], default_px: int, token_name: str) -> int:
        return _round_px(_lookup(tables.SPACING_SIZES, name, default_px, token_name) * density)

    return ResolvedSpacing(
        section_gap_px=scaled(spacing.section_gap, tables.DEFAULT_SECTION_GAP_PX, "section gap"),
        item_gap_px=scaled(spacing.item_gap, tables.DEFAULT_ITEM_GAP_PX, "item gap"),
        content_padding_px=scaled(
            spacing.content_padding, tables.DEFAULT_CONTENT_PADDING_PX, "content padding"
        ),
        density_factor=density,
    )


def resolve(tokens: Optional[DesignTokens]) -> ResolvedTokens:
    """
    Resolve enumerated design tokens to concrete values.

    Args:
        tokens: Design tokens from a validated DSL document (None resolves every fallback)

    Returns:
        ResolvedTokens with no enumerated names left
    """
    if tokens is None:
        tokens = DesignTokens()

    typography = tokens.typography
    palette = tokens.colors.colors

    font_size = _lookup(tables.FONT_SIZES, typography.font_size, tables.DEFAULT_FONT_SIZE, "font size")
    heading = resolve_heading_style(typography.heading_style, palette.primary)

    return ResolvedTokens(
        typography=ResolvedTypography(
            heading_font_family=resolve_font_family(typography.font_family.heading),
            body_font_family=resolve_font_family(typography.font_family.body),
            base_font_size_px=font_size["base"],
            heading_font_size_px=font_size["heading"],
            line_height=tables.LINE_HEIGHT,
            heading_font_weight=heading["font_weight"],
            body_font_weight=tables.BODY_FONT_WEIGHT,
            heading_text_transform=heading["text_transform"],
            heading_border_bottom=heading["border_bottom"],
            heading_border_left=heading["border_left"],
            heading_padding_left=heading["padding_left"],
        ),
        colors=ResolvedColors(
            primary=palette.primary,
            secondary=palette.secondary,
            background=palette.background,
            surface=palette.surface,
            text_primary=palette.text.primary,
            text_secondary=palette.text.secondary,
            text_accent=palette.text.accent,
            border=palette.border,
            divider=palette.divider,
        ),
        spacing=_resolve_spacing(tokens.spacing),
        effects=ResolvedEffects(
            border_radius_px=_lookup(
                tables.BORDER_RADII,
                tokens.colors.border_radius,
                tables.DEFAULT_BORDER_RADIUS_PX,
                "border radius",
            ),
            box_shadow=_lookup(tables.SHADOWS, tokens.colors.shadows, tables.DEFAULT_SHADOW, "shadow"),
        ),
    )
