"""
Section Placement

Filters sections by visibility, sorts them by declared order, maps each logical
column to a physical column id and attaches the compiled payload and styles.
Never mutates its inputs.
"""

from types import MappingProxyType
from typing import Any, List, Mapping, Optional

from resumark.contexts.compilation.ast_data_structure import (
    AstSection,
    ContainerStyle,
    SectionStyles,
    TextStyle,
    TitleStyle,
)
from resumark.contexts.compilation.section_compilers import (
    SectionCompilerRegistry,
    default_registry,
)
from resumark.contexts.compilation.token_resolver import ResolvedTokens
from resumark.contexts.schema.dsl_data_structure import ResumeDsl

# Logical DSL column -> physical AST column id
COLUMN_IDS = MappingProxyType(
    {
        "full-width": "main",
        "main": "main",
        "sidebar": "sidebar",
    }
)
DEFAULT_COLUMN_ID = "main"


def map_column_to_id(column: Optional[str]) -> str:
    return COLUMN_IDS.get(column, DEFAULT_COLUMN_ID)


def build_section_styles(tokens: ResolvedTokens) -> SectionStyles:
    """Container, title and content styles; identical for every section of a document."""
    typography = tokens.typography

    return SectionStyles(
        container=ContainerStyle(
            background_color="transparent",
            border_color=tokens.colors.border,
            border_width_px=0,
            border_radius_px=tokens.effects.border_radius_px,
            padding_px=tokens.spacing.content_padding_px,
            margin_bottom_px=tokens.spacing.section_gap_px,
            item_gap_px=tokens.spacing.item_gap_px,
            shadow=tokens.effects.box_shadow if tokens.effects.box_shadow != "none" else None,
        ),
        title=TitleStyle(
            font_family=typography.heading_font_family,
            font_size_px=typography.heading_font_size_px,
            line_height=typography.line_height,
            font_weight=typography.heading_font_weight,
            text_transform=typography.heading_text_transform,
            color=tokens.colors.text_primary,
            border_bottom=typography.heading_border_bottom,
            border_left=typography.heading_border_left,
            padding_left_px=typography.heading_padding_left,
        ),
        content=TextStyle(
            font_family=typography.body_font_family,
            font_size_px=typography.base_font_size_px,
            line_height=typography.line_height,
            font_weight=typography.body_font_weight,
            color=tokens.colors.text_primary,
        ),
    )


def place_sections(
    dsl: ResumeDsl,
    tokens: ResolvedTokens,
    resume_data: Optional[Mapping[str, Any]] = None,
    registry: Optional[SectionCompilerRegistry] = None,
) -> List[AstSection]:
    """
    Place and compile the visible sections of a document.

    Args:
        dsl: Validated DSL document
        tokens: Resolved tokens
        resume_data: Resume record from the data provider; None compiles placeholders (preview)
        registry: Section compiler registry (built-in compilers by default)

    Returns:
        Visible sections sorted ascending by order (stable for equal orders)
    """
    registry = registry or default_registry
    styles = build_section_styles(tokens)

    # sorted() is stable, so equal orders keep document order
    visible = sorted((s for s in dsl.sections if s.visible is True), key=lambda s: s.order)

    placed = []
    for section in visible:
        overrides = dsl.item_overrides.get(section.id, [])
        placed.append(
            AstSection(
                section_id=section.id,
                column_id=map_column_to_id(section.column),
                order=section.order,
                data=registry.compile_section(section.id, resume_data, overrides),
                styles=styles,
            )
        )

    return placed
