"""
Page Layout Builder

Computes physical page dimensions, margins and the ordered column list from the
layout type, paper size, margin size and column distribution.

Column strategies:
- single-column, compact:       [main 100]
- two-column, sidebar-right:    [main, sidebar] from the distribution table
- sidebar-left:                 [sidebar, main] from the distribution table
- magazine:                     [main 60, sidebar 40] (distribution ignored)
- anything else:                [main 100]

No failure mode: unknown enum values degrade to documented fallbacks.
"""

from typing import List, Optional, Tuple

from resumark.contexts.compilation import token_tables as tables
from resumark.contexts.compilation.ast_data_structure import AstColumn, AstPage
from resumark.contexts.compilation.logger import log_fallback
from resumark.contexts.compilation.token_resolver import ResolvedTokens
from resumark.contexts.schema.dsl_data_structure import ResumeDsl

SINGLE_COLUMN_LAYOUTS = ("single-column", "compact")
MAIN_FIRST_LAYOUTS = ("two-column", "sidebar-right")


def _distribution(name: Optional[str]) -> Tuple[int, int]:
    if name in tables.COLUMN_DISTRIBUTIONS:
        return tables.COLUMN_DISTRIBUTIONS[name]
    if name is not None:
        log_fallback("column distribution", name, tables.DEFAULT_COLUMN_DISTRIBUTION)
    return tables.DEFAULT_COLUMN_DISTRIBUTION


def build_columns(layout_type: Optional[str], distribution: Optional[str] = None) -> List[AstColumn]:
    """
    Build the ordered column list for a layout type.

    Args:
        layout_type: DSL layout type name
        distribution: Column distribution name (e.g., "65-35"); only used by two-column layouts

    Returns:
        Columns whose width percentages sum to 100
    """
    if layout_type in MAIN_FIRST_LAYOUTS:
        main, sidebar = _distribution(distribution)
        return [
            AstColumn(id="main", width_percentage=main, order=0),
            AstColumn(id="sidebar", width_percentage=sidebar, order=1),
        ]

    if layout_type == "sidebar-left":
        main, sidebar = _distribution(distribution)
        return [
            AstColumn(id="sidebar", width_percentage=sidebar, order=0),
            AstColumn(id="main", width_percentage=main, order=1),
        ]

    if layout_type == "magazine":
        main, sidebar = tables.MAGAZINE_DISTRIBUTION
        return [
            AstColumn(id="main", width_percentage=main, order=0),
            AstColumn(id="sidebar", width_percentage=sidebar, order=1),
        ]

    if layout_type not in SINGLE_COLUMN_LAYOUTS and layout_type is not None:
        log_fallback("layout type", layout_type, "single-column")

    return [AstColumn(id="main", width_percentage=100, order=0)]


def build_page_layout(dsl: ResumeDsl, tokens: ResolvedTokens) -> AstPage:
    """
    Compute the physical page for a validated document.

    Args:
        dsl: Validated DSL document
        tokens: Resolved tokens (the column gap derives from the section gap)

    Returns:
        AstPage with dimensions and uniform margins in mm
    """
    layout = dsl.layout

    if layout.paper_size in tables.PAPER_SIZES_MM:
        width, height = tables.PAPER_SIZES_MM[layout.paper_size]
    else:
        if layout.paper_size is not None:
            log_fallback("paper size", layout.paper_size, "a4")
        width, height = tables.DEFAULT_PAPER_SIZE_MM

    if layout.margins in tables.MARGINS_MM:
        margin = tables.MARGINS_MM[layout.margins]
    else:
        if layout.margins is not None:
            log_fallback("margin size", layout.margins, "normal")
        margin = tables.DEFAULT_MARGIN_MM

    return AstPage(
        width_mm=width,
        height_mm=height,
        margin_top_mm=margin,
        margin_bottom_mm=margin,
        margin_left_mm=margin,
        margin_right_mm=margin,
        columns=build_columns(layout.type, layout.column_distribution),
        column_gap_mm=tokens.spacing.section_gap_px / tables.PX_PER_MM_COLUMN_GAP,
    )
