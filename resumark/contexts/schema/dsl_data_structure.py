"""
Resume DSL Data Structures

Typed representation of the resume theming DSL: layout, design tokens, section
placement and item overrides. Produced by the validator, consumed by every
compilation stage.

Design-token leaves are deliberately loose strings: an unrecognised enum value
is not a schema error, it resolves to a documented fallback downstream.
Unknown extra fields are kept (extra="allow") so newer documents survive a
round trip through older code.
"""

import math
import re
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

# MAJOR.MINOR with optional PATCH ("1.0" is a legacy short form)
VERSION_PATTERN = r"^\d+\.\d+(\.\d+)?$"
VERSION_RE = re.compile(r"\d+\.\d+(\.\d+)?")


def is_well_formed_version(value: Any) -> bool:
    """Whether value is a MAJOR.MINOR[.PATCH] string, matched in full (no trailing newline)."""
    return isinstance(value, str) and VERSION_RE.fullmatch(value) is not None


class DslModel(BaseModel):
    """Base for all DSL models: camelCase aliases, extra fields passed through."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_document(self) -> Dict[str, Any]:
        """Plain camelCase dict with only the fields that were actually provided."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class LayoutConfig(DslModel):
    type: Optional[str] = None
    paper_size: Optional[str] = Field(default=None, alias="paperSize")
    margins: Optional[str] = None
    column_distribution: Optional[str] = Field(default=None, alias="columnDistribution")
    page_break_behavior: Optional[str] = Field(default=None, alias="pageBreakBehavior")
    show_page_numbers: Optional[bool] = Field(default=None, alias="showPageNumbers")
    page_number_position: Optional[str] = Field(default=None, alias="pageNumberPosition")


class FontFamilyTokens(DslModel):
    heading: Optional[str] = None
    body: Optional[str] = None


class TypographyTokens(DslModel):
    font_family: FontFamilyTokens = Field(default_factory=FontFamilyTokens, alias="fontFamily")
    font_size: Optional[str] = Field(default=None, alias="fontSize")
    heading_style: Optional[str] = Field(default=None, alias="headingStyle")


class TextColors(DslModel):
    primary: Optional[str] = None
    secondary: Optional[str] = None
    accent: Optional[str] = None


class ColorPalette(DslModel):
    """Hex color values; passed through to the AST unmodified."""

    primary: Optional[str] = None
    secondary: Optional[str] = None
    background: Optional[str] = None
    surface: Optional[str] = None
    text: TextColors = Field(default_factory=TextColors)
    border: Optional[str] = None
    divider: Optional[str] = None


class ColorTokens(DslModel):
    colors: ColorPalette = Field(default_factory=ColorPalette)
    border_radius: Optional[str] = Field(default=None, alias="borderRadius")
    shadows: Optional[str] = None


class SpacingTokens(DslModel):
    density: Optional[str] = None
    section_gap: Optional[str] = Field(default=None, alias="sectionGap")
    item_gap: Optional[str] = Field(default=None, alias="itemGap")
    content_padding: Optional[str] = Field(default=None, alias="contentPadding")


class DesignTokens(DslModel):
    """
    Enumerated design tokens.

    Attributes:
        typography: Font families, font size name, heading style name
        colors: Color palette plus border radius and shadow names
        spacing: Gap/padding size names and the density name
    """

    typography: TypographyTokens = Field(default_factory=TypographyTokens)
    colors: ColorTokens = Field(default_factory=ColorTokens)
    spacing: SpacingTokens = Field(default_factory=SpacingTokens)


class SectionConfig(DslModel):
    """
    Placement of one resume section.

    Attributes:
        id: Section identifier (e.g., "experience", "skills"); unique per document
        visible: Whether the section is rendered at all
        order: Sort key; values need not be contiguous
        column: Logical column the section belongs to
    """

    id: str = Field(min_length=1)
    visible: bool = Field(strict=True)
    order: Union[int, float]
    column: Literal["full-width", "main", "sidebar"]

    @field_validator("order", mode="before")
    @classmethod
    def _order_is_number(cls, value: Any) -> Any:
        # bool is an int subclass; "true" is not an order
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise PydanticCustomError("invalid_type", "Input should be a number")
        # nan and inf have no place in a total order
        if isinstance(value, float) and not math.isfinite(value):
            raise PydanticCustomError("non_finite", "Input should be a finite number")
        return value


class ResumeDsl(DslModel):
    """
    A complete resume theming document.

    Attributes:
        version: DSL version the document is authored against (migration key)
        layout: Page layout configuration
        tokens: Design tokens
        sections: Ordered list of section placements
        item_overrides: Section id -> list of item-level override objects
    """

    version: str = Field(pattern=VERSION_PATTERN)
    layout: LayoutConfig
    tokens: DesignTokens
    sections: List[SectionConfig]
    item_overrides: Dict[str, List[Dict[str, Any]]] = Field(
        default_factory=dict, alias="itemOverrides"
    )
