"""
Resume AST Data Structures

The compiler's output: layout fully decided, tokens resolved to concrete values,
no CSS, no markup. Renderers only paint it.

Attributes are snake_case in Python; the wire format (to_dict / to_json) is
camelCase, matching the DSL input.
"""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

RenderTarget = Literal["html", "pdf"]
Number = Union[int, float]


class AstModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready camelCase dict."""
        return self.model_dump(by_alias=True, mode="json")

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)


class AstPagination(AstModel):
    """Print-only pagination settings, attached for the pdf target."""

    page_break_behavior: Optional[str] = None
    show_page_numbers: bool = False
    page_number_position: Optional[str] = None


class AstMeta(AstModel):
    version: str
    generated_at: str
    target: RenderTarget
    pagination: Optional[AstPagination] = None


class AstColumn(AstModel):
    id: str
    width_percentage: Number
    order: int


class AstPage(AstModel):
    """Physical page: dimensions and margins in millimeters, ordered columns."""

    width_mm: Number
    height_mm: Number
    margin_top_mm: Number
    margin_bottom_mm: Number
    margin_left_mm: Number
    margin_right_mm: Number
    columns: List[AstColumn]
    column_gap_mm: Number


class ContainerStyle(AstModel):
    background_color: str = "transparent"
    border_color: Optional[str] = None
    border_width_px: int = 0
    border_radius_px: int
    padding_px: int
    margin_bottom_px: int
    item_gap_px: int
    shadow: Optional[str] = None


class TextStyle(AstModel):
    font_family: str
    font_size_px: int
    line_height: float
    font_weight: int
    text_transform: str = "none"
    text_decoration: str = "none"
    color: Optional[str] = None


class TitleStyle(TextStyle):
    border_bottom: Optional[str] = None
    border_left: Optional[str] = None
    padding_left_px: int = 0


class SectionStyles(AstModel):
    container: ContainerStyle
    title: TitleStyle
    content: TextStyle


class AstSection(AstModel):
    """
    One placed section.

    Attributes:
        section_id: DSL section id
        column_id: Physical column the section is painted in
        order: Declared DSL order
        data: Section payload ({"type", "items"} or {"type", "data"})
        styles: Container/title/content styles, identical in shape for every section
    """

    section_id: str
    column_id: str
    order: Number
    data: Dict[str, Any]
    styles: SectionStyles


class GlobalStyles(AstModel):
    background: Optional[str] = None
    text_primary: Optional[str] = None
    text_secondary: Optional[str] = None
    accent: Optional[str] = None


class ResumeAst(AstModel):
    meta: AstMeta
    page: AstPage
    sections: List[AstSection]
    global_styles: GlobalStyles
