"""
Lookup tables for design-token resolution and page layout.

Every enumerated DSL value maps to a concrete value here. Each table has an
explicit fallback next to it; resolution code must never index a table directly.
"""

from types import MappingProxyType

# Font family names -> CSS-safe family stacks
FONT_FAMILIES = MappingProxyType(
    {
        "inter": "Inter, system-ui, sans-serif",
        "merriweather": "Merriweather, Georgia, serif",
        "roboto": "Roboto, Arial, sans-serif",
        "open-sans": "Open Sans, Arial, sans-serif",
        "playfair-display": "Playfair Display, Georgia, serif",
        "source-serif": "Source Serif Pro, Georgia, serif",
        "lato": "Lato, Arial, sans-serif",
        "poppins": "Poppins, Arial, sans-serif",
        "system": "system-ui, -apple-system, Segoe UI, sans-serif",
    }
)
DEFAULT_FONT_FAMILY = FONT_FAMILIES["inter"]

# Font size names -> base/heading sizes in px
FONT_SIZES = MappingProxyType(
    {
        "sm": MappingProxyType({"base": 14, "heading": 18}),
        "base": MappingProxyType({"base": 16, "heading": 22}),
        "lg": MappingProxyType({"base": 18, "heading": 26}),
    }
)
DEFAULT_FONT_SIZE = FONT_SIZES["base"]

LINE_HEIGHT = 1.5
BODY_FONT_WEIGHT = 400

# Spacing size names -> px (before density scaling)
SPACING_SIZES = MappingProxyType(
    {
        "xs": 8,
        "sm": 12,
        "md": 16,
        "lg": 24,
        "xl": 32,
    }
)
DEFAULT_SECTION_GAP_PX = 24
DEFAULT_ITEM_GAP_PX = 16
DEFAULT_CONTENT_PADDING_PX = 16

# Density names -> multiplier applied to every spacing value
DENSITY_FACTORS = MappingProxyType(
    {
        "compact": 0.75,
        "comfortable": 1,
        "spacious": 1.25,
        "relaxed": 1.5,
    }
)
DEFAULT_DENSITY_FACTOR = 1

# Border radius names -> px
BORDER_RADII = MappingProxyType(
    {
        "none": 0,
        "sm": 4,
        "md": 8,
        "lg": 12,
        "full": 9999,
    }
)
DEFAULT_BORDER_RADIUS_PX = 8

# Shadow names -> CSS box-shadow
SHADOWS = MappingProxyType(
    {
        "none": "none",
        "subtle": "0 1px 2px rgba(0, 0, 0, 0.05)",
        "medium": "0 4px 6px -1px rgba(0, 0, 0, 0.1)",
        "strong": "0 10px 15px -3px rgba(0, 0, 0, 0.1)",
    }
)
DEFAULT_SHADOW = "none"

# Heading style names -> heading decoration; "{accent}" is replaced by the primary color
HEADING_STYLES = MappingProxyType(
    {
        "bold": MappingProxyType(
            {
                "font_weight": 700,
                "text_transform": "none",
                "border_bottom": None,
                "border_left": None,
                "padding_left": 0,
            }
        ),
        "underline": MappingProxyType(
            {
                "font_weight": 600,
                "text_transform": "none",
                "border_bottom": "2px solid {accent}",
                "border_left": None,
                "padding_left": 0,
            }
        ),
        "uppercase": MappingProxyType(
            {
                "font_weight": 600,
                "text_transform": "uppercase",
                "border_bottom": None,
                "border_left": None,
                "padding_left": 0,
            }
        ),
        "accent-border": MappingProxyType(
            {
                "font_weight": 700,
                "text_transform": "none",
                "border_bottom": None,
                "border_left": "4px solid {accent}",
                "padding_left": 12,
            }
        ),
        "minimal": MappingProxyType(
            {
                "font_weight": 500,
                "text_transform": "none",
                "border_bottom": None,
                "border_left": None,
                "padding_left": 0,
            }
        ),
    }
)
DEFAULT_HEADING_STYLE = HEADING_STYLES["bold"]

# Paper size names -> (width, height) in mm
PAPER_SIZES_MM = MappingProxyType(
    {
        "a4": (210, 297),
        "letter": (216, 279),
        "legal": (216, 356),
    }
)
DEFAULT_PAPER_SIZE_MM = PAPER_SIZES_MM["a4"]

# Margin names -> mm, applied to all four sides
MARGINS_MM = MappingProxyType(
    {
        "compact": 10,
        "normal": 15,
        "relaxed": 20,
        "wide": 25,
    }
)
DEFAULT_MARGIN_MM = MARGINS_MM["normal"]

# Column distribution names -> (main, sidebar) width percentages
COLUMN_DISTRIBUTIONS = MappingProxyType(
    {
        "50-50": (50, 50),
        "60-40": (60, 40),
        "65-35": (65, 35),
        "70-30": (70, 30),
    }
)
DEFAULT_COLUMN_DISTRIBUTION = COLUMN_DISTRIBUTIONS["70-30"]

# Magazine layout ignores the distribution table
MAGAZINE_DISTRIBUTION = (60, 40)

# Calibrated against existing visual output, not a true px->mm conversion (~3.78 px/mm at 96dpi).
# Revisit if print DPI assumptions change.
PX_PER_MM_COLUMN_GAP = 4
