"""
Compilation Context

Responsibilities:
- Resolves enumerated design tokens to concrete values
- Computes the physical page layout and column strategy
- Places visible sections, compiles their content and item overrides
- Assembles the renderer-agnostic ResumeAst

Owns: Token lookup tables, layout algorithm, section placement, AST shape
Never: Fetches resume data or themes, renders pixels
"""

from resumark.contexts.compilation.ast_data_structure import AstColumn, AstPage, AstSection, ResumeAst
from resumark.contexts.compilation.compiler import (
    compile_dsl,
    compile_for_html,
    compile_for_pdf,
    compile_from_raw,
)
from resumark.contexts.compilation.page_layout import build_page_layout
from resumark.contexts.compilation.section_compilers import (
    SectionCompiler,
    SectionCompilerRegistry,
    apply_item_overrides,
)
from resumark.contexts.compilation.section_placer import place_sections
from resumark.contexts.compilation.token_resolver import ResolvedTokens, resolve

__all__ = [
    # Facade
    "compile_dsl",
    "compile_from_raw",
    "compile_for_html",
    "compile_for_pdf",
    # Stages
    "resolve",
    "build_page_layout",
    "place_sections",
    "apply_item_overrides",
    "SectionCompiler",
    "SectionCompilerRegistry",
    # Data structures
    "ResolvedTokens",
    "ResumeAst",
    "AstPage",
    "AstColumn",
    "AstSection",
]
