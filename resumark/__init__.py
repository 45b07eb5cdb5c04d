"""
resumark - Resume theming DSL compiler

Turns a declarative, versioned style description (layout type, design tokens,
section ordering and visibility, per-item overrides) into a fully resolved,
renderer-agnostic AST that HTML and PDF renderers paint without making any
further design decisions.

Architecture:
- Schema Context: DSL validation and version migration
- Compilation Context: Token resolution, page layout, section placement, AST assembly
- Theming Context: Theme/customization merging and the render orchestration around the compiler
"""

__version__ = "0.1.0"
