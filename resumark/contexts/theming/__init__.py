"""
Theming Context

Responsibilities:
- Stores and loads theme style configs (bundled YAML themes)
- Merges a theme's styleConfig with a resume's customTheme
- Orchestrates rendering of stored and public resumes

Owns: Theme files, merge semantics, resume/theme collaborator interfaces
Never: Resolves tokens or lays out pages (compilation context does that)
"""

from resumark.contexts.theming.config_merger import UNSET, merge_dsl
from resumark.contexts.theming.exceptions import ResumeNotFoundError, ThemeNotFoundError
from resumark.contexts.theming.render_service import build_merged_dsl, render, render_public
from resumark.contexts.theming.theme_store import (
    InMemoryResumeProvider,
    ResumeDataProvider,
    ThemeStore,
    YamlThemeStore,
)

__all__ = [
    "UNSET",
    "merge_dsl",
    "build_merged_dsl",
    "render",
    "render_public",
    "ThemeStore",
    "ResumeDataProvider",
    "YamlThemeStore",
    "InMemoryResumeProvider",
    "ResumeNotFoundError",
    "ThemeNotFoundError",
]
