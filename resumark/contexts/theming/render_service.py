"""
Render Service

Glue between persisted resumes and the compiler:

    fetch resume -> resolve theme styleConfig -> merge customTheme -> compile with resume data

The theme's styleConfig comes from the record's embedded "activeTheme"
when present, else from the ThemeStore by "activeThemeId". A resume with no
theme compiles its customTheme alone.
"""

from typing import Any, Dict, Mapping, Optional

from resumark.contexts.compilation.ast_data_structure import ResumeAst
from resumark.contexts.compilation.compiler import compile_dsl
from resumark.contexts.theming.config_merger import merge_dsl
from resumark.contexts.theming.exceptions import ResumeNotFoundError, ThemeNotFoundError
from resumark.contexts.theming.logger import _log_debug, log_render_start
from resumark.contexts.theming.theme_store import ResumeDataProvider, ThemeStore, YamlThemeStore


def resolve_style_config(resume: Mapping[str, Any], theme_store: Optional[ThemeStore] = None) -> Dict[str, Any]:
    """
    Find the base DSL document for a resume's active theme.

    Raises:
        ThemeNotFoundError: activeThemeId names a theme the store does not have
    """
    active_theme = resume.get("activeTheme")
    if isinstance(active_theme, Mapping) and active_theme.get("styleConfig") is not None:
        return dict(active_theme["styleConfig"])

    theme_id = resume.get("activeThemeId")
    if theme_id is None:
        _log_debug("Resume has no active theme, compiling customTheme alone")
        return {}

    store = theme_store or YamlThemeStore()
    style_config = store.get_style_config(theme_id)
    if style_config is None:
        raise ThemeNotFoundError(theme_id, getattr(store, "themes_path", None))
    return style_config


def build_merged_dsl(resume: Mapping[str, Any], theme_store: Optional[ThemeStore] = None) -> Dict[str, Any]:
    """Theme styleConfig with the resume's customTheme merged over it."""
    base = resolve_style_config(resume, theme_store)
    return merge_dsl(base, resume.get("customTheme") or {})


def render(
    resume_id: str,
    user_id: str,
    target: str,
    provider: ResumeDataProvider,
    theme_store: Optional[ThemeStore] = None,
) -> ResumeAst:
    """
    Compile a user's own resume.

    Args:
        resume_id: Resume id
        user_id: Owner id
        target: "html" or "pdf"
        provider: Resume data provider
        theme_store: Theme lookup for activeThemeId (bundled YAML themes by default)

    Returns:
        ResumeAst with the resume's data compiled into its sections

    Raises:
        ResumeNotFoundError: Provider has no such resume for this user
        ThemeNotFoundError: Active theme id is unknown
        InvalidDslError: Merged document fails validation
        UnsupportedMigrationError: Merged document's version cannot be migrated
    """
    log_render_start(target, resume_id=resume_id)

    resume = provider.get_resume(resume_id, user_id)
    if resume is None:
        raise ResumeNotFoundError(resume_id=resume_id)

    return compile_dsl(build_merged_dsl(resume, theme_store), target, resume_data=resume)


def render_public(
    slug: str,
    target: str,
    provider: ResumeDataProvider,
    theme_store: Optional[ThemeStore] = None,
) -> ResumeAst:
    """
    Compile a publicly shared resume.

    Raises:
        ResumeNotFoundError: No public resume with this slug
    """
    log_render_start(target, slug=slug)

    resume = provider.get_public_resume(slug)
    if resume is None:
        raise ResumeNotFoundError(slug=slug)

    return compile_dsl(build_merged_dsl(resume, theme_store), target, resume_data=resume)
