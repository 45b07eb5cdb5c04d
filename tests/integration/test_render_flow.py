"""
Integration tests for rendering stored and public resumes.

Tests: provider lookup -> theme styleConfig -> customTheme merge -> compile with resume data.
"""

import pytest
from omegaconf import OmegaConf

from resumark.contexts.compilation import compile_dsl
from resumark.contexts.schema import InvalidDslError
from resumark.contexts.theming import (
    InMemoryResumeProvider,
    ResumeNotFoundError,
    ThemeNotFoundError,
    YamlThemeStore,
    render,
    render_public,
)


@pytest.fixture
def store():
    return YamlThemeStore()


@pytest.fixture
def provider(resume_data):
    record = {
        **resume_data,
        "activeThemeId": "modern",
        "customTheme": {"layout": {"columnDistribution": "60-40"}},
    }
    private = {**resume_data, "id": "resume-2", "slug": "private", "isPublic": False}
    return InMemoryResumeProvider([record, private])


@pytest.mark.integration
def test_bundled_themes_compile(store):
    """Test every bundled theme is a valid current document."""
    themes = store.list_themes()
    assert {"modern", "classic", "minimal"} <= set(themes)

    for theme_id in themes:
        ast = compile_dsl(store.get_style_config(theme_id))
        assert sum(c.width_percentage for c in ast.page.columns) == 100


@pytest.mark.integration
def test_bundled_theme_layouts(store):
    """Test bundled themes compile to their layouts."""
    modern = compile_dsl(store.get_style_config("modern"))
    classic = compile_dsl(store.get_style_config("classic"))
    minimal = compile_dsl(store.get_style_config("minimal"))

    assert [(c.id, c.width_percentage) for c in modern.page.columns] == [("main", 70), ("sidebar", 30)]
    assert modern.global_styles.accent == "#3B82F6"
    assert [c.id for c in classic.page.columns] == ["main"]
    assert classic.sections[0].styles.title.border_bottom == "2px solid #1F2937"
    assert "references" not in [s.section_id for s in classic.sections]
    assert [(c.id, c.width_percentage) for c in minimal.page.columns] == [("sidebar", 35), ("main", 65)]


@pytest.mark.integration
def test_render_merges_custom_theme(provider, store):
    """Test render merges the custom theme over the active theme."""
    ast = render("resume-1", "user-1", "html", provider, store)

    assert [(c.id, c.width_percentage) for c in ast.page.columns] == [("main", 60), ("sidebar", 40)]
    assert ast.sections[0].styles.title.border_left == "4px solid #3B82F6"

    by_id = {s.section_id: s for s in ast.sections}
    assert by_id["skills"].column_id == "sidebar"
    assert [item["name"] for item in by_id["skills"].data["items"]] == ["Python", "SQL"]
    assert by_id["experience"].data["items"][0]["title"] == "Senior Engineer"


@pytest.mark.integration
def test_render_pdf_has_pagination(provider, store):
    """Test rendering for pdf adds pagination."""
    ast = render("resume-1", "user-1", "pdf", provider, store)
    assert ast.meta.pagination is not None


@pytest.mark.integration
def test_custom_sections_replace_theme_sections(resume_data, store):
    """Test custom sections replace the theme's sections."""
    record = {
        **resume_data,
        "activeThemeId": "modern",
        "customTheme": {
            "sections": [
                {"id": "experience", "visible": True, "order": 0, "column": "main"},
                {"id": "skills", "visible": False, "order": 1, "column": "sidebar"},
            ],
            "itemOverrides": {"experience": [{"itemId": "exp-1", "order": 10}]},
        },
    }

    ast = render("resume-1", "user-1", "html", InMemoryResumeProvider([record]), store)

    assert [s.section_id for s in ast.sections] == ["experience"]
    assert [item["id"] for item in ast.sections[0].data["items"]] == ["exp-2", "exp-1"]


@pytest.mark.integration
def test_embedded_active_theme_wins(resume_data, store):
    """Test an embedded active theme wins over the theme id."""
    style_config = store.get_style_config("classic")
    record = {**resume_data, "activeTheme": {"styleConfig": style_config}, "activeThemeId": "modern"}

    ast = render("resume-1", "user-1", "html", InMemoryResumeProvider([record]), store)

    assert [c.id for c in ast.page.columns] == ["main"]


@pytest.mark.integration
def test_render_public(provider, store):
    """Test public rendering looks up by slug."""
    ast = render_public("jane-doe", "html", provider, store)
    assert ast.sections

    with pytest.raises(ResumeNotFoundError):
        render_public("private", "html", provider, store)


@pytest.mark.integration
def test_render_unknown_or_foreign_resume(provider, store):
    """Test unknown or foreign resumes are not found."""
    with pytest.raises(ResumeNotFoundError):
        render("missing", "user-1", "html", provider, store)

    with pytest.raises(ResumeNotFoundError):
        render("resume-1", "someone-else", "html", provider, store)


@pytest.mark.integration
def test_unknown_theme_id(resume_data, store):
    """Test an unknown theme id raises ThemeNotFoundError."""
    record = {**resume_data, "activeThemeId": "neon"}

    with pytest.raises(ThemeNotFoundError):
        render("resume-1", "user-1", "html", InMemoryResumeProvider([record]), store)


@pytest.mark.integration
def test_no_theme_and_incomplete_customization(resume_data, store):
    """Test an incomplete customization without a theme fails validation."""
    record = {**resume_data, "customTheme": {"layout": {"type": "two-column"}}}

    with pytest.raises(InvalidDslError):
        render("resume-1", "user-1", "html", InMemoryResumeProvider([record]), store)


@pytest.mark.integration
def test_theme_store_from_directory(tmp_path, modern_dsl):
    """Test a store reads themes from a directory."""
    OmegaConf.save(OmegaConf.create(modern_dsl), tmp_path / "house.yaml")
    store = YamlThemeStore(tmp_path)

    config = store.get_style_config("house")
    config["layout"]["type"] = "magazine"

    assert store.list_themes() == ["house"]
    assert store.is_cached("house")
    assert store.get_style_config("house")["layout"]["type"] == "two-column"
    assert store.get_style_config("modern") is None

    store.clear_cache()
    assert not store.is_cached("house")
