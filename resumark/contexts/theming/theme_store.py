"""
Theme and Resume Data Sources

Collaborator interfaces the render flow depends on, plus the bundled
implementations:

- ThemeStore: theme id -> stored DSL styleConfig
- ResumeDataProvider: resume id / public slug -> resume record

Resume records are plain dicts carrying section record lists (experiences,
education, skills, ...), "summary", "customTheme" and either
"activeTheme" ({"styleConfig": {...}}) or "activeThemeId".
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Protocol

from dotenv import load_dotenv
from omegaconf import OmegaConf

from resumark.contexts.theming.logger import _log_debug, log_theme_loaded

load_dotenv()
DEFAULT_THEMES_PATH = Path(__file__).parent / "themes"
THEMES_PATH = Path(os.getenv("RESUMARK_THEMES_PATH", str(DEFAULT_THEMES_PATH)))

THEME_SUFFIXES = (".yaml", ".yml")


class ThemeStore(Protocol):
    def get_style_config(self, theme_id: str) -> Optional[Dict[str, Any]]:
        ...


class ResumeDataProvider(Protocol):
    def get_resume(self, resume_id: str, user_id: str) -> Optional[Dict[str, Any]]:
        ...

    def get_public_resume(self, slug: str) -> Optional[Dict[str, Any]]:
        ...


class YamlThemeStore:
    """
    Theme store backed by a directory of <theme_id>.yaml DSL documents.

    Loaded configs are cached; callers always receive a deep copy so the cache
    cannot be mutated through a returned document.
    """

    def __init__(self, themes_path: Path = None):
        """
        Initialize the theme store.

        Args:
            themes_path: Directory of theme files. Defaults to RESUMARK_THEMES_PATH
                         from environment, else the bundled themes
        """
        if themes_path is None:
            themes_path = THEMES_PATH

        self.themes_path = Path(themes_path)
        self._cache: Dict[str, Dict[str, Any]] = {}

    def get_theme_path(self, theme_id: str) -> Optional[Path]:
        for suffix in THEME_SUFFIXES:
            path = self.themes_path / f"{theme_id}{suffix}"
            if path.exists():
                return path
        return None

    def get_style_config(self, theme_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a theme's DSL style config, loading and caching it if necessary.

        Args:
            theme_id: Theme name (file stem)

        Returns:
            DSL document dict, or None if no such theme exists
        """
        if theme_id not in self._cache:
            path = self.get_theme_path(theme_id)
            if path is None:
                _log_debug(f"No theme file for '{theme_id}' in {self.themes_path}")
                return None

            self._cache[theme_id] = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
            log_theme_loaded(theme_id, path)

        return copy.deepcopy(self._cache[theme_id])

    def list_themes(self) -> List[str]:
        """Sorted ids of all themes in the directory."""
        if not self.themes_path.is_dir():
            return []
        return sorted(
            path.stem for path in self.themes_path.iterdir() if path.suffix in THEME_SUFFIXES
        )

    def clear_cache(self):
        """Clear the theme cache."""
        self._cache.clear()

    def is_cached(self, theme_id: str) -> bool:
        return theme_id in self._cache


class InMemoryResumeProvider:
    """
    Resume data provider over in-memory records.

    Records are keyed by their "id"; each may carry "userId", "slug" and
    "isPublic". Owner lookups require a matching userId; public lookups
    require isPublic.
    """

    def __init__(self, records: Iterable[Dict[str, Any]] = ()):
        self._records: Dict[str, Dict[str, Any]] = {}
        for record in records:
            self.add(record)

    def add(self, record: Dict[str, Any]) -> None:
        self._records[record["id"]] = copy.deepcopy(record)

    def get_resume(self, resume_id: str, user_id: str) -> Optional[Dict[str, Any]]:
        record = self._records.get(resume_id)
        if record is None or record.get("userId") != user_id:
            return None
        return copy.deepcopy(record)

    def get_public_resume(self, slug: str) -> Optional[Dict[str, Any]]:
        for record in self._records.values():
            if record.get("slug") == slug and record.get("isPublic") is True:
                return copy.deepcopy(record)
        return None
