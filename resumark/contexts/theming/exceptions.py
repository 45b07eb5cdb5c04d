"""Custom exceptions for the theming context."""

from typing import Optional


class ResumeNotFoundError(LookupError):
    """
    Exception raised when a resume data provider has no record for a lookup.

    Attributes:
        resume_id: Requested resume id (None for public lookups)
        slug: Requested public slug (None for owner lookups)
    """

    def __init__(self, resume_id: Optional[str] = None, slug: Optional[str] = None):
        self.resume_id = resume_id
        self.slug = slug

        if slug is not None:
            message = f"No public resume with slug '{slug}'"
        else:
            message = f"Resume '{resume_id}' not found"

        super().__init__(message)


class ThemeNotFoundError(LookupError):
    """
    Exception raised when a theme id has no stored style config.

    Attributes:
        theme_id: Requested theme id
        themes_path: Directory that was searched, when file-backed
    """

    def __init__(self, theme_id: str, themes_path=None):
        self.theme_id = theme_id
        self.themes_path = themes_path

        parts = [f"Theme '{theme_id}' not found"]
        if themes_path is not None:
            parts.append(f"Searched: {themes_path}")

        super().__init__("\n".join(parts))
