"""
Shared utilities for resumark.

Common functionality used across contexts:
- Logger configuration
- Timestamp and date formatting
"""

from resumark.utils.timestamp import format_date, now, now_exact

__all__ = ["format_date", "now", "now_exact"]
