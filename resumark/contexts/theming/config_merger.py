"""
Theme Configuration Merging

Reconciles a theme's stored styleConfig (base) with a resume's customTheme
(overrides) before compilation. Customizations win leaf by leaf.

Examples:
    >>> merge_dsl({"layout": {"type": "two-column", "margins": "normal"}},
    ...           {"layout": {"margins": "wide"}})
    {'layout': {'type': 'two-column', 'margins': 'wide'}}

    # Arrays are replaced, never merged element-wise
    >>> merge_dsl({"sections": [{"id": "a"}]}, {"sections": []})
    {'sections': []}
"""

import copy
from typing import Any, Dict, Mapping


class _Unset:
    """Sentinel for "no override": the key is skipped, unlike None which replaces."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()


def _is_plain_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def _without_unset(value: Any) -> Any:
    """Deep copy of an override value with every UNSET key or list element dropped."""
    if _is_plain_object(value):
        return {key: _without_unset(item) for key, item in value.items() if item is not UNSET}
    if isinstance(value, list):
        return [_without_unset(item) for item in value if item is not UNSET]
    return copy.deepcopy(value)


def merge_dsl(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge overrides into base.

    Rules:
    - both values are mappings: recurse
    - otherwise the override replaces the base value (arrays and None included)
    - keys only in base are kept
    - override values that are UNSET are skipped, at any depth; inside a
      replacing subtree (no mapping in base, or an array) they are dropped

    Neither input is mutated; the result shares no containers with them.

    Args:
        base: Base document (e.g., a theme's styleConfig)
        overrides: Customizations (e.g., a resume's customTheme)

    Returns:
        New merged dict
    """
    result = {key: copy.deepcopy(value) for key, value in base.items()}

    for key, override_value in overrides.items():
        if override_value is UNSET:
            continue

        base_value = base.get(key)
        if _is_plain_object(base_value) and _is_plain_object(override_value):
            result[key] = merge_dsl(base_value, override_value)
        else:
            result[key] = _without_unset(override_value)

    return result
