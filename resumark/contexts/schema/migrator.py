"""
DSL Version Migration

Rewrites documents authored against older DSL versions into the current version
before any other compilation stage runs. Older documents may not satisfy the
current schema until migrated, so migration operates on plain dicts.

Each MigrationStep is a pure function responsible for exactly one version
increment. Steps are chained by their from/to versions:

    0.9.0 -> 1.0.0 -> 1.1.0 (CURRENT_DSL_VERSION)

Examples:
    # Bring a legacy document up to date
    >>> doc = migrate({"version": "0.9.0", "layout": {"type": "simple", "paper": "a4"}, ...})
    >>> doc["version"]
    '1.1.0'

    # Inspect the chain without applying it
    >>> get_migration_path("0.9.0", "1.1.0")
    ['0.9.0', '1.0.0', '1.1.0']
"""

import copy
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from resumark.contexts.schema.exceptions import UnsupportedMigrationError
from resumark.contexts.schema.logger import _log_debug, log_migration_step

CURRENT_DSL_VERSION = "1.1.0"

SHORT_VERSION_PATTERN = re.compile(r"^\d+\.\d+$")

# Layout type names used before 1.0.0
LEGACY_LAYOUT_TYPES = {
    "simple": "single-column",
    "sidebar": "sidebar-left",
}

# Defaults introduced by 1.1.0
LAYOUT_DEFAULTS_1_1 = {
    "columnDistribution": "70-30",
    "showPageNumbers": False,
    "pageNumberPosition": "bottom-center",
}


@dataclass(frozen=True)
class MigrationStep:
    """
    One version increment.

    Attributes:
        from_version: Version the step accepts
        to_version: Version the step produces (the result's "version" must equal it)
        migrate: Pure function (document dict) -> document dict
        description: Short summary for logs
    """

    from_version: str
    to_version: str
    migrate: Callable[[Dict[str, Any]], Dict[str, Any]]
    description: str = ""


def normalize_version(version: str) -> str:
    """Expand the legacy short form "MAJOR.MINOR" to "MAJOR.MINOR.0"."""
    if isinstance(version, str) and SHORT_VERSION_PATTERN.match(version):
        return f"{version}.0"
    return version


def _migrate_0_9_0_to_1_0_0(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Rename layout.paper to layout.paperSize and map legacy layout type names."""
    doc = copy.deepcopy(doc)
    layout = doc.get("layout")

    if isinstance(layout, dict):
        if "paper" in layout and "paperSize" not in layout:
            layout["paperSize"] = layout.pop("paper")
        if layout.get("type") in LEGACY_LAYOUT_TYPES:
            layout["type"] = LEGACY_LAYOUT_TYPES[layout["type"]]

    doc["version"] = "1.0.0"
    return doc


def _migrate_1_0_0_to_1_1_0(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Rename density "normal" to "comfortable" and add 1.1.0 layout/override defaults."""
    doc = copy.deepcopy(doc)

    spacing = (doc.get("tokens") or {}).get("spacing")
    if isinstance(spacing, dict) and spacing.get("density") == "normal":
        spacing["density"] = "comfortable"

    layout = doc.get("layout")
    if isinstance(layout, dict):
        for key, default_value in LAYOUT_DEFAULTS_1_1.items():
            layout.setdefault(key, default_value)

    doc.setdefault("itemOverrides", {})
    doc["version"] = "1.1.0"
    return doc


BUILTIN_STEPS = [
    MigrationStep("0.9.0", "1.0.0", _migrate_0_9_0_to_1_0_0, "layout.paper -> layout.paperSize"),
    MigrationStep("1.0.0", "1.1.0", _migrate_1_0_0_to_1_1_0, "density rename, 1.1.0 defaults"),
]


class MigrationRegistry:
    """
    Registry of migration steps keyed by the version they migrate from.

    Registering a step for an already-registered from_version replaces it.
    """

    def __init__(self, steps: Optional[Iterable[MigrationStep]] = None):
        self._steps: Dict[str, MigrationStep] = {}
        if steps:
            self.register_all(steps)

    def register(self, step: MigrationStep) -> None:
        self._steps[normalize_version(step.from_version)] = step

    def register_all(self, steps: Iterable[MigrationStep]) -> None:
        for step in steps:
            self.register(step)

    @property
    def known_versions(self) -> List[str]:
        """Every version that appears at either end of a registered step."""
        versions = set(self._steps)
        versions.update(normalize_version(step.to_version) for step in self._steps.values())
        return sorted(versions)

    def get_migration_path(self, from_version: str, to_version: str) -> List[str]:
        """
        Get the versions walked from from_version to to_version, both inclusive.

        Raises:
            UnsupportedMigrationError: If no chain exists or the chain is circular
        """
        current = normalize_version(from_version)
        target = normalize_version(to_version)
        path = [current]
        visited = {current}

        while current != target:
            step = self._steps.get(current)
            if step is None:
                raise UnsupportedMigrationError(
                    from_version, to_version, f"no migration registered from '{current}'"
                )

            next_version = normalize_version(step.to_version)
            if next_version in visited:
                raise UnsupportedMigrationError(
                    from_version,
                    to_version,
                    f"circular migration chain at '{current}' -> '{next_version}'",
                )

            path.append(next_version)
            visited.add(next_version)
            current = next_version

        return path

    def can_migrate(self, from_version: str, to_version: str) -> bool:
        try:
            self.get_migration_path(from_version, to_version)
        except UnsupportedMigrationError:
            return False
        return True

    def migrate(self, doc: Dict[str, Any], target_version: str = CURRENT_DSL_VERSION) -> Dict[str, Any]:
        """
        Migrate a document dict to target_version.

        Returns the input object itself when it is already at target_version;
        otherwise a new dict (the input is never mutated).

        Raises:
            UnsupportedMigrationError: No path, circular chain, or a step produced
                a document with the wrong version
        """
        version = doc.get("version") if isinstance(doc, dict) else None

        if version == target_version:
            return doc

        if not isinstance(version, str):
            raise UnsupportedMigrationError(
                repr(version), target_version, "document has no version string"
            )

        path = self.get_migration_path(version, target_version)
        _log_debug(f"Migration path: {' -> '.join(path)}")

        result = copy.deepcopy(doc)
        result["version"] = path[0]

        for from_version in path[:-1]:
            step = self._steps[from_version]
            result = step.migrate(result)

            expected = normalize_version(step.to_version)
            if not isinstance(result, dict) or result.get("version") != expected:
                produced = result.get("version") if isinstance(result, dict) else type(result).__name__
                raise UnsupportedMigrationError(
                    version,
                    target_version,
                    f"step {from_version} -> {expected} produced version '{produced}'",
                )

            log_migration_step(from_version, expected)

        return result


default_registry = MigrationRegistry(BUILTIN_STEPS)


def migrate(
    doc: Dict[str, Any],
    target_version: str = CURRENT_DSL_VERSION,
    registry: Optional[MigrationRegistry] = None,
) -> Dict[str, Any]:
    """Migrate a document dict using the given registry (built-in steps by default)."""
    return (registry or default_registry).migrate(doc, target_version)


def get_migration_path(
    from_version: str,
    to_version: str = CURRENT_DSL_VERSION,
    registry: Optional[MigrationRegistry] = None,
) -> List[str]:
    return (registry or default_registry).get_migration_path(from_version, to_version)


def can_migrate(
    from_version: str,
    to_version: str = CURRENT_DSL_VERSION,
    registry: Optional[MigrationRegistry] = None,
) -> bool:
    return (registry or default_registry).can_migrate(from_version, to_version)
