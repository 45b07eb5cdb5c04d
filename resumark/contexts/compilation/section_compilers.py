"""
Section Compilers

Turns the resume data provider's records into section payloads, applying the
document's item-level overrides. One SectionCompiler per section type, looked up
through SectionCompilerRegistry by DSL section id.

Payload shapes:
- item sections:    {"type": "experience", "items": [...]}
- content sections: {"type": "summary", "data": {"content": "..."}}
- unknown ids:      {"type": "custom", "items": []}

Item override matching:
- "itemId" present: matches the item whose "id" equals it
- otherwise "index": matches the item at that zero-based position in provider order
- overrides matching nothing are ignored; several overrides on one item apply in list order

Item override effects:
- "visible": false removes the item
- "order" sets the item's sort key (items without one keep their position index)
- every other key replaces or adds that field; fields not named pass through unchanged
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

from resumark.contexts.compilation.logger import _log_debug
from resumark.utils.timestamp import format_date

RESERVED_OVERRIDE_KEYS = frozenset({"itemId", "index", "visible", "order", "id"})

ITEMS = "items"
CONTENT = "content"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _override_matches(override: Mapping[str, Any], item: Mapping[str, Any], index: int) -> bool:
    if override.get("itemId") is not None:
        return item.get("id") == override["itemId"]
    position = override.get("index")
    if isinstance(position, int) and not isinstance(position, bool):
        return position == index
    return False


def apply_item_overrides(
    items: List[Dict[str, Any]], overrides: Optional[List[Mapping[str, Any]]]
) -> List[Dict[str, Any]]:
    """
    Apply item-level overrides to compiled items.

    Never mutates items or overrides; returns new item dicts.

    Args:
        items: Compiled items in provider order
        overrides: Override objects for this section (may be empty or None)

    Returns:
        Visible items, stably sorted by override order (position index otherwise)

    Example:
        >>> items = [{"id": "a", "title": "A"}, {"id": "b", "title": "B"}]
        >>> apply_item_overrides(items, [{"itemId": "b", "title": "Bee", "order": -1}])
        [{'id': 'b', 'title': 'Bee'}, {'id': 'a', 'title': 'A'}]
    """
    overrides = [o for o in (overrides or []) if isinstance(o, Mapping)]
    entries = []

    for index, item in enumerate(items):
        patched = dict(item)
        visible = True
        sort_key = index

        for override in overrides:
            if not _override_matches(override, item, index):
                continue
            if "visible" in override:
                visible = override["visible"] is not False
            if _is_number(override.get("order")):
                sort_key = override["order"]
            for key, value in override.items():
                if key not in RESERVED_OVERRIDE_KEYS:
                    patched[key] = value

        if visible:
            entries.append((sort_key, index, patched))

    entries.sort(key=lambda entry: (entry[0], entry[1]))
    return [patched for _, _, patched in entries]


def _date_range(record: Mapping[str, Any], start_key: str = "startDate", end_key: str = "endDate") -> dict:
    return {
        "startDate": format_date(record.get(start_key)),
        "endDate": format_date(record.get(end_key)),
        "isCurrent": bool(record.get("isCurrent", False)),
    }


# Record mappers: provider record -> AST item


def map_experience(record: Mapping[str, Any]) -> dict:
    return {
        "id": record.get("id"),
        "title": record.get("position", ""),
        "company": record.get("company", ""),
        "location": record.get("location"),
        "dateRange": _date_range(record),
        "description": record.get("description"),
        "skills": list(record.get("skills") or []),
    }


def map_education(record: Mapping[str, Any]) -> dict:
    return {
        "id": record.get("id"),
        "institution": record.get("institution", ""),
        "degree": record.get("degree", ""),
        "field": record.get("field"),
        "location": record.get("location"),
        "dateRange": _date_range(record),
        "description": record.get("description"),
        "gpa": record.get("gpa"),
    }


def map_skill(record: Mapping[str, Any]) -> dict:
    return {
        "id": record.get("id"),
        "name": record.get("name", ""),
        "category": record.get("category"),
        "level": record.get("level"),
    }


def map_language(record: Mapping[str, Any]) -> dict:
    return {
        "id": record.get("id"),
        "name": record.get("name", ""),
        "level": record.get("level"),
    }


def map_project(record: Mapping[str, Any]) -> dict:
    return {
        "id": record.get("id"),
        "name": record.get("name", ""),
        "description": record.get("description"),
        "url": record.get("url"),
        "technologies": list(record.get("technologies") or []),
        "dateRange": _date_range(record),
    }


def map_certification(record: Mapping[str, Any]) -> dict:
    return {
        "id": record.get("id"),
        "name": record.get("name", ""),
        "issuer": record.get("issuer"),
        "issueDate": format_date(record.get("issueDate")),
        "expiryDate": format_date(record.get("expiryDate")),
        "credentialId": record.get("credentialId"),
        "credentialUrl": record.get("credentialUrl"),
    }


def map_award(record: Mapping[str, Any]) -> dict:
    return {
        "id": record.get("id"),
        "title": record.get("title", ""),
        "issuer": record.get("issuer"),
        "date": format_date(record.get("date")),
        "description": record.get("description"),
    }


def map_interest(record: Mapping[str, Any]) -> dict:
    return {
        "id": record.get("id"),
        "name": record.get("name", ""),
        "description": record.get("description"),
    }


def map_reference(record: Mapping[str, Any]) -> dict:
    return {
        "id": record.get("id"),
        "author": record.get("author", ""),
        "position": record.get("position"),
        "company": record.get("company"),
        "content": record.get("content", ""),
        "date": format_date(record.get("date")),
    }


@dataclass(frozen=True)
class SectionCompiler:
    """
    Compiles one section type.

    Attributes:
        section_type: Payload "type" value
        kind: ITEMS (list of records) or CONTENT (single text block)
        source_key: Key of the records/text in the resume record; None means
            the provider never supplies data and the placeholder is always used
        map_item: Record -> item mapper (ITEMS only)
    """

    section_type: str
    kind: str = ITEMS
    source_key: Optional[str] = None
    map_item: Optional[Callable[[Mapping[str, Any]], dict]] = None

    def placeholder(self) -> dict:
        if self.kind == CONTENT:
            return {"type": self.section_type, "data": {"content": ""}}
        return {"type": self.section_type, "items": []}

    def compile(self, resume: Mapping[str, Any], overrides: List[Mapping[str, Any]]) -> dict:
        if self.source_key is None:
            return self.placeholder()

        if self.kind == CONTENT:
            return {"type": self.section_type, "data": {"content": resume.get(self.source_key) or ""}}

        records = resume.get(self.source_key) or []
        items = [self.map_item(record) for record in records]
        return {"type": self.section_type, "items": apply_item_overrides(items, overrides)}


CUSTOM_SECTION = SectionCompiler("custom")

BUILTIN_COMPILERS = {
    "experience": SectionCompiler("experience", ITEMS, "experiences", map_experience),
    "education": SectionCompiler("education", ITEMS, "education", map_education),
    "skills": SectionCompiler("skills", ITEMS, "skills", map_skill),
    "languages": SectionCompiler("languages", ITEMS, "languages", map_language),
    "projects": SectionCompiler("projects", ITEMS, "projects", map_project),
    "certifications": SectionCompiler("certifications", ITEMS, "certifications", map_certification),
    "awards": SectionCompiler("awards", ITEMS, "awards", map_award),
    "interests": SectionCompiler("interests", ITEMS, "interests", map_interest),
    "references": SectionCompiler("references", ITEMS, "recommendations", map_reference),
    "summary": SectionCompiler("summary", CONTENT, "summary"),
    # Known section types the provider has no records for
    "objective": SectionCompiler("objective", CONTENT),
    "volunteer": SectionCompiler("volunteer", ITEMS),
    "publications": SectionCompiler("publications", ITEMS),
}

BUILTIN_ALIASES = {
    "experiences": "experience",
    "recommendations": "references",
}


class SectionCompilerRegistry:
    """
    Registry mapping DSL section ids to section compilers.

    Unknown section ids resolve to the "custom" compiler, whose payload is always
    an empty item list.
    """

    def __init__(
        self,
        compilers: Optional[Dict[str, SectionCompiler]] = None,
        aliases: Optional[Dict[str, str]] = None,
    ):
        self._compilers: Dict[str, SectionCompiler] = dict(
            BUILTIN_COMPILERS if compilers is None else compilers
        )
        self._aliases: Dict[str, str] = dict(BUILTIN_ALIASES if aliases is None else aliases)

    def register(self, section_id: str, compiler: SectionCompiler, *aliases: str) -> None:
        self._compilers[section_id] = compiler
        for alias in aliases:
            self._aliases[alias] = section_id

    def has(self, section_id: str) -> bool:
        return self._aliases.get(section_id, section_id) in self._compilers

    def get(self, section_id: str) -> SectionCompiler:
        return self._compilers.get(self._aliases.get(section_id, section_id), CUSTOM_SECTION)

    def compile_section(
        self,
        section_id: str,
        resume: Optional[Mapping[str, Any]],
        overrides: Optional[List[Mapping[str, Any]]] = None,
    ) -> dict:
        """
        Compile a section payload, or its placeholder when there is no resume data.

        Args:
            section_id: DSL section id
            resume: Resume record from the data provider (None in preview mode)
            overrides: Item overrides for this section

        Returns:
            Section payload dict
        """
        compiler = self.get(section_id)
        if resume is None:
            return compiler.placeholder()
        if not self.has(section_id):
            _log_debug(f"No compiler for section '{section_id}', using placeholder")
        return compiler.compile(resume, overrides or [])


default_registry = SectionCompilerRegistry()
