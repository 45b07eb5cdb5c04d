"""
DSL Compiler

Compiles a resume DSL document into a ResumeAst in a fixed order:

    migrate -> validate -> resolve tokens -> build layout -> place/compile sections -> assemble

Every call is a single side-effect-free pass; the compiler keeps no state between
calls. Errors (InvalidDslError, UnsupportedMigrationError) propagate unchanged and
no partial AST is ever returned.

The html and pdf targets differ only in metadata: pdf also carries the
print-only pagination settings.
"""

import time
from typing import Any, Mapping, Optional, Union

from resumark.contexts.compilation.ast_data_structure import (
    AstMeta,
    AstPagination,
    GlobalStyles,
    ResumeAst,
)
from resumark.contexts.compilation.logger import log_compilation_result, log_compilation_start
from resumark.contexts.compilation.page_layout import build_page_layout
from resumark.contexts.compilation.section_compilers import SectionCompilerRegistry
from resumark.contexts.compilation.section_placer import place_sections
from resumark.contexts.compilation.token_resolver import resolve
from resumark.contexts.schema.dsl_data_structure import ResumeDsl, is_well_formed_version
from resumark.contexts.schema.migrator import CURRENT_DSL_VERSION, MigrationRegistry, migrate
from resumark.contexts.schema.validator import validate_or_throw
from resumark.utils.timestamp import now_exact

RENDER_TARGETS = ("html", "pdf")


def _migrate_if_versioned(document: Any, migrations: Optional[MigrationRegistry]) -> Any:
    """Migrate documents with a well-formed version; validation reports everything else."""
    version = document.get("version") if isinstance(document, dict) else None
    if not is_well_formed_version(version):
        return document
    return migrate(document, CURRENT_DSL_VERSION, registry=migrations)


def _build_meta(dsl: ResumeDsl, target: str) -> AstMeta:
    pagination = None
    if target == "pdf":
        pagination = AstPagination(
            page_break_behavior=dsl.layout.page_break_behavior,
            show_page_numbers=bool(dsl.layout.show_page_numbers),
            page_number_position=dsl.layout.page_number_position,
        )
    return AstMeta(
        version=dsl.version,
        generated_at=now_exact(),
        target=target,
        pagination=pagination,
    )


def compile_dsl(
    dsl: Union[ResumeDsl, Mapping[str, Any]],
    target: str = "html",
    resume_data: Optional[Mapping[str, Any]] = None,
    migrations: Optional[MigrationRegistry] = None,
    sections: Optional[SectionCompilerRegistry] = None,
) -> ResumeAst:
    """
    Compile a DSL document to a ResumeAst.

    Args:
        dsl: DSL document (typed or plain dict); any supported version
        target: "html" or "pdf"
        resume_data: Resume record from the data provider; None compiles placeholders
        migrations: Migration registry (built-in chain by default)
        sections: Section compiler registry (built-in compilers by default)

    Returns:
        Fully resolved ResumeAst

    Raises:
        ValueError: Unknown target
        UnsupportedMigrationError: No migration path to the current version
        InvalidDslError: Document (after migration) fails validation
    """
    if target not in RENDER_TARGETS:
        raise ValueError(f"Unknown render target '{target}'. Expected one of: {RENDER_TARGETS}")

    start_time = time.perf_counter()

    document = dsl.to_document() if isinstance(dsl, ResumeDsl) else dsl
    migrated = _migrate_if_versioned(document, migrations)
    validated = validate_or_throw(migrated)

    log_compilation_start(validated.version, target, preview=resume_data is None)

    tokens = resolve(validated.tokens)
    page = build_page_layout(validated, tokens)
    placed = place_sections(validated, tokens, resume_data, registry=sections)

    ast = ResumeAst(
        meta=_build_meta(validated, target),
        page=page,
        sections=placed,
        global_styles=GlobalStyles(
            background=tokens.colors.background,
            text_primary=tokens.colors.text_primary,
            text_secondary=tokens.colors.text_secondary,
            accent=tokens.colors.primary,
        ),
    )

    log_compilation_result(ast, time.perf_counter() - start_time)
    return ast


def compile_from_raw(raw: Any, target: str = "html") -> ResumeAst:
    """
    Validate untrusted input, then compile it in preview mode (no resume data).

    Raises:
        InvalidDslError: Malformed input
    """
    dsl = validate_or_throw(raw)
    return compile_dsl(dsl, target)


def compile_for_html(
    dsl: Union[ResumeDsl, Mapping[str, Any]], resume_data: Optional[Mapping[str, Any]] = None
) -> ResumeAst:
    return compile_dsl(dsl, "html", resume_data)


def compile_for_pdf(
    dsl: Union[ResumeDsl, Mapping[str, Any]], resume_data: Optional[Mapping[str, Any]] = None
) -> ResumeAst:
    return compile_dsl(dsl, "pdf", resume_data)
