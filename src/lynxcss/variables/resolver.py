"""Fixed-point resolution of custom properties.

A run has four phases over one explicit ScopeTable:

1. collect -- gather raw custom-property values per selector;
2. resolve -- rewrite ``var()`` references until a full pass changes
   nothing or the iteration cap is hit;
3. write back -- copy resolved values onto custom-property declarations;
4. diagnose -- warn about references that nothing can satisfy.

Only custom-property definitions are inlined.  ``var()`` usages in ordinary
style declarations are always left exactly as written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from lynxcss.config import DEFAULT_MAX_ITERATIONS, ResolverOptions, check_max_iterations
from lynxcss.model.diagnostic import Diagnostic, Severity
from lynxcss.model.stylesheet import Stylesheet
from lynxcss.variables.references import (
    VarReference,
    find_references,
    has_references,
    rewrite_references,
)
from lynxcss.variables.scope import ScopeTable, collect

__all__ = [
    "MAX_ITERATIONS_MESSAGE",
    "MAX_VALUE_LENGTH",
    "Resolution",
    "VariableReport",
    "resolve",
    "write_back",
    "diagnose",
    "resolve_variables",
]

MAX_ITERATIONS_MESSAGE = "Maximum iterations reached. There might be circular references."

# Longest value resolve() stores before treating the run as circular.
MAX_VALUE_LENGTH = 1 << 20


@dataclass
class Resolution:
    """Outcome of the fixed-point loop.

    Attributes:
        table: The (mutated) scope table.
        iterations: Number of passes run, including the final no-op pass.
        reached_limit: True when the cap was hit while values were still
            changing -- usually a circular definition.
    """

    table: ScopeTable
    iterations: int
    reached_limit: bool


@dataclass
class VariableReport:
    """Result of a full resolution run over one stylesheet."""

    resolution: Resolution
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def table(self) -> ScopeTable:
        return self.resolution.table


def _substitution_for(table: ScopeTable, selector: str) -> Callable[[VarReference], str | None]:
    def substitute(ref: VarReference) -> str | None:
        value = table.lookup(selector, ref.name)
        if value is not None:
            return value
        return ref.fallback

    return substitute


def _grown_length(value: str, substitute: Callable[[VarReference], str | None]) -> int:
    """Length *value* would have after one rewrite, without building it."""
    length = len(value)
    for ref in find_references(value):
        replacement = substitute(ref)
        if replacement is not None:
            length += len(replacement) - (ref.end - ref.start)
    return length


def resolve(table: ScopeTable, max_iterations: int = DEFAULT_MAX_ITERATIONS) -> Resolution:
    """Rewrite references in *table* in place until a fixed point or the cap.

    Every substitution counts as a change, even one that reproduces the same
    text, so self-referential chains run into the cap instead of looking
    converged.  A cycle that repeats its own reference (``--a: var(--a)
    var(--a)``) grows with every pass; once a rewrite would push a value past
    MAX_VALUE_LENGTH the loop stops early and reports the limit as reached.
    """
    check_max_iterations(max_iterations)

    iterations = 0
    changed = True
    while changed and iterations < max_iterations:
        changed = False
        iterations += 1
        for selector, values in table.items():
            substitute = _substitution_for(table, selector)
            for name in list(values):
                value = values[name]
                if not has_references(value):
                    continue
                if _grown_length(value, substitute) > MAX_VALUE_LENGTH:
                    return Resolution(table=table, iterations=iterations, reached_limit=True)
                new_value, substituted = rewrite_references(value, substitute)
                if substituted:
                    values[name] = new_value
                    changed = True

    return Resolution(table=table, iterations=iterations, reached_limit=changed)


def write_back(stylesheet: Stylesheet, table: ScopeTable) -> None:
    """Overwrite every custom-property declaration with its resolved value."""
    for ctx, decl in stylesheet.declarations():
        if not decl.is_custom:
            continue
        value = table.get(ctx.selector, decl.prop)
        if value is not None:
            decl.value = value


def diagnose(stylesheet: Stylesheet, table: ScopeTable) -> list[Diagnostic]:
    """Report each reference with no definition in any scope and no fallback."""
    diagnostics: list[Diagnostic] = []
    for ctx, decl in stylesheet.declarations():
        for ref in find_references(decl.value):
            if ref.has_fallback or table.lookup(ctx.selector, ref.name) is not None:
                continue
            diagnostics.append(
                Diagnostic(
                    rule="undefined_variable",
                    severity=Severity.WARNING,
                    message=f"Undefined variable '{ref.name}' used in '{ctx.selector}'",
                    selector=ctx.selector,
                    variable=ref.name,
                )
            )
    return diagnostics


def resolve_variables(
    stylesheet: Stylesheet,
    options: ResolverOptions | None = None,
    logger: logging.Logger | None = None,
) -> VariableReport:
    """Resolve every custom property in *stylesheet* in place.

    Warnings are returned as diagnostics and logged on the ``lynxcss``
    logger.  With ``options.log_warnings`` off, neither happens.
    """
    options = options or ResolverOptions()
    log = logger or logging.getLogger("lynxcss")

    table = collect(stylesheet)
    resolution = resolve(table, options.max_iterations)
    write_back(stylesheet, table)
    log.debug(
        "Resolved %d scope(s) in %d pass(es)", len(table), resolution.iterations
    )

    if not options.log_warnings:
        return VariableReport(resolution=resolution)

    diagnostics: list[Diagnostic] = []
    if resolution.reached_limit:
        diagnostics.append(
            Diagnostic(
                rule="max_iterations",
                severity=Severity.WARNING,
                message=MAX_ITERATIONS_MESSAGE,
            )
        )
    diagnostics.extend(diagnose(stylesheet, table))

    for diag in diagnostics:
        log.warning("%s", diag.message)
    return VariableReport(resolution=resolution, diagnostics=diagnostics)
