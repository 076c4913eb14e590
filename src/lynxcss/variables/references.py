"""Locating and rewriting ``var()`` references inside declaration values.

References are found with balanced-parenthesis scanning rather than a flat
regex so that ``var(--a, rgb(0 0 0))`` keeps its whole fallback and
``calc(var(--x) * 2)`` only matches the inner ``var(--x)``.  References
nested inside another reference's fallback are part of that fallback text
and are not reported separately.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

__all__ = ["VarReference", "find_references", "has_references", "rewrite_references"]

# "var(" not preceded by an identifier character (so "somevar(" is skipped).
_VAR_OPEN_RE = re.compile(r"(?<![\w-])var\(")


@dataclass(frozen=True)
class VarReference:
    """One ``var(NAME[, FALLBACK])`` occurrence in a value string.

    ``start``/``end`` delimit the full ``var(...)`` text (end exclusive).
    ``fallback`` is None when absent or blank.
    """

    name: str
    fallback: str | None
    start: int
    end: int

    @property
    def has_fallback(self) -> bool:
        return self.fallback is not None


def _closing_paren(value: str, open_index: int) -> int:
    """Return the index of the parenthesis closing the one at *open_index*, or -1."""
    depth = 0
    quote = ""
    i = open_index
    while i < len(value):
        ch = value[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = ""
        elif ch in "\"'":
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return -1


def _split_arguments(inner: str) -> tuple[str, str | None]:
    """Split ``NAME, FALLBACK`` on the first top-level comma."""
    depth = 0
    quote = ""
    for i, ch in enumerate(inner):
        if quote:
            if ch == quote:
                quote = ""
        elif ch in "\"'":
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        elif ch == "," and depth == 0:
            fallback = inner[i + 1 :].strip()
            return inner[:i].strip(), fallback or None
    return inner.strip(), None


def find_references(value: str) -> list[VarReference]:
    """Return the ``var()`` references in *value*, left to right.

    An unterminated ``var(`` ends the scan; it is not a reference.
    """
    refs: list[VarReference] = []
    pos = 0
    while True:
        match = _VAR_OPEN_RE.search(value, pos)
        if match is None:
            break
        close = _closing_paren(value, match.end() - 1)
        if close == -1:
            break
        name, fallback = _split_arguments(value[match.end() : close])
        refs.append(VarReference(name=name, fallback=fallback, start=match.start(), end=close + 1))
        pos = close + 1
    return refs


def has_references(value: str) -> bool:
    """Return True if *value* contains at least one ``var()`` reference."""
    return "var(" in value and bool(find_references(value))


def rewrite_references(
    value: str, replace: Callable[[VarReference], str | None]
) -> tuple[str, bool]:
    """Splice replacements into *value*.

    *replace* returns the text for a reference, or None to leave it as is.
    Returns the rewritten string and whether any substitution happened.
    Substituted text is not rescanned.
    """
    parts: list[str] = []
    last = 0
    changed = False
    for ref in find_references(value):
        replacement = replace(ref)
        if replacement is None:
            continue
        parts.append(value[last : ref.start])
        parts.append(replacement)
        last = ref.end
        changed = True
    if not changed:
        return value, False
    parts.append(value[last:])
    return "".join(parts), True
