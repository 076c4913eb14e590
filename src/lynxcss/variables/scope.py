"""Scope table: custom-property definitions grouped by selector."""

from __future__ import annotations

from typing import Iterator

from lynxcss.model.stylesheet import Stylesheet

__all__ = ["ScopeTable", "collect"]


class ScopeTable:
    """Mapping of selector -> (custom property name -> current value).

    Scopes and the names inside them keep insertion order, which is the
    order in which the cross-scope lookup visits them.
    """

    def __init__(self, scopes: dict[str, dict[str, str]] | None = None) -> None:
        self._scopes: dict[str, dict[str, str]] = {
            selector: dict(values) for selector, values in (scopes or {}).items()
        }

    def set(self, selector: str, name: str, value: str) -> None:
        self._scopes.setdefault(selector, {})[name] = value

    def get(self, selector: str, name: str) -> str | None:
        return self._scopes.get(selector, {}).get(name)

    def scope(self, selector: str) -> dict[str, str]:
        """Return the live mapping for *selector* (empty if unknown)."""
        return self._scopes.get(selector, {})

    def lookup(self, selector: str, name: str) -> str | None:
        """Find *name* in *selector*'s own scope, else in the first other scope defining it.

        The fallback to unrelated scopes is looser than the CSS cascade; it
        serves the common pattern of a single ``:root`` theme referenced
        from component rules.
        """
        own = self._scopes.get(selector)
        if own is not None and name in own:
            return own[name]
        for other, values in self._scopes.items():
            if other != selector and name in values:
                return values[name]
        return None

    def defines(self, name: str) -> bool:
        """Return True if any scope defines *name*."""
        return any(name in values for values in self._scopes.values())

    def selectors(self) -> list[str]:
        return list(self._scopes)

    def items(self) -> Iterator[tuple[str, dict[str, str]]]:
        return iter(self._scopes.items())

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Return a deep copy as plain dictionaries."""
        return {selector: dict(values) for selector, values in self._scopes.items()}

    def __contains__(self, selector: object) -> bool:
        return selector in self._scopes

    def __len__(self) -> int:
        return len(self._scopes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScopeTable):
            return NotImplemented
        return self._scopes == other._scopes

    def __repr__(self) -> str:
        return f"ScopeTable({self._scopes!r})"


def collect(stylesheet: Stylesheet) -> ScopeTable:
    """Build a fresh ScopeTable from every custom property in *stylesheet*.

    Later declarations of a name within the same scope win.
    """
    table = ScopeTable()
    for ctx, decl in stylesheet.declarations():
        if decl.is_custom:
            table.set(ctx.selector, decl.prop, decl.value)
    return table
