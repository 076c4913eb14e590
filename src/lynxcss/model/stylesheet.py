"""Stylesheet model: Declaration, Rule, AtRule, and Stylesheet dataclasses.

The tree is mutable: transforms edit declaration values and remove
declarations in place, but never create or delete rules.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Protocol, Union

CUSTOM_PROPERTY_PREFIX = "--"


@dataclass
class Declaration:
    """A single ``prop: value`` pair inside a rule or at-rule block."""

    prop: str
    value: str

    @property
    def is_custom(self) -> bool:
        """Return True for custom properties (``--name``)."""
        return self.prop.startswith(CUSTOM_PROPERTY_PREFIX)


@dataclass
class Rule:
    """A style rule: a selector string and its ordered declarations."""

    selector: str
    declarations: list[Declaration] = field(default_factory=list)


@dataclass
class AtRule:
    """An at-rule such as ``@media``, ``@font-face`` or ``@import``.

    ``children`` is None for statement at-rules (``@import "x.css";``) and a
    list of rules, at-rules and declarations for block at-rules.
    """

    name: str
    params: str = ""
    children: list[Node] | None = None

    @property
    def selector(self) -> str:
        """Scope name used for declarations placed directly in this block."""
        return f"@{self.name} {self.params}".strip()

    @property
    def declarations(self) -> list[Declaration]:
        if self.children is None:
            return []
        return [c for c in self.children if isinstance(c, Declaration)]


Node = Union[Rule, AtRule, Declaration]


class RuleContext(Protocol):
    """Anything owning declarations under a selector string."""

    @property
    def selector(self) -> str: ...

    @property
    def declarations(self) -> list[Declaration]: ...


@dataclass
class Stylesheet:
    """A parsed stylesheet: top-level rules and at-rules in source order."""

    nodes: list[Rule | AtRule] = field(default_factory=list)

    def contexts(self) -> Iterator[RuleContext]:
        """Yield every rule context in document order.

        At-rule blocks are descended into; an at-rule block that holds
        declarations directly is itself yielded as a context.
        """
        yield from _walk_contexts(self.nodes)

    def declarations(self) -> Iterator[tuple[RuleContext, Declaration]]:
        """Yield ``(context, declaration)`` pairs in document order."""
        for ctx in self.contexts():
            for decl in ctx.declarations:
                yield ctx, decl

    def rules(self) -> Iterator[Rule]:
        """Yield every style rule, including those nested in at-rules."""
        for ctx in self.contexts():
            if isinstance(ctx, Rule):
                yield ctx


def _walk_contexts(nodes: list) -> Iterator[RuleContext]:
    for node in nodes:
        if isinstance(node, Rule):
            yield node
        elif isinstance(node, AtRule) and node.children is not None:
            if node.declarations:
                yield node
            yield from _walk_contexts(node.children)
