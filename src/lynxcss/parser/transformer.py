"""Lark Transformer that converts a CSS parse tree into a Stylesheet model."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from lynxcss.model.stylesheet import AtRule, Declaration, Rule, Stylesheet
from lynxcss.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


def _collapse(raw: str) -> str:
    """Collapse runs of whitespace (including newlines) to single spaces."""
    return " ".join(raw.split())


class CssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into stylesheet model objects."""

    def declaration(self, items: list[Token]) -> Declaration:
        prop = str(items[0]).strip()
        value = str(items[1]).strip() if len(items) > 1 else ""
        return Declaration(prop=prop, value=value)

    def rule(self, items: list[object]) -> Rule:
        selector = _collapse(str(items[0]))
        declarations = [item for item in items[1:] if isinstance(item, Declaration)]
        return Rule(selector=selector, declarations=declarations)

    def block(self, items: list[object]) -> list[object]:
        return list(items)

    def at_rule(self, items: list[object]) -> AtRule:
        name = str(items[0])[1:]
        params = ""
        children = None
        for item in items[1:]:
            if isinstance(item, list):
                children = item
            else:
                params = _collapse(str(item))
        return AtRule(name=name, params=params, children=children)

    def start(self, items: list[object]) -> Stylesheet:
        nodes = [item for item in items if isinstance(item, (Rule, AtRule))]
        return Stylesheet(nodes=nodes)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )


def parse_css(source: str) -> Stylesheet:
    """Parse CSS source text into a Stylesheet model."""
    try:
        tree = _parser().parse(source)
    except UnexpectedInput as e:
        raise ParseError.from_lark(e) from e
    return CssTransformer().transform(tree)
