"""Attribute selector transform: rewrites ``[attr]`` / ``[attr=value]`` as classes.

    button[disabled]          ->  button.disabled
    .btn[data-size="lg"]      ->  .btn.data-size-lg
    [lang|=en], [a="b" i]     ->  unchanged
"""

from __future__ import annotations

import re

from lynxcss.model.stylesheet import Stylesheet

# [name] or [name=value] with an optionally quoted value; any other operator
# or a case flag makes the match fail and the selector is left alone.
_ATTRIBUTE_RE = re.compile(
    r"""
    \[\s*
    (?P<name>-?[A-Za-z_][\w-]*)
    \s*
    (?:=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<bare>[^\]\s"']+)))?
    \s*\]
    """,
    re.VERBOSE,
)

_UNSAFE_CLASS_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def _class_for(match: re.Match[str]) -> str:
    name = match.group("name")
    value = next(
        (v for v in (match.group("dq"), match.group("sq"), match.group("bare")) if v is not None),
        "",
    )
    value = _UNSAFE_CLASS_CHARS.sub("-", value)
    if value:
        return f".{name}-{value}"
    return f".{name}"


def rewrite_selector(selector: str) -> str:
    """Return *selector* with supported attribute selectors turned into classes."""
    if "[" not in selector:
        return selector
    return _ATTRIBUTE_RE.sub(_class_for, selector)


class AttributeSelectorTransform:
    """Rewrite attribute selectors into compound class selectors in every rule."""

    def apply(self, stylesheet: Stylesheet) -> Stylesheet:
        for rule in stylesheet.rules():
            rule.selector = rewrite_selector(rule.selector)
        return stylesheet
