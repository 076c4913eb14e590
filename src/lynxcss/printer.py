"""Serialize a Stylesheet model back to CSS text."""

from __future__ import annotations

from lynxcss.model.stylesheet import AtRule, Declaration, Rule, Stylesheet

__all__ = ["stringify"]


def _declaration(decl: Declaration) -> str:
    if decl.value:
        return f"{decl.prop}: {decl.value};"
    return f"{decl.prop}:;"


def _node_lines(node: object, indent: str, depth: int) -> list[str]:
    pad = indent * depth
    if isinstance(node, Declaration):
        return [pad + _declaration(node)]
    if isinstance(node, Rule):
        lines = [f"{pad}{node.selector} {{"]
        lines.extend(pad + indent + _declaration(d) for d in node.declarations)
        lines.append(pad + "}")
        return lines
    if isinstance(node, AtRule):
        head = f"@{node.name} {node.params}" if node.params else f"@{node.name}"
        if node.children is None:
            return [f"{pad}{head};"]
        lines = [f"{pad}{head} {{"]
        for child in node.children:
            lines.extend(_node_lines(child, indent, depth + 1))
        lines.append(pad + "}")
        return lines
    raise TypeError(f"Cannot serialize {type(node).__name__}")


def stringify(stylesheet: Stylesheet, indent: str = "  ") -> str:
    """Render *stylesheet* as CSS, one declaration per line.

    Top-level nodes are separated by a blank line; non-empty output ends
    with a newline.
    """
    blocks = ["\n".join(_node_lines(node, indent, 0)) for node in stylesheet.nodes]
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"
