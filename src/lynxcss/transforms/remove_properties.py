"""Property removal transform: drops declarations the target runtime rejects."""

from __future__ import annotations

from lynxcss.model.stylesheet import AtRule, Declaration, Rule, Stylesheet

DEFAULT_REMOVED_PROPERTIES = frozenset({
    "color-scheme",
    "stroke-dasharray",
    "stroke-dashoffset",
})


class RemovePropertiesTransform:
    """Delete every declaration whose property name is in *properties*.

    Applies at any depth, including declarations nested in at-rule blocks.
    """

    def __init__(self, properties: frozenset[str] | set[str] = DEFAULT_REMOVED_PROPERTIES) -> None:
        self.properties = frozenset(properties)

    def apply(self, stylesheet: Stylesheet) -> Stylesheet:
        if not self.properties:
            return stylesheet
        self._prune(stylesheet.nodes)
        return stylesheet

    def _prune(self, nodes: list) -> None:
        for node in nodes:
            if isinstance(node, Rule):
                node.declarations[:] = [
                    d for d in node.declarations if d.prop not in self.properties
                ]
            elif isinstance(node, AtRule) and node.children is not None:
                node.children[:] = [
                    c
                    for c in node.children
                    if not (isinstance(c, Declaration) and c.prop in self.properties)
                ]
                self._prune(node.children)
