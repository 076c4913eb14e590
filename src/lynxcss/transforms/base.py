"""Base protocol for stylesheet transforms."""

from __future__ import annotations

from typing import Protocol

from lynxcss.model.stylesheet import Stylesheet


class Transform(Protocol):
    """A stylesheet transformation step; edits the tree in place and returns it."""

    def apply(self, stylesheet: Stylesheet) -> Stylesheet: ...
