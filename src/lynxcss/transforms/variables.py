"""Variable resolution transform: inlines custom-property definitions."""

from __future__ import annotations

import logging

from lynxcss.config import ResolverOptions
from lynxcss.model.stylesheet import Stylesheet
from lynxcss.variables import VariableReport, resolve_variables


class VariableResolutionTransform:
    """Resolve ``var()`` references inside custom-property definitions.

    The report of the most recent run is kept on ``self.report``.
    """

    def __init__(
        self,
        options: ResolverOptions | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.options = options or ResolverOptions()
        self.logger = logger
        self.report: VariableReport | None = None

    def apply(self, stylesheet: Stylesheet) -> Stylesheet:
        self.report = resolve_variables(stylesheet, self.options, logger=self.logger)
        return stylesheet
