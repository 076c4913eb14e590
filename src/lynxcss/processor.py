"""End-to-end processing: parse CSS text, run the transforms, print the result."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from lynxcss.config import ResolverOptions
from lynxcss.model.diagnostic import Diagnostic
from lynxcss.model.stylesheet import Stylesheet
from lynxcss.parser import parse_css
from lynxcss.printer import stringify
from lynxcss.transforms import DEFAULT_REMOVED_PROPERTIES, Transform, apply_transforms
from lynxcss.variables import VariableReport


@dataclass
class ProcessResult:
    """Output CSS, the transformed tree, and the variable resolution report."""

    css: str
    stylesheet: Stylesheet
    report: VariableReport

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.report.diagnostics

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.report.diagnostics if d.is_warning]


def process_css(
    source: str,
    options: ResolverOptions | None = None,
    custom_transforms: list[Transform] | None = None,
    removed_properties: frozenset[str] | set[str] = DEFAULT_REMOVED_PROPERTIES,
    logger: logging.Logger | None = None,
) -> ProcessResult:
    """Parse *source*, apply all transforms, and serialize the result.

    Raises :class:`lynxcss.parser.ParseError` on malformed input.
    """
    stylesheet = parse_css(source)
    report = apply_transforms(
        stylesheet,
        options=options,
        custom_transforms=custom_transforms,
        removed_properties=removed_properties,
        logger=logger,
    )
    return ProcessResult(css=stringify(stylesheet), stylesheet=stylesheet, report=report)
