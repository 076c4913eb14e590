from __future__ import annotations

import logging

from lynxcss.config import ResolverOptions
from lynxcss.model.stylesheet import Stylesheet
from lynxcss.transforms.attribute_selectors import AttributeSelectorTransform
from lynxcss.transforms.base import Transform
from lynxcss.transforms.remove_properties import (
    DEFAULT_REMOVED_PROPERTIES,
    RemovePropertiesTransform,
)
from lynxcss.transforms.variables import VariableResolutionTransform
from lynxcss.variables import VariableReport


def apply_transforms(
    stylesheet: Stylesheet,
    options: ResolverOptions | None = None,
    custom_transforms: list[Transform] | None = None,
    removed_properties: frozenset[str] | set[str] = DEFAULT_REMOVED_PROPERTIES,
    logger: logging.Logger | None = None,
) -> VariableReport:
    """Apply the built-in transforms (and any custom ones) to *stylesheet* in place.

    Built-ins run in order: property removal, attribute selectors, variable
    resolution.  Fresh instances are built per call so runs share no state.
    Returns the report of the variable resolution run.
    """
    resolver = VariableResolutionTransform(options, logger=logger)
    transforms: list[Transform] = [
        RemovePropertiesTransform(removed_properties),
        AttributeSelectorTransform(),
        resolver,
    ]
    if custom_transforms:
        transforms.extend(custom_transforms)
    for t in transforms:
        stylesheet = t.apply(stylesheet)
    return resolver.report  # type: ignore[return-value]


__all__ = [
    "DEFAULT_REMOVED_PROPERTIES",
    "AttributeSelectorTransform",
    "RemovePropertiesTransform",
    "Transform",
    "VariableResolutionTransform",
    "apply_transforms",
]
