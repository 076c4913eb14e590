"""lynxcss model layer -- public type re-exports."""

from lynxcss.model.diagnostic import Diagnostic, Severity
from lynxcss.model.stylesheet import (
    CUSTOM_PROPERTY_PREFIX,
    AtRule,
    Declaration,
    Rule,
    RuleContext,
    Stylesheet,
)

__all__ = [
    # stylesheet
    "CUSTOM_PROPERTY_PREFIX",
    "Declaration",
    "Rule",
    "AtRule",
    "RuleContext",
    "Stylesheet",
    # diagnostic
    "Severity",
    "Diagnostic",
]
