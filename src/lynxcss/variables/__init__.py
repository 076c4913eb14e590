"""Custom-property resolution: scope collection and the fixed-point resolver."""

from lynxcss.variables.references import VarReference, find_references
from lynxcss.variables.resolver import (
    MAX_ITERATIONS_MESSAGE,
    MAX_VALUE_LENGTH,
    Resolution,
    VariableReport,
    diagnose,
    resolve,
    resolve_variables,
    write_back,
)
from lynxcss.variables.scope import ScopeTable, collect

__all__ = [
    "VarReference",
    "find_references",
    "ScopeTable",
    "collect",
    "Resolution",
    "VariableReport",
    "MAX_ITERATIONS_MESSAGE",
    "MAX_VALUE_LENGTH",
    "resolve",
    "write_back",
    "diagnose",
    "resolve_variables",
]
