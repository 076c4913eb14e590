"""lynxcss -- resolves CSS custom properties for runtimes without ``var()`` cascading."""

__version__ = "0.1.0"

from lynxcss.config import ResolverOptions  # noqa: E402
from lynxcss.parser import ParseError, parse_css  # noqa: E402
from lynxcss.printer import stringify  # noqa: E402
from lynxcss.processor import ProcessResult, process_css  # noqa: E402
from lynxcss.variables import resolve_variables  # noqa: E402

__all__ = [
    "__version__",
    "ResolverOptions",
    "ParseError",
    "parse_css",
    "stringify",
    "ProcessResult",
    "process_css",
    "resolve_variables",
]
