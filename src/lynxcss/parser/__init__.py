from lynxcss.parser.errors import ParseError
from lynxcss.parser.transformer import parse_css

__all__ = ["ParseError", "parse_css"]
