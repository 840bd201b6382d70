# Parser package
"""
Cursor scanner for hand-written text parsing.

Main components:
- TextCursor: Position, peek/advance, whitespace checks and mark/reset
- SimpleParser: Compound readers (comma skipping, quoted strings, lookahead)
- ParserConfig: Behaviour switches such as strict quote handling
"""
from .text_cursor import TextCursor
from .simple_parser import SimpleParser
from .parser_config import ParserConfig
from .errors import ScannerError, UnterminatedQuoteError

__all__ = [
    "TextCursor",
    "SimpleParser",
    "ParserConfig",
    "ScannerError",
    "UnterminatedQuoteError",
]
