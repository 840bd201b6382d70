"""
SimpleParser: Compound readers for hand-written text parsing.

Builds delimiter skipping, whitespace-separated token reads, quoted literal
extraction and non-consuming lookahead on top of the TextCursor primitives.
Every reader is fail-soft: "nothing matched" is reported as False or an
empty string, never as an exception (unless strict quotes are enabled).
"""
import logging
from typing import Optional

from .text_cursor import TextCursor
from .parser_config import ParserConfig
from .errors import UnterminatedQuoteError

logger = logging.getLogger(__name__)

QUOTE_CHAR = '"'


class SimpleParser(TextCursor):
    """
    A stateful scanner over a single line or token of text.

    Instances are private to one logical scan and are not thread-safe.
    """

    def __init__(self, text: str = "", config: Optional[ParserConfig] = None):
        """
        Initialize the parser.

        Args:
            text: The complete text to scan.
            config: Parser configuration. Uses defaults if not provided.
        """
        super().__init__(text)
        self._config = config or ParserConfig()
        self._last_quote_terminated: Optional[bool] = None
        logger.debug(f"SimpleParser initialized over {len(text)} characters (strict_quotes={self._config.strict_quotes})")

    @property
    def config(self) -> ParserConfig:
        """Get the parser configuration."""
        return self._config

    @property
    def last_quote_terminated(self) -> Optional[bool]:
        """
        Whether the last quoted literal read had a closing quote.

        None until read_quoted_string() has consumed a literal, and after a
        call that returned early because the cursor was not on a quote.
        """
        return self._last_quote_terminated

    def parse_through_comma(self) -> bool:
        """
        Skip whitespace and consume a comma if one follows.

        Whitespace is consumed even when no comma is found, so the cursor
        always ends on the next meaningful character.

        Returns:
            True if a comma was consumed.
        """
        self.eat_whitespace()
        if self.peek() == ",":
            self.advance()
            return True
        return False

    def read_to_whitespace(self) -> str:
        """Consume and return the run of non-whitespace characters at the cursor."""
        chars = []
        while not self.eol() and not self.is_whitespace():
            chars.append(self.read_char())
        return "".join(chars)

    def look_ahead(self, pattern: str, ignore_case: bool = False) -> bool:
        """
        Check whether the upcoming characters match a pattern, without consuming them.

        Args:
            pattern: The text expected at the cursor.
            ignore_case: Compare characters case-insensitively.

        Returns:
            True if the next len(pattern) characters equal the pattern.
        """
        if self.remaining() < len(pattern):
            return False

        start = self.get_position()
        window = self.substring(start, start + len(pattern))
        if not ignore_case:
            return window == pattern

        for expected, actual in zip(pattern, window):
            if expected.lower() != actual.lower():
                return False
        return True

    def read_quoted_string(self) -> str:
        """
        Read a double-quoted literal starting at the cursor.

        If the cursor is not on a double quote, returns "" without moving.
        Otherwise consumes the opening quote, the interior up to the next
        double quote (no escape processing) and one position for the closing
        quote. An unterminated literal yields the text read up to the end of
        input; in strict-quote mode it raises instead.

        Returns:
            The interior text of the literal.

        Raises:
            UnterminatedQuoteError: If strict quotes are enabled and the
                literal reaches end-of-input without a closing quote.
        """
        if self.peek() != QUOTE_CHAR:
            self._last_quote_terminated = None
            return ""

        start = self.get_position()
        self.advance()
        chars = []
        while not self.eol() and self.peek() != QUOTE_CHAR:
            chars.append(self.read_char())

        terminated = not self.eol()
        # Closing quote; clamped to a no-op when the literal ran off the end.
        self.advance()
        self._last_quote_terminated = terminated
        text = "".join(chars)

        if not terminated:
            if self._config.strict_quotes:
                raise UnterminatedQuoteError(start, text)
            logger.warning(f"Quoted string starting at position {start} reached end of input without a closing quote")

        return text
