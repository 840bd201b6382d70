"""
Exceptions raised by the cursor scanner.

Most scanner operations are fail-soft and never raise; these are reserved
for the explicitly opted-in strict behaviours.
"""


class ScannerError(Exception):
    """Base exception class for scanner errors."""
    pass


class UnterminatedQuoteError(ScannerError):
    """Raised in strict-quote mode when a quoted literal reaches end-of-input unclosed."""

    def __init__(self, start: int, text: str):
        self.start = start
        self.text = text
        super().__init__(
            f"Unterminated quoted string starting at position {start}: {text!r}"
        )
