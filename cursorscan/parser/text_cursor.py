"""
TextCursor: A character cursor over an immutable text buffer.

This encapsulates position arithmetic, single-character inspection and the
single-slot mark/reset checkpoint, so compound readers never touch the
buffer index directly.
"""
from typing import Optional

WHITESPACE_CHARS = " \t\n\r"


class TextCursor:
    """
    Manages a fixed string buffer, a cursor position and one saved mark.

    The position always satisfies ``0 <= position <= len(buffer)``. Reaching
    the end of the buffer is never an error: reads return ``None`` and
    advances become no-ops.
    """

    def __init__(self, text: str = ""):
        """Initialize the cursor at position 0 with the mark at position 0."""
        self._buffer: str = text
        self._pos: int = 0
        self._marked: int = 0

    def remaining(self) -> int:
        """Return the number of characters left to read."""
        return max(len(self._buffer) - self._pos, 0)

    def eol(self) -> bool:
        """
        Check whether the cursor has reached the end of the buffer.

        Returns:
            True if there is nothing left to read.
        """
        return self._pos >= len(self._buffer)

    def peek(self) -> Optional[str]:
        """
        Look at the character at the current cursor position without advancing.

        Returns:
            The character at the cursor, or None if at the end.
        """
        if self._pos < len(self._buffer):
            return self._buffer[self._pos]
        return None

    def advance(self) -> None:
        """Move the cursor forward by one position."""
        if not self.eol():
            self._pos += 1

    def advance_by(self, count: int) -> None:
        """
        Move the cursor forward by a specified number of positions.

        Args:
            count: The number of characters to advance.

        Raises:
            ValueError: If count is negative.
        """
        if count < 0:
            raise ValueError(f"Cannot advance by a negative count ({count}).")
        self._pos = min(len(self._buffer), self._pos + count)

    def read_char(self) -> Optional[str]:
        """Consume and return the current character, or None at the end."""
        if self.eol():
            return None
        char = self._buffer[self._pos]
        self._pos += 1
        return char

    def is_whitespace(self) -> bool:
        """True if the current character is a space, tab, newline or carriage return."""
        char = self.peek()
        return char is not None and char in WHITESPACE_CHARS

    def is_identifier(self) -> bool:
        """True if the current character is a letter, a digit or an underscore."""
        char = self.peek()
        if char is None:
            return False
        return char.isalnum() or char == "_"

    def eat_whitespace(self) -> None:
        while self.is_whitespace():
            self.advance()

    def mark(self) -> None:
        """Save the current position, replacing any previously saved one."""
        self._marked = self._pos

    def reset(self) -> None:
        """Restore the position saved by the last mark() (0 if never marked)."""
        self._pos = self._marked

    def get_position(self) -> int:
        """
        Return the current zero-based position of the cursor.

        Returns:
            The current cursor position.
        """
        return self._pos

    def get_mark(self) -> int:
        """Return the saved mark position."""
        return self._marked

    def get_buffer_length(self) -> int:
        """
        Return the total length of the buffer.

        Returns:
            The length of the buffer.
        """
        return len(self._buffer)

    def substring(self, start: int, end: Optional[int] = None) -> str:
        """
        Extract a substring from the buffer.

        Args:
            start: The starting index.
            end: The ending index (exclusive). If None, reads to end of buffer.

        Returns:
            The extracted substring.
        """
        if end is None:
            return self._buffer[start:]
        return self._buffer[start:end]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self._pos}, length={len(self._buffer)}, mark={self._marked})"
