"""
ParserConfig: Behaviour switches for SimpleParser.
"""
from typing import Optional

from cursorscan.config.config import config as global_config


class ParserConfig:
    """Configuration for the simple parser."""

    def __init__(self, strict_quotes: Optional[bool] = None):
        # Fall back to the environment when not set explicitly.
        if strict_quotes is None:
            strict_quotes = global_config.strict_quotes
        self.strict_quotes = strict_quotes

    def __repr__(self) -> str:
        return f"ParserConfig(strict_quotes={self.strict_quotes})"
