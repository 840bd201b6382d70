from dotenv import load_dotenv
import os

load_dotenv()

ENV_STRICT_QUOTES = "CURSORSCAN_STRICT_QUOTES"
TRUTHY_VALUES = ("1", "true", "yes", "on")


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY_VALUES


class Config:
    @property
    def strict_quotes(self) -> bool:
        return env_flag(ENV_STRICT_QUOTES)

config = Config()
