import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_TABLE_NAME = "Item"
DEFAULT_LOG_LEVEL = "INFO"
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    table_name: str = DEFAULT_TABLE_NAME
    log_level: str = DEFAULT_LOG_LEVEL
    # False keeps the legacy PUT/DELETE behaviour where a missing query string
    # surfaces as a 500 instead of a 400.
    strict_params: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        strict = env.get("STRICT_PARAMS", "true").strip().lower() not in _FALSY
        return cls(
            table_name=env.get("TABLE_NAME", DEFAULT_TABLE_NAME),
            log_level=_log_level(env.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)),
            strict_params=strict,
        )


def _log_level(value: str) -> str:
    level = value.strip().upper()
    # getLevelName maps known names to their numeric level
    if isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL
