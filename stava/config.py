"""Runtime settings for the stava command line.

Values come from the environment, with a .env file in the working directory
loaded first. Empty values count as unset.

Env:
  STAVA_WORDS_PATH   default dictionary text file (unset: no default)
  STAVA_LOG_LEVEL    logging level name (default: WARNING)
  STAVA_ENCODING     encoding used to read dictionary files (default: utf-8)
"""

import codecs
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_ENCODING = "utf-8"


@dataclass
class Settings:
    words_path: Optional[str] = None
    log_level: int = logging.WARNING
    encoding: str = DEFAULT_ENCODING


def _parse_log_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name!r}")
    return level


def _parse_encoding(name: str) -> str:
    try:
        codecs.lookup(name)
    except LookupError:
        raise ValueError(f"Unknown encoding: {name!r}") from None
    return name


def load_settings() -> Settings:
    load_dotenv()
    words_path = os.getenv("STAVA_WORDS_PATH") or None
    return Settings(
        words_path=words_path,
        log_level=_parse_log_level(os.getenv("STAVA_LOG_LEVEL") or DEFAULT_LOG_LEVEL),
        encoding=_parse_encoding(os.getenv("STAVA_ENCODING") or DEFAULT_ENCODING),
    )
