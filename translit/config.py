"""
Runtime configuration for the translit command line.

Values come from dataclass defaults, then environment variables, then
command-line flags. Engines never read this object themselves: the CLI
passes the relevant values into the language factories explicitly.
"""

import dataclasses
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import ConfigurationError

ENV_PREFIX = "TRANSLIT_"


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(ENV_PREFIX + name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class TranslitConfig:
    """Settings shared by the CLI and batch processing."""
    placeholder: str = "?"
    verify: bool = True
    accept_all_ascii: bool = False
    workers: int = 1
    ocr_lang: Optional[str] = None
    log_level: str = "WARNING"

    def __post_init__(self):
        if len(self.placeholder) != 1:
            raise ConfigurationError(f"Placeholder must be a single character, got {self.placeholder!r}")
        if self.workers < 1:
            raise ConfigurationError(f"Worker count must be at least 1, got {self.workers}")

    @classmethod
    def from_env(cls) -> "TranslitConfig":
        """Create configuration from TRANSLIT_* environment variables."""
        defaults = cls()
        workers = os.getenv(ENV_PREFIX + "WORKERS")
        try:
            workers = int(workers) if workers else defaults.workers
        except ValueError:
            raise ConfigurationError(f"{ENV_PREFIX}WORKERS must be an integer, got {workers!r}") from None

        return cls(
            placeholder=os.getenv(ENV_PREFIX + "PLACEHOLDER", defaults.placeholder),
            verify=_env_flag("VERIFY", defaults.verify),
            accept_all_ascii=_env_flag("ACCEPT_ASCII", defaults.accept_all_ascii),
            workers=workers,
            ocr_lang=os.getenv(ENV_PREFIX + "OCR_LANG", defaults.ocr_lang),
            log_level=os.getenv(ENV_PREFIX + "LOG_LEVEL", defaults.log_level).upper(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)
