"""
Runtime configuration.

Values come from keyword arguments first, then from the environment:

    KIZHI_LOG_LEVEL   logging level for the CLI (default WARNING)
    KIZHI_PROMPT      REPL prompt (default "> ")
    KIZHI_STRICT      reject "end set code" without a pending "set code"
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUE_VALUES = {"1", "true", "yes", "on"}
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_flag(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUE_VALUES


def _env_log_level(value: Optional[str], default: str) -> str:
    """Unknown levels fall back to *default*."""
    level = (value or "").strip().upper()
    return level if level in LOG_LEVELS else default


@dataclass
class KizhiConfig:
    log_level: str = "WARNING"
    prompt: str = "> "
    strict_code_brackets: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None,
                 **overrides) -> "KizhiConfig":
        env = os.environ if environ is None else environ
        config = cls(
            log_level=_env_log_level(env.get("KIZHI_LOG_LEVEL"), cls.log_level),
            prompt=env.get("KIZHI_PROMPT", cls.prompt),
            strict_code_brackets=_env_flag(env.get("KIZHI_STRICT")),
        )
        for key, value in overrides.items():
            if value is not None:
                setattr(config, key, value)
        return config
