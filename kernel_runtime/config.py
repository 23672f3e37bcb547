# kernel_runtime/config.py
"""
Runtime settings (culture, logging).

Environment overrides:
    KERNEL_RUNTIME_CULTURE    culture identifier, e.g. "en-US" ("" = invariant)
    KERNEL_RUNTIME_LOG_LEVEL  DEBUG / INFO / WARNING / ERROR / CRITICAL
"""
from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from babel import Locale
from pydantic import BaseModel, Field, field_validator

from .core.culture import resolve_culture

ENV_PREFIX = "KERNEL_RUNTIME_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class RuntimeSettings(BaseModel):
    culture: str = Field("", description="Culture used to render function results ('' = invariant)")
    log_level: str = Field("WARNING", description="Level of the kernel_runtime logger")

    @field_validator("culture")
    @classmethod
    def _check_culture(cls, v: str) -> str:
        v = v.strip()
        # Raises ValueError for unknown identifiers
        resolve_culture(v)
        return v

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {v!r}")
        return level

    @property
    def locale(self) -> Optional[Locale]:
        return resolve_culture(self.culture)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "RuntimeSettings":
        env = os.environ if env is None else env
        values = {}
        for field_name in cls.model_fields:
            key = f"{ENV_PREFIX}{field_name.upper()}"
            if key in env:
                values[field_name] = env[key]
        return cls(**values)

    def configure_logging(self) -> None:
        logging.getLogger("kernel_runtime").setLevel(self.log_level)
