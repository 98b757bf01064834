from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from potd.core.error_dialect import InvalidRequest
from potd.core.models import DEFAULT_SEED

DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class PotdConfig:
    default_seed: str = DEFAULT_SEED
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def _parse_seed(value: str, field: str) -> str:
    raw = value.strip()
    if not raw:
        raise InvalidRequest(f"{field} must not be empty")
    return raw


def _parse_log_level(value: str, field: str) -> str:
    raw = value.strip().upper()
    if raw not in _LOG_LEVELS:
        raise InvalidRequest(f"{field} must be one of {', '.join(_LOG_LEVELS)}")
    return raw


def load_config(environ: Optional[Mapping[str, str]] = None) -> PotdConfig:
    env = os.environ if environ is None else environ
    return PotdConfig(
        default_seed=_parse_seed(env.get("POTD_DEFAULT_SEED", DEFAULT_SEED), "POTD_DEFAULT_SEED"),
        log_level=_parse_log_level(env.get("POTD_LOG_LEVEL", DEFAULT_LOG_LEVEL), "POTD_LOG_LEVEL"),
    )
