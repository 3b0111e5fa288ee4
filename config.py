#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LilyPad Focus configuration.
Read from environment variables, with defaults for a local desktop run.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from storage.repos import HABITS_KEY

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer, using %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("%s=%r must be positive, using %s", name, raw, default)
        return default
    return value


@dataclass(frozen=True)
class AppConfig:
    db_path: str = "lilypad.db"
    storage_key: str = HABITS_KEY
    tick_ms: int = 1000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "AppConfig":
        env = os.environ if env is None else env

        level = (env.get("LILYPAD_LOG_LEVEL") or cls.log_level).strip().upper()
        if level not in LOG_LEVELS:
            logger.warning("Unknown LILYPAD_LOG_LEVEL %r, using INFO", level)
            level = "INFO"

        return cls(
            db_path=env.get("LILYPAD_DB_PATH") or cls.db_path,
            storage_key=env.get("LILYPAD_STORAGE_KEY") or cls.storage_key,
            tick_ms=_positive_int(env, "LILYPAD_TICK_MS", cls.tick_ms),
            log_level=level,
        )
