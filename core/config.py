# core/config.py
# Runtime settings for the doctor. Read from the environment at call time:
#   SCRIPT_DOCTOR_SEED       integer seed for reproducible rewrites (optional)
#   SCRIPT_DOCTOR_LOG_LEVEL  level name for configure_logging (default WARNING)

from __future__ import annotations

import logging
import os
import random
from typing import Mapping, Optional

from pydantic import BaseModel

logger = logging.getLogger(__name__)

SEED_ENV = "SCRIPT_DOCTOR_SEED"
LOG_LEVEL_ENV = "SCRIPT_DOCTOR_LOG_LEVEL"


class DoctorSettings(BaseModel):
    seed: Optional[int] = None
    log_level: str = "WARNING"


def load_settings(env: Optional[Mapping[str, str]] = None) -> DoctorSettings:
    env = os.environ if env is None else env

    seed = None
    raw = (env.get(SEED_ENV) or "").strip()
    if raw:
        try:
            seed = int(raw)
        except ValueError:
            logger.warning("ignoring non-integer %s=%r", SEED_ENV, raw)

    level = (env.get(LOG_LEVEL_ENV) or "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("unknown log level %r; using WARNING", level)
        level = "WARNING"
    return DoctorSettings(seed=seed, log_level=level)


def make_rng(
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    settings: Optional[DoctorSettings] = None,
) -> random.Random:
    """Per-call random source: explicit rng, then seed, then configured seed, then entropy."""
    if rng is not None:
        return rng
    if seed is not None:
        return random.Random(seed)
    settings = settings or load_settings()
    if settings.seed is not None:
        return random.Random(settings.seed)
    return random.Random()


def configure_logging(level: Optional[str] = None) -> None:
    """Basic console logging for scripts; the library never calls this itself."""
    level = level or load_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
