"""Miljøbasert konfigurasjon av Cache-Control-policyen."""

import logging
import os

from cache_headers.cache_policy import DEFAULT_MAX_AGE, CacheControlConfig

logger = logging.getLogger(__name__)

# Verdier som slår på speiling av request-headeren
TRUTHY_VALUES = {"1", "true", "yes", "on"}


def _get_max_age() -> int:
    raw = os.getenv("CACHE_CONTROL_MAX_AGE")
    if raw is None or not raw.strip():
        return DEFAULT_MAX_AGE
    try:
        max_age = int(raw)
    except ValueError:
        raise ValueError(
            f"CACHE_CONTROL_MAX_AGE must be a non-negative integer, got {raw!r}"
        )
    if max_age < 0:
        raise ValueError(
            f"CACHE_CONTROL_MAX_AGE must be a non-negative integer, got {raw!r}"
        )
    return max_age


def get_cache_control_config() -> CacheControlConfig:
    """
    Bygg Cache-Control-policyen fra miljøvariabler.

    CACHE_CONTROL_OVERRIDE vinner hvis den er satt. Ellers brukes
    standardpolicyen med CACHE_CONTROL_MAX_AGE og CACHE_CONTROL_MIRROR_REQUEST.
    """
    override = os.getenv("CACHE_CONTROL_OVERRIDE")
    if override and override.strip():
        logger.info(f"Using fixed Cache-Control override: {override.strip()}")
        return CacheControlConfig.override(override.strip())

    mirror = os.getenv("CACHE_CONTROL_MIRROR_REQUEST", "").strip().lower()
    config = CacheControlConfig.default(
        max_age=_get_max_age(),
        mirror_request=mirror in TRUTHY_VALUES,
    )
    logger.info(
        f"Using status based Cache-Control policy "
        f"(max_age={config.max_age}, mirror_request={config.mirror_request})"
    )
    return config
