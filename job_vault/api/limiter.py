"""Shared rate limiter for the API."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from job_vault.config import Settings, settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

# Route limits are resolved per request so the most recent app config applies.
limits = {"export": settings.export_rate_limit, "seed": settings.seed_rate_limit}


def configure_limiter(config: Settings) -> None:
    """Apply a config's rate limit settings to the shared limiter."""
    limiter.enabled = config.rate_limit_enabled
    limits["export"] = config.export_rate_limit
    limits["seed"] = config.seed_rate_limit


def export_limit() -> str:
    return limits["export"]


def seed_limit() -> str:
    return limits["seed"]
