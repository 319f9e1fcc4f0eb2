"""Wellscore server entry point: ``python -m wellscore.core.server.main``.

Startup order: settings, logging, bind guard, app (weights and storage), serve.
Configuration errors surface before the transport is opened.
"""

from __future__ import annotations

import logging
from ipaddress import ip_address

from wellscore.core.config.settings import Settings, get_settings
from wellscore.core.server.app import create_app

logger = logging.getLogger(__name__)

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class UnsafeBindError(RuntimeError):
    """Raised when the configured host would expose the tools beyond loopback."""


def _is_loopback_host(host: str) -> bool:
    if host == "localhost":
        return True
    try:
        return ip_address(host).is_loopback
    except ValueError:
        return False


def log_level(name: str) -> int:
    """Map a ``WELLSCORE_LOG_LEVEL`` value to a :mod:`logging` level.

    Raises:
        ValueError: If ``name`` is not one of :data:`LOG_LEVELS`.
    """
    normalized = name.strip().lower()
    if normalized not in LOG_LEVELS:
        raise ValueError(
            f"WELLSCORE_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}; got {name!r}"
        )
    return logging.getLevelName(normalized.upper())


def check_bind(settings: Settings) -> None:
    """Refuse a non-loopback host unless the insecure-bind override is set."""
    host = settings.wellscore_host
    if _is_loopback_host(host):
        return
    if settings.wellscore_allow_insecure_bind:
        logger.warning(
            "Binding to non-loopback host %s with no auth layer in front of the tools",
            host,
        )
        return
    raise UnsafeBindError(
        f"Refusing to bind Wellscore to non-loopback host {host!r} without an auth "
        "layer. Set WELLSCORE_ALLOW_INSECURE_BIND=true to override (unsafe)."
    )


def run() -> None:
    """Validate configuration, build the app and serve it over Streamable HTTP."""
    settings = get_settings()
    logging.basicConfig(level=log_level(settings.wellscore_log_level), format=LOG_FORMAT)
    check_bind(settings)

    mcp = create_app()
    logger.info(
        "Starting Wellscore server on %s:%d",
        settings.wellscore_host,
        settings.wellscore_port,
    )
    mcp.run(
        transport="streamable-http",
        host=settings.wellscore_host,
        port=settings.wellscore_port,
    )


if __name__ == "__main__":
    run()
