"""Structured logging for the ``shared_secrets`` logger hierarchy.

Every module logs through ``structlog.get_logger(__name__)``.  The records are
routed to a single stderr handler installed on the ``shared_secrets`` stdlib
logger, leaving the root logger (and whatever an embedding application put
there) untouched.  stdout stays free for command output.

A record is one JSON line::

    {"ts": "...", "level": "info", "component": "crypto.cipher", "msg": "key split", "n": 5, "k": 3}

``component`` is the emitting module relative to the package.
"""
from __future__ import annotations

import logging
import sys

import structlog

from shared_secrets.config import LOG_LEVEL

PACKAGE_LOGGER = "shared_secrets"


def configure_logging(level: str | None = None) -> None:
    """(Re)configure logging at *level*, defaulting to ``SHARED_SECRETS_LOG_LEVEL``.

    Unknown level names fall back to ``warning``.  Calling this again replaces
    the previous handler rather than stacking another one.
    """
    numeric_level = resolve_level(level or LOG_LEVEL)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(numeric_level)
    package_logger.propagate = False

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _add_component,
            structlog.processors.EventRenamer("msg"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
    )


def resolve_level(name: str) -> int:
    """Map a level name such as ``"debug"`` to its numeric value."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def component_of(logger_name: str | None) -> str:
    """``"shared_secrets.crypto.shamir"`` -> ``"crypto.shamir"``."""
    if not logger_name or logger_name == PACKAGE_LOGGER:
        return PACKAGE_LOGGER
    prefix = PACKAGE_LOGGER + "."
    if logger_name.startswith(prefix):
        return logger_name[len(prefix):]
    return logger_name


def _add_component(logger, _method_name, event_dict):
    event_dict.setdefault("component", component_of(getattr(logger, "name", None)))
    return event_dict


__all__ = ["configure_logging", "resolve_level", "component_of"]
