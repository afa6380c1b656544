"""Shared plumbing for the adapters: argument checks and failure routing."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from possibly.config import Settings, default_settings
from possibly.errors import NullValueError

if TYPE_CHECKING:
    from collections.abc import Callable

log = logging.getLogger(__name__)


def require_callable(func: Any, field_name: str) -> None:
    if not callable(func):
        raise TypeError(f"{field_name}: must be callable, got {type(func).__name__}")


def require_handler(handler: Any) -> None:
    if handler is not None:
        require_callable(handler, "handler")


def settings_or_default(settings: Settings | None) -> Settings:
    return settings if settings is not None else default_settings()


def route_failure(
    kind: str,
    failure: Exception,
    handler: Callable[[Exception], object] | None,
    settings: Settings,
) -> None:
    """Hand *failure* to *handler*, or drop it when there is none.

    Must be called from inside the ``except`` block that caught *failure* so
    that anything the handler raises is chained to it.
    """
    if handler is not None:
        log.debug("%s routing %s to handler", kind, type(failure).__name__)
        handler(failure)
        return
    level = logging.WARNING if settings.log_discarded else logging.DEBUG
    log.log(level, "%s discarded failure: %r", kind, failure)


def null_result(kind: str) -> NullValueError:
    """Build the failure recorded when a wrapped operation returns ``None``."""
    return NullValueError(
        f"{kind} wrapped operation returned None",
        hint="Return a value, or raise to report a failure.",
    )
