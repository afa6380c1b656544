"""PossiblyConsumer: a one-argument procedure whose failures go to a handler."""

from __future__ import annotations

from collections.abc import Callable  # noqa: TC003 - used at runtime in dataclass
from dataclasses import dataclass

from possibly.adapters._guard import (
    require_callable,
    require_handler,
    route_failure,
    settings_or_default,
)
from possibly.config import Settings  # noqa: TC001 - used at runtime in dataclass


@dataclass(frozen=True, slots=True)
class PossiblyConsumer[T]:
    """Wrap a procedure that may raise so it can act as a side-effecting stage.

    If the procedure raises, the failure is passed to ``handler``. Without a
    handler the failure is discarded, which is a deliberate opt-in and not
    the same as passing a handler that does nothing. If the handler itself
    raises, that exception propagates with the original failure chained to
    it.

    Example:
        audit = PossiblyConsumer.of(write_audit_row, errors.append)
        for row in rows:
            audit(row)
    """

    procedure: Callable[[T], object]
    handler: Callable[[Exception], object] | None
    settings: Settings

    @classmethod
    def of(
        cls,
        procedure: Callable[[T], object],
        handler: Callable[[Exception], object] | None = None,
        *,
        settings: Settings | None = None,
    ) -> PossiblyConsumer[T]:
        """Create a consumer wrapping *procedure*.

        Args:
            procedure: The procedure to run for each input.
            handler: Called with each failure. ``None`` discards failures.
            settings: Overrides ``default_settings()``.
        """
        require_callable(procedure, "procedure")
        require_handler(handler)
        return cls(procedure, handler, settings_or_default(settings))

    def __call__(self, value: T) -> None:
        try:
            self.procedure(value)
        except self.settings.catch as exc:
            route_failure("PossiblyConsumer", exc, self.handler, self.settings)
