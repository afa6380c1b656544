"""PossiblyPredicate: a one-argument test where a failure counts as False."""

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
class PossiblyPredicate[T]:
    """Wrap a test that may raise so it can be used with ``filter``.

    A test that raises does not pass: the call returns ``False`` after the
    failure has been handed to ``handler`` (or discarded when there is no
    handler). A handler that raises propagates out of the call.
    """

    test: Callable[[T], object]
    handler: Callable[[Exception], object] | None
    settings: Settings

    @classmethod
    def of(
        cls,
        test: Callable[[T], object],
        handler: Callable[[Exception], object] | None = None,
        *,
        settings: Settings | None = None,
    ) -> PossiblyPredicate[T]:
        """Create a predicate wrapping *test*.

        Args:
            test: The test to run for each input.
            handler: Called with each failure. ``None`` discards failures.
            settings: Overrides ``default_settings()``.
        """
        require_callable(test, "test")
        require_handler(handler)
        return cls(test, handler, settings_or_default(settings))

    def __call__(self, value: T) -> bool:
        try:
            return bool(self.test(value))
        except self.settings.catch as exc:
            route_failure("PossiblyPredicate", exc, self.handler, self.settings)
            return False
