"""PossiblyFunction: a one-argument transform that returns a Possibly."""

from __future__ import annotations

from collections.abc import Callable  # noqa: TC003 - used at runtime in dataclass
from dataclasses import dataclass

from possibly.adapters._guard import (
    log,
    null_result,
    require_callable,
    settings_or_default,
)
from possibly.config import Settings  # noqa: TC001 - used at runtime in dataclass
from possibly.core.possibly import Possibly


@dataclass(frozen=True, slots=True)
class PossiblyFunction[V, R]:
    """Wrap a transform that may raise so it can be used with ``map``.

    Example:
        results = map(PossiblyFunction.of(json.loads), lines)

    Each call returns ``Possibly.of(transform(x))``, or a failure container
    when the transform raises. A transform that returns ``None`` yields a
    failure carrying ``NullValueError``.
    """

    transform: Callable[[V], R]
    settings: Settings

    @classmethod
    def of(
        cls, transform: Callable[[V], R], *, settings: Settings | None = None
    ) -> PossiblyFunction[V, R]:
        """Create a function adapter wrapping *transform*."""
        require_callable(transform, "transform")
        return cls(transform, settings_or_default(settings))

    def __call__(self, value: V) -> Possibly[R]:
        try:
            result = self.transform(value)
        except self.settings.catch as exc:
            log.debug("PossiblyFunction caught %s", type(exc).__name__)
            return Possibly.of_failure(exc)
        if result is None:
            return Possibly.of_failure(null_result("PossiblyFunction"))
        return Possibly.of(result)
