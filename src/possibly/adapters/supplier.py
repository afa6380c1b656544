"""PossiblySupplier: a zero-argument factory that returns a Possibly."""

from __future__ import annotations

from collections.abc import Callable, Iterator  # noqa: TC003
from dataclasses import dataclass
import itertools

from possibly.adapters._guard import (
    log,
    null_result,
    require_callable,
    settings_or_default,
)
from possibly.config import Settings  # noqa: TC001 - used at runtime in dataclass
from possibly.core.possibly import Possibly


@dataclass(frozen=True, slots=True)
class PossiblySupplier[T]:
    """Wrap a factory that may raise, typically to drive a lazy sequence.

    Example:
        reads = PossiblySupplier.of(sock.recv_byte)
        for result in reads.generate(limit=16):
            ...

    Calls are independent; any memory between them lives in the factory.
    """

    factory: Callable[[], T]
    settings: Settings

    @classmethod
    def of(
        cls, factory: Callable[[], T], *, settings: Settings | None = None
    ) -> PossiblySupplier[T]:
        """Create a supplier wrapping *factory*."""
        require_callable(factory, "factory")
        return cls(factory, settings_or_default(settings))

    def __call__(self) -> Possibly[T]:
        try:
            result = self.factory()
        except self.settings.catch as exc:
            log.debug("PossiblySupplier caught %s", type(exc).__name__)
            return Possibly.of_failure(exc)
        if result is None:
            return Possibly.of_failure(null_result("PossiblySupplier"))
        return Possibly.of(result)

    def generate(self, limit: int | None = None) -> Iterator[Possibly[T]]:
        """Yield a result per call, forever or *limit* times."""
        if limit is not None and limit < 0:
            raise ValueError("limit must be >= 0 or None")
        calls = (
            itertools.repeat(None) if limit is None else itertools.repeat(None, limit)
        )
        return (self() for _ in calls)
