"""Possibly: a value, a failure, or nothing.

A ``Possibly`` records the outcome of one fallible operation so it can keep
flowing through ``map``/``filter`` pipelines. It is patterned on optional
types: both channels are exposed as ``X | None`` and the combinators only
ever touch the value channel, passing a failure through untouched.

The state is a closed union of ``Present``, ``Failed`` and ``Absent``, so a
container can never hold a value and a failure at the same time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, cast

from possibly.errors import NullValueError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@dataclass(frozen=True, slots=True)
class Present[T]:
    """The value channel."""

    value: T


@dataclass(frozen=True, slots=True)
class Failed:
    """The failure channel."""

    failure: Exception


@dataclass(frozen=True, slots=True)
class Absent:
    """Neither a value nor a failure."""


State = Present[Any] | Failed | Absent


@dataclass(frozen=True, slots=True)
class Possibly[T]:
    """Immutable outcome of an operation that could raise.

    Build instances through the classmethods rather than the constructor:

        Possibly.of(42)
        Possibly.of_failure(OSError("disk gone"))
        Possibly.of_nullable(lookup.get("key"))
        Possibly.empty()

    ``of`` only ever fills the value channel, even when handed an exception
    object; failures go through ``of_failure``.
    """

    state: State

    # --- Construction ---

    @classmethod
    def of(cls, value: T) -> Possibly[T]:
        """Create a container holding *value*.

        Any non-``None`` object is a value, exceptions included; use
        ``of_failure`` for the failure channel.

        Raises:
            NullValueError: If *value* is ``None``.
        """
        if value is None:
            raise NullValueError(
                "value of Possibly cannot be None",
                hint="Use Possibly.of_nullable() when the value may be absent.",
            )
        return cls(Present(value))

    @classmethod
    def of_failure(cls, failure: Exception) -> Possibly[T]:
        """Create a failure container. It never carries a value.

        Raises:
            NullValueError: If *failure* is ``None``.
            TypeError: If *failure* is not an exception instance.
        """
        if failure is None:
            raise NullValueError("failure of Possibly cannot be None")
        if not isinstance(failure, Exception):
            raise TypeError(
                f"failure must be an Exception instance, got {type(failure).__name__}"
            )
        return cls(Failed(failure))

    @classmethod
    def of_nullable(cls, value: T | None) -> Possibly[T]:
        """Create a container that is empty when *value* is ``None``."""
        if value is None:
            return cls.empty()
        return cls.of(value)

    @classmethod
    def empty(cls) -> Possibly[T]:
        """Return the shared empty container."""
        return cast("Possibly[T]", _EMPTY)

    # --- Inspection ---

    def has_value(self) -> bool:
        """Return True only when a value is present.

        Both an empty and a failed container answer False here, so "has a
        value" is narrower than "is not a failure".
        """
        return isinstance(self.state, Present)

    def is_failure(self) -> bool:
        """Return True when a failure is present."""
        return isinstance(self.state, Failed)

    def is_empty(self) -> bool:
        """Return True when neither a value nor a failure is present."""
        return isinstance(self.state, Absent)

    @property
    def value(self) -> T | None:
        """The value, or ``None``."""
        match self.state:
            case Present(value=value):
                return cast("T", value)
            case _:
                return None

    @property
    def failure(self) -> Exception | None:
        """The failure, or ``None``."""
        match self.state:
            case Failed(failure=failure):
                return failure
            case _:
                return None

    def do_on_failure(self, handler: Callable[[Exception], object]) -> Possibly[T]:
        """Call *handler* with the failure, if any, and return ``self``.

        Meant for side effects such as logging in the middle of a chain.
        Anything the handler raises propagates.
        """
        if isinstance(self.state, Failed):
            handler(self.state.failure)
        return self

    # --- Combinators ---

    def map[U](self, transform: Callable[[T], U | None]) -> Possibly[U]:
        """Apply *transform* to the value.

        A ``None`` result collapses to empty. Failures and empties pass
        through unchanged. *transform* is expected not to raise; wrap it in
        ``PossiblyFunction`` when it can.
        """
        if isinstance(self.state, Present):
            return Possibly.of_nullable(transform(self.state.value))
        return cast("Possibly[U]", self)

    def flat_map[U](
        self, transform: Callable[[T], U | Possibly[U] | None]
    ) -> Possibly[U]:
        """Apply *transform*, which returns an optional value directly.

        ``None`` collapses to empty; a returned ``Possibly`` is used as-is.
        """
        if not isinstance(self.state, Present):
            return cast("Possibly[U]", self)
        result = transform(self.state.value)
        if isinstance(result, Possibly):
            return cast("Possibly[U]", result)
        return Possibly.of_nullable(result)

    def filter(self, predicate: Callable[[T], object]) -> Possibly[T]:
        """Keep the value only if *predicate* holds for it."""
        if isinstance(self.state, Present) and not predicate(self.state.value):
            return Possibly.empty()
        return self

    def stream(self) -> Iterator[T]:
        """Return a fresh iterator over zero or one values."""
        if isinstance(self.state, Present):
            yield self.state.value

    def __iter__(self) -> Iterator[T]:
        return self.stream()

    def __repr__(self) -> str:
        match self.state:
            case Present(value=value):
                return f"Possibly.of({value!r})"
            case Failed(failure=failure):
                return f"Possibly.of_failure({failure!r})"
            case _:
                return "Possibly.empty()"


_EMPTY: Final[Possibly[Any]] = Possibly(Absent())
