from __future__ import annotations

import logging

import pytest

from possibly.adapters import PossiblyConsumer
from possibly.config import resolve_settings

pytestmark = pytest.mark.unit

GOOD_VALUE = "good"
BAD_VALUE = "bad"


def accept_with_exception(value: str) -> None:
    if value == BAD_VALUE:
        raise Exception("bad value")


def test_accept_routes_failure_to_handler(recorder) -> None:
    """A failing procedure hands its exception to the handler."""
    consumer = PossiblyConsumer.of(accept_with_exception, recorder)

    for value in (GOOD_VALUE, BAD_VALUE):
        assert consumer(value) is None

    assert recorder.messages == ["bad value"]


def test_no_handler_swallows_every_failure() -> None:
    """Without a handler nothing escapes, even when most calls fail."""
    seen: list[int] = []

    def every_third(n: int) -> None:
        seen.append(n)
        if n % 3 == 0:
            raise ValueError(f"bad input {n}")

    consumer = PossiblyConsumer.of(every_third)

    for n in range(1, 7):
        consumer(n)

    assert seen == [1, 2, 3, 4, 5, 6]


def test_handler_error_propagates_with_original_chained() -> None:
    def rethrow(failure: Exception) -> None:
        raise RuntimeError("runtime exception") from failure

    consumer = PossiblyConsumer.of(accept_with_exception, rethrow)
    consumer(GOOD_VALUE)

    with pytest.raises(RuntimeError, match="runtime exception") as exc:
        consumer(BAD_VALUE)

    assert str(exc.value.__cause__) == "bad value"


def test_handler_error_records_original_as_context() -> None:
    """Even without ``raise ... from``, the original failure stays attached."""

    def broken(_: Exception) -> None:
        raise KeyError("handler bug")

    consumer = PossiblyConsumer.of(accept_with_exception, broken)

    with pytest.raises(KeyError) as exc:
        consumer(BAD_VALUE)

    assert str(exc.value.__context__) == "bad value"


def test_noop_handler_is_not_the_same_as_no_handler(adapter_logs) -> None:
    """A present handler runs instead of the discard path."""
    consumer = PossiblyConsumer.of(accept_with_exception, lambda _: None)

    consumer(BAD_VALUE)

    assert not any("discarded" in r.getMessage() for r in adapter_logs.records)


def test_discarded_failure_logs_at_debug(adapter_logs) -> None:
    PossiblyConsumer.of(accept_with_exception)(BAD_VALUE)

    discarded = [r for r in adapter_logs.records if "discarded" in r.getMessage()]
    assert len(discarded) == 1
    assert discarded[0].levelno == logging.DEBUG
    assert "PossiblyConsumer" in discarded[0].getMessage()


def test_discarded_failure_logs_at_warning_when_enabled(adapter_logs) -> None:
    settings = resolve_settings(log_discarded=True)

    PossiblyConsumer.of(accept_with_exception, settings=settings)(BAD_VALUE)

    discarded = [r for r in adapter_logs.records if "discarded" in r.getMessage()]
    assert [r.levelno for r in discarded] == [logging.WARNING]


def test_uncaught_exception_class_propagates(recorder) -> None:
    consumer = PossiblyConsumer.of(
        accept_with_exception, recorder, settings=resolve_settings(catch=KeyError)
    )

    with pytest.raises(Exception, match="bad value"):
        consumer(BAD_VALUE)
    assert recorder.count == 0


def test_works_as_a_pipeline_stage(recorder) -> None:
    consumer = PossiblyConsumer.of(accept_with_exception, recorder)

    def peek(values):
        for value in values:
            consumer(value)
            yield value

    assert list(peek([GOOD_VALUE, BAD_VALUE])) == [GOOD_VALUE, BAD_VALUE]
    assert recorder.count == 1


@pytest.mark.parametrize(
    ("procedure", "handler"),
    [("not callable", None), (accept_with_exception, "not callable")],
)
def test_of_rejects_non_callables(procedure, handler) -> None:
    with pytest.raises(TypeError, match="must be callable"):
        PossiblyConsumer.of(procedure, handler)
