"""Adapters turning fallible callables into total ones.

Each adapter matches one callable shape a pipeline stage expects:

    - PossiblyConsumer: ``(T) -> None``, failures go to an optional handler
    - PossiblyFunction: ``(V) -> Possibly[R]``
    - PossiblyPredicate: ``(T) -> bool``, a failure counts as ``False``
    - PossiblySupplier: ``() -> Possibly[T]``
"""

from possibly.adapters.consumer import PossiblyConsumer
from possibly.adapters.function import PossiblyFunction
from possibly.adapters.predicate import PossiblyPredicate
from possibly.adapters.supplier import PossiblySupplier

__all__ = [
    "PossiblyConsumer",
    "PossiblyFunction",
    "PossiblyPredicate",
    "PossiblySupplier",
]
