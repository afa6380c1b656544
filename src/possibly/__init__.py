"""possibly: fallible operations as total callables for pipelines.

Public API:
    - Possibly: value, failure, or nothing
    - PossiblyConsumer / PossiblyFunction / PossiblyPredicate / PossiblySupplier:
      adapters wrapping callables that may raise
    - Settings, resolve_settings(): adapter configuration

Example:
    from possibly import PossiblyFunction

    results = list(map(PossiblyFunction.of(lambda x: 100 // x), [5, 0, 2]))
    values = [r.value for r in results if r.has_value()]
"""

from __future__ import annotations

import logging

from possibly.adapters import (
    PossiblyConsumer,
    PossiblyFunction,
    PossiblyPredicate,
    PossiblySupplier,
)
from possibly.config import Settings, default_settings, resolve_settings
from possibly.core import Possibly
from possibly.errors import ConfigurationError, NullValueError, PossiblyError

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("possibly")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("possibly").addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "NullValueError",
    "Possibly",
    "PossiblyConsumer",
    "PossiblyError",
    "PossiblyFunction",
    "PossiblyPredicate",
    "PossiblySupplier",
    "Settings",
    "default_settings",
    "resolve_settings",
]
