"""Settings: which failures adapters catch and how discarded ones are reported.

Resolution order is explicit overrides > environment > defaults. A project
``.env`` file is loaded before the environment is read.
"""

from __future__ import annotations

from functools import cache
import os
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from possibly.errors import ConfigurationError

_ENV_PREFIX = "POSSIBLY_"
_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off", ""})
_DOTENV_LOADED = False


class Settings(BaseModel):
    """Validated, immutable adapter settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    #: Exception classes an adapter converts into a failure. Anything else
    #: propagates to the caller untouched.
    catch: tuple[type[Exception], ...] = Field(default=(Exception,))
    #: Log failures dropped by handler-less adapters at WARNING instead of DEBUG.
    log_discarded: bool = False

    @field_validator("catch", mode="before")
    @classmethod
    def normalize_catch(cls, v: Any) -> Any:
        """Accept a single exception class as shorthand for a 1-tuple."""
        if isinstance(v, type):
            return (v,)
        return v

    @field_validator("catch")
    @classmethod
    def require_catch(cls, v: tuple[type[Exception], ...]) -> Any:
        """Reject an empty tuple, which would catch nothing."""
        if not v:
            raise ValueError("catch must name at least one exception class")
        return v


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(
        f"Invalid boolean for {key}: {raw!r}",
        hint="Use one of 1/0, true/false, yes/no, on/off.",
    )


def _load_dotenv_once() -> None:
    """Load the project ``.env`` file on first resolution only."""
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    load_dotenv()
    _DOTENV_LOADED = True


def load_env() -> dict[str, Any]:
    """Read ``POSSIBLY_*`` settings from the environment."""
    _load_dotenv_once()
    out: dict[str, Any] = {}
    raw = os.environ.get(f"{_ENV_PREFIX}LOG_DISCARDED")
    if raw is not None:
        out["log_discarded"] = _parse_bool(f"{_ENV_PREFIX}LOG_DISCARDED", raw)
    return out


def resolve_settings(**overrides: Any) -> Settings:
    """Resolve settings from overrides, environment and defaults.

    Raises:
        ConfigurationError: If the merged values do not validate.
    """
    merged = {**load_env(), **overrides}
    try:
        return Settings(**merged)
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
        raise ConfigurationError(
            f"Invalid settings: {e.error_count()} error(s) in {fields or 'input'}",
            hint="catch takes exception classes; log_discarded takes a bool.",
        ) from e


@cache
def default_settings() -> Settings:
    """Return the process-wide settings, resolved once on first use."""
    return resolve_settings()
