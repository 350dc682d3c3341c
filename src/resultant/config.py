"""Configuration schema and resolution for resultant diagnostics.

Follows a resolve-once, freeze-then-flow design:
- ``Settings`` is the pydantic schema (fields, defaults, validation)
- ``FrozenConfig`` is the immutable payload read by the library
- ``resolve_config`` merges defaults < ``RESULTANT_*`` env < overrides
- ``config_scope`` temporarily installs a config for the current context

Configuration only steers diagnostics. It never changes how an outcome,
option or validation result is computed.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from dataclasses import dataclass
from functools import cache
import os
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from resultant.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

ENV_PREFIX = "RESULTANT_"

# --- Schema (Pydantic wall) ---


class Settings(BaseModel):
    """Pydantic settings schema for configuration validation and defaults."""

    # Log every constructed failure at DEBUG on the ``resultant.trace`` logger.
    trace_failures: bool = Field(default=False)
    # Log aggregated validation results at DEBUG.
    trace_validation: bool = Field(default=False)
    # Upper bound on errors rendered in a single validation trace line.
    max_traced_errors: int = Field(default=10, ge=1)

    model_config = {"extra": "ignore"}

    @field_validator("trace_failures", "trace_validation", mode="before")
    @classmethod
    def coerce_flag(cls, v: Any) -> Any:
        """Accept the usual string spellings for booleans coming from env vars."""
        if isinstance(v, str):
            s = v.strip().lower()
            if s in {"1", "true", "yes", "on"}:
                return True
            if s in {"0", "false", "no", "off", ""}:
                return False
        return v


@cache
def _default_settings() -> dict[str, Any]:
    return Settings().model_dump()


# --- Immutable runtime payload ---


@dataclass(frozen=True)
class FrozenConfig:
    """Immutable configuration payload read by the tracing hooks."""

    trace_failures: bool
    trace_validation: bool
    max_traced_errors: int


# --- Loading ---


def load_env() -> dict[str, Any]:
    """Read ``RESULTANT_*`` variables into a plain mapping of field values."""
    config: dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        config[key[len(ENV_PREFIX) :].lower()] = value
    return config


_DOTENV_LOADED: bool = False


def _try_load_dotenv() -> None:
    """Load a project ``.env`` file once per process."""
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    from dotenv import load_dotenv

    load_dotenv()
    _DOTENV_LOADED = True


# --- Public resolution API ---


def resolve_config(overrides: Mapping[str, Any] | None = None) -> FrozenConfig:
    """Resolve configuration from defaults, environment and overrides.

    Args:
        overrides: Programmatic overrides; these win over environment values.

    Returns:
        The validated ``FrozenConfig``.

    Raises:
        ConfigurationError: If a value fails schema validation.
    """
    _try_load_dotenv()

    merged = {**_default_settings(), **load_env(), **dict(overrides or {})}
    try:
        settings = Settings.model_validate(merged)
    except ValidationError as e:
        err = e.errors()[0]
        loc = ".".join(str(p) for p in err.get("loc", ()))
        msg = err.get("msg", "invalid value")
        # Remove "Value error, " prefix if present (Pydantic standard wrapper)
        if msg.startswith("Value error, "):
            msg = msg[13:]
        raise ConfigurationError(
            f"Configuration validation failed for {loc!r}: {msg}",
            hint=f"Check the {ENV_PREFIX}{loc.upper()} environment variable or override.",
        ) from e

    return FrozenConfig(**settings.model_dump())


# --- Ambient scope ---

_AMBIENT: contextvars.ContextVar[FrozenConfig | None] = contextvars.ContextVar(
    "resultant_config", default=None
)
_PROCESS_DEFAULT: FrozenConfig | None = None


def current_config() -> FrozenConfig:
    """Return the config active in this context.

    Falls back to a process-wide config resolved on first use.
    """
    global _PROCESS_DEFAULT
    cfg = _AMBIENT.get()
    if cfg is not None:
        return cfg
    if _PROCESS_DEFAULT is None:
        _PROCESS_DEFAULT = resolve_config()
    return _PROCESS_DEFAULT


def reset_config() -> None:
    """Forget the cached process-wide config so the next read re-resolves it."""
    global _PROCESS_DEFAULT
    _PROCESS_DEFAULT = None


@contextmanager
def config_scope(
    cfg_or_overrides: Mapping[str, Any] | FrozenConfig | None = None,
    **overrides: object,
) -> Generator[FrozenConfig]:
    """Run a block with a specific configuration.

    Thread-safe and async-safe: the config is bound to the current context.

    Example:
        with config_scope(trace_failures=True):
            Outcome.failure(Error.failure("Order.Missing", "No such order"))
    """
    if isinstance(cfg_or_overrides, FrozenConfig):
        cfg = cfg_or_overrides
    else:
        cfg = resolve_config({**(cfg_or_overrides or {}), **overrides})

    token = _AMBIENT.set(cfg)
    try:
        yield cfg
    finally:
        _AMBIENT.reset(token)
