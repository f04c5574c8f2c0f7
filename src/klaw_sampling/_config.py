"""Sampling configuration: SourceKind enum, SamplingConfig, and initialization."""

from __future__ import annotations

import logging
import os
import random
from dataclasses import dataclass
from enum import Enum

from klaw_sampling._logging import configure_logging
from klaw_sampling.source import StdlibSource

__all__ = [
    'SamplingConfig',
    'SourceKind',
    'create_source',
    'get_config',
    'init',
]


class SourceKind(Enum):
    """Kind of generator behind sources built by `create_source`."""

    STDLIB = 'stdlib'
    SYSTEM = 'system'


@dataclass(frozen=True)
class SamplingConfig:
    """Configuration for klaw-sampling.

    Attributes:
        source: Generator kind used by `create_source` when none is given.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Render logs as JSON (True) or console text (False).
    """

    source: SourceKind = SourceKind.STDLIB
    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: SamplingConfig | None = None


def _detect_source() -> SourceKind:
    """Detect the source kind from the KLAW_SAMPLING_SOURCE environment variable.

    Unknown values log a warning and fall back to STDLIB.
    """
    env_source = os.environ.get('KLAW_SAMPLING_SOURCE', '').lower()
    if not env_source:
        return SourceKind.STDLIB
    try:
        return SourceKind(env_source)
    except ValueError:
        logging.warning("Unknown KLAW_SAMPLING_SOURCE value '%s', defaulting to stdlib", env_source)
        return SourceKind.STDLIB


def _detect_log_level() -> str | None:
    """Read KLAW_SAMPLING_LOG_LEVEL; empty or unset means silent."""
    env_level = os.environ.get('KLAW_SAMPLING_LOG_LEVEL', '').strip()
    return env_level.upper() or None


def init(
    source: SourceKind | str | None = None,
    log_level: str | None = None,
    *,
    json_logs: bool = True,
) -> SamplingConfig:
    """Initialize klaw-sampling with the specified configuration.

    Args:
        source: Default generator kind for `create_source`. Detected from the
            environment if None. Can be SourceKind enum or string ("stdlib", "system").
        log_level: Logging level ("DEBUG", "INFO", etc.). Detected from the
            environment if None; silent if neither is set.
        json_logs: Emit JSON logs (True) or console output (False).

    Returns:
        The SamplingConfig that was set.

    Example:
        ```python
        from klaw_sampling import init, SourceKind

        init()
        init(source=SourceKind.SYSTEM, log_level="DEBUG")
        ```
    """
    global _config  # noqa: PLW0603

    if source is None:
        resolved_source = _detect_source()
    elif isinstance(source, str):
        resolved_source = SourceKind(source.lower())
    else:
        resolved_source = source

    resolved_level = log_level if log_level is not None else _detect_log_level()

    _config = SamplingConfig(
        source=resolved_source,
        log_level=resolved_level,
        json_logs=json_logs,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=json_logs)

    return _config


def get_config() -> SamplingConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'klaw_sampling not initialized. Call klaw_sampling.init() first.'
        raise RuntimeError(msg)
    return _config


def create_source(kind: SourceKind | str | None = None, seed: int | None = None) -> StdlibSource:
    """Build a new caller-owned random source.

    The kind defaults to the configured one (or the environment when `init()`
    was never called). Sampling operations never call this themselves.

    Args:
        kind: Generator kind.
        seed: Seed for a STDLIB generator.

    Raises:
        ValueError: If a seed is given for a SYSTEM source.
    """
    if kind is None:
        resolved = _config.source if _config is not None else _detect_source()
    elif isinstance(kind, str):
        resolved = SourceKind(kind.lower())
    else:
        resolved = kind

    if resolved is SourceKind.SYSTEM:
        if seed is not None:
            msg = 'SYSTEM sources draw from OS entropy and cannot be seeded'
            raise ValueError(msg)
        return StdlibSource(random.SystemRandom())
    return StdlibSource(random.Random(seed))
