"""Library configuration: InconsistentStatePolicy, OptionalsConfig, and initialization."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from optionals._logging import configure_logging, get_logger

__all__ = [
    'InconsistentStatePolicy',
    'OptionalsConfig',
    'get_config',
    'init',
    'resolve_policy',
]

POLICY_ENV_VAR = 'OPTIONALS_INCONSISTENT_STATE'


class InconsistentStatePolicy(Enum):
    """What a MarkerPair does when it holds an end marker but no start."""

    RAISE = 'raise'
    RESET = 'reset'


@dataclass(frozen=True)
class OptionalsConfig:
    """Configuration for optionals.

    Attributes:
        inconsistent_state: Default policy for MarkerPair instances.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Emit JSON logs when logging is configured.
    """

    inconsistent_state: InconsistentStatePolicy = InconsistentStatePolicy.RAISE
    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: OptionalsConfig | None = None


def _detect_policy() -> InconsistentStatePolicy:
    """Detect the inconsistent-state policy from the environment.

    Priority:
    1. OPTIONALS_INCONSISTENT_STATE environment variable ("raise" or "reset")
    2. Default to RAISE
    """
    env_policy = os.environ.get(POLICY_ENV_VAR, '').lower()
    if not env_policy:
        return InconsistentStatePolicy.RAISE
    try:
        return InconsistentStatePolicy(env_policy)
    except ValueError:
        get_logger(__name__).warning(
            'Unknown inconsistent-state policy, defaulting to raise',
            env_var=POLICY_ENV_VAR,
            value=env_policy,
        )
        return InconsistentStatePolicy.RAISE


def resolve_policy(explicit: InconsistentStatePolicy | str | None = None) -> InconsistentStatePolicy:
    """Resolve the policy for a new MarkerPair.

    Uses the explicit value if given, else the initialized config, else the
    environment.
    """
    if explicit is not None:
        return InconsistentStatePolicy(explicit.lower()) if isinstance(explicit, str) else explicit
    if _config is not None:
        return _config.inconsistent_state
    return _detect_policy()


def init(
    inconsistent_state: InconsistentStatePolicy | str | None = None,
    log_level: str | None = None,
    *,
    json_logs: bool = True,
) -> OptionalsConfig:
    """Initialize optionals with the specified configuration.

    Args:
        inconsistent_state: Default MarkerPair policy. Detected from the
            environment if None. Can be the enum or a string ("raise", "reset").
        log_level: Logging level ("DEBUG", "INFO", etc.). None = leave logging alone.
        json_logs: Emit JSON logs (True) or console logs (False).

    Returns:
        The OptionalsConfig that was set.

    Example:
        ```python
        from optionals import init, InconsistentStatePolicy

        init()
        init(inconsistent_state=InconsistentStatePolicy.RESET, log_level='INFO')
        ```
    """
    global _config  # noqa: PLW0603

    if inconsistent_state is None:
        resolved_policy = _detect_policy()
    elif isinstance(inconsistent_state, str):
        resolved_policy = InconsistentStatePolicy(inconsistent_state.lower())
    else:
        resolved_policy = inconsistent_state

    _config = OptionalsConfig(
        inconsistent_state=resolved_policy,
        log_level=log_level,
        json_logs=json_logs,
    )

    if log_level is not None:
        configure_logging(log_level, json_output=json_logs)

    return _config


def get_config() -> OptionalsConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'optionals not initialized. Call optionals.init() first.'
        raise RuntimeError(msg)
    return _config
