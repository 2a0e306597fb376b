from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper for the scan: merges raw input over domain defaults, coerces
types and normalizes the root path. Values that would make the whole scan
meaningless raise ConfigurationError; recoverable oddities become warnings.
"""

import logging
import math
from typing import Any, Dict, List, Tuple

from sizescout.domain.config import get_default_config, parse_bool_flag
from sizescout.domain.errors import ConfigurationError
from sizescout.infra.fs import normalize_path

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(config: Any) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a scan configuration.

    Args:
        config: Raw configuration dictionary (from CLI, tests or callers).

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.

    Raises:
        ConfigurationError: If the configuration is not a dict or the
            percentage is unusable.
    """
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Invalid config type: expected dict, received {type(config).__name__}."
        )

    warnings: List[str] = []
    merged: Dict[str, Any] = get_default_config()
    known_keys = set(merged)
    merged.update({k: v for k, v in config.items() if v is not None})

    merged["input_path"] = normalize_path(str(merged.get("input_path") or ""))
    merged["percent"] = _as_percent(merged.get("percent"))
    merged["respect_ignore"] = _as_bool(merged.get("respect_ignore"), "respect_ignore", warnings)

    if merged["percent"] > 100.0:
        warnings.append(
            f"Percent {merged['percent']:g} exceeds 100; only directories can reach the cutoff."
        )

    unknown = sorted(set(config) - known_keys)
    for key in unknown:
        warnings.append(f"Unknown configuration key ignored: '{key}'.")
        merged.pop(key, None)

    logger.debug(f"Validated configuration: {merged}")
    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_percent(value: Any) -> float:
    """Parse the threshold percentage, rejecting non-numeric and negative values."""
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid percent: {value!r}")
    try:
        pct = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Invalid percent: {value!r} is not a number") from None

    if not math.isfinite(pct):
        raise ConfigurationError(f"Invalid percent: {value!r} is not finite")
    if pct < 0:
        raise ConfigurationError(f"Invalid percent: {value!r} is negative")
    return pct


def _as_bool(value: Any, field: str, warnings: List[str]) -> bool:
    """Coerce booleans, accepting textual flags."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return parse_bool_flag(value, False)
    if isinstance(value, int):
        return bool(value)

    warnings.append(f"Invalid field '{field}': expected bool, received {type(value).__name__}. Using False.")
    return False
