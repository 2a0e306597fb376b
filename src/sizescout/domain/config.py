from __future__ import annotations

"""
Configuration Domain Management.

Builds the default runtime configuration. Defaults can be overridden through
environment variables, which in turn are overridden by CLI arguments.
"""

import logging
import os
from typing import Any, Dict, Mapping, Optional

from sizescout.domain.constants import (
    DEFAULT_PERCENT,
    DEFAULT_RESPECT_IGNORE,
    FALSY_VALUES,
    IGNORE_ENV_VAR,
    PERCENT_ENV_VAR,
    TRUTHY_VALUES,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Values read from the environment are kept raw here; type coercion
    happens in the validation stage.

    Args:
        environ: Environment mapping to read overrides from (os.environ by default).

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    env = os.environ if environ is None else environ

    cfg: Dict[str, Any] = {
        "input_path": "",
        "percent": DEFAULT_PERCENT,
        "respect_ignore": DEFAULT_RESPECT_IGNORE,
    }

    raw_percent = env.get(PERCENT_ENV_VAR)
    if raw_percent is not None and raw_percent.strip():
        logger.debug(f"Percent taken from ${PERCENT_ENV_VAR}: {raw_percent!r}")
        cfg["percent"] = raw_percent.strip()

    raw_ignore = env.get(IGNORE_ENV_VAR)
    if raw_ignore is not None:
        cfg["respect_ignore"] = parse_bool_flag(raw_ignore, DEFAULT_RESPECT_IGNORE)

    return cfg


def parse_bool_flag(value: str, fallback: bool) -> bool:
    """
    Interpret a textual boolean such as an environment variable value.

    Args:
        value: Raw text.
        fallback: Value returned when the text is not recognised.

    Returns:
        bool: Parsed flag.
    """
    v = value.strip().lower()
    if v in TRUTHY_VALUES:
        return True
    if v in FALSY_VALUES:
        return False
    logger.warning(f"Unrecognised boolean value {value!r}, using {fallback}.")
    return fallback
