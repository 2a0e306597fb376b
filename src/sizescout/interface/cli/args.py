from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides. Options left unset fall
back to environment variables and then to domain defaults.
"""

import argparse
from typing import Any, Dict

from sizescout.domain.constants import (
    APP_VERSION,
    DEFAULT_PERCENT,
    IGNORE_ENV_VAR,
    PERCENT_ENV_VAR,
)

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the SizeScout CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="sizescout",
        description="Large file finder: list files and directories that are "
                    "large relative to the largest file in a tree.",
    )

    # --- Scan Target ---
    p.add_argument(
        "input_path",
        metavar="DIRECTORY",
        help="The directory to scan for files and directories (~ and $VARS are expanded).",
    )

    # --- Threshold and Filtering ---
    p.add_argument(
        "-p", "--percent",
        dest="percent",
        default=None,
        help=(
            "Show files and dirs larger than this percentage of the largest file "
            f"(default: {DEFAULT_PERCENT:g}, env: {PERCENT_ENV_VAR})."
        ),
    )
    p.add_argument(
        "-i", "--ignore",
        dest="respect_ignore",
        action="store_const",
        const=True,
        default=None,
        help=f"Skip hidden entries and paths matched by .gitignore/.ignore files (env: {IGNORE_ENV_VAR}).",
    )
    p.add_argument(
        "--no-ignore",
        dest="respect_ignore",
        action="store_const",
        const=False,
        help="Scan every entry even if ignore mode is enabled in the environment.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this (rotating) log file.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Only options actually given on the command line are included.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {"input_path": args.input_path}

    if args.percent is not None:
        overrides["percent"] = args.percent
    if args.respect_ignore is not None:
        overrides["respect_ignore"] = args.respect_ignore

    return overrides
