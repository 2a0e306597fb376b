from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of configuration
sources (defaults, environment and CLI overrides), scan execution and
report rendering.
"""

import sys
from typing import List, Optional

from sizescout.core.pipeline.engine import run_scan
from sizescout.domain.scan_models import ScanResult
from sizescout.infra.logging import LoggingConfig, configure_logging, get_logger
from sizescout.interface.cli import args as cli_args
from sizescout.utils.formatting import bytes_to_nice

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console stderr, optional file)
    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=args.log_file))

    logger.debug("CLI execution initiated.")

    # 3. Scan execution phase
    overrides = cli_args.args_to_overrides(args)
    try:
        result = run_scan(overrides)
    except KeyboardInterrupt:
        logger.warning("Scan interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.critical(f"Scan failed: {e}", exc_info=True)
        print(f"ERROR: Scan failed: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    # 4. Output rendering phase
    _print_report(result)
    return EXIT_OK

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_report(result: ScanResult) -> None:
    """
    Print the report lines followed by the two summary lines.

    Args:
        result: Successful scan result.
    """
    for line in result.report_lines:
        print(line)

    print(f"Total size: {bytes_to_nice(result.total_size)}")
    print(f"Largest child: {bytes_to_nice(result.largest_child)}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
