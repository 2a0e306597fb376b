from __future__ import annotations

"""
Scan Pipeline Engine.

Orchestrates a complete scan: configuration validation, parallel tree
construction, bottom-up size propagation, cutoff computation and report
rendering. Fatal conditions are returned as an error ScanResult; per-entry
problems are carried in the result's error list.
"""

import logging
import time
from typing import Any, Dict, Optional

from sizescout.core.analysis.report_renderer import compute_cutoff, render_report
from sizescout.core.analysis.size_calculator import propagate
from sizescout.core.analysis.tree_builder import build_tree
from sizescout.core.pipeline.stages.validator import validate_config
from sizescout.domain.errors import SizeScoutError
from sizescout.domain.scan_models import (
    ScanResult,
    create_error_result,
    create_success_result,
)
from sizescout.infra.fs import ensure_scannable_dir
from sizescout.utils.formatting import bytes_to_nice

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def run_scan(config: Dict[str, Any], max_workers: Optional[int] = None) -> ScanResult:
    """
    Execute a full scan described by a configuration dictionary.

    Args:
        config: Raw configuration with input_path, percent and respect_ignore.
        max_workers: Optional override of the builder pool size.

    Returns:
        ScanResult: Success result with the report, or an error result
                    describing why the scan could not run.
    """
    # 1. Validation
    try:
        cfg, warnings = validate_config(config)
    except SizeScoutError as e:
        logger.error(str(e))
        return create_error_result(str(e), config if isinstance(config, dict) else {})

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    root_path = cfg["input_path"]
    logger.info(f"Scanning {root_path} (ignore rules: {'on' if cfg['respect_ignore'] else 'off'})")

    # 2. Parallel tree construction
    started = time.perf_counter()
    try:
        ensure_scannable_dir(root_path)
        built = build_tree(root_path, respect_ignore=cfg["respect_ignore"], max_workers=max_workers)
    except SizeScoutError as e:
        logger.error(str(e))
        return create_error_result(str(e), cfg)

    # 3. Bottom-up propagation
    total_size, largest = propagate(built.root)
    elapsed = time.perf_counter() - started
    logger.info(
        f"Walk finished in {elapsed:.2f}s: total {bytes_to_nice(total_size)}, "
        f"largest file {bytes_to_nice(largest)}"
    )

    if built.errors:
        logger.warning(f"{len(built.errors)} entries could not be read and were skipped.")

    # 4. Threshold report
    cutoff = compute_cutoff(largest, cfg["percent"])
    logger.debug(f"Cutoff: {cutoff} bytes ({cfg['percent']:g}% of {largest})")
    lines = render_report(built.root, cutoff)

    return create_success_result(
        cfg,
        root=built.root,
        total_size=total_size,
        largest_child=largest,
        cutoff=cutoff,
        report_lines=lines,
        errors=built.errors,
    )
