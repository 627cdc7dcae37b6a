"""Run summary logging."""

import logging

from application.constants import TABLE_NAMES
from application.pipeline import MappingResult

logger = logging.getLogger(__name__)


def log_run_summary(result: MappingResult) -> None:
    """
    Log a concise, human-readable summary of a mapping run.

    Args:
        result: MappingResult returned by run_mapping
    """
    logger.info("=== Mapping Summary ===")
    logger.info("Source: %s", result.source)
    logger.info(
        "Rows: source=%d, after normalization=%d, distinct taxa=%d",
        result.source_rows,
        result.normalized_rows,
        result.taxa,
    )

    logger.info("--- Tables ---")
    for name in TABLE_NAMES:
        if name in result.row_counts:
            logger.info("%s: %d rows", name, result.row_counts[name])

    logger.info("--- Artifacts ---")
    if result.raw_path is not None:
        logger.info("Raw copy: %s", result.raw_path)
    for name, path in result.output_paths.items():
        logger.info("%s: %s", name, path)
