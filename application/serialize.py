"""Output table serialization."""

import logging
from pathlib import Path

import pandas as pd

from application.constants import OUTPUT_FILENAMES, TABLE_NAMES
from infrastructure.io import write_table

logger = logging.getLogger(__name__)


def write_tables(tables: dict[str, pd.DataFrame], processed_dir: Path) -> dict[str, Path]:
    """
    Write every output table to processed_dir as <name>.csv.

    Tables are written in TABLE_NAMES order; unknown table names are rejected
    so a typo cannot silently produce an extra file.

    Raises:
        KeyError: If a table name has no configured output file
    """
    unknown = sorted(set(tables) - set(OUTPUT_FILENAMES))
    if unknown:
        raise KeyError(f"No output file configured for tables: {unknown}")

    paths: dict[str, Path] = {}
    for name in TABLE_NAMES:
        if name not in tables:
            continue
        paths[name] = write_table(tables[name], processed_dir / OUTPUT_FILENAMES[name])
        logger.info("Saved %s (%d rows): %s", name, len(tables[name]), paths[name])

    return paths
