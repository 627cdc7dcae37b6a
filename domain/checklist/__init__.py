"""
Checklist input handling: normalization, deduplication and region lookup.

All functions in this module are pure (no file I/O).
"""

from domain.checklist.dedup import first_by_key, sort_by_key
from domain.checklist.normalizer import (
    SOURCE_COLUMNS,
    TAXON_ID_COL,
    TAXON_ID_PREFIX,
    clean_column_name,
    clean_column_names,
    drop_empty_rows,
    make_taxon_id_hash,
    normalize_records,
    pathway_columns,
    require_columns,
)
from domain.checklist.regions import Region, RegionLookup, parse_region_config

__all__ = [
    "normalize_records",
    "clean_column_name",
    "clean_column_names",
    "drop_empty_rows",
    "make_taxon_id_hash",
    "pathway_columns",
    "require_columns",
    "SOURCE_COLUMNS",
    "TAXON_ID_COL",
    "TAXON_ID_PREFIX",
    "first_by_key",
    "sort_by_key",
    "Region",
    "RegionLookup",
    "parse_region_config",
]
