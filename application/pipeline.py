"""The mapping workflow: source table -> four Darwin Core tables."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import httpx
import pandas as pd

from application.constants import (
    DESCRIPTION_TABLE,
    DISTRIBUTION_TABLE,
    SPECIES_PROFILE_TABLE,
    TAXON_TABLE,
)
from application.serialize import write_tables
from domain.checklist import normalize_records
from domain.projections import (
    project_descriptions,
    project_distributions,
    project_species_profiles,
    project_taxa,
)
from domain.schemas import DescriptionRow, DistributionRow, SpeciesProfileRow, TaxonRow, validate_table
from infrastructure.config.models import MappingConfig
from infrastructure.io import read_source, write_table
from infrastructure.observability import clear_table_context, set_log_context

logger = logging.getLogger(__name__)

# Row model each built table is validated against
TABLE_MODELS = {
    TAXON_TABLE: TaxonRow,
    DISTRIBUTION_TABLE: DistributionRow,
    SPECIES_PROFILE_TABLE: SpeciesProfileRow,
    DESCRIPTION_TABLE: DescriptionRow,
}


@dataclass(frozen=True)
class MappingResult:
    """What a run read and wrote."""

    source: str
    source_rows: int
    normalized_rows: int
    taxa: int
    row_counts: dict[str, int] = field(default_factory=dict)
    output_paths: dict[str, Path] = field(default_factory=dict)
    raw_path: Path | None = None


def build_tables(raw_df: pd.DataFrame, cfg: MappingConfig) -> tuple[pd.DataFrame, dict[str, pd.DataFrame]]:
    """
    Normalize the source table once and derive the four output tables from it.

    Pure: reads nothing from disk and writes nothing.

    Args:
        raw_df: Source table as read (all cells text or null)
        cfg: MappingConfig instance

    Returns:
        Tuple of (normalized records, {table name: output DataFrame})

    Raises:
        pydantic.ValidationError: If a built row does not fit its row model
    """
    records = normalize_records(
        raw_df,
        taxon_id_prefix=cfg.taxon_id_prefix,
        derive_taxon_id_hash=cfg.derive_taxon_id_hash,
    )
    logger.info(
        "Normalized %d source rows into %d records (%d distinct taxa)",
        len(raw_df),
        len(records),
        records["taxon_id"].nunique(),
    )

    projectors = {
        TAXON_TABLE: lambda: project_taxa(records, cfg.dataset),
        DISTRIBUTION_TABLE: lambda: project_distributions(records, cfg.regions),
        SPECIES_PROFILE_TABLE: lambda: project_species_profiles(records),
        DESCRIPTION_TABLE: lambda: project_descriptions(records, language=cfg.dataset.language),
    }

    tables: dict[str, pd.DataFrame] = {}
    try:
        for name, project in projectors.items():
            set_log_context(table=name)
            tables[name] = project()
            validate_table(tables[name], TABLE_MODELS[name])
            logger.info("Built %s: %d rows", name, len(tables[name]))
    finally:
        clear_table_context()

    return records, tables


def run_mapping(cfg: MappingConfig, client: httpx.Client | None = None) -> MappingResult:
    """
    Run the whole mapping: read source, archive it, build and write the tables.

    Args:
        cfg: MappingConfig instance
        client: Optional httpx client used when the source is a URL

    Returns:
        MappingResult with row counts and written paths
    """
    logger.info("Reading source %s...", cfg.source)
    raw_df = read_source(cfg.source, timeout_s=cfg.http_timeout_s, client=client)
    logger.info("Source loaded: %d rows, %d columns", raw_df.shape[0], raw_df.shape[1])

    raw_path: Path | None = None
    if cfg.archive_raw:
        raw_path = write_table(raw_df, cfg.raw_path)
        logger.info("Archived raw source to %s", raw_path)

    records, tables = build_tables(raw_df, cfg)
    output_paths = write_tables(tables, cfg.processed_dir)

    return MappingResult(
        source=cfg.source,
        source_rows=len(raw_df),
        normalized_rows=len(records),
        taxa=len(tables[TAXON_TABLE]),
        row_counts={name: len(df) for name, df in tables.items()},
        output_paths=output_paths,
        raw_path=raw_path,
    )
