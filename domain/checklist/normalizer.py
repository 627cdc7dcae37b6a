"""Input normalization: column names, empty rows and taxon identifiers."""

import hashlib
import logging
import re
from collections.abc import Iterable

import pandas as pd

logger = logging.getLogger(__name__)

TAXON_ID_PREFIX = "alien-mammals-checklist:taxon:"
TAXON_ID_COL = "taxon_id"
TAXON_ID_HASH_COL = "taxon_id_hash"
PATHWAY_COL_PREFIX = "introduction_pathway"

# Source columns read by at least one projector (after name normalization)
SOURCE_COLUMNS = [
    "scientific_name",
    "kingdom",
    "phylum",
    "order",
    "family",
    "genus",
    "taxon_rank",
    "nomenclatural_code",
    "location",
    "country_code",
    "occurrence_status",
    "establishment_means",
    "degree_of_establishment",
    "date_first_observation",
    "date_last_observation",
    "source",
    "occurrence_remarks",
    "terrestrial",
    "marine",
    "freshwater",
    "native_range",
    TAXON_ID_HASH_COL,
]


def clean_column_name(name: object) -> str:
    """
    Convert a raw header to snake_case.

    Examples:
        >>> clean_column_name("Scientific name")
        'scientific_name'
        >>> clean_column_name("dateFirstObservation")
        'date_first_observation'
        >>> clean_column_name(" Introduction pathway (1) ")
        'introduction_pathway_1'
    """
    s = str(name).strip()
    s = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s)
    s = s.lower()
    s = re.sub(r"[^a-z0-9]+", "_", s)
    return s.strip("_")


def clean_column_names(columns: Iterable[object]) -> list[str]:
    """Clean every header; repeated names get _2, _3, ... in order of appearance."""
    seen: dict[str, int] = {}
    cleaned: list[str] = []
    for raw in columns:
        name = clean_column_name(raw) or "x"
        seen[name] = seen.get(name, 0) + 1
        cleaned.append(name if seen[name] == 1 else f"{name}_{seen[name]}")
    return cleaned


def pathway_columns(df: pd.DataFrame) -> list[str]:
    """Return the introduction_pathway* columns in their table order."""
    return [c for c in df.columns if str(c).startswith(PATHWAY_COL_PREFIX)]


def blank_cells(df: pd.DataFrame) -> pd.DataFrame:
    """Boolean mask of cells that are null, empty or whitespace only."""
    if df.empty:
        return df.isna()
    return df.apply(lambda col: col.isna() | col.astype(str).str.strip().eq(""))


def drop_empty_rows(df: pd.DataFrame) -> pd.DataFrame:
    """Drop rows where every cell is null, empty or whitespace only."""
    if df.empty:
        return df
    return df.loc[~blank_cells(df).all(axis=1)]


def make_taxon_id_hash(scientific_name: object, kingdom: object) -> str:
    """MD5 hex digest of the trimmed, case-folded "<scientific_name> <kingdom>"."""
    parts = ["" if pd.isna(v) else str(v).strip().casefold() for v in (scientific_name, kingdom)]
    return hashlib.md5(" ".join(parts).encode("utf-8")).hexdigest()


def require_columns(df: pd.DataFrame, columns: Iterable[str]) -> None:
    """
    Check once that the normalized table carries every column the mapping reads.

    Raises:
        KeyError: If any column is missing, or there is no introduction_pathway* column
    """
    missing = [c for c in columns if c not in df.columns]
    if not pathway_columns(df):
        missing.append(f"{PATHWAY_COL_PREFIX}*")
    if missing:
        raise KeyError(f"Source table is missing required columns: {missing}. Available: {list(df.columns)}")


def normalize_records(
    raw_df: pd.DataFrame,
    taxon_id_prefix: str = TAXON_ID_PREFIX,
    derive_taxon_id_hash: bool = False,
) -> pd.DataFrame:
    """
    Clean the raw source table and add the taxon_id column.

    - Headers are rewritten to snake_case.
    - Empty and whitespace-only cells become null (other values are kept
      verbatim); rows with nothing in them are dropped.
    - taxon_id = taxon_id_prefix + taxon_id_hash, with an empty hash segment
      when the hash is missing.

    This is a pure function: the input DataFrame is not modified.

    Args:
        raw_df: Source table, all cells as text or null
        taxon_id_prefix: Prefix prepended to every hash
        derive_taxon_id_hash: Derive taxon_id_hash from scientific_name + kingdom
            when the source has no such column

    Returns:
        Normalized DataFrame with a fresh RangeIndex in input order
    """
    df = raw_df.copy()
    df.columns = clean_column_names(df.columns)
    df = df.mask(blank_cells(df))
    n_before = len(df)
    df = drop_empty_rows(df).reset_index(drop=True)
    if len(df) < n_before:
        logger.info("Dropped %d empty rows", n_before - len(df))

    if TAXON_ID_HASH_COL not in df.columns and derive_taxon_id_hash:
        require_columns(df, ["scientific_name", "kingdom"])
        logger.info("No %s column in source; deriving it from scientific_name + kingdom", TAXON_ID_HASH_COL)
        df[TAXON_ID_HASH_COL] = [
            make_taxon_id_hash(name, kingdom) for name, kingdom in zip(df["scientific_name"], df["kingdom"])
        ]

    require_columns(df, SOURCE_COLUMNS)

    df[TAXON_ID_COL] = taxon_id_prefix + df[TAXON_ID_HASH_COL].fillna("").astype(str)
    return df
