"""Taxon core projection."""

import pandas as pd

from domain.checklist.dedup import first_by_key, sort_by_key
from domain.checklist.normalizer import TAXON_ID_COL
from domain.schemas import TAXON_COLUMNS
from infrastructure.config.models import DatasetConfig

# Darwin Core term -> normalized source column
TAXON_FIELD_MAP = {
    "scientificName": "scientific_name",
    "kingdom": "kingdom",
    "phylum": "phylum",
    "order": "order",
    "family": "family",
    "genus": "genus",
    "taxonRank": "taxon_rank",
    "nomenclaturalCode": "nomenclatural_code",
}


def project_taxa(df: pd.DataFrame, dataset: DatasetConfig) -> pd.DataFrame:
    """
    Build the Taxon core: one row per distinct taxon_id.

    The taxonomic fields come from the first record seen for each taxon_id;
    dataset metadata is the same on every row. Sorted by taxonID.

    Args:
        df: Normalized records
        dataset: Dataset-level constants (license, rights holder, ...)

    Returns:
        DataFrame with TAXON_COLUMNS in order
    """
    taxa = first_by_key(df, TAXON_ID_COL)

    out = pd.DataFrame({"taxonID": taxa[TAXON_ID_COL].to_numpy()})
    for term, col in TAXON_FIELD_MAP.items():
        out[term] = taxa[col].to_numpy()

    for term, value in dataset.as_taxon_terms().items():
        out[term] = value

    return sort_by_key(out[TAXON_COLUMNS], "taxonID")
