import pandas as pd

from domain.checklist import normalize_records
from domain.projections import project_taxa
from domain.schemas import TAXON_COLUMNS

PREFIX = "alien-mammals-checklist:taxon:"


def test_one_row_per_taxon_sorted_by_taxon_id(raw_df: pd.DataFrame, dataset_cfg) -> None:
    taxa = project_taxa(normalize_records(raw_df), dataset_cfg)

    assert list(taxa.columns) == TAXON_COLUMNS
    assert list(taxa["taxonID"]) == [PREFIX + "000", PREFIX + "aaa", PREFIX + "bbb"]
    assert taxa["taxonID"].is_unique


def test_first_record_wins(raw_df: pd.DataFrame, dataset_cfg) -> None:
    taxa = project_taxa(normalize_records(raw_df), dataset_cfg).set_index("taxonID")

    procyon = taxa.loc[PREFIX + "aaa"]
    assert procyon["scientificName"] == "Procyon lotor"
    assert procyon["family"] == "Procyonidae"
    assert procyon["taxonRank"] == "species"
    assert procyon["nomenclaturalCode"] == "ICZN"


def test_dataset_constants_on_every_row(raw_df: pd.DataFrame, dataset_cfg) -> None:
    taxa = project_taxa(normalize_records(raw_df), dataset_cfg)

    assert set(taxa["language"]) == {"en"}
    assert set(taxa["rightsHolder"]) == {"INBO"}
    assert set(taxa["institutionCode"]) == {"INBO"}
    assert set(taxa["license"]) == {"http://creativecommons.org/publicdomain/zero/1.0/"}
    assert set(taxa["datasetID"]) == {"https://doi.org/10.0000/test"}
    assert set(taxa["datasetName"]) == {"Test checklist"}


def test_missing_taxonomic_fields_stay_null(raw_df: pd.DataFrame, dataset_cfg) -> None:
    taxa = project_taxa(normalize_records(raw_df), dataset_cfg).set_index("taxonID")
    assert pd.isna(taxa.loc[PREFIX + "000", "family"])
