import pandas as pd
import pytest

from infrastructure.config.models import DatasetConfig, MappingConfig

PREFIX = "alien-mammals-checklist:taxon:"

RAW_COLUMNS = [
    "Scientific Name",
    "kingdom",
    "phylum",
    "order",
    "family",
    "genus",
    "taxonRank",
    "nomenclatural_code",
    "location",
    "country_code",
    "occurrence_status",
    "establishment_means",
    "degree_of_establishment",
    "introduction_pathway_1",
    "Introduction pathway 2",
    "date_first_observation",
    "date_last_observation",
    "source",
    "occurrence_remarks",
    "terrestrial",
    "marine",
    "freshwater",
    "native_range",
    "taxon_id_hash",
]


def _row(**values: str | None) -> dict[str, str | None]:
    return {col: values.get(col) for col in RAW_COLUMNS}


@pytest.fixture
def raw_df() -> pd.DataFrame:
    """Five source rows: two for the same taxon, one without pathways, one empty."""
    rows = [
        _row(
            **{
                "Scientific Name": "Ondatra zibethicus",
                "kingdom": "Animalia",
                "order": "Rodentia",
                "location": "Belgium",
                "country_code": "BE",
                "occurrence_status": "present",
                "introduction_pathway_1": "contaminant",
                "date_first_observation": "1950",
                "freshwater": "TRUE",
                "taxon_id_hash": "bbb",
            }
        ),
        _row(
            **{
                "Scientific Name": "Procyon lotor",
                "kingdom": "Animalia",
                "phylum": "Chordata",
                "order": "Carnivora",
                "family": "Procyonidae",
                "genus": "Procyon",
                "taxonRank": "species",
                "nomenclatural_code": "ICZN",
                "location": "Flanders",
                "country_code": "BE",
                "occurrence_status": "present",
                "establishment_means": "introduced",
                "degree_of_establishment": "established",
                "introduction_pathway_1": "escape",
                "Introduction pathway 2": "release",
                "date_first_observation": "1990",
                "date_last_observation": "2010",
                "source": "Verbeylen 2012",
                "occurrence_remarks": "first record near Ghent",
                "terrestrial": "TRUE",
                "native_range": "North America|Central America",
                "taxon_id_hash": "aaa",
            }
        ),
        _row(
            **{
                "Scientific Name": "Myocastor coypus",
                "kingdom": "Animalia",
                "location": "Brussels",
                "native_range": "South America| ",
                "taxon_id_hash": "000",
            }
        ),
        _row(),
        _row(
            **{
                "Scientific Name": "Procyon lotor (second row)",
                "kingdom": "Animalia",
                "location": "Wallonia",
                "introduction_pathway_1": "escape",
                "date_last_observation": "2015",
                "terrestrial": "FALSE",
                "native_range": "Europe",
                "taxon_id_hash": "aaa",
            }
        ),
    ]
    return pd.DataFrame(rows, columns=RAW_COLUMNS)


@pytest.fixture
def dataset_cfg() -> DatasetConfig:
    return DatasetConfig(dataset_id="https://doi.org/10.0000/test", dataset_name="Test checklist")


@pytest.fixture
def mapping_cfg(tmp_path, dataset_cfg) -> MappingConfig:
    return MappingConfig(
        source=str(tmp_path / "source.csv"),
        data_dir=tmp_path / "data",
        dataset=dataset_cfg,
    )
