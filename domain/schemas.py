"""Pydantic models for the Darwin Core output rows.

Field order on each model is the column order of the written CSV.
"""

import pandas as pd
from pydantic import BaseModel, Field


class TaxonRow(BaseModel):
    """Darwin Core Taxon core row (one per distinct taxonID)."""

    language: str = "en"
    license: str
    rightsHolder: str
    accessRights: str
    datasetID: str
    institutionCode: str
    datasetName: str
    taxonID: str
    scientificName: str | None = None
    kingdom: str | None = None
    phylum: str | None = None
    order: str | None = None
    family: str | None = None
    genus: str | None = None
    taxonRank: str | None = None
    nomenclaturalCode: str | None = None


class DistributionRow(BaseModel):
    """Distribution extension row (one per taxon x region x pathway)."""

    taxonID: str
    locationID: str | None = None
    locality: str | None = None
    countryCode: str | None = None
    occurrenceStatus: str | None = None
    establishmentMeans: str | None = None
    degreeOfEstablishment: str | None = None
    pathway: str
    eventDate: str | None = Field(
        default=None,
        description="ISO 8601 interval built from first and last observation, open ends allowed.",
    )
    source: str | None = None
    occurrenceRemarks: str | None = None


class SpeciesProfileRow(BaseModel):
    """Species Profile extension row. Habitat flags are copied verbatim (no boolean coercion)."""

    taxonID: str
    isMarine: str | None = None
    isFreshwater: str | None = None
    isTerrestrial: str | None = None


class DescriptionRow(BaseModel):
    """Description extension row (one per native range token)."""

    taxonID: str
    description: str
    type: str = "native range"
    language: str = "en"


def columns_of(model: type[BaseModel]) -> list[str]:
    """Return the output column order declared by a row model."""
    return list(model.model_fields)


TAXON_COLUMNS = columns_of(TaxonRow)
DISTRIBUTION_COLUMNS = columns_of(DistributionRow)
SPECIES_PROFILE_COLUMNS = columns_of(SpeciesProfileRow)
DESCRIPTION_COLUMNS = columns_of(DescriptionRow)


def validate_table(df: pd.DataFrame, model: type[BaseModel]) -> None:
    """
    Check a built table against its row model: exact column order, then every row.

    Raises:
        ValueError: If the columns differ from the model's fields
        pydantic.ValidationError: If a row breaks the model (e.g. a null taxonID)
    """
    expected = columns_of(model)
    if list(df.columns) != expected:
        raise ValueError(f"{model.__name__} columns mismatch: expected {expected}, got {list(df.columns)}")
    rows = df.astype(object).where(df.notna(), None)
    for row in rows.to_dict("records"):
        model.model_validate(row)
