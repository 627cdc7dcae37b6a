"""Configuration models (Pydantic classes)."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from domain.checklist.normalizer import TAXON_ID_PREFIX
from domain.checklist.regions import RegionLookup
from infrastructure.constants import DATA_DIR, LOG_DIRNAME, PROCESSED_DIRNAME, RAW_DIRNAME


class DatasetConfig(BaseModel):
    """
    Dataset-level metadata written on every Taxon core row.

    Defaults are the INBO checklist conventions; dataset_id and dataset_name
    identify the published dataset and must be given.
    """

    language: str = "en"
    license: str = "http://creativecommons.org/publicdomain/zero/1.0/"
    rights_holder: str = "INBO"
    access_rights: str = "https://www.inbo.be/en/norms-for-data-use"
    dataset_id: str
    institution_code: str = "INBO"
    dataset_name: str

    def as_taxon_terms(self) -> dict[str, str]:
        """Return the metadata keyed by Darwin Core term."""
        return {
            "language": self.language,
            "license": self.license,
            "rightsHolder": self.rights_holder,
            "accessRights": self.access_rights,
            "datasetID": self.dataset_id,
            "institutionCode": self.institution_code,
            "datasetName": self.dataset_name,
        }


class MappingConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from mapping.yaml (source may be overridden from the environment)
    - Validated and enriched by configuration loader
    - Consumed by the mapping pipeline
    """

    source: str = Field(..., description="Local file path or http(s) URL of the source checklist (CSV).")
    http_timeout_s: float = Field(default=30.0, gt=0, description="Timeout for downloading a URL source.")

    data_dir: Path = Field(default_factory=lambda: DATA_DIR)
    raw_file: str = Field(
        default="alien-mammals-checklist.csv",
        description="File name of the unmodified source copy under <data_dir>/raw.",
    )
    archive_raw: bool = Field(default=True, description="Write the unmodified source table to <data_dir>/raw.")

    taxon_id_prefix: str = TAXON_ID_PREFIX
    derive_taxon_id_hash: bool = Field(
        default=False,
        description="Derive taxon_id_hash from scientific_name + kingdom when the source lacks the column.",
    )

    dataset: DatasetConfig
    regions: RegionLookup = Field(default_factory=RegionLookup)

    @property
    def raw_path(self) -> Path:
        return self.data_dir / RAW_DIRNAME / self.raw_file

    @property
    def processed_dir(self) -> Path:
        return self.data_dir / PROCESSED_DIRNAME

    @property
    def log_dir(self) -> Path:
        return self.data_dir / LOG_DIRNAME

    @property
    def source_is_url(self) -> bool:
        return self.source.lower().startswith(("http://", "https://"))

    @model_validator(mode="after")
    def _validate(self) -> "MappingConfig":
        self.source = self.source.strip()
        if not self.source:
            raise ValueError("source must be a file path or URL")

        if not self.taxon_id_prefix:
            raise ValueError("taxon_id_prefix must not be empty")

        # Archiving a local source onto itself would only rewrite it
        if self.archive_raw and not self.source_is_url and Path(self.source).resolve() == self.raw_path.resolve():
            self.archive_raw = False

        return self
