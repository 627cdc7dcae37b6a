"""Configuration loading from YAML files."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from domain.checklist.regions import parse_region_config
from infrastructure.config.models import DatasetConfig, MappingConfig
from infrastructure.constants import SOURCE_ENV_VAR

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_mapping_config(config_path: Path) -> MappingConfig:
    """
    Load mapping.yaml and construct a fully-resolved MappingConfig.

    The source can be overridden with the CHECKLIST_SOURCE environment variable
    (typically set in .env), so a private spreadsheet URL does not have to be
    committed with the config.
    """
    raw = _load_yaml(config_path)

    source = os.environ.get(SOURCE_ENV_VAR) or raw.get("source")
    if not source:
        raise ValueError(f"mapping.yaml missing required key 'source' (and {SOURCE_ENV_VAR} is not set)")
    if os.environ.get(SOURCE_ENV_VAR):
        logger.info("Source overridden from %s", SOURCE_ENV_VAR)

    dataset_raw = raw.get("dataset")
    if not isinstance(dataset_raw, dict):
        raise ValueError("mapping.yaml missing required mapping: dataset")

    regions = parse_region_config(raw.get("regions"))

    kwargs: dict[str, Any] = {
        key: raw[key]
        for key in (
            "http_timeout_s",
            "data_dir",
            "raw_file",
            "archive_raw",
            "taxon_id_prefix",
            "derive_taxon_id_hash",
        )
        if raw.get(key) is not None
    }

    cfg = MappingConfig(
        source=str(source),
        dataset=DatasetConfig(**dataset_raw),
        regions=regions,
        **kwargs,
    )

    return cfg
