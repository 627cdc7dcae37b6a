"""
Configuration management: models, loading, and validation.

Handles:
- MappingConfig: source location, output layout, identifier settings
- DatasetConfig: metadata written on every Taxon row
- Region lookup loading from YAML
- Environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_mapping_config
from infrastructure.config.models import DatasetConfig, MappingConfig

__all__ = [
    "MappingConfig",
    "DatasetConfig",
    "load_mapping_config",
]
