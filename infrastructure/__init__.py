"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML, environment)
- Source reading (local files, http(s) URLs) and table writing
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import DatasetConfig, MappingConfig, load_mapping_config

__all__ = [
    "load_mapping_config",
    "MappingConfig",
    "DatasetConfig",
]
