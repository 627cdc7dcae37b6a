"""
Domain layer: Darwin Core mapping logic with minimal external dependencies.

Contains:
- schemas: Pydantic models for the output rows (column order and row checks live here)
- checklist: input normalization, first-wins deduplication, region lookup
- projections: Taxon, Distribution, SpeciesProfile and Description tables
"""

from domain.schemas import DescriptionRow, DistributionRow, SpeciesProfileRow, TaxonRow, validate_table

__all__ = [
    "TaxonRow",
    "DistributionRow",
    "SpeciesProfileRow",
    "DescriptionRow",
    "validate_table",
]
