"""
Darwin Core projections of the normalized checklist.

Each projector reads the same normalized table and returns one output table
with its columns in the published order. Projectors do not depend on each
other.
"""

from domain.projections.description import project_descriptions, split_native_range
from domain.projections.distribution import interval_date, project_distributions
from domain.projections.species_profile import project_species_profiles
from domain.projections.taxon import project_taxa

__all__ = [
    "project_taxa",
    "project_distributions",
    "interval_date",
    "project_species_profiles",
    "project_descriptions",
    "split_native_range",
]
