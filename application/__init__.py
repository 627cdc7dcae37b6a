"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing the mapping workflow from source checklist to Darwin Core tables.
"""

from application.pipeline import MappingResult, build_tables, run_mapping
from application.serialize import write_tables
from application.summary import log_run_summary

__all__ = [
    # Main workflow
    "run_mapping",
    "build_tables",
    "MappingResult",
    # Outputs
    "write_tables",
    "log_run_summary",
]
