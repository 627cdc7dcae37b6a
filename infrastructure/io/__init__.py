"""I/O utilities: filesystem operations, dataset loading and writing."""

from infrastructure.io.datasets import fetch_table, read_source, read_table, write_table
from infrastructure.io.fs import ensure_exists

__all__ = [
    "ensure_exists",
    "fetch_table",
    "read_source",
    "read_table",
    "write_table",
]
