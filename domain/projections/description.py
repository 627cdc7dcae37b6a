"""Description extension projection (native range)."""

import pandas as pd

from domain.checklist.dedup import first_by_key, sort_by_key
from domain.checklist.normalizer import TAXON_ID_COL
from domain.schemas import DESCRIPTION_COLUMNS

NATIVE_RANGE_SEP = "|"
NATIVE_RANGE_TYPE = "native range"


def split_native_range(value: object) -> list[str]:
    """
    Split a "|"-delimited native range into trimmed, non-empty tokens.

    Examples:
        >>> split_native_range("Asia|Europe| North America ")
        ['Asia', 'Europe', 'North America']
        >>> split_native_range(None)
        []
    """
    if not isinstance(value, str):
        return []
    tokens = (token.strip() for token in value.split(NATIVE_RANGE_SEP))
    return [token for token in tokens if token]


def project_descriptions(df: pd.DataFrame, language: str = "en") -> pd.DataFrame:
    """
    One row per (taxon, native range token), from the first record of each taxon.

    Tokens of one taxon keep the order they have in native_range.
    """
    taxa = first_by_key(df, TAXON_ID_COL)

    rows = [
        {"taxonID": taxon_id, "description": token}
        for taxon_id, native_range in zip(taxa[TAXON_ID_COL], taxa["native_range"])
        for token in split_native_range(native_range)
    ]
    out = pd.DataFrame(rows, columns=["taxonID", "description"])
    out["type"] = NATIVE_RANGE_TYPE
    out["language"] = language

    return sort_by_key(out[DESCRIPTION_COLUMNS], "taxonID")
