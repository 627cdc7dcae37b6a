"""Stable row selection and ordering shared by the projectors."""

import pandas as pd


def first_by_key(df: pd.DataFrame, key: str) -> pd.DataFrame:
    """Keep the first row per key value, in input order ("first wins")."""
    return df.drop_duplicates(subset=[key], keep="first")


def sort_by_key(df: pd.DataFrame, key: str) -> pd.DataFrame:
    """Sort ascending on key; rows with equal keys keep their relative order."""
    return df.sort_values(key, kind="stable").reset_index(drop=True)
