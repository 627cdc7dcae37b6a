"""Dataset loading and writing utilities."""

import io
import logging
from pathlib import Path

import httpx
import pandas as pd

logger = logging.getLogger(__name__)

# Every cell is text; only empty cells are null ("NA", "null", ... stay as written).
# header=None keeps repeated headers as written instead of pandas' "x.1" renaming.
_TEXT_READ_OPTS = {"header": None, "dtype": str, "keep_default_na": False, "na_values": [""]}


def _promote_header(df: pd.DataFrame) -> pd.DataFrame:
    """Use the first row as the header, exactly as it appears in the file."""
    if df.empty:
        return pd.DataFrame()
    header = ["" if pd.isna(h) else h for h in df.iloc[0]]
    out = df.iloc[1:].reset_index(drop=True)
    out.columns = header
    return out


def read_table(path: Path) -> pd.DataFrame:
    """
    Read tabular data file (CSV, TSV or Excel) based on file extension.

    Supported formats:
    - CSV: .csv
    - Tab separated: .tsv, .txt
    - Excel: .xlsx

    Args:
        path: Path to data file

    Returns:
        pandas DataFrame with every column as text; repeated headers are kept
        as written (clean_column_names suffixes them later)

    Raises:
        ValueError: If file format is not supported
        FileNotFoundError: If file does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    suffix = path.suffix.lower()

    if suffix == ".xlsx":
        return _promote_header(pd.read_excel(path, **_TEXT_READ_OPTS))
    elif suffix == ".csv":
        return _promote_header(pd.read_csv(path, **_TEXT_READ_OPTS))
    elif suffix in [".tsv", ".txt"]:
        return _promote_header(pd.read_csv(path, sep="\t", **_TEXT_READ_OPTS))
    else:
        raise ValueError(f"Unsupported file format: {suffix}. Supported formats: .csv, .tsv, .txt, .xlsx")


def fetch_table(url: str, timeout_s: float = 30.0, client: httpx.Client | None = None) -> pd.DataFrame:
    """
    Download a CSV (e.g. a published spreadsheet export) and parse it as text.

    Args:
        url: http(s) URL returning CSV
        timeout_s: Request timeout when no client is given
        client: Optional pre-configured httpx client (tests pass a MockTransport here)

    Raises:
        httpx.HTTPError: On connection errors and non-2xx responses
    """
    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=timeout_s, follow_redirects=True)

    try:
        logger.debug("GET %s", url)
        resp = client.get(url)
        resp.raise_for_status()
    finally:
        if owns_client:
            client.close()

    logger.info("Downloaded %d bytes from %s", len(resp.content), url)
    return _promote_header(pd.read_csv(io.BytesIO(resp.content), encoding="utf-8", **_TEXT_READ_OPTS))


def read_source(source: str, timeout_s: float = 30.0, client: httpx.Client | None = None) -> pd.DataFrame:
    """Read the source table from an http(s) URL or a local path."""
    if source.lower().startswith(("http://", "https://")):
        return fetch_table(source, timeout_s=timeout_s, client=client)
    return read_table(Path(source))


def write_table(df: pd.DataFrame, path: Path) -> Path:
    """Write a table as UTF-8 CSV: no index, nulls as empty strings, \\n line endings."""
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False, na_rep="", encoding="utf-8", lineterminator="\n")
    return path
