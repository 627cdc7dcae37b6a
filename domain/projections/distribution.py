"""Distribution extension projection."""

import logging

import pandas as pd

from domain.checklist.dedup import sort_by_key
from domain.checklist.normalizer import TAXON_ID_COL, pathway_columns
from domain.checklist.regions import RegionLookup
from domain.schemas import DISTRIBUTION_COLUMNS

logger = logging.getLogger(__name__)

# Darwin Core term -> normalized source column (straight copies)
DISTRIBUTION_FIELD_MAP = {
    "countryCode": "country_code",
    "occurrenceStatus": "occurrence_status",
    "establishmentMeans": "establishment_means",
    "degreeOfEstablishment": "degree_of_establishment",
    "source": "source",
    "occurrenceRemarks": "occurrence_remarks",
}

_ROW_POS = "_row_pos"
_PATHWAY_POS = "_pathway_pos"


def _is_blank(value: object) -> bool:
    return value is None or pd.isna(value) or str(value) == ""


def interval_date(first: object, last: object) -> str | None:
    """
    Build an ISO 8601 interval from first and last observation.

    Examples:
        >>> interval_date("1990", "2010")
        '1990/2010'
        >>> interval_date(None, "2010")
        '/2010'
        >>> interval_date("1990", None)
        '1990/'
        >>> interval_date(None, None) is None
        True
    """
    if _is_blank(first) and _is_blank(last):
        return None
    if _is_blank(first):
        return f"/{last}"
    if _is_blank(last):
        return f"{first}/"
    return f"{first}/{last}"


def project_distributions(df: pd.DataFrame, regions: RegionLookup | None = None) -> pd.DataFrame:
    """
    Build the Distribution extension: one row per (record, populated pathway column).

    Works on the full normalized table (no deduplication). Records without any
    pathway contribute no rows. Unknown locations get null locationID/locality
    and are reported once each as a warning.

    Args:
        df: Normalized records
        regions: Location lookup (defaults to the Belgian regions)

    Returns:
        DataFrame with DISTRIBUTION_COLUMNS in order, sorted by taxonID;
        rows of one taxon keep input order, then pathway column order
    """
    regions = regions or RegionLookup()
    pathways = pathway_columns(df)

    base = df.reset_index(drop=True)
    base[_ROW_POS] = range(len(base))

    long = base[[_ROW_POS, *pathways]].melt(
        id_vars=[_ROW_POS],
        value_vars=pathways,
        var_name=_PATHWAY_POS,
        value_name="pathway",
    )
    long[_PATHWAY_POS] = long[_PATHWAY_POS].map({col: i for i, col in enumerate(pathways)})
    long = long.loc[long["pathway"].notna()]
    long = long.sort_values([_ROW_POS, _PATHWAY_POS], kind="stable")

    records = base.set_index(_ROW_POS).loc[long[_ROW_POS].to_numpy()].reset_index()

    for loc in regions.unknown(records["location"].tolist()):
        logger.warning("Unknown location %r: locationID and locality left empty", loc)

    resolved = [regions.resolve(loc) for loc in records["location"]]

    out = pd.DataFrame({"taxonID": records[TAXON_ID_COL].to_numpy()})
    out["locationID"] = [location_id for location_id, _ in resolved]
    out["locality"] = [locality for _, locality in resolved]
    for term, col in DISTRIBUTION_FIELD_MAP.items():
        out[term] = records[col].to_numpy()
    out["pathway"] = long["pathway"].to_numpy()
    out["eventDate"] = [
        interval_date(first, last)
        for first, last in zip(records["date_first_observation"], records["date_last_observation"])
    ]

    return sort_by_key(out[DISTRIBUTION_COLUMNS], "taxonID")
