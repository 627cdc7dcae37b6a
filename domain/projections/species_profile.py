"""Species Profile extension projection."""

import pandas as pd

from domain.checklist.dedup import first_by_key, sort_by_key
from domain.checklist.normalizer import TAXON_ID_COL
from domain.schemas import SPECIES_PROFILE_COLUMNS

# Darwin Core term -> normalized source column
HABITAT_FIELD_MAP = {
    "isMarine": "marine",
    "isFreshwater": "freshwater",
    "isTerrestrial": "terrestrial",
}


def project_species_profiles(df: pd.DataFrame) -> pd.DataFrame:
    """
    One habitat row per taxon, for taxa whose first record has any habitat flag.

    Flag values are copied verbatim ("TRUE" stays "TRUE").
    """
    taxa = first_by_key(df, TAXON_ID_COL)
    taxa = taxa.loc[taxa[list(HABITAT_FIELD_MAP.values())].notna().any(axis=1)]

    out = pd.DataFrame({"taxonID": taxa[TAXON_ID_COL].to_numpy()})
    for term, col in HABITAT_FIELD_MAP.items():
        out[term] = taxa[col].to_numpy()

    return sort_by_key(out[SPECIES_PROFILE_COLUMNS], "taxonID")
