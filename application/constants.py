"""Application-level constants."""

# Output table names (also used as log context)
TAXON_TABLE = "taxon"
DISTRIBUTION_TABLE = "distribution"
SPECIES_PROFILE_TABLE = "speciesprofile"
DESCRIPTION_TABLE = "description"

# Write order of the output tables
TABLE_NAMES = [TAXON_TABLE, DISTRIBUTION_TABLE, SPECIES_PROFILE_TABLE, DESCRIPTION_TABLE]

# Output filenames under <data_dir>/processed
OUTPUT_FILENAMES = {name: f"{name}.csv" for name in TABLE_NAMES}

LOG_FILENAME = "mapping.log"
