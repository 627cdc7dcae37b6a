from pathlib import Path

# Repo-root conventional directories/files (overrideable via mapping.yaml)
CONFIG_DIR = Path("configs")
MAPPING_FILE = CONFIG_DIR / "mapping.yaml"

DATA_DIR = Path("data")
RAW_DIRNAME = "raw"
PROCESSED_DIRNAME = "processed"
LOG_DIRNAME = "logs"

# Environment variable overriding the configured source (path or URL)
SOURCE_ENV_VAR = "CHECKLIST_SOURCE"
