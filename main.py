"""
CLI entrypoint for the alien mammals checklist Darwin Core mapping.

This script performs the following steps:
- loads .env (if present) and configs/mapping.yaml
- reads the source checklist (local file or published spreadsheet URL)
- archives the unmodified source under data/raw/
- normalizes the records and builds the Taxon, Distribution,
  Species Profile and Description tables
- writes them as CSV under data/processed/
- logs a human-readable summary of the run
"""

import argparse
import logging
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from application import log_run_summary, run_mapping
from application.constants import LOG_FILENAME
from infrastructure.config import load_mapping_config
from infrastructure.constants import MAPPING_FILE
from infrastructure.io import ensure_exists
from infrastructure.observability import configure_logging, make_run_tag, set_log_context

logger = logging.getLogger(__name__)


def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Map the alien mammals checklist to Darwin Core")
    p.add_argument(
        "--config",
        type=str,
        default=str(MAPPING_FILE),
        help="Path to mapping.yaml (default: configs/mapping.yaml)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file, loaded when present (default: .env)",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level",
    )
    p.add_argument(
        "--file-level",
        type=str,
        default="DEBUG",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="File log level",
    )
    return p.parse_args()


def main() -> None:
    args = _parse_args()

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    config_path = Path(args.config)
    ensure_exists(config_path, "mapping.yaml")

    cfg = load_mapping_config(config_path)

    log_path = cfg.log_dir / LOG_FILENAME
    configure_logging(
        log_file=log_path,
        console_level=getattr(logging, args.console_level),
        file_level=getattr(logging, args.file_level),
    )

    run_id = f"{datetime.now().strftime('%Y%m%d_%H%M%S')}_{cfg.dataset.dataset_name}"
    set_log_context(run_id_full=run_id)
    logger.info("Starting run: run_id=%s (run_tag=%s)", run_id, make_run_tag(run_id))

    try:
        result = run_mapping(cfg)
    except Exception:
        logger.exception("Mapping failed; outputs may be incomplete")
        raise

    log_run_summary(result)
    logger.info("Detailed log: %s", log_path)


if __name__ == "__main__":
    main()
