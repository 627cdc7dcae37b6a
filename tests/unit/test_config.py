from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from infrastructure.config import DatasetConfig, MappingConfig, load_mapping_config

REPO_CONFIG = Path(__file__).resolve().parents[2] / "configs" / "mapping.yaml"


def _write_config(tmp_path: Path, **overrides) -> Path:
    data = {
        "source": "data/raw/checklist.csv",
        "dataset": {"dataset_id": "https://doi.org/10.0000/test", "dataset_name": "Test checklist"},
    }
    data.update(overrides)
    path = tmp_path / "mapping.yaml"
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


def test_repo_config_loads(monkeypatch) -> None:
    monkeypatch.delenv("CHECKLIST_SOURCE", raising=False)

    cfg = load_mapping_config(REPO_CONFIG)

    assert cfg.taxon_id_prefix == "alien-mammals-checklist:taxon:"
    assert cfg.dataset.rights_holder == "INBO"
    assert cfg.regions.resolve("Brussels") == ("ISO_3166-2:BE-BRU", "Brussels-Capital Region")
    # the configured source is the raw archive itself, so it is not copied onto itself
    assert cfg.archive_raw is False


def test_defaults_fill_dataset_constants(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("CHECKLIST_SOURCE", raising=False)

    cfg = load_mapping_config(_write_config(tmp_path))

    terms = cfg.dataset.as_taxon_terms()
    assert terms["language"] == "en"
    assert terms["institutionCode"] == "INBO"
    assert terms["license"] == "http://creativecommons.org/publicdomain/zero/1.0/"
    assert cfg.regions.resolve("Wallonia") == ("ISO_3166-2:BE-WAL", "Walloon Region")
    assert cfg.processed_dir == Path("data") / "processed"


def test_source_overridden_from_environment(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("CHECKLIST_SOURCE", "https://example.org/checklist.csv")

    cfg = load_mapping_config(_write_config(tmp_path))

    assert cfg.source == "https://example.org/checklist.csv"
    assert cfg.source_is_url
    assert cfg.archive_raw is True


def test_missing_source_raises(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("CHECKLIST_SOURCE", raising=False)
    with pytest.raises(ValueError, match="source"):
        load_mapping_config(_write_config(tmp_path, source=None))


def test_missing_dataset_raises(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("CHECKLIST_SOURCE", raising=False)
    with pytest.raises(ValueError, match="dataset"):
        load_mapping_config(_write_config(tmp_path, dataset=None))


def test_bad_regions_raise(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("CHECKLIST_SOURCE", raising=False)
    with pytest.raises(ValueError, match="Flanders"):
        load_mapping_config(_write_config(tmp_path, regions={"Flanders": "BE-VLG"}))


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_mapping_config(tmp_path / "nope.yaml")


def test_blank_source_is_rejected() -> None:
    with pytest.raises(ValidationError):
        MappingConfig(source="   ", dataset=DatasetConfig(dataset_id="x", dataset_name="y"))


def test_dataset_id_is_required() -> None:
    with pytest.raises(ValidationError):
        DatasetConfig(dataset_name="y")
