import pytest

import config
from config import ConfigError, PipelineSettings


def test_defaults():
    settings = PipelineSettings()
    assert 0.0 <= settings.match_threshold <= 1.0
    assert settings.max_records_per_file >= 1


@pytest.mark.parametrize("overrides", [
    {"match_threshold": 1.5},
    {"low_confidence_threshold": -0.1},
    {"max_file_size_bytes": 0},
    {"max_workers": 0},
    {"min_photos": -1},
    {"mapping_policy": "one-to-one"},
    {"mapping_policy": "best_guess"},
])
def test_invalid_settings_raise(overrides):
    with pytest.raises(ConfigError):
        PipelineSettings(**overrides)


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)


def test_from_env_rejects_unknown_policy(monkeypatch):
    monkeypatch.setattr(config, "MAPPING_POLICY", "best_guess")
    with pytest.raises(ConfigError, match="MAPPING_POLICY"):
        PipelineSettings.from_env()


def test_from_env_many_to_one(monkeypatch):
    monkeypatch.setattr(config, "MAPPING_POLICY", "many_to_one")
    assert PipelineSettings.from_env().one_to_one is False


def test_mapping_policy_sets_one_to_one():
    assert PipelineSettings(mapping_policy="one_to_one").one_to_one is True
    assert PipelineSettings(mapping_policy="many_to_one").one_to_one is False


def test_many_to_one_settings_reach_the_mapper(small_catalog):
    from normalizer import IngestionPipeline, UploadedFile

    settings = PipelineSettings(mapping_policy="many_to_one")
    result = IngestionPipeline(small_catalog, settings).process_file(
        UploadedFile("a.csv", "Price,List Price\n1,2\n")
    )
    assert result.mapping_report.mapped_field_names() == ["ListPrice"]
    assert len(result.mapping_report.mappings) == 2
