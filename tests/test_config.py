import json

import pytest
from pydantic import ValidationError

from grn_netlist.config import ConverterConfig, load_config


@pytest.mark.unit
def test_defaults() -> None:
    cfg = load_config(None)
    assert cfg.classifier == "two_pass"
    assert cfg.log_level == "WARNING"
    assert cfg.output.write_dot is False


@pytest.mark.unit
def test_unknown_keys_and_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        ConverterConfig(classifier="three_pass")
    with pytest.raises(ValidationError):
        ConverterConfig(colour="blue")
    with pytest.raises(ValidationError):
        ConverterConfig(log_level="chatty")


@pytest.mark.unit
def test_log_level_is_normalized() -> None:
    assert ConverterConfig(log_level=" debug ").log_level == "DEBUG"


@pytest.mark.integration
def test_load_yaml(tmp_path) -> None:
    path = tmp_path / "cfg.yaml"
    path.write_text("classifier: single_pass\noutput:\n  write_dot: true\n  output_dir: out\n")
    cfg = load_config(path)
    assert cfg.classifier == "single_pass"
    assert cfg.output.write_dot is True
    assert cfg.output.output_dir == "out"


@pytest.mark.integration
def test_load_json(tmp_path) -> None:
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"log_level": "info"}))
    assert load_config(str(path)).log_level == "INFO"


@pytest.mark.unit
def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("GRN_NETLIST_CLASSIFIER", "single_pass")
    monkeypatch.delenv("GRN_NETLIST_LOG_LEVEL", raising=False)
    cfg = ConverterConfig().from_environment()
    assert cfg.classifier == "single_pass"
    assert cfg.log_level == "WARNING"


@pytest.mark.unit
def test_with_updates_ignores_none() -> None:
    cfg = ConverterConfig(classifier="single_pass").with_updates(classifier=None, log_level="error")
    assert cfg.classifier == "single_pass"
    assert cfg.log_level == "ERROR"
