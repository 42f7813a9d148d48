import pytest
from pydantic import ValidationError

from cwcheck import env_vars
from cwcheck.config import ConfigModel, parse_config_file


def test_parse_config_file(tmp_path):
    config_path = tmp_path / "cwcheck.yaml"
    config_path.write_text(
        "host_version: cosmwasm-1\n"
        "capability_policy: requires_exports\n"
        "capabilities: [staking, stargate]\n"
    )

    config = parse_config_file(str(config_path))

    assert config.host_version == "cosmwasm-1"
    assert config.capability_policy == "requires_exports"
    assert config.capabilities == ["staking", "stargate"]


def test_parse_empty_config_file_uses_defaults(tmp_path):
    config_path = tmp_path / "cwcheck.yaml"
    config_path.write_text("")

    config = parse_config_file(str(config_path))

    assert config.capability_policy == "none"


def test_parse_config_file_missing(tmp_path):
    with pytest.raises(ValueError, match="is not a file"):
        parse_config_file(str(tmp_path / "missing.yaml"))


def test_config_unknown_host_version():
    with pytest.raises(ValidationError):
        ConfigModel(host_version="cosmwasm-0")


def test_config_unknown_policy():
    with pytest.raises(ValidationError):
        ConfigModel(capability_policy="guess")


def test_config_forbids_extra_keys():
    with pytest.raises(ValidationError):
        ConfigModel(required_imports=["env.db_read"])


def test_config_defaults_from_environment(monkeypatch):
    monkeypatch.setattr(env_vars, "CWCHECK_CAPABILITIES", "stargate, staking")
    monkeypatch.setattr(env_vars, "CWCHECK_CAPABILITY_POLICY", "requires_exports")

    config = ConfigModel()

    assert config.capabilities == ["staking", "stargate"]
    assert config.capability_policy == "requires_exports"


def test_config_validates_environment_defaults(monkeypatch):
    monkeypatch.setattr(env_vars, "CWCHECK_HOST_VERSION", "cosmwasm-0")
    with pytest.raises(ValidationError):
        ConfigModel()
