import pathlib
from typing import List

import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from cwcheck import env_vars
from cwcheck.host_abi import HOST_ABI_TABLES
from cwcheck.policies.policy_catalog import POLICY_CATALOG
from cwcheck.validator import parse_capabilities


def _default_capabilities() -> List[str]:
    return sorted(parse_capabilities([env_vars.CWCHECK_CAPABILITIES]))


class ConfigModel(BaseModel):
    host_version: StrictStr = Field(default_factory=lambda: env_vars.CWCHECK_HOST_VERSION)
    capability_policy: StrictStr = Field(default_factory=lambda: env_vars.CWCHECK_CAPABILITY_POLICY)
    capabilities: List[StrictStr] = Field(default_factory=_default_capabilities)

    model_config = ConfigDict(extra="forbid", validate_default=True)

    @field_validator("host_version")
    @classmethod
    def validate_host_version(cls, value):
        if value not in HOST_ABI_TABLES:
            raise ValueError(f"host_version: {value} does not exist in HOST_ABI_TABLES.")
        return value

    @field_validator("capability_policy")
    @classmethod
    def validate_capability_policy(cls, value):
        if value not in POLICY_CATALOG:
            raise ValueError(f"capability_policy: {value} does not exist in POLICY_CATALOG.")
        return value


def parse_config_file(config_filename: str) -> ConfigModel:
    """Parse config file and return ConfigModel."""
    if not pathlib.Path(config_filename).is_file():
        raise ValueError(
            f"config_filename: {config_filename} is not a file. Please check if it exists."
        )

    with open(config_filename) as f:
        config = yaml.load(f, yaml.SafeLoader) or {}

    return ConfigModel(**config)


if __name__ == "__main__":
    # Call this from the root of the repo using "python -m cwcheck.config"
    config_model = parse_config_file(config_filename="config/cwcheck.yaml")
    print(config_model.model_dump_json(indent=2))
