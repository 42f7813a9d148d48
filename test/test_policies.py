import pytest

from cwcheck.compiler import CompiledModule, ExportEntry, FUNCTION
from cwcheck.policies.base import BaseCapabilityPolicy
from cwcheck.policies.none_policy import NoCapabilitiesPolicy
from cwcheck.policies.policy_catalog import (
    POLICY_CATALOG,
    _validate_no_duplicate_policy_types,
    get_policy,
)
from cwcheck.policies.requires_exports import RequiresExportsPolicy


def test_catalog_contains_policies():
    assert POLICY_CATALOG["none"] is NoCapabilitiesPolicy
    assert POLICY_CATALOG["requires_exports"] is RequiresExportsPolicy


def test_get_policy_default():
    assert isinstance(get_policy(), NoCapabilitiesPolicy)


def test_get_policy_unknown():
    with pytest.raises(ValueError):
        get_policy("from_custom_section")


def test_duplicate_policy_types_rejected():
    class AnotherNonePolicy(BaseCapabilityPolicy):
        POLICY_TYPE = "none"

        def required_capabilities(self, module):
            return frozenset()

    with pytest.raises(ValueError, match="duplicated"):
        _validate_no_duplicate_policy_types([NoCapabilitiesPolicy, AnotherNonePolicy])


def test_requires_exports_reads_marker_exports():
    exports = tuple(
        ExportEntry(name, FUNCTION)
        for name in ["instantiate", "requires_staking", "requires_stargate", "requires_"]
    )
    required = RequiresExportsPolicy().required_capabilities(CompiledModule(exports=exports))
    assert required == {"staking", "stargate"}
