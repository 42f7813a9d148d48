from typing import FrozenSet

from cwcheck.compiler import CompiledModule
from cwcheck.policies.base import BaseCapabilityPolicy


class NoCapabilitiesPolicy(BaseCapabilityPolicy):
    """Modules require no capabilities until they carry a convention that says otherwise."""
    POLICY_TYPE = "none"

    def required_capabilities(self, module: CompiledModule) -> FrozenSet[str]:
        return frozenset()
