from typing import FrozenSet

from cwcheck.compiler import CompiledModule
from cwcheck.policies.base import BaseCapabilityPolicy


REQUIRES_PREFIX = "requires_"


class RequiresExportsPolicy(BaseCapabilityPolicy):
    """
    Reads capabilities from marker exports: a module exporting `requires_staking` needs the
    `staking` capability. This is how CosmWasm contracts declare their needs.
    """
    POLICY_TYPE = "requires_exports"

    def required_capabilities(self, module: CompiledModule) -> FrozenSet[str]:
        return frozenset(
            name[len(REQUIRES_PREFIX):]
            for name in module.export_names
            if name.startswith(REQUIRES_PREFIX) and len(name) > len(REQUIRES_PREFIX)
        )
