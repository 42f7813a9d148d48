from __future__ import annotations

import abc
from typing import FrozenSet

from cwcheck.compiler import CompiledModule


class BaseCapabilityPolicy(abc.ABC):
    """Decides which host capabilities a compiled module requires.

    Subclasses must declare:
    - POLICY_TYPE: str
    - required_capabilities(self, module: CompiledModule) -> FrozenSet[str]

    Example declaration of subclass:

        class StakingOnlyPolicy(BaseCapabilityPolicy):
            POLICY_TYPE = "staking_only"

            def required_capabilities(self, module):
                return frozenset({"staking"})
    """
    POLICY_TYPE: str
    """Identifies the policy in config files and on the command line.
    - The policy_type must be unique across all subclasses
    """

    @abc.abstractmethod
    def required_capabilities(self, module: CompiledModule) -> FrozenSet[str]:
        raise NotImplementedError()
