"""
Environment variable defaults for the contract checker.
"""

import os

from cwcheck.host_abi import DEFAULT_HOST_VERSION
from cwcheck.policies.policy_catalog import DEFAULT_POLICY_TYPE


# Host VM whose ABI tables the contract is checked against
CWCHECK_HOST_VERSION = os.environ.get("CWCHECK_HOST_VERSION", DEFAULT_HOST_VERSION)

# How a contract's required capabilities are derived
CWCHECK_CAPABILITY_POLICY = os.environ.get("CWCHECK_CAPABILITY_POLICY", DEFAULT_POLICY_TYPE)

# Comma separated capabilities the host provides, e.g. "staking,stargate"
CWCHECK_CAPABILITIES = os.environ.get("CWCHECK_CAPABILITIES", "")
