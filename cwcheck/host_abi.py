"""
Host ABI tables: what a contract module has to look like for a given host VM version.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True)
class HostAbi:
    version: str
    supported_interface_versions: Tuple[str, ...]
    required_exports: Tuple[str, ...]
    required_imports: Tuple[str, ...]


INTERFACE_VERSION_PREFIX = "interface_version_"

COSMWASM_1 = HostAbi(
    version="cosmwasm-1",
    supported_interface_versions=(
        "interface_version_7",
        "interface_version_8",
    ),
    required_exports=(
        "allocate",
        "deallocate",
        "instantiate",
    ),
    required_imports=(
        "env.abort",
        "env.db_read",
        "env.db_write",
        "env.db_remove",
        "env.addr_validate",
        "env.addr_canonicalize",
        "env.addr_humanize",
        "env.secp256k1_verify",
        "env.secp256k1_recover_pubkey",
        "env.ed25519_verify",
        "env.ed25519_batch_verify",
        "env.debug",
        "env.query_chain",
        "env.db_scan",
        "env.db_next",
    ),
)

# Add new host VM versions here. Check logic only ever reads a HostAbi.
HOST_ABI_TABLES: Mapping[str, HostAbi] = MappingProxyType({
    COSMWASM_1.version: COSMWASM_1,
})

DEFAULT_HOST_VERSION = COSMWASM_1.version


def get_host_abi(version: str = DEFAULT_HOST_VERSION) -> HostAbi:
    try:
        return HOST_ABI_TABLES[version]
    except KeyError:
        raise ValueError(
            f"Unknown host version: {version}. Known versions: {', '.join(HOST_ABI_TABLES)}"
        ) from None
