import pathlib
from logging import getLogger
from typing import Callable, Iterable, List, Optional, Tuple

import wasmtime

from cwcheck.checks import (
    check_capabilities,
    check_exports,
    check_imports,
    check_interface_version,
    check_memories,
)
from cwcheck.compiler import CompiledModule, compile_module
from cwcheck.host_abi import DEFAULT_HOST_VERSION, get_host_abi
from cwcheck.policies.policy_catalog import DEFAULT_POLICY_TYPE, get_policy
from cwcheck.results import CheckResult, ContractNotFound, ContractUnreadable, VALID

logger = getLogger(__name__)


def parse_capabilities(values: Iterable[str]) -> frozenset:
    """
    Turn capability arguments into a capability set. Each value may itself be a comma separated
    list, so `["staking,stargate", "iterator"]` gives three capabilities.
    """
    capabilities = set()
    for value in values:
        capabilities.update(token.strip() for token in value.split(",") if token.strip())
    return frozenset(capabilities)


def check_wasm(
        module: CompiledModule,
        available_capabilities: Iterable[str],
        host_version: str = DEFAULT_HOST_VERSION,
        capability_policy: str = DEFAULT_POLICY_TYPE,
) -> CheckResult:
    """Run the checks in order against an already compiled module and stop at the first failure."""
    host_abi = get_host_abi(host_version)
    policy = get_policy(capability_policy)
    capabilities = frozenset(available_capabilities)

    # Cheap structural checks first
    stages: List[Tuple[str, Callable[[], CheckResult]]] = [
        ("memories", lambda: check_memories(module)),
        ("interface_version", lambda: check_interface_version(module, host_abi)),
        ("exports", lambda: check_exports(module, host_abi)),
        ("imports", lambda: check_imports(module, host_abi)),
        ("capabilities", lambda: check_capabilities(module, capabilities, policy)),
    ]

    for stage_name, stage in stages:
        result = stage()
        logger.debug(f"Check {stage_name}: {'passed' if result.ok else 'failed'}")
        if not result.ok:
            logger.info(f"Wasm contract failed {stage_name} check: {result.reason}")
            return result

    return VALID


def validate(
        wasm_bytes: bytes,
        available_capabilities: Iterable[str],
        host_version: str = DEFAULT_HOST_VERSION,
        capability_policy: str = DEFAULT_POLICY_TYPE,
        engine: Optional[wasmtime.Engine] = None,
) -> CheckResult:
    """
    Compile the contract and check it against the host ABI.

    Raises CompileError if the bytes are not a valid module. Every other failure is returned as
    an Invalid verdict.
    """
    module = compile_module(wasm_bytes, engine)
    return check_wasm(module, available_capabilities, host_version, capability_policy)


def check_contract(
        path: str,
        available_capabilities: Iterable[str],
        host_version: str = DEFAULT_HOST_VERSION,
        capability_policy: str = DEFAULT_POLICY_TYPE,
) -> CheckResult:
    contract_path = pathlib.Path(path)
    if not contract_path.is_file():
        raise ContractNotFound(f"File {path} does not exist")

    try:
        wasm_bytes = contract_path.read_bytes()
    except OSError as e:
        raise ContractUnreadable(f"Unable to read {path}: {e}") from e
    logger.info(f"Checking contract {path} ({len(wasm_bytes)} bytes)")
    return validate(wasm_bytes, available_capabilities, host_version, capability_policy)
