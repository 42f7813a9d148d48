"""
The five structural checks run against a compiled contract module.

Every check is a pure function of its inputs and reports expected failures as an Invalid verdict
rather than raising.
"""
from typing import AbstractSet, Sequence

from cwcheck.compiler import CompiledModule, MEMORY
from cwcheck.host_abi import HostAbi, INTERFACE_VERSION_PREFIX
from cwcheck.policies.base import BaseCapabilityPolicy
from cwcheck.results import CheckResult, FailureKind, Invalid, VALID


def _quoted(names: Sequence[str]) -> str:
    return ", ".join(f'"{name}"' for name in names)


def check_memories(module: CompiledModule) -> CheckResult:
    memories = module.exports_of_kind(MEMORY)
    if len(memories) == 0:
        return Invalid(FailureKind.MEMORY, "missing memory section")
    if len(memories) > 1:
        return Invalid(FailureKind.MEMORY, "must contain exactly one memory")
    return VALID


def check_interface_version(module: CompiledModule, host_abi: HostAbi) -> CheckResult:
    markers = [name for name in module.export_names if name.startswith(INTERFACE_VERSION_PREFIX)]
    if len(markers) == 0:
        return Invalid(FailureKind.INTERFACE_VERSION, "missing interface_version_* marker export")
    if len(markers) > 1:
        return Invalid(FailureKind.INTERFACE_VERSION, "more than one interface_version_* marker export")

    marker = markers[0]
    if marker not in host_abi.supported_interface_versions:
        return Invalid(
            FailureKind.INTERFACE_VERSION,
            f'unknown interface_version_* marker: "{marker}". '
            f"Versions supported by VM {host_abi.version}: "
            f"{_quoted(host_abi.supported_interface_versions)}.",
        )
    return VALID


def check_exports(module: CompiledModule, host_abi: HostAbi) -> CheckResult:
    export_names = set(module.export_names)
    missing = [name for name in host_abi.required_exports if name not in export_names]
    if missing:
        return Invalid(
            FailureKind.EXPORTS,
            f"missing required export: {_quoted(missing)}. "
            f"Exports required by VM: {_quoted(host_abi.required_exports)}.",
        )
    return VALID


def check_imports(module: CompiledModule, host_abi: HostAbi) -> CheckResult:
    imported = {entry.qualified_name for entry in module.imports}
    missing = [token for token in host_abi.required_imports if token not in imported]
    if missing:
        return Invalid(
            FailureKind.IMPORTS,
            f"missing required import: {_quoted(missing)}. "
            f"Imports required by VM: {_quoted(host_abi.required_imports)}.",
        )
    return VALID


def check_capabilities(
        module: CompiledModule,
        available_capabilities: AbstractSet[str],
        policy: BaseCapabilityPolicy,
) -> CheckResult:
    required = policy.required_capabilities(module)
    missing = sorted(required - set(available_capabilities))
    if missing:
        return Invalid(FailureKind.CAPABILITIES, f"missing capability: {', '.join(missing)}")
    return VALID
