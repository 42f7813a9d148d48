from typing import Sequence

import pytest
import wasmtime

from cwcheck.host_abi import COSMWASM_1


LIFECYCLE_EXPORTS = ("interface_version_8", "allocate", "deallocate", "instantiate")


def contract_wat(
        memory_exports: Sequence[str] = ("memory",),
        exports: Sequence[str] = LIFECYCLE_EXPORTS,
        imports: Sequence[str] = COSMWASM_1.required_imports,
) -> str:
    """
    Build the text format of a contract-shaped module. Every import and export is an empty
    function, the checks only look at names and kinds.
    """
    lines = ["(module"]
    for token in imports:
        module, name = token.split(".", 1)
        lines.append(f'  (import "{module}" "{name}" (func))')
    if memory_exports is not None:
        inline_exports = " ".join(f'(export "{name}")' for name in memory_exports)
        lines.append(f"  (memory {inline_exports} 1)")
    for name in exports:
        lines.append(f'  (func (export "{name}"))')
    lines.append(")")
    return "\n".join(lines)


def build_contract(**kwargs) -> bytes:
    return wasmtime.wat2wasm(contract_wat(**kwargs))


@pytest.fixture
def make_contract():
    return build_contract


@pytest.fixture
def valid_contract_bytes():
    return build_contract()


@pytest.fixture
def staking_contract_bytes():
    """A contract that declares it needs the staking capability"""
    return build_contract(exports=LIFECYCLE_EXPORTS + ("requires_staking",))
