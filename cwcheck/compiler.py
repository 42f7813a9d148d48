from dataclasses import dataclass
from logging import getLogger
from typing import Optional, Tuple

import wasmtime

from cwcheck.results import CompileError

logger = getLogger(__name__)


FUNCTION = "function"
MEMORY = "memory"
GLOBAL = "global"
TABLE = "table"

WASM_MAGIC = b"\x00asm"


@dataclass(frozen=True)
class ExportEntry:
    name: str
    kind: str


@dataclass(frozen=True)
class ImportEntry:
    module: str
    name: str
    kind: str

    @property
    def qualified_name(self) -> str:
        return f"{self.module}.{self.name}"


@dataclass(frozen=True)
class CompiledModule:
    """The static interface of a compiled module: its exports and imports in declaration order."""
    exports: Tuple[ExportEntry, ...] = ()
    imports: Tuple[ImportEntry, ...] = ()

    def exports_of_kind(self, kind: str) -> Tuple[ExportEntry, ...]:
        return tuple(exported for exported in self.exports if exported.kind == kind)

    @property
    def export_names(self) -> Tuple[str, ...]:
        return tuple(exported.name for exported in self.exports)


def _kind_of(extern_type) -> str:
    if isinstance(extern_type, wasmtime.FuncType):
        return FUNCTION
    if isinstance(extern_type, wasmtime.MemoryType):
        return MEMORY
    if isinstance(extern_type, wasmtime.GlobalType):
        return GLOBAL
    if isinstance(extern_type, wasmtime.TableType):
        return TABLE
    raise CompileError(f"Unsupported extern type: {extern_type!r}")


def compile_module(wasm_bytes: bytes, engine: Optional[wasmtime.Engine] = None) -> CompiledModule:
    """
    Compile raw bytes with wasmtime and project out the export and import tables.

    Raises CompileError if wasmtime rejects the binary (bad magic, truncated sections, features
    the engine does not support).
    """
    if engine is None:
        engine = wasmtime.Engine()

    wasm_bytes = bytes(wasm_bytes)
    # wasmtime also accepts the text format, contracts must be binary
    if not wasm_bytes.startswith(WASM_MAGIC):
        raise CompileError("Unable to compile Wasm contract: missing Wasm magic header")

    try:
        module = wasmtime.Module(engine, wasm_bytes)
    except wasmtime.WasmtimeError as e:
        raise CompileError(f"Unable to compile Wasm contract: {e}") from e

    exports = tuple(ExportEntry(exported.name, _kind_of(exported.type)) for exported in module.exports)
    imports = tuple(
        ImportEntry(imported.module, imported.name or "", _kind_of(imported.type))
        for imported in module.imports
    )
    logger.debug(f"Compiled module with {len(exports)} exports and {len(imports)} imports")
    return CompiledModule(exports, imports)
