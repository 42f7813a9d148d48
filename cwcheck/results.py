"""
Verdicts returned by every check, and the exceptions reserved for conditions that stop a
validation before any check runs.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Union


class CwCheckError(Exception):
    pass


class CompileError(CwCheckError):
    """The bytes could not be compiled into a WebAssembly module."""


class ContractNotFound(CwCheckError):
    pass


class ContractUnreadable(CwCheckError):
    pass


class FailureCategory(str, Enum):
    STRUCTURAL = "structural"
    CAPABILITY = "capability"


class FailureKind(str, Enum):
    MEMORY = "memory"
    INTERFACE_VERSION = "interface_version"
    EXPORTS = "exports"
    IMPORTS = "imports"
    CAPABILITIES = "capabilities"

    @property
    def category(self) -> FailureCategory:
        if self is FailureKind.CAPABILITIES:
            return FailureCategory.CAPABILITY
        return FailureCategory.STRUCTURAL


@dataclass(frozen=True)
class Valid:
    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    kind: FailureKind
    reason: str

    @property
    def ok(self) -> bool:
        return False

    def __str__(self):
        return self.reason


CheckResult = Union[Valid, Invalid]

VALID = Valid()
