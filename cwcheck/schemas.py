from typing import Optional

from pydantic import BaseModel

from cwcheck.results import CheckResult


class VerdictResponse(BaseModel):
    valid: bool
    kind: Optional[str] = None
    category: Optional[str] = None
    message: str

    @classmethod
    def from_result(cls, result: CheckResult) -> "VerdictResponse":
        if result.ok:
            return cls(valid=True, message="Wasm contract is valid")
        return cls(
            valid=False,
            kind=result.kind.value,
            category=result.kind.category.value,
            message=result.reason,
        )
