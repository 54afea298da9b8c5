from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

PASS = "PASS"
FAIL = "FAIL"
ERROR = "ERROR"


@dataclass(frozen=True)
class Pass:
    identity: str

    status = PASS
    passed = True

    def format(self) -> str:
        return f"{self.identity}: passed"

    def to_dict(self) -> Dict[str, Any]:
        return {"identity": self.identity, "status": self.status}


@dataclass(frozen=True)
class Fail:
    identity: str
    actual: Any
    expected: Tuple[str, ...]
    description: str
    reason: str = "unexpected expansion"

    status = FAIL
    passed = False

    def format(self) -> str:
        if len(self.expected) == 1:
            wanted = repr(self.expected[0])
        else:
            wanted = "one of " + ", ".join(repr(e) for e in self.expected)
        return (
            f"{self.identity}: {self.description}: {self.reason}: "
            f"got {self.actual!r}, expected {wanted}"
        )

    def to_dict(self) -> Dict[str, Any]:
        actual = self.actual
        if not isinstance(actual, (str, dict, type(None))):
            actual = repr(actual)
        return {
            "identity": self.identity,
            "status": self.status,
            "reason": self.reason,
            "description": self.description,
            "actual": actual,
            "expected": list(self.expected),
        }


@dataclass(frozen=True)
class Error:
    identity: str
    cause: BaseException
    description: str

    status = ERROR
    passed = False

    def format(self) -> str:
        return f"{self.identity}: {self.description}: {type(self.cause).__name__}: {self.cause}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "identity": self.identity,
            "status": self.status,
            "description": self.description,
            "error_type": type(self.cause).__name__,
            "error": str(self.cause),
        }


Outcome = Union[Pass, Fail, Error]
