"""Uniform result shape returned by repository operations"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class OutcomeStatus(str, Enum):
    """How a storage operation ended"""
    OK = "ok"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass
class Outcome:
    """Result of a storage operation: a value, a miss, or a failure"""
    status: OutcomeStatus
    value: Any = None
    error: Optional[BaseException] = None
    timed_out: bool = False

    @classmethod
    def ok(cls, value: Any = None) -> "Outcome":
        return cls(status=OutcomeStatus.OK, value=value)

    @classmethod
    def not_found(cls) -> "Outcome":
        return cls(status=OutcomeStatus.NOT_FOUND)

    @classmethod
    def failure(cls, error: BaseException, timed_out: bool = False) -> "Outcome":
        return cls(status=OutcomeStatus.ERROR, error=error, timed_out=timed_out)

    @property
    def is_ok(self) -> bool:
        return self.status == OutcomeStatus.OK

    @property
    def is_not_found(self) -> bool:
        return self.status == OutcomeStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        return self.status == OutcomeStatus.ERROR
