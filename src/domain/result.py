"""
Result Types

Tagged success/failure variants returned by every use case.
Expected failures travel as values; only unexpected faults are raised.
"""

from dataclasses import dataclass, field
from typing import Dict, Generic, List, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Error:
    """
    Domain error.

    Attributes:
        code: Stable machine-readable code (e.g. INVALID_CREDENTIALS)
        message: Human readable summary
        fields: Form field name -> messages, for errors tied to inputs
    """

    code: str
    message: str
    fields: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def for_field(cls, code: str, field_name: str, message: str) -> "Error":
        return cls(code, message, {field_name: [message]})


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def success(self) -> bool:
        return True

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True)
class Err:
    error: Error

    @property
    def success(self) -> bool:
        return False

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


Result = Union[Ok[T], Err]


class Return:
    @staticmethod
    def ok(value: Optional[T] = None) -> Ok[T]:
        return Ok(value)

    @staticmethod
    def err(error: Error) -> Err:
        return Err(error)
