"""
Acme Flavors Backend: Repository Result Values
==============================================

What:  A small tagged value returned by every repository operation.
Why:   The route layer has to choose between 200, 404 and 500. Returning the
       outcome explicitly keeps that choice in one place instead of relying
       on exceptions escaping from deep inside the query code.

Usage:
    result = await repo.get_flavor(7)
    if result.is_ok:
        return result.value
    if result.is_not_found:
        ...
    result.error  # the SQLAlchemyError when the store failed
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ResultStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class Result(Generic[T]):
    status: ResultStatus
    value: Optional[T] = None
    error: Optional[Exception] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(status=ResultStatus.OK, value=value)

    @classmethod
    def not_found(cls) -> "Result[T]":
        return cls(status=ResultStatus.NOT_FOUND)

    @classmethod
    def failed(cls, error: Exception) -> "Result[T]":
        return cls(status=ResultStatus.FAILED, error=error)

    @property
    def is_ok(self) -> bool:
        return self.status is ResultStatus.OK

    @property
    def is_not_found(self) -> bool:
        return self.status is ResultStatus.NOT_FOUND

    @property
    def is_failed(self) -> bool:
        return self.status is ResultStatus.FAILED
