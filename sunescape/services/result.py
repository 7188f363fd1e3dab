"""Tagged results returned by every workflow service.

Routers inspect the tag; services never raise across the boundary for
expected failures (validation, permission, duplicate, missing row).
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, enum.Enum):
    validation = "validation"
    permission = "permission"
    conflict = "conflict"
    not_found = "not_found"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]


def validation_error(message: str) -> Err:
    return Err(ErrorKind.validation, message)


def permission_error(message: str) -> Err:
    return Err(ErrorKind.permission, message)


def conflict_error(message: str) -> Err:
    return Err(ErrorKind.conflict, message)


def not_found_error(message: str = "Not found") -> Err:
    return Err(ErrorKind.not_found, message)
