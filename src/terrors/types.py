"""
Core types and protocols used across the library.

This module provides the error classification enum and the capability
protocols that inspection code checks for, so that externally supplied
exceptions compose with the error variants defined in terrors.exceptions.
"""

from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from terrors.stack import StackTrace


class Type(Enum):
    """
    Classification of an error, attached at construction.

    Lets consumers branch on the nature of a failure without matching on
    message text.

    Categories:
        UNKNOWN: No classification available (default)
        INVALID: Invalid input or arguments
        PERMISSION: Caller lacks permission for the operation
        EXIST: Target already exists
        NOT_EXIST: Target does not exist
        INTERNAL: Internal failure of the callee
        UNAUTHORIZED: Caller is not authenticated
    """

    UNKNOWN = "unknown"
    INVALID = "invalid"
    PERMISSION = "permission"
    EXIST = "exist"
    NOT_EXIST = "not_exist"
    INTERNAL = "internal"
    UNAUTHORIZED = "unauthorized"


@runtime_checkable
class Typed(Protocol):
    """Exposes a classification."""

    @property
    def type(self) -> Type: ...


@runtime_checkable
class Causer(Protocol):
    """Exposes the error it wraps."""

    @property
    def cause(self) -> BaseException | None: ...


@runtime_checkable
class StackTracer(Protocol):
    """Exposes the call stack captured when the error was created."""

    @property
    def stack_trace(self) -> "StackTrace": ...
