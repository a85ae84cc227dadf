"""Result types for railway-oriented programming.

Validation in the domain layer (configuration checks, policy parsing) returns
a Result instead of raising. The application layer decides whether a Failure
becomes an exception at the library boundary.

Usage:
    result = parse_policy("read:post", config)
    match result:
        case Success(value=policy):
            ...
        case Failure(error=error):
            raise PolicyError(error)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
