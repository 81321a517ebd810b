"""
Failure outcomes returned by the product handlers and their HTTP mapping.

Handlers return one of these values instead of raising. Anything that is not
one of them (store outages, permission errors, bugs) is raised as usual and
never becomes an HTTP response here.
"""
from dataclasses import dataclass, field
from typing import Any, List, Tuple, Union

from fastapi import status


@dataclass(frozen=True)
class DecodeFailure:
    """The raw request body could not be decoded as JSON."""
    message: str


@dataclass(frozen=True)
class ValidationFailure:
    """The decoded body violated the product schema."""
    errors: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class NotFound:
    """The referenced productId does not exist."""
    product_id: Any = None


Failure = Union[DecodeFailure, ValidationFailure, NotFound]


def classify(failure: Any) -> Tuple[int, dict]:
    """
    Map a failure outcome to a (status_code, body) pair.

    Checked in order: decode failure, validation failure, not found.
    Exceptions are re-raised unchanged; any other value is a programming
    error and raises TypeError.
    """
    if isinstance(failure, DecodeFailure):
        return status.HTTP_400_BAD_REQUEST, {
            "error": f'Invalid request body format: "{failure.message}"'
        }

    if isinstance(failure, ValidationFailure):
        return status.HTTP_400_BAD_REQUEST, {"errors": list(failure.errors)}

    if isinstance(failure, NotFound):
        return status.HTTP_404_NOT_FOUND, {"error": "Not Found"}

    if isinstance(failure, BaseException):
        raise failure

    raise TypeError(f"Cannot classify outcome of type {type(failure).__name__}")
