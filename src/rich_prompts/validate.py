"""Validation of prompt input.

A validator is any callable taking the parsed value. It rejects the value
by returning an error message or by raising ``ValidationError`` (or
``ValueError``); returning None accepts it.

Example:
    def not_blank(value: str) -> str | None:
        return "value required" if not value.strip() else None
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, TypeVar, Union

from .errors import ValidationError

T = TypeVar("T")

Validator = Callable[[T], Union[str, None]]


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Accepted input, carrying the parsed value."""

    value: T


@dataclass(frozen=True)
class Err:
    """Rejected input, carrying the message to show."""

    message: str


ValidationResult = Union[Ok[T], Err]


def chain_validators(validators: Validator | Iterable[Validator] | None) -> list[Validator]:
    """Normalize a validator option into a list (first error wins)."""
    if validators is None:
        return []
    if callable(validators):
        return [validators]
    return list(validators)


def run_validators(value: T, validators: Iterable[Validator]) -> ValidationResult:
    """Run validators in order and return the first rejection, if any."""
    for validator in validators:
        try:
            message = validator(value)
        except (ValidationError, ValueError) as exc:
            message = str(exc) or "invalid value"
        if message:
            return Err(str(message))
    return Ok(value)


def parse_and_validate(
    text: str,
    parser: Callable[[str], T],
    validators: Iterable[Validator],
) -> ValidationResult:
    """Parse ``text`` and validate the result.

    Parse failures (``ValueError``, including ``ValidationError`` raised by a
    custom parser) are reported as ``Err`` with the parser's message.
    """
    try:
        value = parser(text)
    except (ValidationError, ValueError) as exc:
        return Err(str(exc) or f"invalid value: {text!r}")
    return run_validators(value, validators)
