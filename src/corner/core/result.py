"""Success-or-notice outcome of a dashboard action.

Adding a countdown with no name or a note with no text is an everyday event,
not an exception. Widgets return ``Ok(record)`` or ``Err(notice)``; surfaces
branch on :meth:`Result.is_err` and show the notice, and the store is left
as it was.

Example
-------
>>> from corner.core.result import ok, err
>>> ok(3).unwrap()
3
>>> err("Please pick a date").unwrap_err()
'Please pick a date'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


class Result(Generic[T, E]):
    """Either an :class:`Ok` carrying a value or an :class:`Err` carrying an error."""

    def is_ok(self) -> bool:
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        return isinstance(self, Err)

    def unwrap(self) -> T:
        """Return the value of an ``Ok``; raise ``RuntimeError`` on ``Err``."""
        if isinstance(self, Ok):
            return self.value
        raise RuntimeError(f"unwrap() called on {self!r}")

    def unwrap_err(self) -> E:
        """Return the error of an ``Err``; raise ``RuntimeError`` on ``Ok``."""
        if isinstance(self, Err):
            return self.error
        raise RuntimeError(f"unwrap_err() called on {self!r}")


@dataclass(frozen=True)
class Ok(Result[T, E]):
    value: T


@dataclass(frozen=True)
class Err(Result[T, E]):
    error: E


def ok(value: T) -> Result[T, E]:
    return Ok(value)


def err(error: E) -> Result[T, E]:
    return Err(error)


__all__ = ["Err", "Ok", "Result", "err", "ok"]
