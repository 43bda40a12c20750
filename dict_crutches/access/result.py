"""Success/failure result of a non-raising path lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeAlias, TypeVar

from dict_crutches.exceptions import KeyNotFoundError


_T = TypeVar("_T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[_T]):
    """The path resolved to ``value``."""

    value: _T

    def is_ok(self) -> Literal[True]:
        """Return whether the path resolved."""
        return True

    def is_err(self) -> Literal[False]:
        """Return whether the path failed to resolve."""
        return False

    def unwrap(self) -> _T:
        """Return the resolved value."""
        return self.value

    def unwrap_or(self, default: Any) -> _T:  # noqa: ARG002
        """Return the resolved value, ignoring ``default``."""
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    """The path did not resolve; ``error`` tells which segment failed and where."""

    error: KeyNotFoundError

    def is_ok(self) -> Literal[False]:
        """Return whether the path resolved."""
        return False

    def is_err(self) -> Literal[True]:
        """Return whether the path failed to resolve."""
        return True

    def unwrap(self) -> Any:
        """Raise the lookup error."""
        raise self.error

    def unwrap_or(self, default: _T) -> _T:
        """Return ``default`` in place of the missing value."""
        return default


Result: TypeAlias = Ok[_T] | Err
