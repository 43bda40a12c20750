"""Splitting and joining of delimited key paths."""

from __future__ import annotations

from typing import Any


class KeyPath:
    """Map between delimited path strings and tuples of key segments."""

    def __init__(self, sep: str = ".") -> None:
        super().__init__()
        if not sep:
            msg = "sep must not be empty"
            raise ValueError(msg)
        self.sep = sep

    def parts(self, path: str | tuple[Any, ...] | list[Any]) -> tuple[Any, ...]:
        """Convert a path into its key segments.

        Strings are split on the separator, the empty string being the empty
        path. Tuples and lists are already split and are used as given.
        """
        if isinstance(path, str):
            if not path:
                return ()
            return tuple(path.split(self.sep))
        if isinstance(path, (tuple, list)):
            return tuple(path)
        msg = f"path must be a str, tuple or list, not {type(path).__name__}"
        raise TypeError(msg)

    def join(self, *parts: str) -> str:
        """Build a delimited path string from key segments."""
        for part in parts:
            if self.sep in part:
                msg = f"key parts must not contain separator: {part!r}"
                raise ValueError(msg)
        return self.sep.join(parts)
