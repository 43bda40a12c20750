"""Exceptions raised by path access."""

from __future__ import annotations

import sys
from typing import Any

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override


class KeyNotFoundError(KeyError):
    """A path segment could not be resolved.

    ``key`` is the segment that failed and ``mapping`` is the value it was
    looked up in. That value is not necessarily a mapping: descending into a
    scalar fails the same way as a missing key.
    """

    def __init__(self, key: Any, mapping: Any) -> None:
        super().__init__(key)
        self.key = key
        self.mapping = mapping

    @override
    def __reduce__(self) -> tuple[type[KeyNotFoundError], tuple[Any, Any]]:
        return (type(self), (self.key, self.mapping))

    @override
    def __str__(self) -> str:
        return f"key {self.key!r} not found in: {self.mapping!r}"
