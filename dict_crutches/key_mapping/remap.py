"""Recursive key rewriting over nested mappings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Callable


def remap_keys(mapping: Mapping[Any, Any], transform: Callable[[Any], Any]) -> dict[Any, Any]:
    """Return a copy of ``mapping`` with ``transform`` applied to every key.

    Values that are mappings themselves are remapped recursively, to any
    depth. All other values, lists included, are carried over as they are.
    When two keys of one level transform to the same key, the one iterated
    last wins.
    """
    remapped: dict[Any, Any] = {}
    for key, value in mapping.items():
        remapped[transform(key)] = remap_keys(value, transform) if isinstance(value, Mapping) else value
    return remapped
