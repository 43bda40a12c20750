"""Entry selection over mappings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Callable, Mapping


def filter_dict(mapping: Mapping[Any, Any], predicate: Callable[[Any, Any], object]) -> dict[Any, Any]:
    """Return the entries for which ``predicate(key, value)`` is truthy."""
    return {key: value for key, value in mapping.items() if predicate(key, value)}


def reject_dict(mapping: Mapping[Any, Any], predicate: Callable[[Any, Any], object]) -> dict[Any, Any]:
    """Return the entries for which ``predicate(key, value)`` is falsy."""
    return filter_dict(mapping, lambda key, value: not predicate(key, value))
