"""Lookup of values in nested mappings by delimited key path.

A path is either a delimited string such as ``"counts.followed_by"`` or a
tuple/list of already split segments. The empty path addresses the mapping
itself.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from dict_crutches.access.result import Err, Ok
from dict_crutches.exceptions import KeyNotFoundError
from dict_crutches.key_mapping import KeyPath


if TYPE_CHECKING:
    from dict_crutches.access.result import Result


_MISSING = object()


def _parts(path: str | tuple[Any, ...] | list[Any], sep: str) -> tuple[Any, ...]:
    return KeyPath(sep=sep).parts(path)


def get_path(
    mapping: Mapping[Any, Any],
    path: str | tuple[Any, ...] | list[Any],
    default: Any = None,
    *,
    sep: str = ".",
) -> Any:
    """Return the value at ``path``, or ``default`` when it does not resolve.

    A missing key and a non-mapping value in the middle of the path are both
    treated as absence; nothing is raised for either. Segments of a tuple or
    list path must be hashable: an unhashable one raises ``TypeError``.
    """
    current: Any = mapping
    for part in _parts(path, sep):
        if not isinstance(current, Mapping):
            return default
        current = current.get(part, _MISSING)
        if current is _MISSING:
            return default
    return current


def fetch_path_strict(
    mapping: Mapping[Any, Any],
    path: str | tuple[Any, ...] | list[Any],
    *,
    sep: str = ".",
) -> Any:
    """Return the value at ``path``.

    Raises:
        KeyNotFoundError: for the first segment that cannot be resolved, with
            the value it was looked up in.
    """
    current: Any = mapping
    for part in _parts(path, sep):
        if not isinstance(current, Mapping) or part not in current:
            raise KeyNotFoundError(part, current)
        current = current[part]
    return current


def fetch_path(
    mapping: Mapping[Any, Any],
    path: str | tuple[Any, ...] | list[Any],
    *,
    sep: str = ".",
) -> Result[Any]:
    """Return ``Ok(value)`` for a resolved path, ``Err(error)`` otherwise."""
    try:
        value = fetch_path_strict(mapping, path, sep=sep)
    except KeyNotFoundError as error:
        return Err(error)
    return Ok(value)
