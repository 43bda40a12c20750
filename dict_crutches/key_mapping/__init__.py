"""Key path and nested key rewriting utilities."""

from .path import KeyPath
from .remap import remap_keys


__all__ = ["KeyPath", "remap_keys"]
