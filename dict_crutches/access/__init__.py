"""Path based access to nested mappings."""

from .lookup import fetch_path, fetch_path_strict, get_path
from .result import Err, Ok, Result


__all__ = ["Err", "Ok", "Result", "fetch_path", "fetch_path_strict", "get_path"]
