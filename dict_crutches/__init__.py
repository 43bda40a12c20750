"""dict-crutches - convenience functions for nested dictionaries"""

from ._version import version as __version__
from .access import Err, Ok, Result, fetch_path, fetch_path_strict, get_path
from .exceptions import KeyNotFoundError
from .key_mapping import KeyPath, remap_keys
from .selection import filter_dict, reject_dict


__all__ = [
    "Err",
    "KeyNotFoundError",
    "KeyPath",
    "Ok",
    "Result",
    "__version__",
    "fetch_path",
    "fetch_path_strict",
    "filter_dict",
    "get_path",
    "reject_dict",
    "remap_keys",
]
