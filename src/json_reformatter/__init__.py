"""
JSON Reformatter - rewrite a JSON file in place as indented, readable JSON.
"""

__version__ = "1.0.0"

from .json_reformatter import JSONReformatter, DEFAULT_TARGET
from .types import ReformatResult, ReformatError, ErrorType

__all__ = [
    "JSONReformatter",
    "DEFAULT_TARGET",
    "ReformatResult",
    "ReformatError",
    "ErrorType",
]
