"""Core type definitions for the JSON Reformatter."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ErrorType(Enum):
    """Enumeration of error types."""
    READ = "read"
    SYNTAX = "syntax"
    WRITE = "write"


@dataclass
class ReformatResult:
    """Result of a reformat operation."""
    path: str
    input_size: int
    output_size: int
    changed: bool


class ReformatError(Exception):
    """Raised when a file cannot be read, parsed or written back."""

    def __init__(self, message: str, error_type: ErrorType,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context or {}
