"""JSON parsing and pretty-printing."""

import json
import logging
import math
import re
from typing import Any, Optional
from .types import ReformatError, ErrorType

INDENT = 1

_LONE_SURROGATE = re.compile('[\ud800-\udfff]')


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _parse_float(literal: str) -> float:
    value = float(literal)
    if math.isinf(value):
        raise ValueError(f"Number out of range: {literal}")
    return value


def _escape_surrogate(match: "re.Match") -> str:
    return f"\\u{ord(match.group()):04x}"


class JSONParser:
    """
    Parses JSON text and renders values back as indented text.

    Any JSON value is accepted at the root, scalars included. Object keys
    keep the order in which they were parsed.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, json_string: str, source: Optional[str] = None) -> Any:
        """
        Parse a JSON string.

        Args:
            json_string: JSON text to parse
            source: Optional name of the text's origin, used in error messages

        Returns:
            The parsed value

        Raises:
            ReformatError: If the text is not valid JSON, holds a number
                outside the float range, or nests too deeply
        """
        origin = source or "input"
        try:
            data = json.loads(json_string, parse_constant=_reject_constant,
                              parse_float=_parse_float)
        except json.JSONDecodeError as e:
            location = f"line {e.lineno}, column {e.colno}"
            raise ReformatError(
                f"Invalid JSON in {origin}: {e.msg} ({location})",
                ErrorType.SYNTAX,
                context={"source": origin, "location": location}
            ) from e
        except ValueError as e:
            raise ReformatError(
                f"Invalid JSON in {origin}: {e}",
                ErrorType.SYNTAX,
                context={"source": origin}
            ) from e
        except RecursionError as e:
            raise ReformatError(
                f"Invalid JSON in {origin}: nesting too deep",
                ErrorType.SYNTAX,
                context={"source": origin}
            ) from e

        self.logger.debug(f"Parsed {origin}: root type {type(data).__name__}")
        return data

    def serialize(self, data: Any) -> str:
        """
        Render a value as JSON text with one space of indentation per level.

        Non-ASCII characters are written literally. Lone surrogates, which
        cannot be encoded as UTF-8, are written as ``\\uXXXX`` escapes.

        Args:
            data: Value to serialize

        Returns:
            Pretty-printed JSON text without a trailing newline

        Raises:
            ReformatError: If the value cannot be rendered as JSON
        """
        try:
            output = json.dumps(data, indent=INDENT, ensure_ascii=False, allow_nan=False)
        except (ValueError, TypeError) as e:
            raise ReformatError(f"Cannot serialize value: {e}", ErrorType.SYNTAX) from e
        except RecursionError as e:
            raise ReformatError("Cannot serialize value: nesting too deep",
                                ErrorType.SYNTAX) from e

        return _LONE_SURROGATE.sub(_escape_surrogate, output)
