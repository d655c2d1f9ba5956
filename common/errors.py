"""Error types raised by the holdings pipeline.

Every failure in the pipeline is fatal to the run: nothing is retried and
no partial result is returned.
"""
from __future__ import annotations

from typing import Optional


class HoldingsError(Exception):
    """Base class for every error raised while processing a holdings export."""

    pass


class ConfigError(HoldingsError):
    """Error raised when a column schema configuration is invalid."""

    pass


class SourceIOError(HoldingsError):
    """The source file could not be opened or read."""

    def __init__(self, operation: str, path: str, message: str = "") -> None:
        self.operation = operation
        self.path = path
        text = f"failed to {operation} the csv file {path!r}"
        if message:
            text = f"{text}: {message}"
        super().__init__(text)


class FormatError(HoldingsError):
    """A record has fewer fields than the schema requires."""

    def __init__(
        self,
        actual_length: int,
        min_length: int,
        line_number: Optional[int] = None,
    ) -> None:
        self.actual_length = actual_length
        self.min_length = min_length
        self.line_number = line_number
        where = f" on line {line_number}" if line_number is not None else ""
        super().__init__(
            f"row length {actual_length}{where} is below the minimum required {min_length}"
        )


class ParseError(HoldingsError, ValueError):
    """A numeric field of a record could not be converted to a float."""

    def __init__(self, field: str, raw_value: str, line_number: Optional[int] = None) -> None:
        self.field = field
        self.raw_value = raw_value
        self.line_number = line_number
        where = f" on line {line_number}" if line_number is not None else ""
        super().__init__(
            f"error while parsing the {field.replace('_', ' ')} into a float{where}: {raw_value!r}"
        )

    def at_line(self, line_number: int) -> "ParseError":
        """Return a copy of this error tagged with the record's line number."""
        return ParseError(self.field, self.raw_value, line_number)
