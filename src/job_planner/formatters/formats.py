"""Supported export formats."""

from enum import Enum
from typing import Union

from job_planner.exceptions import UnsupportedFormatError


class Formats(str, Enum):
    """
    Output encodings for exported records.

    - JSON: structured, sparse (absent fields omitted)
    - CSV: delimited, dense (fixed column count)
    - PRETTY: human-readable ``Label: value`` blocks, dense
    """

    JSON = "json"
    CSV = "csv"
    PRETTY = "pretty"

    @classmethod
    def parse(cls, value: Union["Formats", str]) -> "Formats":
        """
        Resolve a format from an enum member or a case-insensitive name.

        "txt" and "text" are accepted as aliases for PRETTY.

        Raises:
            UnsupportedFormatError: If the name is not a known format
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        if name in ("txt", "text"):
            return cls.PRETTY
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedFormatError(f"Unsupported output format: {value}") from None
