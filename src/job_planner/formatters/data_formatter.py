"""Writers that render job records to an output sink in various formats."""

import csv
import io
import json
import logging
from typing import Any, Callable, Dict, IO, Iterable, List, Optional, Sequence, Union

from job_planner.catalog.models import JobRecord
from job_planner.exceptions import SinkWriteError
from job_planner.formatters.formats import Formats

logger = logging.getLogger(__name__)

ENCODING = "utf-8"

# Canonical field order shared by every format.
FIELD_ORDER: List[str] = [
    "title",
    "description",
    "company",
    "location",
    "salary_min",
    "salary_max",
    "contract_time",
    "created",
    "redirect_url",
    "adref",
    "category",
    "latitude",
    "longitude",
    "id",
    "salary_is_predicted",
]

PRETTY_LABELS: Dict[str, str] = {
    "title": "Title",
    "description": "Description",
    "company": "Company",
    "location": "Location",
    "salary_min": "Salary Min",
    "salary_max": "Salary Max",
    "contract_time": "Contract Time",
    "created": "Created",
    "redirect_url": "Redirect URL",
    "adref": "Adref",
    "category": "Category",
    "latitude": "Latitude",
    "longitude": "Longitude",
    "id": "ID",
    "salary_is_predicted": "Salary Is Predicted",
}

# Nested objects collapse to their display value in flat formats.
_FLATTENERS: Dict[str, Callable[[JobRecord], Optional[str]]] = {
    "company": lambda record: record.company and record.company.display_name,
    "location": lambda record: record.location and record.location.display_name,
    "category": lambda record: record.category and record.category.label,
}


def _is_text_stream(out: IO) -> bool:
    """True for streams that take str: io text classes, or wrappers exposing an encoding."""
    if isinstance(out, io.TextIOBase):
        return True
    return isinstance(getattr(out, "encoding", None), str)


class _Sink:
    """Writes text to a binary or text stream, translating write failures."""

    def __init__(self, out: IO):
        self.out = out
        self.binary = not _is_text_stream(out)

    def write(self, text: str) -> None:
        try:
            self.out.write(text.encode(ENCODING) if self.binary else text)
        except (OSError, TypeError, ValueError) as e:
            raise SinkWriteError(f"Failed to write export output: {e}") from e

    def flush(self) -> None:
        try:
            self.out.flush()
        except (OSError, ValueError) as e:
            raise SinkWriteError(f"Failed to flush export output: {e}") from e


def format_value(value: Any) -> str:
    """
    Render a single field for the flat formats.

    Absent values become an empty string and whole-number floats drop their
    trailing ".0" (50000.0 -> "50000").
    """
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _single_line(value: str) -> str:
    """Join a multi-line value with spaces so it stays on its label's line."""
    parts = value.splitlines()
    if parts == [value]:
        return value
    return " ".join(part.strip() for part in parts if part.strip())


def flatten_record(record: JobRecord) -> List[str]:
    """
    Flatten a record to one string per canonical field.

    Args:
        record: Record to flatten

    Returns:
        List of field values in FIELD_ORDER (dense, empty for absent fields)
    """
    values = []
    for field in FIELD_ORDER:
        flattener = _FLATTENERS.get(field)
        value = flattener(record) if flattener else getattr(record, field)
        values.append(format_value(value))
    return values


def write_records(
    records: Iterable[JobRecord], fmt: Union[Formats, str], out: IO
) -> None:
    """
    Write records to an output stream.

    The stream may be binary (bytes are UTF-8 encoded) or text. It is flushed
    but never closed.

    Args:
        records: Records to write, could be a single entry or none at all
        fmt: Output format (Formats member or its name)
        out: Output stream, e.g. sys.stdout or an open file

    Raises:
        UnsupportedFormatError: If fmt is not a known format
        SinkWriteError: If writing to the stream fails
    """
    output_format = Formats.parse(fmt)
    records = list(records)
    sink = _Sink(out)

    if output_format == Formats.JSON:
        _write_json(records, sink)
    elif output_format == Formats.CSV:
        _write_csv(records, sink)
    else:
        _write_pretty(records, sink)

    sink.flush()
    logger.debug(f"Wrote {len(records)} records as {output_format.value}")


def _write_json(records: Sequence[JobRecord], sink: _Sink) -> None:
    """Write records as a JSON array, omitting absent fields."""
    payload = [record.to_dict() for record in records]
    sink.write(json.dumps(payload, indent=2, ensure_ascii=False))
    sink.write("\n")


def _write_csv(records: Sequence[JobRecord], sink: _Sink) -> None:
    """Write a header row followed by one row per record."""
    buffer = io.StringIO()
    writer = csv.writer(buffer)

    writer.writerow(FIELD_ORDER)
    for record in records:
        writer.writerow(flatten_record(record))
        sink.write(buffer.getvalue())
        buffer.seek(0)
        buffer.truncate()

    # Header-only output for an empty collection
    if buffer.getvalue():
        sink.write(buffer.getvalue())


def _write_pretty(records: Sequence[JobRecord], sink: _Sink) -> None:
    """
    Write one "Label: value" block per record, separated by blank lines.

    Line breaks inside a value are replaced with spaces so every field
    occupies exactly one line.
    """
    for index, record in enumerate(records):
        if index:
            sink.write("\n")
        lines = [
            f"{PRETTY_LABELS[field]}: {_single_line(value)}"
            for field, value in zip(FIELD_ORDER, flatten_record(record))
        ]
        sink.write("\n".join(lines) + "\n")
