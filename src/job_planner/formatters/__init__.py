"""Export of job records to JSON, CSV and plain text."""

from job_planner.formatters.data_formatter import FIELD_ORDER, write_records
from job_planner.formatters.formats import Formats

__all__ = ["FIELD_ORDER", "Formats", "write_records"]
