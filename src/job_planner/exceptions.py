"""Custom exceptions for the job planner application.

This module defines domain-specific exceptions that provide clearer error
handling and better context than generic Python exceptions.
"""


class JobPlannerError(Exception):
    """Base exception for all job planner errors.

    All custom exceptions in this module inherit from this base class,
    making it easy to catch all job-planner-specific errors.
    """

    pass


class ConfigurationError(JobPlannerError):
    """Raised when there's an error in configuration.

    Examples:
    - Configuration file is not valid YAML
    - Configuration root is not a mapping
    """

    pass


class CatalogLoadError(JobPlannerError):
    """Raised when a catalog or saved-jobs file cannot be loaded.

    Examples:
    - File does not exist
    - File is not valid JSON
    - A record does not match the job record shape
    """

    pass


class DateParseError(JobPlannerError, ValueError):
    """Raised when a date supplied as a filter bound cannot be parsed.

    Unparsable dates inside catalog records never raise; those records are
    simply excluded from date filtering.
    """

    pass


class InvalidRangeError(JobPlannerError, ValueError):
    """Raised when a salary range bound is NaN."""

    pass


class UnsupportedFormatError(JobPlannerError, ValueError):
    """Raised when an export format name is not recognized."""

    pass


class SinkWriteError(JobPlannerError, OSError):
    """Raised when writing exported records to the output sink fails.

    The original error is always chained as ``__cause__``.
    """

    pass
