"""Logging configuration for job planner."""

import logging
import os
import sys
import yaml
from pathlib import Path
from typing import Dict, Optional, Tuple


# Global configuration cache
_logging_config: Optional[Dict] = None

LOGGING_CONFIG_PATH = Path("config") / "logging.yaml"


def _load_logging_config() -> Dict:
    """
    Load logging configuration from config/logging.yaml.

    Returns:
        Dict with logging configuration, or default config if file not found.
    """
    global _logging_config

    if _logging_config is not None:
        return _logging_config

    if LOGGING_CONFIG_PATH.exists():
        try:
            with open(LOGGING_CONFIG_PATH, "r") as f:
                _logging_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            print(
                f"⚠️  Failed to load logging config from {LOGGING_CONFIG_PATH}: {e}",
                file=sys.stderr,
            )
            _logging_config = {}
    else:
        _logging_config = {}

    # Apply defaults if keys are missing
    if "console" not in _logging_config:
        _logging_config["console"] = {}

    _logging_config["console"].setdefault("max_company_name_length", 80)
    _logging_config["console"].setdefault("max_job_title_length", 60)

    return _logging_config


def reset_logging_config_cache() -> None:
    """Forget the cached logging configuration (used by tests)."""
    global _logging_config
    _logging_config = None


def format_display_value(value: Optional[str], max_length: int) -> Tuple[str, str]:
    """
    Format a value for logging with both full and display versions.

    Args:
        value: The full value (job title, company name, ...)
        max_length: Maximum length of the display version; 0 or negative
            disables truncation

    Returns:
        Tuple of (full_value, display_value) where the display value is
        truncated with an ellipsis ("...") when too long.

    Example:
        >>> format_display_value("Very Long Company Name That Exceeds Limit", 20)
        ('Very Long Company Name That Exceeds Limit', 'Very Long Company...')
    """
    if not value:
        return "", ""

    full_value = value.strip()

    if max_length <= 0 or len(full_value) <= max_length:
        return full_value, full_value

    # Reserve 3 characters for "..."
    if max_length <= 3:
        display_value = full_value[:max_length]
    else:
        display_value = full_value[: max_length - 3] + "..."

    return full_value, display_value


def format_company_name(company_name: str, max_length: Optional[int] = None) -> Tuple[str, str]:
    """
    Format a company name for console logging.

    Args:
        company_name: The full company name to format.
        max_length: Maximum length for display version. If None, uses config value.
    """
    if max_length is None:
        max_length = _load_logging_config()["console"]["max_company_name_length"]
    return format_display_value(company_name, max_length)


def format_job_title(title: str, max_length: Optional[int] = None) -> Tuple[str, str]:
    """
    Format a job title for console logging.

    Args:
        title: The full job title to format.
        max_length: Maximum length for display version. If None, uses config value.
    """
    if max_length is None:
        max_length = _load_logging_config()["console"]["max_job_title_length"]
    return format_display_value(title, max_length)


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
) -> None:
    """
    Configure console and file logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Path to log file. If None, uses logs/job_planner.log.

    Environment Variables:
        LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        LOG_FILE: Override log file path.
        ENVIRONMENT: Environment name (production, development) - used as message prefix.
    """
    log_level = os.getenv("LOG_LEVEL", log_level).upper()
    if not isinstance(getattr(logging, log_level, None), int):
        log_level = "INFO"
    log_file = os.getenv("LOG_FILE", log_file or "logs/job_planner.log")
    environment = os.getenv("ENVIRONMENT", "development")

    # Create logs directory if it doesn't exist
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    # Console output goes to stderr so exports written to stdout stay clean
    handlers = [
        logging.StreamHandler(sys.stderr),
        logging.FileHandler(log_file, encoding="utf-8"),
    ]

    log_format = f"[{environment.upper()}] %(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Configure root logger
    logging.basicConfig(
        level=getattr(logging, log_level),
        format=log_format,
        handlers=handlers,
        force=True,  # Override any existing configuration
    )

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: environment={environment}, level={log_level}, file={log_file}"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


class StructuredLogger:
    """
    Helper class for structured logging with consistent formatting.

    Provides methods for logging common operations with context.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize structured logger.

        Args:
            logger: Base logger instance
        """
        self.logger = logger

    @staticmethod
    def _format(prefix: str, message: str, details: Optional[Dict]) -> str:
        text = f"[{prefix}] {message}"
        if details:
            detail_str = ", ".join(f"{k}={v}" for k, v in details.items())
            text += f" | {detail_str}"
        return text

    def catalog_activity(self, action: str, source: str, details: Optional[Dict] = None) -> None:
        """
        Log catalog and saved-jobs loading.

        Args:
            action: Action being performed (load, save, ...)
            source: File the catalog was read from or written to
            details: Optional additional details
        """
        self.logger.info(self._format("CATALOG", f"{action.upper()} - {source}", details))

    def filter_activity(
        self, total: int, matched: int, criteria: Optional[Dict] = None
    ) -> None:
        """
        Log the outcome of a filter run.

        Args:
            total: Records before filtering
            matched: Records after filtering
            criteria: Criteria that were set
        """
        self.logger.info(self._format("FILTER", f"{matched}/{total} jobs matched", criteria))

    def export_activity(
        self, fmt: str, destination: str, count: int, status: str = "completed"
    ) -> None:
        """
        Log an export.

        Args:
            fmt: Output format name
            destination: File path or "stdout"
            count: Number of records exported
            status: Export status (completed, failed)
        """
        message = self._format(
            f"EXPORT:{fmt.upper()}", f"{status.upper()} - {destination}", {"records": count}
        )
        if status.lower() == "failed":
            self.logger.error(message)
        else:
            self.logger.info(message)

    def job_activity(self, title: str, company: str, action: str) -> None:
        """
        Log activity on a single job with display truncation of long names.

        Args:
            title: Job title
            company: Company name
            action: Action performed (e.g., "SAVED", "REMOVED")
        """
        _, display_title = format_job_title(title)
        _, display_company = format_company_name(company)
        self.logger.info(f"[JOB] {action.upper()} - {display_title} @ {display_company}")


def get_structured_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__).

    Returns:
        StructuredLogger instance.
    """
    base_logger = logging.getLogger(name)
    return StructuredLogger(base_logger)
