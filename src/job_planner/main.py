"""Main entry point for the job planner application."""

import argparse
import copy
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import find_dotenv, load_dotenv

from job_planner.catalog.models import JobRecord
from job_planner.exceptions import ConfigurationError, JobPlannerError
from job_planner.filters import FilterCriteria, apply_filters, build_predicates
from job_planner.formatters import Formats, write_records
from job_planner.logging_config import get_logger, get_structured_logger, setup_logging
from job_planner.storage import DEFAULT_CATALOG_PATH, DEFAULT_SAVED_PATH, JobCatalog, SavedJobs

# Configure logging (will be called in main())
logger = get_logger(__name__)
slogger = get_structured_logger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "catalog": {"path": DEFAULT_CATALOG_PATH},
    "saved_jobs": {"path": DEFAULT_SAVED_PATH},
    "export": {"format": Formats.PRETTY.value, "file_path": None},
}


def load_config(config_path: str = "config/config.yaml") -> Dict[str, Any]:
    """
    Load configuration from YAML file, filling in defaults.

    A missing file yields the default configuration.

    Raises:
        ConfigurationError: If the file is not valid YAML or not a mapping
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    path = Path(config_path)
    if not path.exists():
        logger.info(f"No config file at {config_path}, using defaults")
        return config

    try:
        with open(path, "r") as f:
            loaded = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {config_path}: {e}") from e

    if not isinstance(loaded, dict):
        raise ConfigurationError(f"{config_path} must contain a mapping")

    for section, values in loaded.items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values
    return config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Job Planner - Filter job postings and export the results"
    )
    parser.add_argument(
        "--config",
        default="config/config.yaml",
        help="Path to configuration file (default: config/config.yaml)",
    )
    parser.add_argument("--catalog", help="Override catalog file path from config")
    parser.add_argument(
        "--saved",
        action="store_true",
        help="Filter and export the saved jobs instead of the catalog",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Add the matching jobs to the saved jobs",
    )

    filters = parser.add_argument_group("filters")
    filters.add_argument("--country", help="Country in the job location (e.g., US)")
    filters.add_argument("--category", help='Job category label (e.g., "IT Jobs")')
    filters.add_argument("--company", help="Text contained in the company name")
    filters.add_argument("--min-salary", help="Minimum salary (requires --max-salary)")
    filters.add_argument("--max-salary", help="Maximum salary (requires --min-salary)")
    filters.add_argument(
        "--role-type",
        action="append",
        default=[],
        metavar="ROLE",
        help="Contract time to accept, e.g. full_time (repeatable)",
    )
    filters.add_argument(
        "--posted",
        choices=["today", "past-week", "past-month"],
        help="Only jobs posted in this period",
    )

    output = parser.add_argument_group("output")
    output.add_argument(
        "--format",
        choices=[f.value for f in Formats],
        help="Output format (default from config: pretty)",
    )
    output.add_argument("--output", help="Output file path (default: stdout)")
    return parser


def criteria_from_args(args: argparse.Namespace) -> FilterCriteria:
    return FilterCriteria(
        country=args.country,
        category=args.category,
        company=args.company,
        min_salary=args.min_salary,
        max_salary=args.max_salary,
        role_types=args.role_type,
        date_filter=args.posted,
    )


def export(records: List[JobRecord], fmt: Formats, file_path: Optional[str]) -> None:
    """
    Export records to a file, or to stdout when no path is given.

    Raises:
        SinkWriteError: If the output cannot be written
    """
    if not file_path:
        write_records(records, fmt, sys.stdout)
        slogger.export_activity(fmt.value, "stdout", len(records))
        return

    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        write_records(records, fmt, f)
    slogger.export_activity(fmt.value, str(path), len(records))


def run(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    """Filter the catalog (or saved jobs) and export the matches."""
    saved_path = config["saved_jobs"]["path"]

    if args.saved:
        source = saved_path
        records = SavedJobs.load_from_json(saved_path).jobs()
    else:
        source = (
            args.catalog or os.getenv("JOB_PLANNER_CATALOG") or config["catalog"]["path"]
        )
        records = list(JobCatalog.load(source).jobs)
    slogger.catalog_activity("load", source, {"records": len(records)})

    criteria = criteria_from_args(args)
    matches = apply_filters(records, build_predicates(criteria))
    slogger.filter_activity(
        len(records), len(matches), criteria.model_dump(exclude_none=True, exclude_defaults=True)
    )

    if args.save:
        saved = SavedJobs.load_from_json(saved_path)
        for job in matches:
            saved.add(job)
            slogger.job_activity(job.title or "", job.company_name, "saved")
        written = saved.save()
        slogger.catalog_activity("save", str(written), {"records": saved.count()})

    fmt = Formats.parse(args.format or config["export"]["format"])
    export(matches, fmt, args.output or config["export"].get("file_path"))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function."""
    # Load .env from the working directory first so LOG_LEVEL and LOG_FILE apply
    load_dotenv(find_dotenv(usecwd=True))
    setup_logging()

    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        return run(args, config)
    except JobPlannerError as e:
        logger.error(f"Job planner failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
