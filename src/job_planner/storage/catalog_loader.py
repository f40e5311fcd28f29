"""Load the job catalog from a JSON file."""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Tuple, Union

from pydantic import ValidationError

from job_planner.catalog.models import JobRecord
from job_planner.exceptions import CatalogLoadError

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = "data/jobpostings.json"


def parse_records(data: Any, source: str = "<memory>") -> List[JobRecord]:
    """
    Build records from decoded catalog JSON.

    Accepts either a list of job objects or a search-API envelope with the
    jobs under "results".

    Args:
        data: Decoded JSON document
        source: Name used in error messages

    Returns:
        Records in document order

    Raises:
        CatalogLoadError: If the document shape or a record is invalid
    """
    if isinstance(data, dict) and "results" in data:
        data = data["results"]

    if not isinstance(data, list):
        raise CatalogLoadError(f"{source}: expected a list of job records")

    records = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise CatalogLoadError(f"{source}: record {index} is not an object")
        try:
            records.append(JobRecord.from_dict(item))
        except ValidationError as e:
            raise CatalogLoadError(f"{source}: record {index} is invalid: {e}") from e
    return records


def read_records(path: Union[str, Path]) -> List[JobRecord]:
    """
    Read records from a JSON file.

    Raises:
        CatalogLoadError: If the file is missing, unreadable or malformed
    """
    file_path = Path(path)
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise CatalogLoadError(f"Catalog file not found: {file_path}") from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"{file_path}: invalid JSON: {e}") from e
    except OSError as e:
        raise CatalogLoadError(f"Cannot read {file_path}: {e}") from e

    return parse_records(data, source=str(file_path))


class JobCatalog:
    """
    In-memory job catalog.

    Holds the records of one catalog load in file order. The catalog itself
    is read-only; filtering and export work on its ``jobs`` sequence.

    Example:
        ```python
        catalog = JobCatalog.load("data/jobpostings.json")
        it_jobs = apply_filters(catalog.jobs, [by_category(JobCategory.IT)])
        ```
    """

    def __init__(self, jobs: Iterable[JobRecord]):
        """
        Initialize catalog.

        Args:
            jobs: Records in catalog order
        """
        self._jobs: Tuple[JobRecord, ...] = tuple(jobs)

    @property
    def jobs(self) -> Tuple[JobRecord, ...]:
        """All records in catalog order."""
        return self._jobs

    def __len__(self) -> int:
        return len(self._jobs)

    @classmethod
    def load(cls, path: Union[str, Path] = DEFAULT_CATALOG_PATH) -> "JobCatalog":
        """
        Load a catalog from a JSON file.

        Args:
            path: Catalog file path

        Returns:
            JobCatalog instance

        Raises:
            CatalogLoadError: If the file is missing or malformed
        """
        records = read_records(path)
        logger.info(f"Loaded {len(records)} job records from {path}")
        return cls(records)
