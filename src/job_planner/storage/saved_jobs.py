"""Saved-jobs collection persisted as a JSON file."""

import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional, Union

from job_planner.catalog.models import JobRecord
from job_planner.exceptions import SinkWriteError
from job_planner.formatters import Formats, write_records
from job_planner.storage.catalog_loader import read_records

logger = logging.getLogger(__name__)

DEFAULT_SAVED_PATH = "data/savedJobs.json"


class SavedJobs:
    """
    The user's saved jobs.

    Jobs are identified by ``id``; adding a job that is already saved is a
    no-op. Order is the order in which jobs were saved.
    """

    def __init__(
        self, jobs: Optional[Iterable[JobRecord]] = None, path: Union[str, Path] = DEFAULT_SAVED_PATH
    ):
        """
        Initialize saved jobs.

        Args:
            jobs: Initially saved records
            path: File used by save() when no path is given
        """
        self.path = Path(path)
        self._jobs: List[JobRecord] = []
        self._last_saved: Optional[datetime] = None
        self.set_jobs(jobs or [])

    def last_saved(self) -> Optional[datetime]:
        """When the collection was last written to disk (None if never)."""
        return self._last_saved

    def count(self) -> int:
        return len(self._jobs)

    def add(self, job: JobRecord) -> None:
        if any(saved.id == job.id for saved in self._jobs):
            logger.debug(f"Job already saved: {job.id}")
            return
        self._jobs.append(job)

    def remove(self, job: JobRecord) -> None:
        self._jobs = [saved for saved in self._jobs if saved.id != job.id]

    def jobs(self) -> List[JobRecord]:
        """Copy of the saved records."""
        return list(self._jobs)

    def set_jobs(self, jobs: Iterable[JobRecord]) -> None:
        """Replace the saved records (duplicates by id are dropped)."""
        self._jobs = []
        for job in jobs:
            self.add(job)

    def clear(self) -> None:
        self._jobs = []

    @classmethod
    def load_from_json(cls, path: Union[str, Path] = DEFAULT_SAVED_PATH) -> "SavedJobs":
        """
        Load saved jobs from a JSON file.

        A missing file yields an empty collection bound to that path.

        Raises:
            CatalogLoadError: If the file exists but is malformed
        """
        file_path = Path(path)
        if not file_path.exists():
            logger.info(f"No saved jobs file at {file_path}, starting empty")
            return cls(path=file_path)

        saved = cls(read_records(file_path), path=file_path)
        logger.info(f"Loaded {saved.count()} saved jobs from {file_path}")
        return saved

    def save(self, path: Optional[Union[str, Path]] = None) -> Path:
        """
        Write saved jobs to disk in JSON format.

        Args:
            path: Destination; defaults to the path the collection was loaded from

        Returns:
            Path written

        Raises:
            SinkWriteError: If the file cannot be written
        """
        file_path = Path(path) if path is not None else self.path
        temp_path: Optional[Path] = None
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            # Write beside the target and swap it in, so a failed write keeps the old file
            with tempfile.NamedTemporaryFile(
                "wb", dir=file_path.parent, prefix=f".{file_path.name}.", delete=False
            ) as f:
                temp_path = Path(f.name)
                write_records(self._jobs, Formats.JSON, f)
            os.replace(temp_path, file_path)
            temp_path = None
        except SinkWriteError:
            raise
        except OSError as e:
            raise SinkWriteError(f"Cannot save jobs to {file_path}: {e}") from e
        finally:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)

        self._last_saved = datetime.now()
        logger.info(f"Saved {self.count()} jobs to {file_path}")
        return file_path
