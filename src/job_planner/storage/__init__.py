"""Job catalog and saved-jobs storage."""

from job_planner.storage.catalog_loader import DEFAULT_CATALOG_PATH, JobCatalog
from job_planner.storage.saved_jobs import DEFAULT_SAVED_PATH, SavedJobs

__all__ = ["DEFAULT_CATALOG_PATH", "DEFAULT_SAVED_PATH", "JobCatalog", "SavedJobs"]
