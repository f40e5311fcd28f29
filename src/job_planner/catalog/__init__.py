"""Job catalog record model and category vocabulary."""

from job_planner.catalog.categories import JobCategory
from job_planner.catalog.models import Category, Company, JobRecord, Location

__all__ = ["Category", "Company", "JobCategory", "JobRecord", "Location"]
