"""Job Planner - Browse, filter and export job postings."""

__version__ = "0.1.0"
