"""Job filtering system."""

from job_planner.filters.criteria import build_predicates, date_range_for_preset
from job_planner.filters.filter_engine import (
    Predicate,
    apply_filters,
    by_category,
    by_company,
    by_country,
    by_date_posted,
    by_role_type,
    by_salary_range,
)
from job_planner.filters.models import DatePreset, FilterCriteria

__all__ = [
    "Predicate",
    "apply_filters",
    "by_category",
    "by_company",
    "by_country",
    "by_date_posted",
    "by_role_type",
    "by_salary_range",
    "build_predicates",
    "date_range_for_preset",
    "DatePreset",
    "FilterCriteria",
]
