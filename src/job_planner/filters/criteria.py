"""Turn user-entered filter criteria into filter engine predicates."""

import logging
from datetime import date
from typing import List, Optional, Tuple

from dateutil.relativedelta import relativedelta

from job_planner.catalog.categories import JobCategory
from job_planner.filters.filter_engine import (
    Predicate,
    by_category,
    by_company,
    by_country,
    by_date_posted,
    by_role_type,
    by_salary_range,
)
from job_planner.filters.models import DatePreset, FilterCriteria

logger = logging.getLogger(__name__)


def date_range_for_preset(preset: DatePreset, today: Optional[date] = None) -> Tuple[date, date]:
    """
    Resolve a date preset to an inclusive (start, end) range ending today.

    - TODAY: (today, today)
    - PAST_WEEK: 7 days back
    - PAST_MONTH: one calendar month back, day clamped to the month length
      (March 31 -> February 28/29)

    Args:
        preset: Date preset
        today: Reference day (defaults to the current local date)
    """
    end = today or date.today()
    if preset == DatePreset.TODAY:
        start = end
    elif preset == DatePreset.PAST_WEEK:
        start = end - relativedelta(weeks=1)
    else:
        start = end - relativedelta(months=1)
    return start, end


def build_predicates(criteria: FilterCriteria, today: Optional[date] = None) -> List[Predicate]:
    """
    Build the predicate list for the criteria that are set.

    Predicates are returned in the order country, category, company,
    salary range, role type, date posted. The salary predicate is only added
    when both bounds are set.

    Args:
        criteria: Filter criteria
        today: Reference day for the date preset

    Returns:
        Predicates to pass to apply_filters
    """
    predicates: List[Predicate] = []

    if criteria.country is not None:
        predicates.append(by_country(criteria.country))
    if criteria.category is not None:
        category = JobCategory.from_string(criteria.category)
        if category is JobCategory.UNKNOWN:
            logger.warning(f"Unknown job category '{criteria.category}', no jobs will match")
        predicates.append(by_category(category))
    if criteria.company is not None:
        predicates.append(by_company(criteria.company))
    if criteria.min_salary is not None and criteria.max_salary is not None:
        predicates.append(by_salary_range(criteria.min_salary, criteria.max_salary))
    if criteria.role_types:
        predicates.append(by_role_type(criteria.role_types))
    if criteria.date_filter is not None:
        start, end = date_range_for_preset(criteria.date_filter, today)
        predicates.append(by_date_posted(start, end))

    return predicates
