"""
Predicate-based filter engine for job records.

Each ``by_*`` function builds one predicate (a plain callable taking a
JobRecord and returning bool) for a single criterion. ``apply_filters``
combines any number of predicates with logical AND.

Predicates close over their (already normalized) arguments only, so they
hold no mutable state and can be evaluated in any order.

Example:
    ```python
    predicates = [by_country("US"), by_company("tech"), by_salary_range(80000, 120000)]
    matches = apply_filters(catalog.jobs, predicates)
    ```
"""

import logging
import math
from datetime import date
from typing import Callable, Iterable, List, Sequence, Union

from job_planner.catalog.categories import JobCategory
from job_planner.catalog.models import JobRecord
from job_planner.exceptions import InvalidRangeError
from job_planner.utils.date_utils import DateLike, coerce_date, parse_posted_date

logger = logging.getLogger(__name__)

Predicate = Callable[[JobRecord], bool]


def _match_all(record: JobRecord) -> bool:
    return True


def by_country(country: str) -> Predicate:
    """
    Match records whose location areas include the country.

    Comparison is case-insensitive and exact per area element, so "us"
    matches an area list of ("US", "California") but "U" does not. A blank
    country places no constraint and matches every record.

    Args:
        country: Country name as it appears in location areas
    """
    wanted = (country or "").strip().lower()
    if not wanted:
        return _match_all

    def predicate(record: JobRecord) -> bool:
        if record.location is None:
            return False
        return any(area.lower() == wanted for area in record.location.area)

    return predicate


def by_category(category: Union[JobCategory, str]) -> Predicate:
    """
    Match records whose category tag equals the category code.

    Args:
        category: Category code; JobCategory.UNKNOWN matches nothing
    """
    code = category.value if isinstance(category, JobCategory) else str(category)

    def predicate(record: JobRecord) -> bool:
        if record.category is None or category is JobCategory.UNKNOWN:
            return False
        return record.category.tag == code

    return predicate


def by_company(name: str) -> Predicate:
    """
    Match records whose company name contains the text, case-insensitively.

    A blank name matches every record.
    """
    wanted = (name or "").strip().lower()
    if not wanted:
        return _match_all

    def predicate(record: JobRecord) -> bool:
        return wanted in record.company_name.lower()

    return predicate


def by_salary_range(min_salary: float, max_salary: float) -> Predicate:
    """
    Match records whose salary range overlaps [min_salary, max_salary].

    Overlap rather than containment: a record paying 50k-100k matches a
    query of 80k-200k. Records with one salary bound use it for both ends;
    records with no salary never match. A record whose own bounds are
    inverted is read as the range between them.

    Inverted query bounds are evaluated as given without swapping.

    Args:
        min_salary: Lower bound of the query range
        max_salary: Upper bound of the query range

    Raises:
        InvalidRangeError: If either bound is NaN
    """
    low, high = float(min_salary), float(max_salary)
    if math.isnan(low) or math.isnan(high):
        raise InvalidRangeError(f"Salary bounds must be numbers, got [{min_salary}, {max_salary}]")

    def predicate(record: JobRecord) -> bool:
        bounds = [s for s in (record.salary_min, record.salary_max) if s is not None]
        if not bounds:
            return False
        return min(bounds) <= high and max(bounds) >= low

    return predicate


def by_role_type(role_types: Iterable[str]) -> Predicate:
    """
    Match records whose contract time equals any of the role types.

    Comparison is case-insensitive ("Full_Time" matches "full_time"). An
    empty collection of role types matches nothing; a single role may be
    passed as a plain string.
    """
    if isinstance(role_types, str):
        role_types = [role_types]
    wanted = frozenset(role.strip().lower() for role in role_types)

    def predicate(record: JobRecord) -> bool:
        if not record.contract_time:
            return False
        return record.contract_time.strip().lower() in wanted

    return predicate


def by_date_posted(start_date: DateLike, end_date: DateLike) -> Predicate:
    """
    Match records created between start_date and end_date, inclusive.

    Only the calendar date of ``created`` is compared. Records whose
    ``created`` value cannot be parsed never match. A start date after the
    end date matches nothing.

    Args:
        start_date: First day of the range (date, datetime or date string)
        end_date: Last day of the range, inclusive

    Raises:
        DateParseError: If a bound is a string that cannot be parsed
    """
    start: date = coerce_date(start_date)
    end: date = coerce_date(end_date)

    def predicate(record: JobRecord) -> bool:
        posted = parse_posted_date(record.created)
        if posted is None:
            return False
        return start <= posted <= end

    return predicate


def apply_filters(records: Iterable[JobRecord], predicates: Sequence[Predicate]) -> List[JobRecord]:
    """
    Return the records that satisfy every predicate.

    Records keep their original relative order and are returned as-is (not
    copied). With no predicates, all records are returned.

    Args:
        records: Records to filter
        predicates: Predicates combined with logical AND

    Returns:
        Matching records in input order
    """
    records = list(records)
    if not predicates:
        return records

    filtered = [record for record in records if all(p(record) for p in predicates)]
    logger.debug(
        f"Applied {len(predicates)} filters: {len(records)} jobs in, {len(filtered)} jobs out"
    )
    return filtered
