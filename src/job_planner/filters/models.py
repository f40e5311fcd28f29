"""
Filter criteria models.

These models hold the raw criteria a user enters (country, category text,
salary bounds as typed, ...) and normalize them so that unset values are
None. ``job_planner.filters.criteria`` turns them into predicates.
"""

import math
import re
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Placeholder shown by selection widgets before a choice is made
SELECT_PLACEHOLDER = "Select"

_SEPARATORS = re.compile(r"[\s_\-]+")


def _is_unset(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        text = value.strip()
        return not text or text == SELECT_PLACEHOLDER
    return False


class DatePreset(str, Enum):
    """Relative posting-date ranges, ending today."""

    TODAY = "Today"
    PAST_WEEK = "Past week"
    PAST_MONTH = "Past month"

    @classmethod
    def from_string(cls, text: Optional[str]) -> Optional["DatePreset"]:
        """
        Look up a preset by label ("Past week") or name ("past-week", "PAST_WEEK").

        Returns:
            Matching preset, or None for blank, "Select" or unknown text
        """
        if _is_unset(text):
            return None
        key = _SEPARATORS.sub(" ", str(text).strip().lower())
        for preset in cls:
            if key in (preset.value.lower(), preset.name.replace("_", " ").lower()):
                return preset
        return None


class FilterCriteria(BaseModel):
    """
    Criteria for narrowing the job catalog.

    Every field is optional; a criterion left as None adds no predicate.

    Attributes:
        country: Country name matched against location areas
        category: Category label or code (e.g., "IT Jobs")
        company: Text contained in the company name
        min_salary: Lower salary bound (both bounds required to filter)
        max_salary: Upper salary bound
        role_types: Accepted contract times (e.g., ["full_time"])
        date_filter: Posting-date preset
    """

    country: Optional[str] = None
    category: Optional[str] = None
    company: Optional[str] = None
    min_salary: Optional[float] = None
    max_salary: Optional[float] = None
    role_types: List[str] = Field(default_factory=list)
    date_filter: Optional[DatePreset] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("country", "category", "company", mode="before")
    @classmethod
    def _blank_text_is_unset(cls, value: Any) -> Optional[str]:
        if _is_unset(value):
            return None
        return str(value).strip()

    @field_validator("min_salary", "max_salary", mode="before")
    @classmethod
    def _unparsable_salary_is_unset(cls, value: Any) -> Optional[float]:
        """Salary text that is not a number (or is NaN) leaves the bound unset."""
        if _is_unset(value):
            return None
        try:
            number = float(value)
        except (TypeError, ValueError):
            return None
        return None if math.isnan(number) else number

    @field_validator("role_types", mode="before")
    @classmethod
    def _drop_blank_role_types(cls, value: Any) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        return [str(role).strip() for role in value if not _is_unset(role)]

    @field_validator("date_filter", mode="before")
    @classmethod
    def _parse_date_filter(cls, value: Any) -> Optional[DatePreset]:
        if isinstance(value, DatePreset):
            return value
        return DatePreset.from_string(value)

    def is_empty(self) -> bool:
        """True when no criterion is set."""
        return (
            self.country is None
            and self.category is None
            and self.company is None
            and (self.min_salary is None or self.max_salary is None)
            and not self.role_types
            and self.date_filter is None
        )
