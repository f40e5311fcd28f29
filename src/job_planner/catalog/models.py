"""
Pydantic models for job catalog records.

Field names match the keys of the catalog's JSON documents (the job search
API format). Field declaration order is the canonical export order used by
every formatter.
"""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

# Shared configuration: records are immutable once loaded, unknown keys in the
# source data are dropped, numeric flags ("salary_is_predicted": 1) are kept as
# text, and NaN or infinite numbers are rejected since JSON cannot encode them.
_RECORD_CONFIG = ConfigDict(
    frozen=True, extra="ignore", coerce_numbers_to_str=True, allow_inf_nan=False
)


class Company(BaseModel):
    """Company offering a job."""

    display_name: Optional[str] = None

    model_config = _RECORD_CONFIG


class Location(BaseModel):
    """
    Location of a job.

    Attributes:
        display_name: Human-readable location (e.g., "Seattle, King County")
        area: Area names ordered from broad to narrow
            (e.g., ("US", "Washington", "King County", "Seattle"))
    """

    display_name: Optional[str] = None
    area: Tuple[str, ...] = Field(default_factory=tuple)

    model_config = _RECORD_CONFIG


class Category(BaseModel):
    """Catalog category of a job (tag is the category code)."""

    tag: Optional[str] = None
    label: Optional[str] = None

    model_config = _RECORD_CONFIG


class JobRecord(BaseModel):
    """
    Primary record passed between the filter engine and the formatters.

    Records are constructed once when the catalog is loaded and are never
    mutated. ``salary_min <= salary_max`` is expected but not enforced.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    company: Optional[Company] = None
    location: Optional[Location] = None
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    contract_time: Optional[str] = None
    created: Optional[str] = None
    redirect_url: Optional[str] = None
    adref: Optional[str] = None
    category: Optional[Category] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    id: Optional[str] = None
    salary_is_predicted: Optional[str] = None

    model_config = _RECORD_CONFIG

    @property
    def company_name(self) -> str:
        """Company display name, or empty string if absent."""
        if self.company is None:
            return ""
        return self.company.display_name or ""

    @property
    def location_name(self) -> str:
        """Location display name, or empty string if absent."""
        if self.location is None:
            return ""
        return self.location.display_name or ""

    @property
    def category_label(self) -> str:
        """Category label, or empty string if absent."""
        if self.category is None:
            return ""
        return self.category.label or ""

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a JSON-ready dictionary in canonical field order.

        Absent fields are omitted rather than emitted as null.
        """
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JobRecord":
        """
        Create a JobRecord from a catalog JSON object.

        Args:
            data: Decoded JSON object; unknown keys are ignored

        Returns:
            JobRecord instance

        Raises:
            pydantic.ValidationError: If a field has an incompatible type
        """
        return cls.model_validate(data)
