"""Closed vocabulary of job categories used by the catalog."""

import re
from enum import Enum
from typing import Dict, Optional

_SEPARATORS = re.compile(r"[\s_\-]+")


def _normalize(text: str) -> str:
    """Lowercase and treat runs of spaces, underscores and hyphens as one space."""
    return _SEPARATORS.sub(" ", text.strip().lower()).strip()


class JobCategory(str, Enum):
    """
    Job category codes.

    Values are the category tags found in catalog records
    (``record.category.tag``). Each member also carries the human label the
    catalog displays for it.

    UNKNOWN is the sentinel returned for labels that are not part of the
    vocabulary; it never matches a real record tag.
    """

    ACCOUNTING_FINANCE = "accounting-finance-jobs"
    IT = "it-jobs"
    SALES = "sales-jobs"
    CUSTOMER_SERVICES = "customer-services-jobs"
    ENGINEERING = "engineering-jobs"
    HR = "hr-jobs"
    HEALTHCARE_NURSING = "healthcare-nursing-jobs"
    HOSPITALITY_CATERING = "hospitality-catering-jobs"
    PR_ADVERTISING_MARKETING = "pr-advertising-marketing-jobs"
    LOGISTICS_WAREHOUSE = "logistics-warehouse-jobs"
    TEACHING = "teaching-jobs"
    TRADE_CONSTRUCTION = "trade-construction-jobs"
    ADMIN = "admin-jobs"
    LEGAL = "legal-jobs"
    CREATIVE_DESIGN = "creative-design-jobs"
    GRADUATE = "graduate-jobs"
    RETAIL = "retail-jobs"
    CONSULTANCY = "consultancy-jobs"
    MANUFACTURING = "manufacturing-jobs"
    SCIENTIFIC_QA = "scientific-qa-jobs"
    SOCIAL_WORK = "social-work-jobs"
    TRAVEL = "travel-jobs"
    ENERGY_OIL_GAS = "energy-oil-gas-jobs"
    PROPERTY = "property-jobs"
    CHARITY_VOLUNTARY = "charity-voluntary-jobs"
    DOMESTIC_HELP_CLEANING = "domestic-help-cleaning-jobs"
    MAINTENANCE = "maintenance-jobs"
    PART_TIME = "part-time-jobs"
    OTHER_GENERAL = "other-general-jobs"
    UNKNOWN = "unknown"

    @property
    def code(self) -> str:
        """Category tag as stored in catalog records."""
        return self.value

    @property
    def label(self) -> str:
        """Human-facing label (e.g., "IT Jobs")."""
        return _LABELS[self]

    @classmethod
    def from_string(cls, text: Optional[str]) -> "JobCategory":
        """
        Look up a category from free text.

        Accepts the human label ("IT Jobs"), the tag ("it-jobs") or the member
        name ("IT_JOBS" or "IT"), case-insensitively, with spaces, underscores
        and hyphens treated as equivalent.

        Args:
            text: Label entered by a user or read from source data

        Returns:
            Matching category, or JobCategory.UNKNOWN if none matches
        """
        if not text:
            return cls.UNKNOWN
        return _LOOKUP.get(_normalize(text), cls.UNKNOWN)


_LABELS: Dict[JobCategory, str] = {
    JobCategory.ACCOUNTING_FINANCE: "Accounting & Finance Jobs",
    JobCategory.IT: "IT Jobs",
    JobCategory.SALES: "Sales Jobs",
    JobCategory.CUSTOMER_SERVICES: "Customer Services Jobs",
    JobCategory.ENGINEERING: "Engineering Jobs",
    JobCategory.HR: "HR & Recruitment Jobs",
    JobCategory.HEALTHCARE_NURSING: "Healthcare & Nursing Jobs",
    JobCategory.HOSPITALITY_CATERING: "Hospitality & Catering Jobs",
    JobCategory.PR_ADVERTISING_MARKETING: "PR, Advertising & Marketing Jobs",
    JobCategory.LOGISTICS_WAREHOUSE: "Logistics & Warehouse Jobs",
    JobCategory.TEACHING: "Teaching Jobs",
    JobCategory.TRADE_CONSTRUCTION: "Trade & Construction Jobs",
    JobCategory.ADMIN: "Admin Jobs",
    JobCategory.LEGAL: "Legal Jobs",
    JobCategory.CREATIVE_DESIGN: "Creative & Design Jobs",
    JobCategory.GRADUATE: "Graduate Jobs",
    JobCategory.RETAIL: "Retail Jobs",
    JobCategory.CONSULTANCY: "Consultancy Jobs",
    JobCategory.MANUFACTURING: "Manufacturing Jobs",
    JobCategory.SCIENTIFIC_QA: "Scientific & QA Jobs",
    JobCategory.SOCIAL_WORK: "Social work Jobs",
    JobCategory.TRAVEL: "Travel Jobs",
    JobCategory.ENERGY_OIL_GAS: "Energy, Oil & Gas Jobs",
    JobCategory.PROPERTY: "Property Jobs",
    JobCategory.CHARITY_VOLUNTARY: "Charity & Voluntary Jobs",
    JobCategory.DOMESTIC_HELP_CLEANING: "Domestic help & Cleaning Jobs",
    JobCategory.MAINTENANCE: "Maintenance Jobs",
    JobCategory.PART_TIME: "Part time Jobs",
    JobCategory.OTHER_GENERAL: "Other/General Jobs",
    JobCategory.UNKNOWN: "Unknown",
}


def _build_lookup() -> Dict[str, JobCategory]:
    lookup: Dict[str, JobCategory] = {}
    for category in JobCategory:
        if category is JobCategory.UNKNOWN:
            continue
        name = category.name
        for key in (_LABELS[category], category.value, name, f"{name}_JOBS"):
            lookup[_normalize(key)] = category
    return lookup


_LOOKUP: Dict[str, JobCategory] = _build_lookup()
