"""
Lead Data Models

Synthetic prospect records produced by the lead synthesizer and the
email-verification path. Serialized keys stay snake_case.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


class CompanySize(str, Enum):
    STARTUP = "startup"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    ENTERPRISE = "enterprise"


@dataclass(frozen=True)
class VerificationStatus:
    """Four independent verification facets of a lead."""
    accuracy: bool
    deliverability: bool
    relevance: bool
    compliance: bool

    def to_dict(self) -> Dict[str, bool]:
        return {
            "accuracy": self.accuracy,
            "deliverability": self.deliverability,
            "relevance": self.relevance,
            "compliance": self.compliance,
        }


@dataclass(frozen=True)
class Lead:
    """One prospect record."""
    company_name: str
    contact_name: str
    email: str
    verified_status: VerificationStatus
    phone: Optional[str] = None
    title: Optional[str] = None
    industry: Optional[str] = None
    company_size: Optional[str] = None
    location: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "company_name": self.company_name,
            "contact_name": self.contact_name,
            "email": self.email,
        }
        for key in ("phone", "title", "industry", "company_size", "location"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        data["verified_status"] = self.verified_status.to_dict()
        return data


@dataclass
class LeadGenerationOptions:
    """Targeting options for one lead-generation request."""
    target_count: int
    industry: Optional[str] = None
    location: Optional[str] = None
    company_size: Optional[CompanySize] = None
    job_titles: Optional[List[str]] = None
