"""
Plan Limits and Credit Costs

Pure metadata consulted by the service layer. Usage tracking and limit
enforcement belong to the caller.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


AUDIT_CREDIT_COST = 10
TARGETED_LEAD_CREDIT_COST = 2
VERIFIED_LEAD_CREDIT_COST = 1


class LeadSource(str, Enum):
    """How a lead was obtained, which decides its credit cost."""
    TARGETED = "targeted"
    EMAIL_VERIFICATION = "email_verification"


class PlanType(str, Enum):
    FREE = "free"
    STARTER = "starter"
    GROWTH = "growth"
    PRO = "pro"


@dataclass(frozen=True)
class PlanLimits:
    """Monthly allowances for one subscription plan."""
    name: str
    price: int
    audits: int
    leads: int
    credits: int
    overage_rate: Optional[float] = None
    features: Tuple[str, ...] = field(default_factory=tuple)


PLANS: Mapping[PlanType, PlanLimits] = MappingProxyType({
    PlanType.FREE: PlanLimits(
        name="Start Free",
        price=0,
        audits=1,
        leads=10,
        credits=250,
        features=(
            "Credit card required to activate",
            "Unverified leads",
            "Watermarked reports",
            "Basic support",
        ),
    ),
    PlanType.STARTER: PlanLimits(
        name="Starter",
        price=19,
        audits=5,
        leads=100,
        credits=2000,
        overage_rate=0.05,
        features=(
            "Soft-cap overage at $0.05/lead",
            "Verified leads",
            "Full reports",
            "Email support",
        ),
    ),
    PlanType.GROWTH: PlanLimits(
        name="Growth",
        price=59,
        audits=25,
        leads=1000,
        credits=10000,
        overage_rate=0.04,
        features=(
            "Hard cap with extras at $0.04/lead",
            "Priority verification",
            "Advanced analytics",
            "Priority support",
        ),
    ),
    PlanType.PRO: PlanLimits(
        name="Pro",
        price=149,
        audits=75,
        leads=5000,
        credits=50000,
        features=(
            "Volume discounts on verification",
            "White-label reports",
            "API access",
            "Dedicated support",
        ),
    ),
})


def get_plan(plan: str) -> PlanLimits:
    """Look up a plan by key. Raises ValueError for unknown plans."""
    return PLANS[PlanType(plan)]


def lead_credit_cost(count: int, source: LeadSource = LeadSource.TARGETED) -> int:
    """Credits consumed by count leads from the given source."""
    if source == LeadSource.EMAIL_VERIFICATION:
        return count * VERIFIED_LEAD_CREDIT_COST
    return count * TARGETED_LEAD_CREDIT_COST


def audits_remaining(plan: str, audits_used: int) -> int:
    return max(0, get_plan(plan).audits - audits_used)


def leads_remaining(plan: str, leads_used: int) -> int:
    return max(0, get_plan(plan).leads - leads_used)
