"""Plan limits and per-operation credit costs."""

from .plans import (
    AUDIT_CREDIT_COST,
    PLANS,
    TARGETED_LEAD_CREDIT_COST,
    VERIFIED_LEAD_CREDIT_COST,
    LeadSource,
    PlanLimits,
    PlanType,
    audits_remaining,
    get_plan,
    lead_credit_cost,
    leads_remaining,
)

__all__ = [
    "AUDIT_CREDIT_COST",
    "PLANS",
    "TARGETED_LEAD_CREDIT_COST",
    "VERIFIED_LEAD_CREDIT_COST",
    "LeadSource",
    "PlanLimits",
    "PlanType",
    "audits_remaining",
    "get_plan",
    "lead_credit_cost",
    "leads_remaining",
]
