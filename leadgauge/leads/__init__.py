"""
Lead Generation Package

- LeadGenerator: synthetic prospect records with simulated verification
- HunterVerifier: email deliverability through the Hunter API
- verify_email / lead_from_email: single-address screening path
"""

from .models import CompanySize, Lead, LeadGenerationOptions, VerificationStatus
from .rosters import COMPANIES_BY_INDUSTRY, DEFAULT_JOB_TITLES, Company
from .generator import LeadGenerator, generate_leads
from .verification import (
    DeliverabilityCheck,
    EmailScreening,
    EmailVerificationResult,
    HunterVerifier,
    lead_from_email,
    screen_email,
    verify_email,
    verify_leads_batch,
)

__all__ = [
    "CompanySize",
    "Lead",
    "LeadGenerationOptions",
    "VerificationStatus",
    "COMPANIES_BY_INDUSTRY",
    "DEFAULT_JOB_TITLES",
    "Company",
    "LeadGenerator",
    "generate_leads",
    "DeliverabilityCheck",
    "EmailScreening",
    "EmailVerificationResult",
    "HunterVerifier",
    "lead_from_email",
    "screen_email",
    "verify_email",
    "verify_leads_batch",
]
