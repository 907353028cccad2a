"""
Lead Service

Request-level validation and credit accounting around the lead
synthesizer and the email-verification path.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Union

from ..audit.models import AuditResult, EnhancedAuditResult
from ..billing.plans import LeadSource, lead_credit_cost
from ..leads.generator import LeadGenerator
from ..leads.models import CompanySize, Lead, LeadGenerationOptions
from ..leads.verification import (
    EmailVerificationResult,
    HunterVerifier,
    lead_from_email,
    verify_email,
)
from ..utils.config import Settings, get_settings

logger = logging.getLogger(__name__)


MIN_TARGET_COUNT = 1
MAX_TARGET_COUNT = 1000
MAX_EMAILS_PER_REQUEST = 100


class LeadRequestError(ValueError):
    """Raised when a lead request violates its input contract."""


@dataclass(frozen=True)
class LeadBatch:
    leads: List[Lead]
    credits_used: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "leads": [lead.to_dict() for lead in self.leads],
            "count": len(self.leads),
            "credits_used": self.credits_used,
        }


@dataclass(frozen=True)
class EmailVerificationBatch:
    results: List[EmailVerificationResult]
    leads: List[Lead] = field(default_factory=list)
    credits_used: int = 0

    @property
    def valid_count(self) -> int:
        return sum(1 for r in self.results if r.is_valid)

    def to_dict(self) -> Dict[str, Any]:
        generated = len(self.leads)
        return {
            "results": [r.to_dict() for r in self.results],
            "leads": [lead.to_dict() for lead in self.leads],
            "total": len(self.results),
            "valid": self.valid_count,
            "leads_generated": generated,
            "credits_used": self.credits_used,
            "message": (
                f"{generated} leads generated from verified emails"
                if generated
                else "Email verification completed"
            ),
        }


def generate_targeted_leads(
    audit: Union[AuditResult, EnhancedAuditResult],
    target_count: int,
    industry: Optional[str] = None,
    location: Optional[str] = None,
    company_size: Optional[str] = None,
    job_titles: Optional[List[str]] = None,
    rng: Optional[random.Random] = None,
) -> LeadBatch:
    """
    Validate a lead request and synthesize the leads.

    Raises:
        LeadRequestError: if target_count is outside [1, 1000] or
            company_size is not a known size
    """
    if (
        isinstance(target_count, bool)
        or not isinstance(target_count, int)
        or not MIN_TARGET_COUNT <= target_count <= MAX_TARGET_COUNT
    ):
        raise LeadRequestError("Target count must be between 1 and 1000")

    size = None
    if company_size:
        try:
            size = CompanySize(company_size)
        except ValueError:
            raise LeadRequestError(f"Unknown company size: {company_size}") from None

    options = LeadGenerationOptions(
        target_count=target_count,
        industry=industry,
        location=location,
        company_size=size,
        job_titles=list(job_titles) if job_titles else None,
    )
    leads = LeadGenerator(rng).generate(audit, options)
    return LeadBatch(
        leads=leads,
        credits_used=lead_credit_cost(len(leads), LeadSource.TARGETED),
    )


async def leads_from_emails(
    emails: Iterable[Any],
    verifier: Optional[HunterVerifier] = None,
    settings: Optional[Settings] = None,
    max_leads: Optional[int] = None,
) -> EmailVerificationBatch:
    """
    Verify addresses and build leads for the valid ones.

    Blank and non-string entries are skipped.

    Args:
        emails: Addresses to verify (1 to 100)
        verifier: Verifier override (defaults to one built from settings)
        settings: Settings override
        max_leads: Stop creating leads once this many exist (remaining plan allowance)

    Raises:
        LeadRequestError: if no addresses or more than 100 were supplied
    """
    emails = list(emails or [])
    if not emails:
        raise LeadRequestError("No emails provided")
    if len(emails) > MAX_EMAILS_PER_REQUEST:
        raise LeadRequestError("Maximum 100 emails allowed per request")

    own_verifier = verifier is None
    if own_verifier:
        settings = settings or get_settings()
        verifier = HunterVerifier(
            api_key=settings.HUNTER_API_KEY,
            timeout=settings.VERIFICATION_TIMEOUT,
        )

    results: List[EmailVerificationResult] = []
    leads: List[Lead] = []
    try:
        for email in emails:
            if not isinstance(email, str) or not email.strip():
                continue
            result = await verify_email(email, verifier)
            results.append(result)
            if result.is_valid and (max_leads is None or len(leads) < max_leads):
                leads.append(lead_from_email(result))
    finally:
        if own_verifier:
            await verifier.close()

    logger.info(f"Verified {len(results)} emails, generated {len(leads)} leads")
    return EmailVerificationBatch(
        results=results,
        leads=leads,
        credits_used=lead_credit_cost(len(leads), LeadSource.EMAIL_VERIFICATION),
    )
