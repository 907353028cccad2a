"""
Lead Synthesizer

Produces plausible, unverified prospect records from an audit and the
caller's targeting options. Records are sampled from fixed rosters; the
four verification facets are simulated with fixed pass rates.

Usage:
    leads = generate_leads(audit, LeadGenerationOptions(target_count=25))
"""

import logging
import random
from typing import List, Optional, Union

from ..audit.models import AuditResult, EnhancedAuditResult
from .models import Lead, LeadGenerationOptions, VerificationStatus
from .rosters import (
    DEFAULT_JOB_TITLES,
    FIRST_NAMES,
    LAST_NAMES,
    LOCATIONS,
    companies_for_industry,
)

logger = logging.getLogger(__name__)


DEFAULT_INDUSTRY = "Technology"

# Probability that each facet fails
ACCURACY_FAILURE_RATE = 0.15
DELIVERABILITY_FAILURE_RATE = 0.10
RELEVANCE_FAILURE_RATE = 0.20
COMPLIANCE_FAILURE_RATE = 0.05


class LeadGenerator:
    """
    Samples lead records.

    All randomness comes from the injected rng, so a seeded generator
    yields a reproducible batch.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def generate(
        self,
        audit: Union[AuditResult, EnhancedAuditResult],
        options: LeadGenerationOptions,
    ) -> List[Lead]:
        """
        Generate exactly options.target_count leads.

        The target industry is the requested one, else the audited
        business's industry, else Technology.
        """
        industry = options.industry or audit.business_info.industry or DEFAULT_INDUSTRY
        logger.info(
            f"Generating {options.target_count} leads for industry '{industry}'"
        )
        return [self._generate_one(industry, options) for _ in range(options.target_count)]

    def _generate_one(self, industry: str, options: LeadGenerationOptions) -> Lead:
        company = self.rng.choice(companies_for_industry(industry))
        title = self.rng.choice(options.job_titles or DEFAULT_JOB_TITLES)
        first_name = self.rng.choice(FIRST_NAMES)
        last_name = self.rng.choice(LAST_NAMES)

        email = self._email(first_name, last_name, company.domain)
        phone = self._phone()
        verified_status = self._verification_status()

        if options.company_size is not None:
            company_size = getattr(options.company_size, "value", options.company_size)
        else:
            company_size = company.size

        return Lead(
            company_name=company.name,
            contact_name=f"{first_name} {last_name}",
            email=email,
            phone=phone,
            title=title,
            industry=industry,
            company_size=company_size,
            location=options.location or self.rng.choice(LOCATIONS),
            verified_status=verified_status,
        )

    def _email(self, first_name: str, last_name: str, domain: str) -> str:
        first, last = first_name.lower(), last_name.lower()
        formats = (
            f"{first}.{last}@{domain}",
            f"{first}{last}@{domain}",
            f"{first[0]}{last}@{domain}",
            f"{first}@{domain}",
        )
        return self.rng.choice(formats)

    def _phone(self) -> str:
        area = self.rng.randint(100, 999)
        exchange = self.rng.randint(100, 999)
        number = self.rng.randint(1000, 9999)
        return f"+1-{area}-{exchange}-{number}"

    def _verification_status(self) -> VerificationStatus:
        return VerificationStatus(
            accuracy=self.rng.random() > ACCURACY_FAILURE_RATE,
            deliverability=self.rng.random() > DELIVERABILITY_FAILURE_RATE,
            relevance=self.rng.random() > RELEVANCE_FAILURE_RATE,
            compliance=self.rng.random() > COMPLIANCE_FAILURE_RATE,
        )


def generate_leads(
    audit: Union[AuditResult, EnhancedAuditResult],
    options: LeadGenerationOptions,
    rng: Optional[random.Random] = None,
) -> List[Lead]:
    """Convenience function to generate leads."""
    return LeadGenerator(rng).generate(audit, options)
