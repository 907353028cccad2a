"""
Synthetic Fallback Audit

Produces a plausible AuditResult when the live website cannot be fetched
or parsed. Scores are sampled per parameter from fixed ranges, so every
fallback differs, but the total is always derived with the same weighting
formula as a real audit.
"""

import random
import re
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .models import (
    AuditParameter,
    AuditResult,
    BusinessInfo,
    PARAMETER_NAMES,
    PARAMETER_WEIGHTS,
    ParameterKey,
)


FALLBACK_INDUSTRY = "Technology"
FALLBACK_DESCRIPTION = "A modern business with digital presence"

# Inclusive (low, high) score range per parameter
FALLBACK_SCORE_RANGES: Mapping[ParameterKey, Tuple[int, int]] = MappingProxyType({
    ParameterKey.DIGITAL_PRESENCE: (60, 89),
    ParameterKey.MARKET_VISIBILITY: (50, 79),
    ParameterKey.BUSINESS_OPERATIONS: (65, 89),
    ParameterKey.COMPETITIVE_POSITIONING: (45, 79),
    ParameterKey.DATA_INSIGHT: (40, 79),
    ParameterKey.COMPLIANCE: (70, 89),
})

FALLBACK_NOTES: Mapping[ParameterKey, Tuple[Tuple[str, ...], Tuple[str, ...]]] = MappingProxyType({
    ParameterKey.DIGITAL_PRESENCE: (
        ("✓ Modern website design", "✓ Mobile-responsive layout"),
        ("Improve page load speed", "Add more interactive elements"),
    ),
    ParameterKey.MARKET_VISIBILITY: (
        ("✓ Active social media presence", "✓ Customer testimonials"),
        ("Increase content marketing", "Expand to more platforms"),
    ),
    ParameterKey.BUSINESS_OPERATIONS: (
        ("✓ Cloud-based infrastructure", "✓ Automated processes"),
        ("Implement CRM system", "Add live chat support"),
    ),
    ParameterKey.COMPETITIVE_POSITIONING: (
        ("✓ Clear value proposition", "✓ Unique features"),
        ("Strengthen brand messaging", "Add more case studies"),
    ),
    ParameterKey.DATA_INSIGHT: (
        ("✓ Basic analytics tracking",),
        ("Implement advanced analytics", "Add conversion tracking"),
    ),
    ParameterKey.COMPLIANCE: (
        ("✓ Privacy policy present", "✓ SSL certificate"),
        ("Update terms of service", "Add GDPR compliance"),
    ),
})


def business_name_from_url(url: str) -> str:
    """Host part of a URL: scheme and path stripped."""
    name = re.sub(r"^https?://", "", url.strip(), flags=re.IGNORECASE)
    return re.sub(r"/.*$", "", name)


def generate_fallback_result(url: str, rng: Optional[random.Random] = None) -> AuditResult:
    """
    Build a synthetic audit for a URL that could not be analyzed.

    Args:
        url: The URL exactly as the caller supplied it
        rng: Random source (a fresh unseeded generator if omitted)

    Returns:
        AuditResult indistinguishable in shape from a real audit
    """
    rng = rng or random.Random()

    parameters = {}
    for key in ParameterKey:
        low, high = FALLBACK_SCORE_RANGES[key]
        insights, recommendations = FALLBACK_NOTES[key]
        parameters[key] = AuditParameter(
            name=PARAMETER_NAMES[key],
            weight=PARAMETER_WEIGHTS[key],
            score=rng.randint(low, high),
            insights=list(insights),
            recommendations=list(recommendations),
        )

    return AuditResult.build(
        parameters,
        BusinessInfo(
            name=business_name_from_url(url),
            url=url,
            industry=FALLBACK_INDUSTRY,
            description=FALLBACK_DESCRIPTION,
        ),
    )
