"""
Email Deliverability Verification

Two paths share the Hunter email-verifier:
1. verify_leads_batch: restamps the deliverability facet of synthesized
   leads and drops the ones that are clearly undeliverable
2. verify_email: static screening (syntax, domain, disposable, role) plus
   the deliverability check, combined into a scored result

Without HUNTER_API_KEY, or when Hunter is unreachable, deliverability is
simulated. The reason string on the check says which happened.

API: https://hunter.io/api-documentation/v2#email-verifier
"""

import logging
import random
import re
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional

import httpx

from .models import Lead, VerificationStatus

logger = logging.getLogger(__name__)


MOCK_REASON_NO_KEY = "Mock verification - no API key"
MOCK_REASON_UNAVAILABLE = "Verification service unavailable"

# Leads at or below this Hunter score are dropped from a batch
MIN_BATCH_SCORE = 50

# verify_email scoring
VALID_EMAIL_MIN_SCORE = 70
SYNTAX_POINTS = 20
DOMAIN_POINTS = 25
DELIVERABLE_POINTS = 35
NOT_DISPOSABLE_POINTS = 15
NOT_ROLE_POINTS = 5

DISPOSABLE_DOMAINS = frozenset({
    "10minutemail.com", "tempmail.org", "guerrillamail.com", "mailinator.com",
    "yopmail.com", "temp-mail.org", "throwaway.email", "maildrop.cc",
    "sharklasers.com", "guerrillamailblock.com", "pokemail.net", "spam4.me",
})

ROLE_PREFIXES = (
    "admin", "support", "info", "contact", "sales", "marketing", "noreply", "no-reply",
)

KNOWN_TLDS = (
    ".com", ".org", ".net", ".edu", ".gov", ".mil", ".int", ".co", ".io", ".ai", ".app",
)

_EMAIL_SYNTAX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_GENERIC_TLD = re.compile(r"\.[a-z]{2,4}$", re.IGNORECASE)
_COMMON_TLD_SUFFIX = re.compile(r"\.(com|org|net|edu|gov)$")


# =============================================================================
# HUNTER DELIVERABILITY
# =============================================================================


@dataclass(frozen=True)
class DeliverabilityCheck:
    """Outcome of one deliverability lookup."""
    deliverable: bool
    score: int
    reason: Optional[str] = None


class HunterVerifier:
    """
    Async client for the Hunter email-verifier endpoint.

    Usage:
        async with HunterVerifier(api_key="...") as verifier:
            check = await verifier.verify("jane@example.com")
    """

    API_URL = "https://api.hunter.io/v2/email-verifier"

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize verifier.

        Args:
            api_key: Hunter API key (None switches to simulated checks)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
            rng: Random source for simulated checks
        """
        self.api_key = api_key
        self.rng = rng or random.Random()
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    async def __aenter__(self) -> "HunterVerifier":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self):
        """Close the HTTP client."""
        await self._client.aclose()

    def _mock_check(self, reason: str) -> DeliverabilityCheck:
        return DeliverabilityCheck(
            deliverable=self.rng.random() > 0.1,
            score=self.rng.randint(60, 99),
            reason=reason,
        )

    async def verify(self, email: str) -> DeliverabilityCheck:
        """Check one address. Never raises."""
        if not self.api_key:
            return self._mock_check(MOCK_REASON_NO_KEY)

        try:
            response = await self._client.get(
                self.API_URL,
                params={"email": email, "api_key": self.api_key},
            )
            response.raise_for_status()
            data = response.json()["data"]
            return DeliverabilityCheck(
                deliverable=data.get("result") == "deliverable",
                score=int(data.get("score") or 0),
                reason=data.get("result"),
            )
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.error(f"Hunter verification failed for {email}: {e}")
            return self._mock_check(MOCK_REASON_UNAVAILABLE)


async def verify_leads_batch(leads: List[Lead], verifier: HunterVerifier) -> List[Lead]:
    """
    Restamp deliverability on each lead.

    Returns copies of the leads that are deliverable with a score above
    MIN_BATCH_SCORE, in input order. Input leads are not modified.
    """
    verified = []
    for lead in leads:
        check = await verifier.verify(lead.email)
        status = replace(lead.verified_status, deliverability=check.deliverable)
        if check.deliverable and check.score > MIN_BATCH_SCORE:
            verified.append(replace(lead, verified_status=status))

    logger.info(f"Verified lead batch: {len(verified)}/{len(leads)} kept")
    return verified


# =============================================================================
# SINGLE-ADDRESS VERIFICATION
# =============================================================================


@dataclass(frozen=True)
class EmailScreening:
    """Static checks that need no network access."""
    syntax: bool
    domain: bool
    disposable: bool
    role: bool


def screen_email(email: str) -> EmailScreening:
    """Syntax, domain format, disposable domain and role-prefix checks."""
    if not _EMAIL_SYNTAX.match(email):
        return EmailScreening(syntax=False, domain=False, disposable=False, role=False)

    local_part, domain = email.split("@", 1)
    domain = domain.lower()
    return EmailScreening(
        syntax=True,
        domain=domain.endswith(KNOWN_TLDS) or bool(_GENERIC_TLD.search(domain)),
        disposable=domain in DISPOSABLE_DOMAINS,
        role=local_part.lower().startswith(ROLE_PREFIXES),
    )


@dataclass(frozen=True)
class EmailVerificationResult:
    email: str
    is_valid: bool
    score: int
    message: str
    details: Dict[str, bool]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "email": self.email,
            "is_valid": self.is_valid,
            "score": self.score,
            "message": self.message,
            "details": dict(self.details),
        }


def _verification_message(
    screening: EmailScreening,
    check: DeliverabilityCheck,
    score: int,
) -> str:
    if screening.disposable:
        return "Disposable email address detected"
    if not check.deliverable:
        return f"Email verification failed: {check.reason or 'undeliverable'}"
    if screening.role:
        return "Role-based email address (may be valid but not personal)"
    if not screening.domain:
        return "Invalid domain format"
    if score < VALID_EMAIL_MIN_SCORE:
        return "Email may not be deliverable"
    return "Valid email address"


async def verify_email(email: str, verifier: HunterVerifier) -> EmailVerificationResult:
    """
    Screen and verify one address.

    Score: syntax 20, domain 25, deliverable 35, not disposable 15,
    not role-based 5. Valid when the score is at least 70, the address is
    deliverable and the domain is not disposable.
    """
    email = email.strip().lower()
    screening = screen_email(email)

    if not screening.syntax:
        return EmailVerificationResult(
            email=email,
            is_valid=False,
            score=0,
            message="Invalid email format",
            details={
                "syntax": False,
                "domain": False,
                "deliverable": False,
                "disposable": False,
                "role": False,
            },
        )

    if screening.disposable:
        check = DeliverabilityCheck(
            deliverable=False, score=0, reason="Disposable domain - check skipped"
        )
    else:
        check = await verifier.verify(email)

    details = {
        "syntax": True,
        "domain": screening.domain,
        "deliverable": check.deliverable,
        "disposable": not screening.disposable,
        "role": not screening.role,
    }

    score = 0
    if details["syntax"]:
        score += SYNTAX_POINTS
    if details["domain"]:
        score += DOMAIN_POINTS
    if details["deliverable"]:
        score += DELIVERABLE_POINTS
    if details["disposable"]:
        score += NOT_DISPOSABLE_POINTS
    if details["role"]:
        score += NOT_ROLE_POINTS

    is_valid = (
        score >= VALID_EMAIL_MIN_SCORE
        and check.deliverable
        and not screening.disposable
    )
    message = _verification_message(screening, check, score)

    logger.info(
        f"Verification result for {email}: "
        f"{'Valid' if is_valid else 'Invalid'} (Score: {score}) - {message}"
    )
    return EmailVerificationResult(
        email=email,
        is_valid=is_valid,
        score=score,
        message=message,
        details=details,
    )


def lead_from_email(result: EmailVerificationResult) -> Lead:
    """Build a lead record from a verified address."""
    local_part, domain = result.email.split("@", 1)
    return Lead(
        company_name=_COMMON_TLD_SUFFIX.sub("", domain),
        contact_name=local_part[:1].upper() + local_part[1:],
        email=result.email,
        verified_status=VerificationStatus(
            accuracy=True,
            deliverability=result.details.get("deliverable", False),
            relevance=result.details.get("role", False),
            compliance=result.details.get("disposable", False),
        ),
    )
