"""
Audit Service

Orchestrates one audit request:
1. Deterministic website audit (always succeeds, possibly synthetic)
2. Claude enrichment when a credential is configured
3. Report data assembly and credit cost
"""

import logging
import random
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..audit.analyzer import WebsiteAuditor
from ..audit.models import AuditResult, EnhancedAuditResult
from ..billing.plans import AUDIT_CREDIT_COST, PlanType
from ..enrichment.analyzer import AuditEnricher, BusinessData, maybe_enrich
from ..utils.config import Settings, get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuditReport:
    """Everything a caller persists for one audit."""
    audit: AuditResult
    enhanced: Optional[EnhancedAuditResult]
    report_data: Dict[str, Any]
    credits_used: int

    @property
    def result(self):
        """The enhanced result when available, else the plain audit."""
        return self.enhanced or self.audit

    def to_dict(self) -> Dict[str, Any]:
        data = self.result.to_dict()
        data["reportData"] = self.report_data
        data["creditsUsed"] = self.credits_used
        return data


def build_report_data(
    audit: AuditResult,
    enhanced: Optional[EnhancedAuditResult],
    plan_type: str = PlanType.FREE.value,
    analysis_date: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Report metadata plus, when enriched, the narrative fields."""
    analysis_date = analysis_date or datetime.now(timezone.utc)
    report_data: Dict[str, Any] = {
        "businessInfo": audit.business_info.to_dict(),
        "analysisDate": analysis_date.isoformat(),
        "planType": plan_type,
    }
    if enhanced is not None:
        report_data.update(enhanced.narrative_dict())
    return report_data


async def run_audit(
    business_url: str,
    business_name: Optional[str] = None,
    plan_type: str = PlanType.FREE.value,
    settings: Optional[Settings] = None,
    enricher: Optional[AuditEnricher] = None,
    auditor: Optional[WebsiteAuditor] = None,
    rng: Optional[random.Random] = None,
) -> AuditReport:
    """
    Run a full audit.

    Args:
        business_url: Website to audit
        business_name: Name supplied by the caller, preferred over the inferred one
        plan_type: Caller's plan, recorded in the report data
        settings: Settings override (defaults to get_settings())
        enricher: Enricher override (defaults to one built from settings)
        auditor: Auditor override (used by tests)
        rng: Random source for fallback results

    Returns:
        AuditReport
    """
    settings = settings or get_settings()
    auditor = auditor or WebsiteAuditor(timeout=settings.FETCH_TIMEOUT, rng=rng)

    audit = await auditor.analyze(business_url)

    enhanced = None
    if enricher is not None or settings.enrichment_enabled:
        business_data = BusinessData.from_audit(audit, name=business_name)
        enhanced = await maybe_enrich(business_data, audit, enricher=enricher, settings=settings)
    else:
        logger.info("Claude API key not configured, using basic analysis")

    report_data = build_report_data(audit, enhanced, plan_type)
    logger.info(
        f"Audit for {business_url} complete: score {audit.total_score}/100, "
        f"enriched={enhanced is not None}"
    )
    return AuditReport(
        audit=audit,
        enhanced=enhanced,
        report_data=report_data,
        credits_used=AUDIT_CREDIT_COST,
    )
