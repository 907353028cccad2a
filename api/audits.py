"""
API Endpoints for Website Audits
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from leadgauge.billing.plans import PlanType
from leadgauge.services.audits import run_audit

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/audits", tags=["Audits"])


class AuditRequest(BaseModel):
    """Request to audit a business website."""
    business_url: str = Field(..., min_length=1, max_length=2048)
    business_name: Optional[str] = Field(None, max_length=255)
    plan_type: PlanType = PlanType.FREE


class AuditResponse(BaseModel):
    """Audit snapshot plus the report data to persist alongside it."""
    total_score: int
    parameter_scores: Dict[str, Any]
    report_data: Dict[str, Any]
    credits_used: int
    enhanced: bool


@router.post("", response_model=AuditResponse)
async def create_audit(request: AuditRequest) -> AuditResponse:
    """Run an audit. Unreachable sites still return a (synthetic) result."""
    if not request.business_url.strip():
        raise HTTPException(status_code=400, detail="Business URL is required")

    report = await run_audit(
        request.business_url,
        business_name=request.business_name,
        plan_type=request.plan_type.value,
    )
    result = report.result.to_dict()
    return AuditResponse(
        total_score=result["totalScore"],
        parameter_scores=result["parameters"],
        report_data=report.report_data,
        credits_used=report.credits_used,
        enhanced=report.enhanced is not None,
    )
