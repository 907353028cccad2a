"""
API Endpoints for Targeted Lead Generation
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from leadgauge.audit.models import AuditResult
from leadgauge.services.leads import LeadRequestError, generate_targeted_leads

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/leads", tags=["Leads"])


class LeadRequest(BaseModel):
    """Request to generate leads from a persisted audit snapshot."""
    audit: Dict[str, Any]
    target_count: int
    industry: Optional[str] = None
    location: Optional[str] = None
    company_size: Optional[str] = None
    job_titles: Optional[List[str]] = None


class LeadResponse(BaseModel):
    leads: List[Dict[str, Any]]
    count: int
    credits_used: int
    message: str = "Leads generated successfully"


@router.post("", response_model=LeadResponse)
async def create_leads(request: LeadRequest) -> LeadResponse:
    """Generate leads targeted by the audit and the request options."""
    try:
        audit = AuditResult.from_dict(request.audit)
    except (KeyError, TypeError, ValueError) as e:
        logger.warning(f"Invalid audit snapshot in lead request: {e}")
        raise HTTPException(status_code=400, detail="Invalid audit snapshot")

    try:
        batch = generate_targeted_leads(
            audit,
            request.target_count,
            industry=request.industry,
            location=request.location,
            company_size=request.company_size,
            job_titles=request.job_titles,
        )
    except LeadRequestError as e:
        raise HTTPException(status_code=400, detail=str(e))

    data = batch.to_dict()
    return LeadResponse(
        leads=data["leads"],
        count=data["count"],
        credits_used=data["credits_used"],
    )
