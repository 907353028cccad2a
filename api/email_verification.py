"""
API Endpoints for Email Verification
"""

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from leadgauge.services.leads import LeadRequestError, leads_from_emails

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/email-verification", tags=["Email Verification"])


class EmailVerificationRequest(BaseModel):
    emails: List[Any] = Field(default_factory=list)
    max_leads: Optional[int] = Field(None, ge=0)


@router.post("")
async def verify_emails(request: EmailVerificationRequest):
    """Verify addresses and build leads for the valid ones."""
    try:
        batch = await leads_from_emails(request.emails, max_leads=request.max_leads)
    except LeadRequestError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"success": True, **batch.to_dict()}
