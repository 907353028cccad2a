"""
LeadGauge API

FastAPI application exposing:
1. POST /api/audits - website audit with optional Claude enrichment
2. POST /api/leads - targeted lead generation from an audit snapshot
3. POST /api/email-verification - verify addresses and build leads
4. GET /health - liveness check

Persistence, authentication and usage limits live in front of this service.
"""

import logging
import sys

from fastapi import FastAPI

from leadgauge import __version__
from leadgauge.utils.config import get_settings

from api.audits import router as audits_router
from api.email_verification import router as email_verification_router
from api.leads import router as leads_router

settings = get_settings()

# Configure logging to stdout
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stdout,
    force=True,
)
logger = logging.getLogger(__name__)

# Quiet down chatty loggers
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

app = FastAPI(
    title="LeadGauge",
    description="Business website audits and lead generation",
    version=__version__,
)

app.include_router(audits_router)
app.include_router(leads_router)
app.include_router(email_verification_router)


@app.get("/health")
async def health():
    """Liveness check with feature flags."""
    return {
        "status": "healthy",
        "version": __version__,
        "environment": settings.ENVIRONMENT,
        "enrichment_enabled": settings.enrichment_enabled,
        "hunter_configured": bool(settings.HUNTER_API_KEY),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
