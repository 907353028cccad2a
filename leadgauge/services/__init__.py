"""
LeadGauge Services Layer

Request-scoped orchestration of audits, enrichment and lead generation.
"""

from .audits import AuditReport, build_report_data, run_audit
from .leads import (
    EmailVerificationBatch,
    LeadBatch,
    LeadRequestError,
    generate_targeted_leads,
    leads_from_emails,
)

__all__ = [
    "AuditReport",
    "build_report_data",
    "run_audit",
    "EmailVerificationBatch",
    "LeadBatch",
    "LeadRequestError",
    "generate_targeted_leads",
    "leads_from_emails",
]
