"""
Audit Scoring Package

Deterministic, rule-based website audit:
- Markup signal extraction (BeautifulSoup)
- Six independent parameter scorers
- Weighted composite score and business info inference
- Synthetic fallback when the website cannot be analyzed

Usage:
    from leadgauge.audit import analyze_website

    result = await analyze_website("example.com")
    print(f"Total score: {result.total_score}/100")
"""

from .models import (
    ParameterKey,
    PARAMETER_WEIGHTS,
    PARAMETER_NAMES,
    AuditParameter,
    BusinessInfo,
    AuditResult,
    ActionPlan,
    EnhancedAuditResult,
    compute_total_score,
)
from .extractor import MarkupDocument, parse_document
from .scorers import (
    SCORERS,
    score_all,
    score_digital_presence,
    score_market_visibility,
    score_business_operations,
    score_competitive_positioning,
    score_data_insight,
    score_compliance,
)
from .business_info import INDUSTRY_KEYWORDS, extract_business_info, infer_industry
from .fallback import generate_fallback_result
from .analyzer import (
    PageFetchError,
    WebsiteFetcher,
    WebsiteAuditor,
    analyze_website,
    normalize_url,
)

__all__ = [
    # Models
    "ParameterKey",
    "PARAMETER_WEIGHTS",
    "PARAMETER_NAMES",
    "AuditParameter",
    "BusinessInfo",
    "AuditResult",
    "ActionPlan",
    "EnhancedAuditResult",
    "compute_total_score",
    # Extraction
    "MarkupDocument",
    "parse_document",
    # Scorers
    "SCORERS",
    "score_all",
    "score_digital_presence",
    "score_market_visibility",
    "score_business_operations",
    "score_competitive_positioning",
    "score_data_insight",
    "score_compliance",
    # Business info
    "INDUSTRY_KEYWORDS",
    "extract_business_info",
    "infer_industry",
    # Fallback
    "generate_fallback_result",
    # Analyzer
    "PageFetchError",
    "WebsiteFetcher",
    "WebsiteAuditor",
    "analyze_website",
    "normalize_url",
]
