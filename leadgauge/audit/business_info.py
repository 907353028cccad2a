"""
Business Info Inference

Derives name, description and industry for the audited business from
its homepage markup. The industry table is seed data and may grow.
"""

import re
from types import MappingProxyType
from typing import Mapping, Tuple

from .extractor import MarkupDocument
from .models import BusinessInfo


DEFAULT_BUSINESS_NAME = "Unknown Business"
DEFAULT_DESCRIPTION = "No description available"
DEFAULT_INDUSTRY = "Other"
MAX_DESCRIPTION_LENGTH = 200

# Ordered: the first industry with a keyword hit wins.
INDUSTRY_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "Technology": ("software", "tech", "app", "digital", "ai", "saas", "platform"),
    "E-commerce": ("shop", "store", "buy", "sell", "commerce", "retail"),
    "Healthcare": ("health", "medical", "doctor", "clinic", "hospital", "care"),
    "Finance": ("bank", "finance", "investment", "loan", "credit", "money"),
    "Education": ("school", "university", "education", "learn", "course", "training"),
    "Real Estate": ("real estate", "property", "home", "house", "rent"),
    "Food & Beverage": ("restaurant", "food", "cafe", "kitchen", "dining"),
    "Professional Services": ("consulting", "legal", "accounting", "marketing", "agency"),
})

_TITLE_SUFFIX = re.compile(r"\s*\|\s*.*$", re.DOTALL)


def infer_industry(title: str, description: str) -> str:
    """Match lowercase title + description against the industry table."""
    text = f"{title} {description}".lower()
    for industry, keywords in INDUSTRY_KEYWORDS.items():
        if any(keyword in text for keyword in keywords):
            return industry
    return DEFAULT_INDUSTRY


def extract_business_info(doc: MarkupDocument, url: str) -> BusinessInfo:
    title = doc.title or DEFAULT_BUSINESS_NAME
    description = (
        doc.meta_content("description")
        or doc.og_content("description")
        or DEFAULT_DESCRIPTION
    )

    return BusinessInfo(
        name=_TITLE_SUFFIX.sub("", title).strip(),
        url=url,
        description=description[:MAX_DESCRIPTION_LENGTH],
        industry=infer_industry(title, description),
    )
