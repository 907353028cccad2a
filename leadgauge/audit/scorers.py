"""
Parameter Scorers

One pure function per business parameter, each mapping a parsed document
to an AuditParameter. All scorers share the same shape:

- every check is independent and adds a fixed number of points when its
  structural condition holds (plus an insight line)
- a failed check adds a recommendation instead, never a penalty
- the accumulated score is clamped to 100

Scorers hold no state, so the same HTML always yields the same output.
"""

from typing import Callable, Dict, List, Mapping

from .extractor import MarkupDocument
from .models import (
    AuditParameter,
    MAX_SCORE,
    PARAMETER_NAMES,
    PARAMETER_WEIGHTS,
    ParameterKey,
)


Scorer = Callable[[MarkupDocument, str], AuditParameter]


# =============================================================================
# LEXICONS
# =============================================================================

SOCIAL_PLATFORMS = ("facebook", "twitter", "linkedin", "instagram")

DIFFERENTIATION_KEYWORDS = (
    "unique", "first", "only", "exclusive", "revolutionary", "innovative",
)

INNOVATION_KEYWORDS = (
    "ai", "machine learning", "automation", "smart", "intelligent", "advanced",
)


# =============================================================================
# SCORE SHEET
# =============================================================================


class ScoreSheet:
    """Accumulates points, insights and recommendations for one parameter."""

    def __init__(self, key: ParameterKey):
        self.key = key
        self.score = 0
        self.insights: List[str] = []
        self.recommendations: List[str] = []

    def check(self, passed: bool, points: int, insight: str, recommendation: str) -> bool:
        if passed:
            self.award(points, insight)
        else:
            self.recommend(recommendation)
        return passed

    def award(self, points: int, insight: str) -> None:
        self.score += points
        self.insights.append(insight)

    def recommend(self, recommendation: str) -> None:
        self.recommendations.append(recommendation)

    def result(self) -> AuditParameter:
        return AuditParameter(
            name=PARAMETER_NAMES[self.key],
            weight=PARAMETER_WEIGHTS[self.key],
            score=min(self.score, MAX_SCORE),
            insights=list(self.insights),
            recommendations=list(self.recommendations),
        )


# =============================================================================
# 1. WEBSITE & DIGITAL PRESENCE (30%)
# =============================================================================


def score_digital_presence(doc: MarkupDocument, url: str) -> AuditParameter:
    sheet = ScoreSheet(ParameterKey.DIGITAL_PRESENCE)

    viewport = doc.meta_content("viewport")
    sheet.check(
        bool(viewport) and "width=device-width" in viewport,
        20,
        "✓ Mobile-responsive viewport detected",
        "Add mobile-responsive viewport meta tag",
    )

    title = doc.title
    sheet.check(
        10 < len(title) < 60,
        15,
        "✓ Good title tag length",
        "Optimize title tag (10-60 characters)",
    )

    description = doc.meta_content("description") or ""
    sheet.check(
        50 < len(description) < 160,
        15,
        "✓ Good meta description length",
        "Add compelling meta description (50-160 characters)",
    )

    sheet.check(
        doc.count("h1") == 1,
        10,
        "✓ Single H1 tag found",
        "Use exactly one H1 tag per page",
    )

    sheet.check(
        url.lower().startswith("https://"),
        15,
        "✓ SSL certificate installed",
        "Install SSL certificate for security",
    )

    cta_count = doc.count(
        'button, .btn, .cta, [href*="contact"], [href*="signup"], [href*="buy"]'
    )
    sheet.check(
        cta_count >= 3,
        15,
        f"✓ {cta_count} call-to-action elements found",
        "Add more clear call-to-action buttons",
    )

    sheet.check(
        doc.exists("nav, .navigation, .menu"),
        10,
        "✓ Navigation structure present",
        "Improve site navigation structure",
    )

    return sheet.result()


# =============================================================================
# 2. MARKET VISIBILITY & REPUTATION (25%)
# =============================================================================


def _linked_social_platforms(doc: MarkupDocument) -> List[str]:
    return [p for p in SOCIAL_PLATFORMS if doc.exists(f'a[href*="{p}"]')]


def score_market_visibility(doc: MarkupDocument, url: str) -> AuditParameter:
    sheet = ScoreSheet(ParameterKey.MARKET_VISIBILITY)

    platforms = len(_linked_social_platforms(doc))
    if platforms >= 3:
        sheet.award(25, f"✓ {platforms} social media platforms linked")
    elif platforms > 0:
        sheet.award(15, f"{platforms} social media platform(s) linked")
        sheet.recommend("Expand social media presence to more platforms")
    else:
        sheet.recommend("Add social media links and presence")

    sheet.check(
        doc.exists('a[href*="blog"], a[href*="news"], a[href*="article"]'),
        20,
        "✓ Blog or news section detected",
        "Add blog or news section for fresh content",
    )

    sheet.check(
        doc.exists('[class*="testimonial"], [class*="review"], [class*="feedback"]'),
        20,
        "✓ Customer testimonials/reviews section found",
        "Add customer testimonials or reviews",
    )

    contact_methods = doc.count('[href^="mailto:"], [href^="tel:"], [class*="contact"]')
    if contact_methods >= 2:
        sheet.award(15, "✓ Multiple contact methods available")
    elif contact_methods == 1:
        sheet.score += 10
        sheet.recommend("Add more contact methods (phone, email)")
    else:
        sheet.recommend("Add clear contact information")

    sheet.check(
        doc.exists('a[href*="about"], a[href*="company"]'),
        20,
        "✓ About/company information available",
        "Add comprehensive about page",
    )

    return sheet.result()


# =============================================================================
# 3. BUSINESS OPERATIONS & SCALABILITY (20%)
# =============================================================================


def score_business_operations(doc: MarkupDocument, url: str) -> AuditParameter:
    sheet = ScoreSheet(ParameterKey.BUSINESS_OPERATIONS)

    sheet.check(
        doc.count("script[src]") >= 5,
        20,
        "✓ Modern technology stack detected",
        "Consider upgrading technology infrastructure",
    )

    image_count = doc.count("img")
    optimized = doc.count('img[loading="lazy"], img[srcset]')
    sheet.check(
        optimized / max(image_count, 1) > 0.5,
        25,
        "✓ Images appear optimized for performance",
        "Optimize images for better performance",
    )

    sheet.check(
        doc.exists('script[src*="cdn"], link[href*="cdn"], img[src*="cdn"]'),
        20,
        "✓ CDN usage detected for better performance",
        "Consider using CDN for better global performance",
    )

    sheet.check(
        doc.exists('script[src*="analytics"], script[src*="gtag"], script[src*="gtm"]'),
        15,
        "✓ Analytics tracking implemented",
        "Implement analytics tracking for data insights",
    )

    # Not every business sells online, so no recommendation when absent.
    if doc.exists(
        '[class*="cart"], [class*="shop"], [class*="product"], [href*="checkout"]'
    ):
        sheet.award(20, "✓ E-commerce functionality detected")

    return sheet.result()


# =============================================================================
# 4. COMPETITIVE POSITIONING (15%)
# =============================================================================


def score_competitive_positioning(doc: MarkupDocument, url: str) -> AuditParameter:
    sheet = ScoreSheet(ParameterKey.COMPETITIVE_POSITIONING)

    hero_text = doc.first_text("h1, .hero, .banner").lower()
    sheet.check(
        any(word in hero_text for word in DIFFERENTIATION_KEYWORDS),
        25,
        "✓ Unique value proposition messaging detected",
        "Strengthen unique value proposition messaging",
    )

    feature_count = doc.count(
        '[class*="feature"], [class*="service"], [class*="benefit"]'
    )
    sheet.check(
        feature_count >= 3,
        25,
        f"✓ {feature_count} feature/service sections found",
        "Highlight more features and services",
    )

    page_text = doc.body_text().lower()
    mentions = sum(1 for keyword in INNOVATION_KEYWORDS if keyword in page_text)
    sheet.check(
        mentions >= 2,
        20,
        "✓ Innovation and technology focus evident",
        "Emphasize technological innovation and capabilities",
    )

    sheet.check(
        doc.exists('[class*="award"], [class*="certification"], [class*="badge"]'),
        15,
        "✓ Awards or certifications displayed",
        "Display relevant awards, certifications, or badges",
    )

    sheet.check(
        doc.exists('a[href*="case"], a[href*="portfolio"], a[href*="work"]'),
        15,
        "✓ Case studies or portfolio available",
        "Add case studies or portfolio examples",
    )

    return sheet.result()


# =============================================================================
# 5. DATA & INSIGHT CAPABILITY (10%)
# =============================================================================


def score_data_insight(doc: MarkupDocument, url: str) -> AuditParameter:
    sheet = ScoreSheet(ParameterKey.DATA_INSIGHT)

    sheet.check(
        doc.exists('script[src*="googletagmanager"], script[src*="google-analytics"]'),
        30,
        "✓ Google Analytics detected",
        "Implement Google Analytics for visitor insights",
    )

    sheet.check(
        doc.exists('script[type="application/ld+json"]'),
        25,
        "✓ Structured data markup found",
        "Add structured data markup for better SEO",
    )

    sheet.check(
        doc.exists('[onclick], [data-track], [class*="track"]'),
        20,
        "✓ Event tracking elements detected",
        "Implement conversion and event tracking",
    )

    sheet.check(
        doc.exists('script[src*="optimizely"], script[src*="vwo"], script[src*="hotjar"]'),
        25,
        "✓ A/B testing or user behavior tools detected",
        "Consider A/B testing tools for optimization",
    )

    return sheet.result()


# =============================================================================
# 6. COMPLIANCE & RISK MANAGEMENT (10%)
# =============================================================================


def score_compliance(doc: MarkupDocument, url: str) -> AuditParameter:
    sheet = ScoreSheet(ParameterKey.COMPLIANCE)

    sheet.check(
        doc.exists('a[href*="privacy"], a[href*="policy"]'),
        30,
        "✓ Privacy policy link found",
        "Add comprehensive privacy policy",
    )

    sheet.check(
        doc.exists('a[href*="terms"], a[href*="conditions"]'),
        25,
        "✓ Terms of service available",
        "Add terms of service page",
    )

    sheet.check(
        doc.exists('[class*="cookie"], [id*="cookie"]'),
        20,
        "✓ Cookie consent mechanism detected",
        "Implement cookie consent for GDPR compliance",
    )

    sheet.check(
        doc.exists('[alt*="secure"], [alt*="ssl"], [class*="security"]'),
        15,
        "✓ Security badges or indicators present",
        "Display security badges to build trust",
    )

    sheet.check(
        doc.exists('[class*="legal"], [href*="contact"]'),
        10,
        "✓ Legal/contact information available",
        "Ensure legal and contact information is accessible",
    )

    return sheet.result()


# =============================================================================
# REGISTRY
# =============================================================================

SCORERS: Mapping[ParameterKey, Scorer] = {
    ParameterKey.DIGITAL_PRESENCE: score_digital_presence,
    ParameterKey.MARKET_VISIBILITY: score_market_visibility,
    ParameterKey.BUSINESS_OPERATIONS: score_business_operations,
    ParameterKey.COMPETITIVE_POSITIONING: score_competitive_positioning,
    ParameterKey.DATA_INSIGHT: score_data_insight,
    ParameterKey.COMPLIANCE: score_compliance,
}


def score_all(doc: MarkupDocument, url: str) -> Dict[ParameterKey, AuditParameter]:
    """Run all six scorers against the same document."""
    return {key: scorer(doc, url) for key, scorer in SCORERS.items()}
