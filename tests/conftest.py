"""
Pytest Configuration and Shared Fixtures

Provides common fixtures and configuration for all test modules.
"""

import json
import random
from typing import Any, Dict

import pytest
from unittest.mock import AsyncMock, MagicMock

from leadgauge.audit.models import (
    AuditParameter,
    AuditResult,
    BusinessInfo,
    PARAMETER_NAMES,
    PARAMETER_WEIGHTS,
    ParameterKey,
)
from leadgauge.enrichment.prompts import AUDIT_SCHEMA_HINT
from leadgauge.utils.config import Settings


# ============================================================================
# HTML Fixtures
# ============================================================================

# Passes every Digital Presence check when served over https
DIGITAL_PRESENCE_HTML = """
<html>
<head>
  <title>Acme Software | Home</title>
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <meta name="description" content="Acme builds workflow software that helps small teams ship projects on time and on budget.">
</head>
<body>
  <nav><a href="/">Home</a></nav>
  <h1>Ship faster</h1>
  <button>Start</button>
  <button>Pricing</button>
  <a class="btn" href="/demo">Book a demo</a>
</body>
</html>
"""

# No structural signal for any scorer
BARE_HTML = "<html><head></head><body><p>Hello</p></body></html>"

RICH_HTML = """
<html>
<head>
  <title>Northwind Health | Clinic</title>
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <meta name="description" content="Northwind Health is a family clinic offering same-day appointments, telehealth and preventive care.">
  <script src="https://www.googletagmanager.com/gtag/js?id=G-1"></script>
  <script type="application/ld+json">{"@type": "MedicalClinic"}</script>
</head>
<body>
  <nav class="navigation"><a href="/about">About us</a></nav>
  <h1>The only clinic with same-day results</h1>
  <a href="https://facebook.com/northwind">Facebook</a>
  <a href="https://twitter.com/northwind">Twitter</a>
  <a href="https://linkedin.com/company/northwind">LinkedIn</a>
  <a href="/blog">Blog</a>
  <div class="testimonial">Great care</div>
  <a href="mailto:hello@northwind.test">Email</a>
  <a href="tel:+15551234567">Call</a>
  <a href="/privacy">Privacy</a>
  <a href="/terms">Terms</a>
  <div id="cookie-banner">We use cookies</div>
  <p>Smart scheduling with advanced automation.</p>
</body>
</html>
"""


@pytest.fixture
def digital_presence_html() -> str:
    return DIGITAL_PRESENCE_HTML


@pytest.fixture
def bare_html() -> str:
    return BARE_HTML


@pytest.fixture
def rich_html() -> str:
    return RICH_HTML


# ============================================================================
# Model Fixtures
# ============================================================================

SAMPLE_SCORES = {
    ParameterKey.DIGITAL_PRESENCE: 80,
    ParameterKey.MARKET_VISIBILITY: 55,
    ParameterKey.BUSINESS_OPERATIONS: 40,
    ParameterKey.COMPETITIVE_POSITIONING: 65,
    ParameterKey.DATA_INSIGHT: 25,
    ParameterKey.COMPLIANCE: 90,
}


@pytest.fixture
def sample_audit() -> AuditResult:
    """A deterministic audit with known scores."""
    parameters = {
        key: AuditParameter(
            name=PARAMETER_NAMES[key],
            weight=PARAMETER_WEIGHTS[key],
            score=score,
            insights=[f"✓ {PARAMETER_NAMES[key]} baseline"],
            recommendations=[f"Improve {PARAMETER_NAMES[key]}"],
        )
        for key, score in SAMPLE_SCORES.items()
    }
    return AuditResult.build(
        parameters,
        BusinessInfo(
            name="Acme Software",
            url="https://acme.test",
            industry="Technology",
            description="Workflow software for small teams",
        ),
    )


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible tests."""
    return random.Random(1234)


@pytest.fixture
def offline_settings() -> Settings:
    """Settings with no external credentials, ignoring any local .env."""
    return Settings(_env_file=None, ANTHROPIC_API_KEY=None, HUNTER_API_KEY=None)


# ============================================================================
# Text Generation Fixtures
# ============================================================================

SAMPLE_NARRATIVE: Dict[str, Any] = {
    "executiveSummary": "Acme has a solid site but limited reach.",
    "keyFindings": ["Strong technical base", "Weak social presence"],
    "priorityRecommendations": ["Launch a blog", "Add testimonials"],
    "competitiveAnalysis": "Acme trails larger rivals on visibility.",
    "growthOpportunities": ["Content marketing", "Partnerships"],
    "riskAssessment": "Low compliance risk.",
    "actionPlan": {
        "immediate": ["Add review widget"],
        "shortTerm": ["Publish two articles a month"],
        "longTerm": ["Build a partner program"],
    },
    "industryBenchmarks": "Above average for small SaaS vendors.",
    "detailedAnalysis": "Acme's website is fast and well structured.",
}

SAMPLE_PARAMETER_RESPONSE: Dict[str, Any] = {
    "insights": ["Refreshed insight"],
    "recommendations": ["Refreshed recommendation"],
    # Enrichment must ignore any score the model invents
    "score": 3,
}


def make_text_generator(
    narrative: Any = None,
    parameter_response: Any = None,
) -> MagicMock:
    """
    Mock TextGenerator.

    The audit-wide request gets `narrative`, every per-parameter request
    gets `parameter_response`. Strings are returned verbatim, exceptions
    are raised, anything else is JSON-encoded.
    """
    narrative = SAMPLE_NARRATIVE if narrative is None else narrative
    parameter_response = (
        SAMPLE_PARAMETER_RESPONSE if parameter_response is None else parameter_response
    )

    def respond(value):
        if isinstance(value, Exception):
            raise value
        if isinstance(value, str):
            return value
        return json.dumps(value)

    async def generate_structured_text(prompt, schema_hint, **kwargs):
        if schema_hint == AUDIT_SCHEMA_HINT:
            return respond(narrative)
        return respond(parameter_response)

    generator = MagicMock()
    generator.generate_structured_text = AsyncMock(side_effect=generate_structured_text)
    generator.generate_text = AsyncMock(return_value="Insightful prose.")
    generator.get_usage_summary.return_value = {
        "total_calls": 7,
        "input_tokens": 3000,
        "output_tokens": 1000,
        "total_tokens": 4000,
        "estimated_cost": 0.024,
    }
    return generator


@pytest.fixture
def text_generator() -> MagicMock:
    return make_text_generator()


# ============================================================================
# Markers
# ============================================================================

def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
