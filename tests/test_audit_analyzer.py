"""
Tests for the audit aggregator, fallback results and audit models.
"""

import random

import httpx
import pytest

from leadgauge.audit.analyzer import (
    BROWSER_USER_AGENT,
    PageFetchError,
    WebsiteAuditor,
    WebsiteFetcher,
    normalize_url,
)
from leadgauge.audit.fallback import (
    FALLBACK_DESCRIPTION,
    FALLBACK_SCORE_RANGES,
    business_name_from_url,
    generate_fallback_result,
)
from leadgauge.audit.models import (
    AuditParameter,
    AuditResult,
    ParameterKey,
    compute_total_score,
)


def html_transport(html: str, status_code: int = 200) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=html)
    return httpx.MockTransport(handler)


def failing_transport() -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)
    return httpx.MockTransport(handler)


def timeout_transport() -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)
    return httpx.MockTransport(handler)


def expected_total(result: AuditResult) -> int:
    weighted = sum(p.score * p.weight for p in result.parameters.values())
    return int(weighted / 100 + 0.5)


class TestNormalizeUrl:

    @pytest.mark.parametrize("raw,expected", [
        ("acme.test", "https://acme.test"),
        ("  acme.test/about ", "https://acme.test/about"),
        ("http://acme.test", "http://acme.test"),
        ("HTTPS://acme.test", "HTTPS://acme.test"),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_url(raw) == expected


class TestWebsiteFetcher:

    @pytest.mark.asyncio
    async def test_sends_browser_user_agent(self):
        seen = {}

        def handler(request):
            seen["ua"] = request.headers["user-agent"]
            return httpx.Response(200, text="<html></html>")

        async with WebsiteFetcher(transport=httpx.MockTransport(handler)) as fetcher:
            await fetcher.fetch_html("https://acme.test")
        assert seen["ua"] == BROWSER_USER_AGENT

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        async with WebsiteFetcher(transport=html_transport("gone", 404)) as fetcher:
            with pytest.raises(PageFetchError) as exc_info:
                await fetcher.fetch_html("https://acme.test")
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        async with WebsiteFetcher(transport=failing_transport()) as fetcher:
            with pytest.raises(PageFetchError):
                await fetcher.fetch_html("https://acme.test")

    @pytest.mark.asyncio
    async def test_read_timeout_raises(self):
        async with WebsiteFetcher(transport=timeout_transport()) as fetcher:
            with pytest.raises(PageFetchError) as exc_info:
                await fetcher.fetch_html("https://acme.test")
        assert exc_info.value.status_code is None


class TestWebsiteAuditor:

    @pytest.mark.asyncio
    async def test_successful_audit(self, rich_html):
        auditor = WebsiteAuditor(transport=html_transport(rich_html))
        result = await auditor.analyze("northwind.test")

        assert result.business_info.url == "https://northwind.test"
        assert result.business_info.name == "Northwind Health"
        assert list(result.parameters) == list(ParameterKey)
        assert result.total_score == expected_total(result)
        assert 0 <= result.total_score <= 100

    @pytest.mark.asyncio
    async def test_404_returns_fallback(self):
        auditor = WebsiteAuditor(
            transport=html_transport("not found", 404),
            rng=random.Random(3),
        )
        result = await auditor.analyze("acme.test")

        assert result.business_info.name == "acme.test"
        assert result.business_info.url == "acme.test"
        assert result.business_info.industry == "Technology"
        assert result.business_info.description == FALLBACK_DESCRIPTION
        assert result.total_score == expected_total(result)

    @pytest.mark.asyncio
    async def test_network_error_returns_fallback(self):
        auditor = WebsiteAuditor(transport=failing_transport(), rng=random.Random(3))
        result = await auditor.analyze("https://acme.test/pricing")
        assert result.business_info.name == "acme.test"
        for key, (low, high) in FALLBACK_SCORE_RANGES.items():
            assert low <= result.parameters[key].score <= high

    @pytest.mark.asyncio
    async def test_read_timeout_returns_fallback(self):
        auditor = WebsiteAuditor(transport=timeout_transport(), rng=random.Random(3))
        result = await auditor.analyze("slow.test")

        assert result == generate_fallback_result("slow.test", random.Random(3))
        assert result.business_info.description == FALLBACK_DESCRIPTION


class TestFallback:

    def test_scores_within_ranges(self, rng):
        for _ in range(20):
            result = generate_fallback_result("https://acme.test", rng)
            for key, (low, high) in FALLBACK_SCORE_RANGES.items():
                assert low <= result.parameters[key].score <= high
            assert result.total_score == expected_total(result)

    def test_seeded_rng_is_reproducible(self):
        first = generate_fallback_result("acme.test", random.Random(42))
        second = generate_fallback_result("acme.test", random.Random(42))
        assert first == second

    @pytest.mark.parametrize("url,name", [
        ("https://acme.test/about", "acme.test"),
        ("http://www.acme.test", "www.acme.test"),
        ("acme.test", "acme.test"),
    ])
    def test_business_name_from_url(self, url, name):
        assert business_name_from_url(url) == name


class TestModels:

    def test_total_rounds_half_up(self, sample_audit):
        # 80*.3 + 55*.25 + 40*.2 + 65*.15 + 25*.1 + 90*.1 = 67.0
        assert sample_audit.total_score == 67

        params = dict(sample_audit.parameters)
        params[ParameterKey.DATA_INSIGHT] = AuditParameter(
            name="Data & Insight Capability", weight=10, score=30,
        )
        # 67.5 rounds up
        assert compute_total_score(params) == 68

    def test_to_dict_shape(self, sample_audit):
        data = sample_audit.to_dict()
        assert data["totalScore"] == 67
        assert list(data["parameters"]) == [
            "digitalPresence",
            "marketVisibility",
            "businessOperations",
            "competitivePositioning",
            "dataInsight",
            "compliance",
        ]
        assert data["businessInfo"]["url"] == "https://acme.test"

    def test_from_dict_restores_snapshot(self, sample_audit):
        assert AuditResult.from_dict(sample_audit.to_dict()) == sample_audit

    def test_from_dict_recomputes_total(self, sample_audit):
        data = sample_audit.to_dict()
        data["totalScore"] = 99
        assert AuditResult.from_dict(data).total_score == 67

    def test_from_dict_without_total(self, sample_audit):
        data = sample_audit.to_dict()
        del data["totalScore"]
        assert AuditResult.from_dict(data) == sample_audit

    @pytest.mark.parametrize("section,value", [
        ("businessInfo", ["not", "a", "dict"]),
        ("parameters", ["not", "a", "dict"]),
    ])
    def test_from_dict_rejects_non_object_section(self, sample_audit, section, value):
        data = sample_audit.to_dict()
        data[section] = value
        with pytest.raises(TypeError):
            AuditResult.from_dict(data)

    def test_from_dict_rejects_non_object_snapshot(self):
        with pytest.raises(TypeError):
            AuditResult.from_dict(["totalScore", 67])
