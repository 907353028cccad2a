"""
Tests for the enrichment pass.
"""

import asyncio
import logging

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from conftest import SAMPLE_NARRATIVE, make_text_generator

from leadgauge.enrichment.analyzer import (
    AuditEnricher,
    BusinessData,
    EnrichmentUnavailable,
    create_enricher,
    maybe_enrich,
)
from leadgauge.enrichment.client import (
    ClaudeClient,
    GenerationResponse,
    TextGenerationError,
    TokenUsage,
)
from leadgauge.enrichment.prompts import PLACEHOLDER_NARRATIVE
from leadgauge.audit.models import (
    AuditParameter,
    AuditResult,
    BusinessInfo,
    PARAMETER_NAMES,
    PARAMETER_WEIGHTS,
    ParameterKey,
)
from leadgauge.utils.config import Settings


@pytest.fixture
def business_data(sample_audit):
    return BusinessData.from_audit(sample_audit)


class TestEnrich:

    @pytest.mark.asyncio
    async def test_scores_are_never_changed(self, sample_audit, business_data, text_generator):
        enhanced = await AuditEnricher(text_generator).enrich(business_data, sample_audit)

        assert enhanced.total_score == sample_audit.total_score
        for key, original in sample_audit.parameters.items():
            assert enhanced.parameters[key].score == original.score
            assert enhanced.parameters[key].weight == original.weight
            assert enhanced.parameters[key].name == original.name

    @pytest.mark.asyncio
    async def test_narrative_and_parameters_are_enriched(
        self, sample_audit, business_data, text_generator
    ):
        enhanced = await AuditEnricher(text_generator).enrich(business_data, sample_audit)

        assert enhanced.executive_summary == SAMPLE_NARRATIVE["executiveSummary"]
        assert enhanced.action_plan.short_term == ["Publish two articles a month"]
        assert enhanced.parameters[ParameterKey.COMPLIANCE].insights == ["Refreshed insight"]
        # One audit-wide call plus six parameter calls
        assert text_generator.generate_structured_text.await_count == 7

        data = enhanced.to_dict()
        assert data["totalScore"] == sample_audit.total_score
        assert data["actionPlan"]["longTerm"] == ["Build a partner program"]

    @pytest.mark.asyncio
    async def test_parameter_calls_use_fast_model(self, sample_audit, business_data, text_generator):
        await AuditEnricher(text_generator, parameter_model="fast-model").enrich(
            business_data, sample_audit
        )
        models = [
            call.kwargs.get("model")
            for call in text_generator.generate_structured_text.await_args_list
        ]
        assert models.count("fast-model") == 6

    @pytest.mark.asyncio
    async def test_failed_parameter_keeps_original_text(self, sample_audit, business_data):
        generator = make_text_generator(parameter_response=TextGenerationError("overloaded"))
        enhanced = await AuditEnricher(generator).enrich(business_data, sample_audit)

        for key, original in sample_audit.parameters.items():
            assert enhanced.parameters[key].insights == original.insights
            assert enhanced.parameters[key].recommendations == original.recommendations
        assert enhanced.executive_summary == SAMPLE_NARRATIVE["executiveSummary"]

    @pytest.mark.asyncio
    async def test_failed_parameter_without_text_gets_defaults(self):
        parameters = {
            key: AuditParameter(
                name=PARAMETER_NAMES[key], weight=PARAMETER_WEIGHTS[key], score=40,
            )
            for key in ParameterKey
        }
        audit = AuditResult.build(parameters, BusinessInfo(name="X", url="https://x.test"))
        generator = make_text_generator(parameter_response="not json")

        enhanced = await AuditEnricher(generator).enrich(BusinessData.from_audit(audit), audit)

        param = enhanced.parameters[ParameterKey.DATA_INSIGHT]
        assert param.insights == ["Data & Insight Capability scored 40/100"]
        assert param.recommendations == ["Focus on improving this parameter"]

    @pytest.mark.asyncio
    async def test_undecodable_narrative_uses_placeholder(self, sample_audit, business_data):
        generator = make_text_generator(narrative="I cannot answer that.")
        enhanced = await AuditEnricher(generator).enrich(business_data, sample_audit)

        assert enhanced.executive_summary == PLACEHOLDER_NARRATIVE["executiveSummary"]
        assert enhanced.key_findings == PLACEHOLDER_NARRATIVE["keyFindings"]

    @pytest.mark.asyncio
    async def test_partial_narrative_gets_defaults(self, sample_audit, business_data):
        generator = make_text_generator(narrative={"executiveSummary": "Short.", "keyFindings": "oops"})
        enhanced = await AuditEnricher(generator).enrich(business_data, sample_audit)

        assert enhanced.executive_summary == "Short."
        assert enhanced.key_findings == []
        assert enhanced.action_plan.immediate == []

    @pytest.mark.asyncio
    async def test_unreachable_service_raises(self, sample_audit, business_data):
        generator = make_text_generator(narrative=TextGenerationError("Max retries exceeded"))
        with pytest.raises(EnrichmentUnavailable):
            await AuditEnricher(generator).enrich(business_data, sample_audit)

    @pytest.mark.asyncio
    async def test_timeout_raises(self, sample_audit, business_data):
        generator = make_text_generator(narrative=asyncio.TimeoutError())
        with pytest.raises(EnrichmentUnavailable):
            await AuditEnricher(generator).enrich(business_data, sample_audit)

    @pytest.mark.asyncio
    async def test_logs_usage_summary(self, sample_audit, business_data, text_generator, caplog):
        caplog.set_level(logging.INFO, logger="leadgauge.enrichment.analyzer")
        await AuditEnricher(text_generator).enrich(business_data, sample_audit)

        text_generator.get_usage_summary.assert_called_once_with()
        assert "(7 calls, 4000 tokens, $0.0240)" in caplog.text


class TestBusinessInsights:

    @pytest.mark.asyncio
    async def test_returns_generated_text(self, text_generator):
        text = await AuditEnricher(text_generator).generate_business_insights(
            "https://acme.test", {"totalScore": 67}
        )
        assert text == "Insightful prose."
        assert text_generator.generate_text.await_args.kwargs["max_tokens"] == 800

    @pytest.mark.asyncio
    async def test_falls_back_on_error(self, text_generator):
        text_generator.generate_text = AsyncMock(side_effect=TextGenerationError("down"))
        text = await AuditEnricher(text_generator).generate_business_insights(
            "https://acme.test", {}
        )
        assert text.startswith("Business insights analysis completed.")


class TestMaybeEnrich:

    @pytest.mark.asyncio
    async def test_no_credential_returns_none(self, sample_audit, business_data, offline_settings):
        assert create_enricher(offline_settings) is None
        assert await maybe_enrich(business_data, sample_audit, settings=offline_settings) is None

    @pytest.mark.asyncio
    async def test_service_failure_returns_none(self, sample_audit, business_data):
        generator = make_text_generator(narrative=TextGenerationError("down"))
        result = await maybe_enrich(
            business_data, sample_audit, enricher=AuditEnricher(generator)
        )
        assert result is None

    @pytest.mark.asyncio
    async def test_timeout_returns_none(self, sample_audit, business_data):
        generator = make_text_generator(narrative=asyncio.TimeoutError())
        result = await maybe_enrich(
            business_data, sample_audit, enricher=AuditEnricher(generator)
        )
        assert result is None

    @pytest.mark.asyncio
    async def test_success(self, sample_audit, business_data, text_generator):
        result = await maybe_enrich(
            business_data, sample_audit, enricher=AuditEnricher(text_generator)
        )
        assert result is not None
        assert result.base is sample_audit

    def test_create_enricher_with_credential(self):
        settings = Settings(_env_file=None, ANTHROPIC_API_KEY="sk-test")
        with patch("leadgauge.enrichment.client.anthropic.AsyncAnthropic"):
            enricher = create_enricher(settings)
        assert isinstance(enricher.generator, ClaudeClient)
        assert enricher.parameter_model == settings.CLAUDE_FAST_MODEL


class TestClaudeClient:

    def test_requires_api_key(self, monkeypatch):
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
        with pytest.raises(ValueError):
            ClaudeClient(api_key=None)

    @pytest.mark.asyncio
    async def test_structured_text_raises_after_retries(self):
        with patch("leadgauge.enrichment.client.anthropic.AsyncAnthropic"):
            client = ClaudeClient(api_key="sk-test", max_retries=1)
        client.generate = AsyncMock(return_value=GenerationResponse(
            content="",
            usage=TokenUsage(),
            model="claude-test",
            stop_reason="error",
            success=False,
            error="boom",
        ))

        with pytest.raises(TextGenerationError):
            await client.generate_structured_text("prompt", "{}")

    @pytest.mark.asyncio
    async def test_tracks_usage_across_calls(self):
        with patch("leadgauge.enrichment.client.anthropic.AsyncAnthropic"):
            client = ClaudeClient(api_key="sk-test")
        client.async_client.messages.create = AsyncMock(return_value=MagicMock(
            content=[MagicMock(text='{"insights": []}')],
            usage=MagicMock(input_tokens=1000, output_tokens=200),
            stop_reason="end_turn",
        ))

        assert await client.generate_structured_text("prompt", "{}") == '{"insights": []}'
        await client.generate_text("prompt")

        summary = client.get_usage_summary()
        assert summary["total_calls"] == 2
        assert summary["input_tokens"] == 2000
        assert summary["output_tokens"] == 400
        assert summary["total_tokens"] == 2400
        # $3/1M input, $15/1M output
        assert summary["estimated_cost"] == pytest.approx(0.012)
        assert client.get_total_cost() == pytest.approx(0.012)
