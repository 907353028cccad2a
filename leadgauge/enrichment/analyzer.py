"""
Audit Enrichment Analyzer

Layers a Claude-written narrative on top of a deterministic audit:
1. One audit-wide request for the executive narrative (JSON schema)
2. Six per-parameter requests for refreshed insights/recommendations
3. Merge: scores and weights untouched, text enriched where available

Decoding problems never fail the enrichment. A broken narrative falls back
to a placeholder, a broken parameter response falls back to the
deterministic insights. Only an unreachable service on the audit-wide call
raises, and callers then keep the plain AuditResult.
"""

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..audit.models import (
    ActionPlan,
    AuditParameter,
    AuditResult,
    EnhancedAuditResult,
    ParameterKey,
)
from ..utils.config import Settings, get_settings
from .client import ClaudeClient, TextGenerationError, TextGenerator
from .lenient_json import decode_lenient
from .prompts import (
    AUDIT_SCHEMA_HINT,
    AUDIT_SYSTEM_PROMPT,
    AUDIT_USER_PROMPT,
    INSIGHTS_SYSTEM_PROMPT,
    INSIGHTS_USER_PROMPT,
    PARAMETER_SCHEMA_HINT,
    PARAMETER_SYSTEM_PROMPT,
    PARAMETER_USER_PROMPT,
    PLACEHOLDER_NARRATIVE,
)

logger = logging.getLogger(__name__)


class EnrichmentUnavailable(Exception):
    """Raised when the text-generation service could not be reached."""


@dataclass
class BusinessData:
    """What we know about the business going into enrichment."""
    url: str
    name: Optional[str] = None
    industry: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_audit(cls, audit: AuditResult, name: Optional[str] = None) -> "BusinessData":
        info = audit.business_info
        return cls(
            url=info.url,
            name=name or info.name,
            industry=info.industry,
            description=info.description,
        )


def _string_list(value: Any) -> Optional[List[str]]:
    """Non-empty list of non-blank strings, else None."""
    if not isinstance(value, list):
        return None
    items = [str(v).strip() for v in value if isinstance(v, (str, int, float))]
    items = [v for v in items if v]
    return items or None


def _string(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


class AuditEnricher:
    """
    Enriches deterministic audits with Claude narrative.

    Usage:
        enricher = AuditEnricher(ClaudeClient(api_key="..."))
        enhanced = await enricher.enrich(business_data, audit_result)
    """

    AUDIT_TEMPERATURE = 0.7
    AUDIT_MAX_TOKENS = 2000
    PARAMETER_TEMPERATURE = 0.6
    PARAMETER_MAX_TOKENS = 500
    INSIGHTS_MAX_TOKENS = 800

    def __init__(
        self,
        generator: TextGenerator,
        parameter_model: Optional[str] = None,
    ):
        """
        Initialize enricher.

        Args:
            generator: Text-generation capability (usually a ClaudeClient)
            parameter_model: Cheaper model for the per-parameter requests
        """
        self.generator = generator
        self.parameter_model = parameter_model

    async def enrich(
        self,
        business_data: BusinessData,
        basic_result: AuditResult,
    ) -> EnhancedAuditResult:
        """
        Enrich an audit.

        Args:
            business_data: Business metadata for the prompt
            basic_result: Deterministic audit result

        Returns:
            EnhancedAuditResult with the same scores as basic_result

        Raises:
            EnrichmentUnavailable: if the audit-wide request could not be served
        """
        logger.info(f"Starting enhanced audit analysis for: {business_data.url}")

        narrative = await self._generate_narrative(business_data, basic_result)
        parameters = await self._enrich_parameters(business_data, basic_result)

        plan = narrative.get("actionPlan")
        plan = plan if isinstance(plan, dict) else {}

        result = EnhancedAuditResult(
            base=basic_result,
            parameters=parameters,
            executive_summary=_string(narrative.get("executiveSummary"))
            or "Analysis completed successfully.",
            key_findings=_string_list(narrative.get("keyFindings")) or [],
            priority_recommendations=_string_list(narrative.get("priorityRecommendations")) or [],
            competitive_analysis=_string(narrative.get("competitiveAnalysis")) or "",
            growth_opportunities=_string_list(narrative.get("growthOpportunities")) or [],
            risk_assessment=_string(narrative.get("riskAssessment")) or "",
            action_plan=ActionPlan(
                immediate=_string_list(plan.get("immediate")) or [],
                short_term=_string_list(plan.get("shortTerm")) or [],
                long_term=_string_list(plan.get("longTerm")) or [],
            ),
            industry_benchmarks=_string(narrative.get("industryBenchmarks")) or "",
            detailed_analysis=_string(narrative.get("detailedAnalysis")) or "",
        )

        usage = self.generator.get_usage_summary()
        logger.info(
            f"Enhanced audit analysis completed for: {business_data.url} "
            f"({usage['total_calls']} calls, {usage['total_tokens']} tokens, "
            f"${usage['estimated_cost']:.4f})"
        )
        return result

    # =========================================================================
    # AUDIT-WIDE NARRATIVE
    # =========================================================================

    def _build_audit_prompt(self, business_data: BusinessData, result: AuditResult) -> str:
        parameter_lines = "\n".join(
            f"- {param.name}: {param.score}/100 (Weight: {param.weight}%)"
            for param in result.parameters.values()
        )
        return AUDIT_USER_PROMPT.format(
            url=business_data.url,
            name=business_data.name or "Not provided",
            industry=business_data.industry or "Not specified",
            description=business_data.description or "Not provided",
            parameter_lines=parameter_lines,
            total_score=result.total_score,
            schema=AUDIT_SCHEMA_HINT,
        )

    async def _generate_narrative(
        self,
        business_data: BusinessData,
        result: AuditResult,
    ) -> Dict[str, Any]:
        try:
            raw = await self.generator.generate_structured_text(
                self._build_audit_prompt(business_data, result),
                AUDIT_SCHEMA_HINT,
                system=AUDIT_SYSTEM_PROMPT,
                max_tokens=self.AUDIT_MAX_TOKENS,
                temperature=self.AUDIT_TEMPERATURE,
            )
        except (TextGenerationError, asyncio.TimeoutError) as e:
            raise EnrichmentUnavailable(str(e)) from e

        logger.debug(f"Raw narrative response length: {len(raw)}")
        narrative, method = decode_lenient(raw, PLACEHOLDER_NARRATIVE)
        logger.info(f"Narrative decoded via {method}")
        return narrative

    # =========================================================================
    # PER-PARAMETER REFRESH
    # =========================================================================

    async def _enrich_parameters(
        self,
        business_data: BusinessData,
        result: AuditResult,
    ) -> Dict[ParameterKey, AuditParameter]:
        keys = list(result.parameters.keys())
        # Independent requests; one failing must not cancel its siblings.
        enriched = await asyncio.gather(*(
            self._enrich_parameter(key, result.parameters[key], business_data)
            for key in keys
        ))
        return dict(zip(keys, enriched))

    async def _enrich_parameter(
        self,
        key: ParameterKey,
        param: AuditParameter,
        business_data: BusinessData,
    ) -> AuditParameter:
        fallback = {
            "insights": list(param.insights) or [f"{param.name} scored {param.score}/100"],
            "recommendations": list(param.recommendations)
            or ["Focus on improving this parameter"],
        }

        prompt = PARAMETER_USER_PROMPT.format(
            name=param.name,
            score=param.score,
            url=business_data.url,
            industry=business_data.industry or "General",
            insights="\n".join(f"- {line}" for line in param.insights) or "- None recorded",
            schema=PARAMETER_SCHEMA_HINT,
        )

        try:
            raw = await self.generator.generate_structured_text(
                prompt,
                PARAMETER_SCHEMA_HINT,
                system=PARAMETER_SYSTEM_PROMPT,
                max_tokens=self.PARAMETER_MAX_TOKENS,
                temperature=self.PARAMETER_TEMPERATURE,
                model=self.parameter_model,
            )
            data, method = decode_lenient(raw, fallback)
            logger.debug(f"Parameter {key.value} decoded via {method}")
        except Exception as e:
            logger.warning(f"Error enhancing parameter {key.value}, keeping original: {e}")
            data = fallback

        return AuditParameter(
            name=param.name,
            weight=param.weight,
            score=param.score,
            insights=_string_list(data.get("insights")) or fallback["insights"],
            recommendations=_string_list(data.get("recommendations"))
            or fallback["recommendations"],
        )

    # =========================================================================
    # FREE-TEXT INSIGHTS
    # =========================================================================

    async def generate_business_insights(
        self,
        business_url: str,
        business_data: Dict[str, Any],
    ) -> str:
        """Strategic insights as prose. Never raises."""
        prompt = INSIGHTS_USER_PROMPT.format(
            url=business_url,
            business_data=json.dumps(business_data, indent=2, default=str),
        )
        try:
            text = await self.generator.generate_text(
                prompt,
                system=INSIGHTS_SYSTEM_PROMPT,
                max_tokens=self.INSIGHTS_MAX_TOKENS,
                temperature=self.AUDIT_TEMPERATURE,
            )
        except Exception as e:
            logger.error(f"Error generating business insights: {e}")
            text = ""

        return text.strip() or (
            "Business insights analysis completed. "
            "Review audit parameters for detailed recommendations."
        )


# =============================================================================
# FACTORY FUNCTIONS
# =============================================================================


def create_enricher(settings: Optional[Settings] = None) -> Optional[AuditEnricher]:
    """Build an enricher from settings, or None when no credential is set."""
    settings = settings or get_settings()
    if not settings.enrichment_enabled:
        return None

    client = ClaudeClient(
        api_key=settings.ANTHROPIC_API_KEY,
        model=settings.CLAUDE_MODEL,
        timeout=settings.ENRICHMENT_TIMEOUT,
        max_retries=settings.ENRICHMENT_MAX_RETRIES,
    )
    return AuditEnricher(client, parameter_model=settings.CLAUDE_FAST_MODEL)


async def maybe_enrich(
    business_data: BusinessData,
    basic_result: AuditResult,
    enricher: Optional[AuditEnricher] = None,
    settings: Optional[Settings] = None,
) -> Optional[EnhancedAuditResult]:
    """
    Enrich if possible.

    Returns None when no credential is configured or the enrichment failed,
    in which case the caller keeps basic_result unmodified.
    """
    enricher = enricher or create_enricher(settings)
    if enricher is None:
        logger.info("Claude API key not configured, using basic analysis")
        return None

    try:
        return await enricher.enrich(business_data, basic_result)
    except Exception as e:
        logger.error(f"AI analysis failed, falling back to basic analysis: {e}")
        return None
