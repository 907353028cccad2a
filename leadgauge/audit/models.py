"""
Audit Data Models

Defines the types produced by the audit scoring engine:
- Fixed parameter keys, display names and weights
- AuditParameter / AuditResult (deterministic pass)
- EnhancedAuditResult (deterministic pass + Claude narrative)

The ``to_dict`` methods emit the persistence shape. Field names there are
consumed verbatim by report rendering and export, so they stay camelCase.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)


# =============================================================================
# PARAMETER CONSTANTS
# =============================================================================


class ParameterKey(str, Enum):
    """The six scored business-health parameters."""
    DIGITAL_PRESENCE = "digitalPresence"
    MARKET_VISIBILITY = "marketVisibility"
    BUSINESS_OPERATIONS = "businessOperations"
    COMPETITIVE_POSITIONING = "competitivePositioning"
    DATA_INSIGHT = "dataInsight"
    COMPLIANCE = "compliance"


PARAMETER_WEIGHTS: Mapping[ParameterKey, int] = MappingProxyType({
    ParameterKey.DIGITAL_PRESENCE: 30,
    ParameterKey.MARKET_VISIBILITY: 25,
    ParameterKey.BUSINESS_OPERATIONS: 20,
    ParameterKey.COMPETITIVE_POSITIONING: 15,
    ParameterKey.DATA_INSIGHT: 10,
    ParameterKey.COMPLIANCE: 10,
})

PARAMETER_NAMES: Mapping[ParameterKey, str] = MappingProxyType({
    ParameterKey.DIGITAL_PRESENCE: "Website & Digital Presence",
    ParameterKey.MARKET_VISIBILITY: "Market Visibility & Reputation",
    ParameterKey.BUSINESS_OPERATIONS: "Business Operations & Scalability",
    ParameterKey.COMPETITIVE_POSITIONING: "Competitive Positioning",
    ParameterKey.DATA_INSIGHT: "Data & Insight Capability",
    ParameterKey.COMPLIANCE: "Compliance & Risk Management",
})

MAX_SCORE = 100


def _require_mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise TypeError(f"{what} must be an object, got {type(value).__name__}")
    return value


# =============================================================================
# DETERMINISTIC RESULT
# =============================================================================


@dataclass(frozen=True)
class AuditParameter:
    """Score for one business parameter."""
    name: str
    weight: int
    score: int
    insights: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "weight": self.weight,
            "score": self.score,
            "insights": list(self.insights),
            "recommendations": list(self.recommendations),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuditParameter":
        data = _require_mapping(data, "parameter")
        return cls(
            name=data["name"],
            weight=int(data["weight"]),
            score=int(data["score"]),
            insights=list(data.get("insights") or []),
            recommendations=list(data.get("recommendations") or []),
        )


@dataclass(frozen=True)
class BusinessInfo:
    """Basic facts inferred about the audited business."""
    name: str
    url: str
    industry: Optional[str] = None
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name, "url": self.url}
        if self.industry is not None:
            data["industry"] = self.industry
        if self.description is not None:
            data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BusinessInfo":
        data = _require_mapping(data, "businessInfo")
        return cls(
            name=data.get("name", ""),
            url=data.get("url", ""),
            industry=data.get("industry"),
            description=data.get("description"),
        )


def compute_total_score(parameters: Mapping[ParameterKey, AuditParameter]) -> int:
    """
    Weighted composite score.

    round(sum(score * weight / 100)), rounding halves up so the
    result matches the figures users have already been shown.
    """
    weighted = sum(p.score * p.weight for p in parameters.values())
    return (weighted + 50) // 100


@dataclass(frozen=True)
class AuditResult:
    """Snapshot of one deterministic audit run."""
    total_score: int
    parameters: Mapping[ParameterKey, AuditParameter]
    business_info: BusinessInfo

    @classmethod
    def build(
        cls,
        parameters: Mapping[ParameterKey, AuditParameter],
        business_info: BusinessInfo,
    ) -> "AuditResult":
        """Assemble a result, deriving the total from the parameters."""
        ordered = {key: parameters[key] for key in ParameterKey}
        return cls(
            total_score=compute_total_score(ordered),
            parameters=MappingProxyType(ordered),
            business_info=business_info,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalScore": self.total_score,
            "parameters": {
                key.value: param.to_dict() for key, param in self.parameters.items()
            },
            "businessInfo": self.business_info.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuditResult":
        """
        Rebuild a result from its persisted snapshot.

        The total is always recomputed from the parameters; a stored
        totalScore that disagrees is logged and discarded.

        Raises:
            KeyError: a parameter is missing
            TypeError: the snapshot or one of its sections is not an object
            ValueError: a weight or score is not an integer
        """
        data = _require_mapping(data, "audit snapshot")
        raw_params = _require_mapping(data.get("parameters") or {}, "parameters")
        parameters = {
            key: AuditParameter.from_dict(raw_params[key.value])
            for key in ParameterKey
        }
        result = cls.build(
            parameters,
            BusinessInfo.from_dict(data.get("businessInfo") or {}),
        )

        stored_total = data.get("totalScore")
        if stored_total is not None and stored_total != result.total_score:
            logger.warning(
                f"Snapshot totalScore {stored_total!r} does not match its parameters, "
                f"using {result.total_score}"
            )
        return result


# =============================================================================
# ENHANCED RESULT
# =============================================================================


@dataclass(frozen=True)
class ActionPlan:
    """Three-horizon action plan."""
    immediate: List[str] = field(default_factory=list)
    short_term: List[str] = field(default_factory=list)
    long_term: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "immediate": list(self.immediate),
            "shortTerm": list(self.short_term),
            "longTerm": list(self.long_term),
        }


@dataclass(frozen=True)
class EnhancedAuditResult:
    """
    Deterministic audit plus Claude-generated narrative.

    Wraps the original AuditResult. Scores and weights always come from
    the wrapped result; only insights, recommendations and narrative text
    are enriched.
    """
    base: AuditResult
    parameters: Mapping[ParameterKey, AuditParameter]
    executive_summary: str = ""
    key_findings: List[str] = field(default_factory=list)
    priority_recommendations: List[str] = field(default_factory=list)
    competitive_analysis: str = ""
    growth_opportunities: List[str] = field(default_factory=list)
    risk_assessment: str = ""
    action_plan: ActionPlan = field(default_factory=ActionPlan)
    industry_benchmarks: str = ""
    detailed_analysis: str = ""

    def __post_init__(self):
        # Enriched parameters must carry the deterministic score and weight.
        merged = {}
        for key, original in self.base.parameters.items():
            enriched = self.parameters.get(key, original)
            merged[key] = replace(
                enriched,
                name=original.name,
                weight=original.weight,
                score=original.score,
            )
        object.__setattr__(self, "parameters", MappingProxyType(merged))

    @property
    def total_score(self) -> int:
        return self.base.total_score

    @property
    def business_info(self) -> BusinessInfo:
        return self.base.business_info

    def narrative_dict(self) -> Dict[str, Any]:
        """Narrative fields only, keyed as stored in report data."""
        return {
            "executiveSummary": self.executive_summary,
            "keyFindings": list(self.key_findings),
            "priorityRecommendations": list(self.priority_recommendations),
            "competitiveAnalysis": self.competitive_analysis,
            "growthOpportunities": list(self.growth_opportunities),
            "riskAssessment": self.risk_assessment,
            "actionPlan": self.action_plan.to_dict(),
            "industryBenchmarks": self.industry_benchmarks,
            "detailedAnalysis": self.detailed_analysis,
        }

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "totalScore": self.total_score,
            "parameters": {
                key.value: param.to_dict() for key, param in self.parameters.items()
            },
            "businessInfo": self.business_info.to_dict(),
        }
        data.update(self.narrative_dict())
        return data
