"""
Audit Enrichment Package

Optional Claude-written narrative on top of a deterministic audit:
- ClaudeClient: async Anthropic client with retries and token tracking
- decode_lenient: JSON decoding that tolerates fences and preamble
- AuditEnricher: audit-wide narrative plus per-parameter refresh

Scores are never changed by enrichment.
"""

from .client import (
    ClaudeClient,
    GenerationResponse,
    TextGenerationError,
    TextGenerator,
    TokenUsage,
)
from .lenient_json import clean_model_output, decode_lenient
from .analyzer import (
    AuditEnricher,
    BusinessData,
    EnrichmentUnavailable,
    create_enricher,
    maybe_enrich,
)

__all__ = [
    "ClaudeClient",
    "GenerationResponse",
    "TextGenerationError",
    "TextGenerator",
    "TokenUsage",
    "clean_model_output",
    "decode_lenient",
    "AuditEnricher",
    "BusinessData",
    "EnrichmentUnavailable",
    "create_enricher",
    "maybe_enrich",
]
