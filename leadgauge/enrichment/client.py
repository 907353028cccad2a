"""
Claude API Client for Audit Enrichment

Provides the text-generation capability used by the enrichment pass,
including token tracking, retry logic and an explicit request timeout.
"""

import os
import asyncio
import logging
from typing import Any, Dict, Optional, Protocol
from dataclasses import dataclass

import anthropic

logger = logging.getLogger(__name__)


class TextGenerationError(Exception):
    """Raised when the text-generation service cannot produce a response."""


class TextGenerator(Protocol):
    """Anything that can turn a prompt into (ideally) structured text."""

    async def generate_structured_text(
        self,
        prompt: str,
        schema_hint: str,
        *,
        system: Optional[str] = None,
        max_tokens: int = 2000,
        temperature: float = 0.7,
        model: Optional[str] = None,
    ) -> str:
        ...

    async def generate_text(
        self,
        prompt: str,
        *,
        system: Optional[str] = None,
        max_tokens: int = 800,
        temperature: float = 0.7,
        model: Optional[str] = None,
    ) -> str:
        ...

    def get_usage_summary(self) -> Dict[str, Any]:
        """Calls, tokens and estimated cost so far."""
        ...


@dataclass
class TokenUsage:
    """Track token usage for cost calculation."""
    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens

    @property
    def estimated_cost(self) -> float:
        """Estimate cost based on Claude Sonnet 4 pricing."""
        # Sonnet 4 pricing: $3/1M input, $15/1M output
        input_cost = (self.input_tokens / 1_000_000) * 3.0
        output_cost = (self.output_tokens / 1_000_000) * 15.0
        return input_cost + output_cost


@dataclass
class GenerationResponse:
    """Response from one Claude call."""
    content: str
    usage: TokenUsage
    model: str
    stop_reason: str
    success: bool = True
    error: Optional[str] = None


class ClaudeClient:
    """
    Async Claude client implementing the TextGenerator protocol.

    Features:
    - Token usage tracking
    - Retry with exponential backoff
    - Explicit per-request timeout
    """

    DEFAULT_MODEL = "claude-sonnet-4-20250514"
    MAX_TOKENS = 2000
    TEMPERATURE = 0.7

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout: float = 30.0,
        max_retries: int = 2,
    ):
        """
        Initialize Claude client.

        Args:
            api_key: Anthropic API key (defaults to env var)
            model: Default model (defaults to Sonnet 4)
            timeout: Request timeout in seconds
            max_retries: Attempts per prompt before giving up
        """
        self.api_key = api_key or os.getenv("ANTHROPIC_API_KEY")
        if not self.api_key:
            raise ValueError("ANTHROPIC_API_KEY not provided")

        self.model = model or self.DEFAULT_MODEL
        self.max_retries = max(1, max_retries)
        # Retries are handled here so that backoff is logged per attempt.
        self.async_client = anthropic.AsyncAnthropic(
            api_key=self.api_key,
            timeout=timeout,
            max_retries=0,
        )

        # Track cumulative usage
        self.total_usage = TokenUsage()
        self.call_count = 0

    async def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        max_tokens: int = MAX_TOKENS,
        temperature: float = TEMPERATURE,
        model: Optional[str] = None,
    ) -> GenerationResponse:
        """
        Send a prompt to Claude.

        Args:
            prompt: User prompt
            system: System prompt
            max_tokens: Maximum output tokens
            temperature: Sampling temperature
            model: Model override for this call

        Returns:
            GenerationResponse with content and usage
        """
        model = model or self.model
        try:
            kwargs: Dict[str, Any] = {
                "model": model,
                "max_tokens": max_tokens,
                "temperature": temperature,
                "messages": [{"role": "user", "content": prompt}],
            }
            if system:
                kwargs["system"] = system

            response = await self.async_client.messages.create(**kwargs)

            content = ""
            for block in response.content:
                if hasattr(block, "text"):
                    content += block.text

            usage = TokenUsage(
                input_tokens=response.usage.input_tokens,
                output_tokens=response.usage.output_tokens,
            )
            self.total_usage.input_tokens += usage.input_tokens
            self.total_usage.output_tokens += usage.output_tokens
            self.call_count += 1

            logger.info(
                f"Claude call ({model}): {usage.input_tokens} in, "
                f"{usage.output_tokens} out, ${usage.estimated_cost:.4f}"
            )

            return GenerationResponse(
                content=content,
                usage=usage,
                model=model,
                stop_reason=response.stop_reason or "",
            )

        except anthropic.APIError as e:
            logger.error(f"Claude API error: {e}")
            return GenerationResponse(
                content="",
                usage=TokenUsage(),
                model=model,
                stop_reason="error",
                success=False,
                error=str(e),
            )

    async def generate_with_retry(
        self,
        prompt: str,
        system: Optional[str] = None,
        **kwargs,
    ) -> GenerationResponse:
        """
        Generate with retry logic for transient failures.

        Args:
            prompt: User prompt
            system: System prompt
            **kwargs: Additional arguments for generate()

        Returns:
            GenerationResponse
        """
        last_error = None

        for attempt in range(self.max_retries):
            response = await self.generate(prompt, system, **kwargs)

            if response.success:
                return response

            last_error = response.error
            if attempt + 1 == self.max_retries:
                break

            wait_time = 2 ** attempt  # Exponential backoff
            logger.warning(
                f"Claude call failed (attempt {attempt + 1}/{self.max_retries}), "
                f"retrying in {wait_time}s: {response.error}"
            )
            await asyncio.sleep(wait_time)

        return GenerationResponse(
            content="",
            usage=TokenUsage(),
            model=kwargs.get("model") or self.model,
            stop_reason="max_retries",
            success=False,
            error=f"Max retries exceeded. Last error: {last_error}",
        )

    async def generate_structured_text(
        self,
        prompt: str,
        schema_hint: str,
        *,
        system: Optional[str] = None,
        max_tokens: int = MAX_TOKENS,
        temperature: float = TEMPERATURE,
        model: Optional[str] = None,
    ) -> str:
        """
        Ask for a JSON response shaped like schema_hint.

        Raises:
            TextGenerationError: if every attempt failed
        """
        system_prompt = (system or "").strip()
        system_prompt += (
            "\n\nRespond with a single JSON object matching this structure, "
            "without markdown formatting or extra text:\n" + schema_hint
        )

        response = await self.generate_with_retry(
            prompt,
            system_prompt.strip(),
            max_tokens=max_tokens,
            temperature=temperature,
            model=model,
        )
        if not response.success:
            raise TextGenerationError(response.error or "Text generation failed")
        return response.content

    async def generate_text(
        self,
        prompt: str,
        *,
        system: Optional[str] = None,
        max_tokens: int = 800,
        temperature: float = TEMPERATURE,
        model: Optional[str] = None,
    ) -> str:
        """Free-form text generation. Raises TextGenerationError on failure."""
        response = await self.generate_with_retry(
            prompt,
            system,
            max_tokens=max_tokens,
            temperature=temperature,
            model=model,
        )
        if not response.success:
            raise TextGenerationError(response.error or "Text generation failed")
        return response.content

    def get_total_cost(self) -> float:
        """Get total cost for all calls in this session."""
        return self.total_usage.estimated_cost

    def get_usage_summary(self) -> Dict[str, Any]:
        """Get summary of all API usage."""
        return {
            "total_calls": self.call_count,
            "input_tokens": self.total_usage.input_tokens,
            "output_tokens": self.total_usage.output_tokens,
            "total_tokens": self.total_usage.total_tokens,
            "estimated_cost": self.total_usage.estimated_cost,
        }
