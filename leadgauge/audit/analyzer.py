"""
Website Audit Analyzer

Orchestrates one audit:
1. Normalize the URL and fetch the homepage
2. Parse the markup into a queryable document
3. Infer business info (name, description, industry)
4. Run the six parameter scorers
5. Compute the weighted total

Any failure along the way is absorbed: the caller receives a synthetic
fallback result of the same shape instead of an exception. Only the logs
tell the two apart.
"""

import logging
import random
from typing import Optional

import httpx

from .business_info import extract_business_info
from .extractor import parse_document
from .fallback import generate_fallback_result
from .models import AuditResult
from .scorers import score_all

logger = logging.getLogger(__name__)


BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)


class PageFetchError(Exception):
    """Raised when a page cannot be fetched or returns an error status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def normalize_url(url: str) -> str:
    """Prefix https:// when the URL carries no scheme."""
    url = url.strip()
    if url.lower().startswith(("http://", "https://")):
        return url
    return f"https://{url}"


# =============================================================================
# WEBSITE FETCHER
# =============================================================================


class WebsiteFetcher:
    """Fetches raw HTML with a realistic browser user agent."""

    def __init__(
        self,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout
        self.client = httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
            headers={
                "User-Agent": BROWSER_USER_AGENT,
                "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
                "Accept-Language": "en-US,en;q=0.9",
            },
        )

    async def __aenter__(self) -> "WebsiteFetcher":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def fetch_html(self, url: str) -> str:
        """
        Fetch a page and return its HTML.

        Raises:
            PageFetchError: on transport errors, timeouts or 4xx/5xx status
        """
        try:
            response = await self.client.get(url)
        except httpx.TimeoutException as e:
            raise PageFetchError(f"Timed out fetching {url}: {e}") from e
        except httpx.RequestError as e:
            raise PageFetchError(f"Request error fetching {url}: {e}") from e

        if response.status_code >= 400:
            raise PageFetchError(
                f"Failed to fetch website: {response.status_code}",
                status_code=response.status_code,
            )

        return response.text


# =============================================================================
# WEBSITE AUDITOR
# =============================================================================


class WebsiteAuditor:
    """
    Scores a business website across the six weighted parameters.

    Each call to analyze() is independent: it opens its own HTTP client and
    shares no state with concurrent audits.
    """

    def __init__(
        self,
        timeout: float = 15.0,
        rng: Optional[random.Random] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize auditor.

        Args:
            timeout: Page fetch timeout in seconds
            rng: Random source for fallback results
            transport: Optional httpx transport (used by tests)
        """
        self.timeout = timeout
        self.rng = rng or random.Random()
        self.transport = transport

    async def analyze(self, url: str) -> AuditResult:
        """
        Audit a website.

        Args:
            url: Business URL, with or without scheme

        Returns:
            AuditResult (synthetic fallback if the site could not be analyzed)
        """
        normalized_url = normalize_url(url)
        logger.info(f"Starting website analysis for: {normalized_url}")

        try:
            async with WebsiteFetcher(self.timeout, self.transport) as fetcher:
                html = await fetcher.fetch_html(normalized_url)

            doc = parse_document(html, normalized_url)
            business_info = extract_business_info(doc, normalized_url)
            parameters = score_all(doc, normalized_url)
            result = AuditResult.build(parameters, business_info)

        except Exception as e:
            logger.warning(
                f"Website analysis failed for {normalized_url}, "
                f"using synthetic fallback result: {e}"
            )
            return generate_fallback_result(url, self.rng)

        logger.info(
            f"Website analysis complete for {normalized_url}: "
            f"total score {result.total_score}/100"
        )
        return result


# =============================================================================
# FACTORY FUNCTION
# =============================================================================


async def analyze_website(
    url: str,
    timeout: float = 15.0,
    rng: Optional[random.Random] = None,
) -> AuditResult:
    """
    Convenience function to audit a website.

    Args:
        url: Business URL
        timeout: Page fetch timeout in seconds
        rng: Random source for fallback results

    Returns:
        AuditResult
    """
    auditor = WebsiteAuditor(timeout=timeout, rng=rng)
    return await auditor.analyze(url)
