"""NewsAPI ``/v2/everything`` client.

One :class:`NewsAPIClient.search` call issues exactly one GET request through a
short-lived ``httpx.AsyncClient``. Nothing is cached or retried; failures are
raised as :mod:`tech_news_bot.errors` exceptions.
"""

import logging
from typing import Any

import httpx

from tech_news_bot.config import NewsAPIConfig
from tech_news_bot.errors import ConfigurationError, NetworkError, UpstreamError

logger = logging.getLogger(__name__)

LANGUAGE = "en"
SORT_BY = "relevancy"


def build_params(query: str, api_key: str) -> dict[str, str]:
    """Return the query parameters for an ``everything`` search."""
    return {"q": query, "language": LANGUAGE, "sortBy": SORT_BY, "apiKey": api_key}


def build_url(config: NewsAPIConfig, query: str) -> httpx.URL:
    """Build the full, URL-encoded request URL for ``query``.

    Raises :class:`ConfigurationError` if no API key is configured.
    """
    if not config.api_key:
        msg = f"{config.api_key_env} is not configured"
        raise ConfigurationError(msg)
    return httpx.URL(config.base_url, params=build_params(query, config.api_key))


def _upstream_error(payload: Any, status_code: int) -> UpstreamError:
    """Build an :class:`UpstreamError` from a NewsAPI error payload."""
    code = message = None
    if isinstance(payload, dict):
        code = payload.get("code")
        message = payload.get("message")
    detail = f" ({code}: {message})" if code or message else ""
    return UpstreamError(
        f"Failed to fetch news: HTTP {status_code}{detail}",
        status_code=status_code,
        code=code if isinstance(code, str) else None,
    )


class NewsAPIClient:
    """Search client for the NewsAPI ``everything`` endpoint.

    ``transport`` is passed straight to ``httpx.AsyncClient``; tests supply an
    ``httpx.MockTransport`` there.
    """

    def __init__(self, config: NewsAPIConfig, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._config = config
        self._transport = transport

    async def search(self, query: str) -> list[Any]:
        """Return the raw ``articles`` list for ``query``, in upstream order."""
        url = build_url(self._config, query)

        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                response = await client.get(url)
            except httpx.DecodingError as exc:
                msg = f"News API returned a body that could not be decoded: {type(exc).__name__}"
                raise UpstreamError(msg) from exc
            except httpx.TransportError as exc:
                msg = f"Could not reach news API at {self._config.base_url}: {type(exc).__name__}"
                raise NetworkError(msg) from exc
            except httpx.RequestError as exc:
                msg = f"News API request failed: {type(exc).__name__}"
                raise UpstreamError(msg) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            msg = f"News API returned an undecodable body (HTTP {response.status_code})"
            raise UpstreamError(msg, status_code=response.status_code) from exc

        if not response.is_success or not isinstance(payload, dict) or payload.get("status") != "ok":
            logger.warning("News API rejected query %r with HTTP %d", query, response.status_code)
            raise _upstream_error(payload, response.status_code)

        articles = payload.get("articles")
        if not isinstance(articles, list):
            msg = "News API payload has no articles list"
            raise UpstreamError(msg, status_code=response.status_code)
        logger.debug("News API returned %d articles for %r", len(articles), query)
        return articles
