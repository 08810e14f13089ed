"""Map NewsAPI article payloads onto the reply models.

Everything here is pure: no I/O, no configuration.
"""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from tech_news_bot.errors import UpstreamError
from tech_news_bot.news.models import MAX_NEWS_ITEMS, NewsItem, TechNewsBotOutput

DEFAULT_INTRO = "Here are the latest tech news related to your query:"
MISSING_SUMMARY = "No summary available."


def _optional_str(value: Any) -> str | None:
    """Return ``value`` when it is a non-empty string, else None."""
    if isinstance(value, str) and value:
        return value
    return None


def normalize_article(article: Any) -> NewsItem:
    """Convert one upstream article into a :class:`NewsItem`.

    Raises :class:`UpstreamError` when the article is not shaped like a NewsAPI article.
    """
    if not isinstance(article, dict):
        msg = f"Unexpected article payload of type {type(article).__name__}"
        raise UpstreamError(msg)

    source = article.get("source")
    source_name = source.get("name") if isinstance(source, dict) else None

    try:
        return NewsItem(
            title=article.get("title"),
            summary=_optional_str(article.get("description")) or MISSING_SUMMARY,
            source=_optional_str(source_name),
            url=_optional_str(article.get("url")),
        )
    except PydanticValidationError as exc:
        msg = f"Unexpected article shape: {exc.error_count()} invalid field(s)"
        raise UpstreamError(msg) from exc


def select_articles(articles: list[Any], *, limit: int = MAX_NEWS_ITEMS) -> list[NewsItem]:
    """Normalize the first ``limit`` articles, keeping upstream order."""
    return [normalize_article(article) for article in articles[:limit]]


def build_reply(items: list[NewsItem]) -> TechNewsBotOutput:
    """Wrap normalized items with the fixed intro sentence."""
    return TechNewsBotOutput(intro=DEFAULT_INTRO, news=items)
