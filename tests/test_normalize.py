"""Tests for mapping NewsAPI articles onto news items."""

from typing import Any

import pytest
from tech_news_bot.errors import UpstreamError
from tech_news_bot.news.normalize import (
    DEFAULT_INTRO,
    MISSING_SUMMARY,
    build_reply,
    normalize_article,
    select_articles,
)


def _article(n: int, **overrides: Any) -> dict[str, Any]:
    article: dict[str, Any] = {
        "source": {"id": None, "name": f"Source {n}"},
        "author": "Jane Doe",
        "title": f"Headline {n}",
        "description": f"Description {n}",
        "url": f"https://example.com/{n}",
        "publishedAt": "2026-10-16T12:00:00Z",
    }
    article.update(overrides)
    return article


# ---------------------------------------------------------------------------
# normalize_article
# ---------------------------------------------------------------------------


def test_normalize_copies_fields() -> None:
    item = normalize_article(_article(1))
    assert item.title == "Headline 1"
    assert item.summary == "Description 1"
    assert item.source == "Source 1"
    assert item.url == "https://example.com/1"


@pytest.mark.parametrize("description", [None, ""])
def test_normalize_missing_description_uses_placeholder(description: str | None) -> None:
    item = normalize_article(_article(1, description=description))
    assert item.summary == MISSING_SUMMARY


def test_normalize_absent_description_uses_placeholder() -> None:
    article = _article(1)
    del article["description"]
    assert normalize_article(article).summary == "No summary available."


def test_normalize_title_is_verbatim() -> None:
    item = normalize_article(_article(1, title="  Chips & <Things>  "))
    assert item.title == "  Chips & <Things>  "


def test_normalize_without_source_or_url() -> None:
    article = _article(1, source=None)
    del article["url"]
    item = normalize_article(article)
    assert item.source is None
    assert item.url is None


def test_normalize_rejects_missing_title() -> None:
    article = _article(1)
    del article["title"]
    with pytest.raises(UpstreamError):
        normalize_article(article)


def test_normalize_rejects_non_dict() -> None:
    with pytest.raises(UpstreamError, match="list"):
        normalize_article(["not", "an", "article"])


# ---------------------------------------------------------------------------
# select_articles / build_reply
# ---------------------------------------------------------------------------


def test_select_truncates_to_five_in_order() -> None:
    items = select_articles([_article(n) for n in range(8)])
    assert [i.title for i in items] == [f"Headline {n}" for n in range(5)]


def test_select_keeps_fewer_than_five() -> None:
    assert len(select_articles([_article(1), _article(2)])) == 2


def test_select_ignores_malformed_articles_past_the_cap() -> None:
    articles = [_article(n) for n in range(5)] + [None]
    assert len(select_articles(articles)) == 5


def test_build_reply_uses_fixed_intro() -> None:
    assert build_reply([]).intro == DEFAULT_INTRO
    assert build_reply(select_articles([_article(1)])).intro == DEFAULT_INTRO
