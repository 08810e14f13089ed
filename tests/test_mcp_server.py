"""Tests for MCP server tools and prompts.

The tool functions are exercised directly with a patched AppContext whose
flow talks to a mocked NewsAPI transport.
"""

from typing import Any
from unittest.mock import patch

import httpx
import pytest
from tech_news_bot.bot import build_flow
from tech_news_bot.config import AppConfig, NewsAPIConfig
from tech_news_bot.errors import UpstreamError
from tech_news_bot.mcp_server import AppContext, tech_news_bot, tech_news_prompt


def _make_ctx(payload: dict[str, Any]) -> AppContext:
    """Build an AppContext whose flow is served by a mock transport."""
    config = AppConfig(news=NewsAPIConfig(api_key="test-key"))
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=payload))
    return AppContext(config=config, flow=build_flow(config, transport=transport))


def _patch_ctx(ctx: AppContext) -> Any:
    """Patch _get_ctx() to return our test AppContext."""
    return patch("tech_news_bot.mcp_server._get_ctx", return_value=ctx)


@pytest.mark.asyncio
async def test_tool_returns_reply() -> None:
    payload = {
        "status": "ok",
        "articles": [{"title": "GPU news", "description": None, "source": {"name": "Wired"}, "url": "https://w/1"}],
    }
    with _patch_ctx(_make_ctx(payload)):
        reply = await tech_news_bot("GPUs")

    assert reply["intro"] == "Here are the latest tech news related to your query:"
    assert reply["news"][0]["summary"] == "No summary available."
    assert reply["news"][0]["source"] == "Wired"


@pytest.mark.asyncio
async def test_tool_omits_missing_source_and_url() -> None:
    payload = {"status": "ok", "articles": [{"title": "Bare story", "description": "Short."}]}
    with _patch_ctx(_make_ctx(payload)):
        reply = await tech_news_bot("GPUs")

    assert reply["news"] == [{"title": "Bare story", "summary": "Short."}]


@pytest.mark.asyncio
async def test_tool_propagates_upstream_error() -> None:
    with _patch_ctx(_make_ctx({"status": "error", "message": "nope"})), pytest.raises(UpstreamError):
        await tech_news_bot("GPUs")


def test_prompt_renders_query() -> None:
    text = tech_news_prompt("AI chips")
    assert 'You are "Techie,"' in text
    assert text.endswith("User query: AI chips")
