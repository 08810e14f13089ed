"""The tech news flow: query in, structured reply out."""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from tech_news_bot.config import AppConfig
from tech_news_bot.flow import Flow
from tech_news_bot.news.models import TechNewsBotInput, TechNewsBotOutput
from tech_news_bot.news.newsapi import NewsAPIClient
from tech_news_bot.news.normalize import build_reply, select_articles

logger = logging.getLogger(__name__)

FLOW_NAME = "techNewsBotFlow"


def build_flow(
    config: AppConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Flow[TechNewsBotInput, TechNewsBotOutput]:
    """Create the tech news flow bound to ``config``."""
    client = NewsAPIClient(config.news, transport=transport)

    async def handler(data: TechNewsBotInput) -> TechNewsBotOutput:
        articles = await client.search(data.query)
        reply = build_reply(select_articles(articles))
        logger.info("Answered query %r with %d news items", data.query, len(reply.news))
        return reply

    return Flow(FLOW_NAME, input_model=TechNewsBotInput, output_model=TechNewsBotOutput, handler=handler)


async def tech_news_bot(
    raw: Mapping[str, Any] | TechNewsBotInput,
    *,
    config: AppConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TechNewsBotOutput:
    """Answer a ``{"query": ...}`` request with the latest matching tech news."""
    return await build_flow(config, transport=transport).run(raw)
