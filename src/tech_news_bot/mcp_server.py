"""MCP server exposing the tech news flow as a tool and the Techie prompt."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from tech_news_bot.bot import build_flow
from tech_news_bot.config import AppConfig, config_from_env, load_config
from tech_news_bot.flow import Flow
from tech_news_bot.news.models import TechNewsBotInput, TechNewsBotOutput
from tech_news_bot.prompts import TECH_NEWS_PROMPT

logger = logging.getLogger(__name__)

# Module-level config path; override via configure() before calling mcp.run().
_config_path: Path = Path("config.yaml")


@dataclass
class AppContext:
    """Shared state for all MCP tools."""

    config: AppConfig
    flow: Flow[TechNewsBotInput, TechNewsBotOutput]


@asynccontextmanager
async def _app_lifespan(_server: FastMCP) -> AsyncIterator[AppContext]:
    """Load config and build the flow on startup."""
    cfg = load_config(_config_path) if _config_path.exists() else config_from_env()
    if not cfg.news.api_key:
        logger.warning("%s not set; tech_news_bot tool calls will fail", cfg.news.api_key_env)
    yield AppContext(config=cfg, flow=build_flow(cfg))


mcp = FastMCP("tech-news-bot", lifespan=_app_lifespan)


def configure(config_path: Path) -> None:
    """Set the config path before running the server."""
    global _config_path  # noqa: PLW0603
    _config_path = config_path


def _get_ctx() -> AppContext:
    """Retrieve the shared AppContext from the MCP lifespan."""
    ctx: AppContext = mcp.get_context().request_context.lifespan_context
    return ctx


@mcp.tool()
async def tech_news_bot(query: str) -> dict[str, Any]:
    """Get the latest tech news articles related to a question.

    Returns a friendly intro sentence and up to five news items, each with a
    title, summary, source name and article URL.
    """
    ctx = _get_ctx()
    reply = await ctx.flow.run({"query": query})
    return reply.model_dump(exclude_none=True)


@mcp.prompt()
def tech_news_prompt(query: str) -> str:
    """Instructions for answering a tech news question as "Techie"."""
    return TECH_NEWS_PROMPT.render(TechNewsBotInput(query=query))
