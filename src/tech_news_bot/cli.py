"""CLI entry point for tech-news-bot."""

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer

from tech_news_bot import __version__
from tech_news_bot.bot import tech_news_bot
from tech_news_bot.config import AppConfig, config_from_env, load_config
from tech_news_bot.errors import TechNewsError
from tech_news_bot.news.models import TechNewsBotOutput

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tech-news-bot {__version__}")
        raise typer.Exit()


app = typer.Typer(name="tech-news-bot", help="Tech News Bot: the latest tech news for any query")


@app.callback()
def main(
    version: Annotated[
        bool, typer.Option("--version", "-V", help="Show version and exit", callback=_version_callback, is_eager=True)
    ] = False,
) -> None:
    """Tech News Bot: the latest tech news for any query."""


DEFAULT_CONFIG = Path("config.yaml")

ConfigOption = Annotated[Path, typer.Option("--config", "-c", help="Path to config.yaml")]


def _load_config(config_path: Path) -> AppConfig:
    """Load config from file, falling back to environment-only defaults."""
    if config_path.exists():
        return load_config(config_path)
    logger.debug("Config file %s not found, using defaults", config_path)
    return config_from_env()


def _setup_logging(cfg: AppConfig) -> None:
    """Configure logging based on monitoring config."""
    from tech_news_bot.monitoring.logging import setup_logging, setup_structured_logging  # noqa: PLC0415

    level = cfg.monitoring.log_level.upper()
    if cfg.monitoring.structured_logging:
        log_file = Path(cfg.monitoring.log_file) if cfg.monitoring.log_file else None
        setup_structured_logging(log_file=log_file, level=level)
    else:
        setup_logging(level=level)


def _format_reply(reply: TechNewsBotOutput) -> str:
    lines = [reply.intro]
    for i, item in enumerate(reply.news, 1):
        lines.append("")
        lines.append(f"{i}. {item.title}")
        lines.append(f"   {item.summary}")
        if item.source:
            lines.append(f"   Source: {item.source}")
        if item.url:
            lines.append(f"   {item.url}")
    return "\n".join(lines)


@app.command()
def ask(
    query: Annotated[str, typer.Argument(help="Your question about tech news")],
    config: ConfigOption = DEFAULT_CONFIG,
    as_json: Annotated[bool, typer.Option("--json", help="Print the reply as JSON")] = False,
) -> None:
    """Ask for the latest tech news about QUERY."""
    cfg = _load_config(config)
    _setup_logging(cfg)

    try:
        reply = asyncio.run(tech_news_bot({"query": query}, config=cfg))
    except TechNewsError as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(code=1) from exc

    typer.echo(reply.model_dump_json(indent=2, exclude_none=True) if as_json else _format_reply(reply))


@app.command()
def mcp(config: ConfigOption = DEFAULT_CONFIG) -> None:
    """Run the MCP server (stdio transport) for AI agent integration."""
    from tech_news_bot.mcp_server import configure  # noqa: PLC0415
    from tech_news_bot.mcp_server import mcp as mcp_server  # noqa: PLC0415

    configure(config_path=config)
    mcp_server.run()
