"""News search and normalization for the tech news flow."""

from tech_news_bot.news.models import NewsItem, TechNewsBotInput, TechNewsBotOutput
from tech_news_bot.news.newsapi import NewsAPIClient

__all__ = ["NewsAPIClient", "NewsItem", "TechNewsBotInput", "TechNewsBotOutput"]
