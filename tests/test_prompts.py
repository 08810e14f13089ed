"""Tests for the Techie prompt definition."""

from tech_news_bot.news.models import TechNewsBotInput, TechNewsBotOutput
from tech_news_bot.prompts import TECH_NEWS_PROMPT


def test_prompt_declares_models() -> None:
    assert TECH_NEWS_PROMPT.name == "techNewsBotPrompt"
    assert TECH_NEWS_PROMPT.input_model is TechNewsBotInput
    assert TECH_NEWS_PROMPT.output_model is TechNewsBotOutput


def test_render_substitutes_query_once() -> None:
    text = TECH_NEWS_PROMPT.render(TechNewsBotInput(query="foldable phones"))
    assert text.count("foldable phones") == 1
    assert "$query" not in text


def test_render_leaves_dollar_signs_in_query_alone() -> None:
    text = TECH_NEWS_PROMPT.render(TechNewsBotInput(query="$5 chips"))
    assert text.endswith("User query: $5 chips")
