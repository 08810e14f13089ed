"""The "Techie" instruction prompt for LLM-driven clients.

The deterministic flow in :mod:`tech_news_bot.bot` never calls an LLM. This
prompt is published (via the MCP server) for clients that want a model to
search and write the reply itself, using the same input and output schemas.
"""

from dataclasses import dataclass
from string import Template

from pydantic import BaseModel

from tech_news_bot.news.models import TechNewsBotInput, TechNewsBotOutput

TECHIE_TEMPLATE = Template(
    """\
You are "Techie," a friendly and knowledgeable AI chatbot expert on the latest technology news.
Your role is to provide users with concise and accurate updates on what's happening in the tech world.
Based on the user's query, search for articles/news on Google and provide a list of items.
For each news item, include the title, a brief summary, the source name, and the direct URL to the article.
If the direct URL is not available, provide a Google search URL for the article title.
At the bottom of each news item, clearly mention the source where you referred the information from.
Ensure the URLs are real and functional.
Start with a friendly introductory sentence.

User query: $query"""
)


@dataclass(frozen=True)
class PromptDefinition:
    """A named prompt template with its declared input and output models."""

    name: str
    template: Template
    input_model: type[BaseModel]
    output_model: type[BaseModel]

    def render(self, data: BaseModel) -> str:
        """Substitute the validated input's fields into the template."""
        return self.template.safe_substitute(data.model_dump())


TECH_NEWS_PROMPT = PromptDefinition(
    name="techNewsBotPrompt",
    template=TECHIE_TEMPLATE,
    input_model=TechNewsBotInput,
    output_model=TechNewsBotOutput,
)
