"""Data models for the tech news flow input and reply."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr

MAX_NEWS_ITEMS = 5


class TechNewsBotInput(BaseModel):
    """The user's query about tech news."""

    model_config = ConfigDict(frozen=True)

    query: StrictStr = Field(description="The user's question about tech news.")


class NewsItem(BaseModel):
    """A single normalized news article."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="The headline of the news article.")
    summary: str = Field(min_length=1, description="A brief summary of the news article.")
    source: str | None = Field(default=None, description="The source of the news (e.g., The Verge, TechCrunch).")
    url: str | None = Field(default=None, description="The direct URL to the full news article.")


class TechNewsBotOutput(BaseModel):
    """The structured reply: an intro sentence followed by the news items."""

    model_config = ConfigDict(frozen=True)

    intro: str = Field(min_length=1, description="A friendly introductory sentence before listing the news items.")
    news: list[NewsItem] = Field(
        default_factory=list,
        max_length=MAX_NEWS_ITEMS,
        description="A list of the latest tech news articles related to the user's query.",
    )
