"""Tech News Bot: answers free-text tech news questions from the NewsAPI search endpoint."""

__version__ = "0.1.0"
