"""Exception hierarchy for the tech news flow."""


class TechNewsError(Exception):
    """Base class for every failure surfaced by the tech news flow."""


class ValidationError(TechNewsError):
    """The caller's input does not match the input contract."""


class ConfigurationError(TechNewsError):
    """A required setting (the news API key) is missing."""


class NetworkError(TechNewsError):
    """The news search API could not be reached."""


class UpstreamError(TechNewsError):
    """The news search API answered, but not with a usable successful payload.

    ``status_code`` is the HTTP status when one was received and ``code`` is the
    error code from the upstream error payload, if it sent one.
    """

    def __init__(self, message: str, *, status_code: int | None = None, code: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code


class OutputValidationError(TechNewsError):
    """A flow handler returned a value that does not match its output model."""
