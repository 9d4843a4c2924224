class NewsBriefError(Exception):
    """Base class for errors raised by newsbrief."""


class ConfigError(NewsBriefError):
    """Bad or missing configuration; raised at startup, never per request."""


class ProviderError(NewsBriefError):
    """The LLM provider could not be reached or returned no usable text."""
