from typing import Optional


class WordGenError(Exception):
    """Base class for every error raised by wordgen."""


class InvalidConfiguration(WordGenError, ValueError):
    """A builder or sampler argument is out of range."""


class InsufficientCorpus(WordGenError, ValueError):
    """The padded corpus is too short to produce a single window."""


class MissingContext(WordGenError, LookupError):
    """Sampling reached a context that was never observed while building."""

    def __init__(self, context: str, message: Optional[str] = None):
        self.context = context
        super().__init__(message or f"Context {context!r} is not in the table")


class SamplingLimitExceeded(WordGenError, RuntimeError):
    """A random walk grew past the caller's max_length."""
