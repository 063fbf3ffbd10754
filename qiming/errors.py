"""
Error taxonomy for the naming engine.

Only ``InvalidDateError`` (and ``InvalidOptionsError``, raised before any work starts) ever
escapes ``NameGenerator.generate_names``. Everything else degrades a score or shrinks the
result list instead of aborting.
"""


class NamingError(Exception):
    """Base class for all naming engine errors."""


class InvalidDateError(NamingError, ValueError):
    """Malformed calendar input: impossible civil date or hour outside 0..23."""


class CharacterNotFoundError(NamingError, KeyError):
    """A looked-up symbol is absent from the character pool."""

    def __init__(self, symbol: str):
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self) -> str:
        return f"character not in pool: {self.symbol!r}"


class InvalidOptionsError(NamingError, ValueError):
    """Generation options that cannot describe a naming request."""
