"""
Text filter exceptions.
"""

from __future__ import annotations


class TextFilterError(Exception):
    """Base class for every error raised by the filter subsystem."""


class FilterIdentityError(TextFilterError):
    """A filter's short name cannot be derived from its declared identity."""

    def __init__(self, identity: str) -> None:
        super().__init__(f"I don't know who I am: {identity}")
        self.identity = identity


class FilterNotFound(TextFilterError, LookupError):
    """No filter is registered under the requested short name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown text filter: {name!r}")
        self.name = name


class MissingDefaultConfig(TextFilterError, KeyError):
    """
    A config option was neither supplied in the filter params nor declared
    in the filter's default_config().
    """

    def __init__(self, filter_name: str, option: str) -> None:
        super().__init__(f"{filter_name}: no value or default for option {option!r}")
        self.filter_name = filter_name
        self.option = option

    def __str__(self) -> str:
        return self.args[0]
