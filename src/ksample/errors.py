"""Exceptions raised while producing sample messages.

Nothing in the factory catches these; they propagate to whoever is pulling
samples, ending the iteration at the failing element.
"""

from __future__ import annotations


class SampleError(Exception):
    """Base class for all sample generation errors."""


class SchemaUnknown(SampleError, KeyError):
    """The schema registry has no skeleton for the requested identifier."""

    def __init__(self, api_key):
        self.api_key = api_key
        SampleError.__init__(self, f"no request schema for api key {api_key!r}")

    def __str__(self) -> str:
        # KeyError would otherwise wrap the message in quotes.
        return self.args[0]


class VersionUnresolved(SampleError, ValueError):
    """No usable wire version could be chosen for a request type."""

    def __init__(self, api_key, reason: str):
        self.api_key = api_key
        self.reason = reason
        SampleError.__init__(self, f"{api_key!s}: {reason}")


class PopulatorShapeMismatch(SampleError, TypeError):
    """A populator was handed a message of the wrong class."""

    def __init__(self, expected: type, message: object):
        self.expected = expected
        self.actual = type(message)
        SampleError.__init__(
            self,
            f"populator expects {expected.__name__}, got {self.actual.__name__}",
        )
