from __future__ import annotations


class FakeTypingError(Exception):
    """Base class for errors raised by faketyping."""


class EmptySourceError(FakeTypingError):
    """A replay was requested for an empty source text."""


class InvalidConfigError(FakeTypingError):
    """Speed settings are out of range or inconsistent."""
