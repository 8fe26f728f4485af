"""Exception types raised by ssp-mcf."""
from __future__ import annotations


class SspMcfError(Exception):
    """Base class for every error raised by this package."""


class OutOfRangeError(SspMcfError, ValueError):
    """A vertex id lies outside ``[0, vertex_count)``."""

    def __init__(self, vertex: int, vertex_count: int, message: str | None = None):
        self.vertex = vertex
        self.vertex_count = vertex_count
        if message is None:
            message = f"vertex {vertex} is out of range for a graph with {vertex_count} vertices"
        super().__init__(message)


class MalformedInputError(SspMcfError, ValueError):
    """The textual graph description could not be parsed."""

    def __init__(self, message: str, position: int | None = None):
        self.position = position
        if position is not None:
            message = f"{message} (token {position})"
        super().__init__(message)


class InternalInvariantViolation(SspMcfError, RuntimeError):
    """The solver reached a state that valid input can never produce."""


__all__ = [
    "InternalInvariantViolation",
    "MalformedInputError",
    "OutOfRangeError",
    "SspMcfError",
]
