from __future__ import annotations


class AlgostratError(Exception):
    """Base class for errors raised by algostrat."""


class InvalidInput(AlgostratError, ValueError):
    """Raised before any mutation when an input breaks the operation contract."""


class PreconditionViolation(AlgostratError):
    """Raised when a caller obligation is checked and found broken."""
