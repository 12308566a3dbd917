"""
Service-layer failures.

Services raise these; routers decide which HTTP status each one becomes,
since the same failure maps differently per endpoint (a missing message is a
400 on update but an empty 200 on read/delete).
"""

from __future__ import annotations


class ServiceError(RuntimeError):
    pass


class ValidationError(ServiceError):
    """Malformed input: blank username, short password, bad message text."""


class DuplicateUsernameError(ServiceError):
    pass


class NotFoundError(ServiceError):
    """A lookup missed where absence is a failure rather than an empty result."""
