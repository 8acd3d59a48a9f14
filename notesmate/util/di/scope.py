"""Dishka scopes."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """APP holds the engine, token service and password hasher for the process lifetime.

    UOW is one HTTP request: its database session, the caller's verified claims
    and the handlers built on them. Nothing request-specific may live in APP.
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
