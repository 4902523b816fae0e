"""Centralized FastAPI dependency definitions for the API layer.

Routers should import dependencies from here instead of directly from
their underlying implementation modules. This provides:

* A stable import surface (refactors in lower layers don't ripple up)
* Easier test overrides via ``app.dependency_overrides[deps.get_db]``
* A single place where the per-process context objects (Extra registry,
  event broker) are pulled off ``app.state``.
"""
from fastapi import Request

from telnyxbridge.db.session import get_db
from telnyxbridge.core.events import EventBroker
from telnyxbridge.core.extra import ExtraRegistry


def get_extras(request: Request) -> ExtraRegistry:
    return request.app.state.extras


def get_broker(request: Request) -> EventBroker:
    return request.app.state.broker


__all__ = ["get_db", "get_extras", "get_broker"]
