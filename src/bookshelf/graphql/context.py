"""
Helpers for reading the per-request GraphQL context
"""

from typing import Any

import strawberry

from ..store import BookStore, get_store


def get_store_from_info(info: strawberry.Info) -> BookStore:
    """Get the record store for the current request.

    Falls back to the process-wide store when the context was built without one
    (e.g. schema.execute() called directly).
    """
    context: Any = info.context
    if isinstance(context, dict) and context.get("store") is not None:
        return context["store"]
    return get_store()
