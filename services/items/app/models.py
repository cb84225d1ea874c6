"""Stored document shape for items.

Documents in the items collection look like:

    {"_id": ObjectId("..."), "name": "milk"}

These helpers are the only place that knows about `_id`; everything above
them works with `schemas.Item`.
"""

from __future__ import annotations

from typing import Any, Mapping

from .schemas import Item


def new_item_document(name: str) -> dict[str, Any]:
    """Build the document to insert for a new item."""
    return {"name": name}


def item_from_document(doc: Mapping[str, Any]) -> Item:
    """Convert a stored document to its API representation.

    Args:
        doc: Document as returned by pymongo (must carry `_id`).

    Returns:
        Item: `_id` rendered as a string id.
    """
    return Item(id=str(doc["_id"]), name=str(doc.get("name", "")))
