"""Item routes.

- `GET /items`  returns every stored item, oldest first.
- `POST /items?name=...` stores one item and returns it.

Both endpoints delegate straight to the document store; failures propagate
to the handlers in `app.errors`.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pymongo import ASCENDING
from pymongo.collection import Collection

from ..db import get_collection
from ..models import item_from_document, new_item_document
from ..schemas import Item

router = APIRouter()

MAX_NAME_LENGTH = 200


@router.get("/items", response_model=list[Item])
def list_items(collection: Collection = Depends(get_collection)):
    """List all stored items.

    Args:
        collection: Items collection (injected).

    Returns:
        list[Item]: Every item in insertion order (`_id` ascending).
    """
    return [item_from_document(doc) for doc in collection.find().sort("_id", ASCENDING)]


@router.post("/items", response_model=Item, status_code=status.HTTP_201_CREATED)
def create_item(
    name: str = Query(..., min_length=1, description="Item name"),
    collection: Collection = Depends(get_collection),
):
    """Store a new item.

    Surrounding whitespace is stripped first; the stripped name must be
    1 to MAX_NAME_LENGTH characters, otherwise 422.

    Args:
        name: Item name.
        collection: Items collection (injected).

    Returns:
        Item: The stored item, with its generated id.
    """
    cleaned = name.strip()
    if not cleaned:
        raise HTTPException(status_code=422, detail="name must not be blank")
    if len(cleaned) > MAX_NAME_LENGTH:
        raise HTTPException(status_code=422, detail=f"name must be at most {MAX_NAME_LENGTH} characters")

    doc = new_item_document(cleaned)
    result = collection.insert_one(doc)
    doc["_id"] = result.inserted_id
    return item_from_document(doc)
