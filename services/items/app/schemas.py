"""API schemas.

Pydantic models used as `response_model=...` on the items endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class Item(BaseModel):
    id: str
    name: str


class ErrorOut(BaseModel):
    ok: bool = False
    error: str
