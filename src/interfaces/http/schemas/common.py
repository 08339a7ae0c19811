from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from src.application.validation import Page


class MessageResponse(BaseModel):
    message: str


def page_payload(page: Page) -> dict[str, Any]:
    return {
        "items": page.items,
        "total": page.total,
        "limit": page.limit,
        "offset": page.offset,
        "pages": page.pages,
    }
