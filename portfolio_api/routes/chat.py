"""Chat endpoints backed by the in-memory store."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from portfolio_api.core.store import MockStore
from portfolio_api.domain.exceptions import DataValidationError
from portfolio_api.routes.dependencies import get_store

router = APIRouter()


class ChatMessageRequest(BaseModel):
    user: str | None = None
    message: str | None = None


class ChatMessageResponse(BaseModel):
    id: int
    user: str
    message: str
    timestamp: str


@router.get("/messages", response_model=list[ChatMessageResponse])
def list_messages(store: Annotated[MockStore, Depends(get_store)]) -> list[ChatMessageResponse]:
    """All chat messages, oldest first."""
    return [ChatMessageResponse(**m.to_dict()) for m in store.list_messages()]


@router.post("/messages", response_model=ChatMessageResponse, status_code=201)
def post_message(
    request: ChatMessageRequest,
    store: Annotated[MockStore, Depends(get_store)],
) -> ChatMessageResponse:
    """Post a new chat message.

    Raises:
        HTTPException 400: if user or message is missing
    """
    try:
        entry = store.add_message(request.user or "", request.message or "")
    except DataValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None
    return ChatMessageResponse(**entry.to_dict())
