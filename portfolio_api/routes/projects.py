"""Project catalog endpoints."""

from typing import Any

from fastapi import APIRouter, HTTPException

from portfolio_api.core.projects import get_project, list_projects
from portfolio_api.domain.exceptions import DataNotFoundError

router = APIRouter()


@router.get("")
def read_projects() -> list[dict[str, Any]]:
    """List all showcase projects."""
    return list_projects()


@router.get("/{slug}")
def read_project(slug: str) -> dict[str, Any]:
    """Get a single project by slug.

    Raises:
        HTTPException 404: if the slug is unknown
    """
    try:
        return get_project(slug)
    except DataNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from None
