"""Root endpoint (service banner)."""

from fastapi import APIRouter

from portfolio_api import __version__

router = APIRouter(tags=["root"])


@router.get("/")
def read_root() -> dict:
    """Service banner."""
    return {"message": "Portfolio backend is running", "service": "portfolio-api", "version": __version__}
