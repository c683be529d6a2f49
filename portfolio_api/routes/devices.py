"""IoT device and fitness workout listings (read-only fixtures)."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from portfolio_api.core.store import MockStore
from portfolio_api.routes.dependencies import get_store

router = APIRouter()


@router.get("/iot/devices", tags=["iot"])
def list_devices(store: Annotated[MockStore, Depends(get_store)]) -> list[dict[str, Any]]:
    return [d.to_dict() for d in store.list_devices()]


@router.get("/fitness/workouts", tags=["fitness"])
def list_workouts(store: Annotated[MockStore, Depends(get_store)]) -> list[dict[str, Any]]:
    return [w.to_dict() for w in store.list_workouts()]
