"""Cloud migration estimate endpoint."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from portfolio_api.domain.exceptions import DataValidationError
from portfolio_api.domain.services.cloud_migration import estimate_cloud_migration

router = APIRouter()


class MigrationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    num_servers: float = Field(..., alias="numServers", description="Servers to migrate, > 0")
    monthly_spend: float = Field(..., alias="monthlySpend", description="Current spend, > 0")


class MigrationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_monthly_spend: float = Field(..., alias="currentMonthlySpend")
    estimated_monthly_savings: float = Field(..., alias="estimatedMonthlySavings")
    estimated_new_monthly_spend: float = Field(..., alias="estimatedNewMonthlySpend")
    assumptions: str


@router.post("/estimate", response_model=MigrationResponse)
def estimate_migration(request: MigrationRequest) -> MigrationResponse:
    """Estimate savings from migrating workloads, assuming a flat 20%.

    Raises:
        HTTPException 400: if either input is not > 0
    """
    try:
        estimate = estimate_cloud_migration(request.num_servers, request.monthly_spend)
    except DataValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None

    return MigrationResponse(
        current_monthly_spend=estimate.current_monthly_spend,
        estimated_monthly_savings=estimate.estimated_monthly_savings,
        estimated_new_monthly_spend=estimate.estimated_new_monthly_spend,
        assumptions=estimate.assumptions,
    )
