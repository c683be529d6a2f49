"""Cloud migration cost estimate (flat savings assumption)."""

import math

from portfolio_api.domain.constants import (
    MIGRATION_ASSUMPTIONS,
    MIGRATION_DECIMALS,
    MIGRATION_SAVINGS_RATIO,
)
from portfolio_api.domain.entities.migration import MigrationEstimate
from portfolio_api.domain.exceptions import DataValidationError


def estimate_cloud_migration(num_servers: float, monthly_spend: float) -> MigrationEstimate:
    """Estimate monthly savings after migrating num_servers to the cloud.

    Raises:
        DataValidationError: either input non-finite or <= 0
    """
    for name, value in (("numServers", num_servers), ("monthlySpend", monthly_spend)):
        if not math.isfinite(value) or value <= 0:
            raise DataValidationError(
                "numServers and monthlySpend must be > 0", field=name, value=value
            )

    savings = monthly_spend * MIGRATION_SAVINGS_RATIO
    return MigrationEstimate(
        current_monthly_spend=monthly_spend,
        estimated_monthly_savings=round(savings, MIGRATION_DECIMALS),
        estimated_new_monthly_spend=round(monthly_spend - savings, MIGRATION_DECIMALS),
        assumptions=MIGRATION_ASSUMPTIONS,
    )
