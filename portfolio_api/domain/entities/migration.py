"""Cloud migration domain entities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MigrationEstimate:
    """Projected monthly spend after a cloud migration."""

    current_monthly_spend: float
    estimated_monthly_savings: float
    estimated_new_monthly_spend: float
    assumptions: str
