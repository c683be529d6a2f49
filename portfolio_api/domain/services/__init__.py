"""Domain services - pure business logic with no external dependencies.

These services contain the core algorithms. They depend only on domain
entities, the standard library and numpy.
"""

from portfolio_api.domain.services.cloud_migration import estimate_cloud_migration
from portfolio_api.domain.services.heuristic_allocation import compute_allocation
from portfolio_api.domain.services.return_statistics import (
    compute_simple_returns,
    estimate_return_statistics,
)

__all__ = [
    # Return statistics
    "compute_simple_returns",
    "estimate_return_statistics",
    # Allocation
    "compute_allocation",
    # Cloud
    "estimate_cloud_migration",
]
