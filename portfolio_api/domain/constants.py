"""Domain constants for portfolio_api.

Centralizes the numeric constants used by the pure domain services so the
rounding and weighting rules live in one place.
"""

# ============================================================================
# Return statistics
# ============================================================================

# Minimum number of observations needed to compute one simple return
MIN_PRICE_POINTS = 2

# Decimal places kept in the response
RETURN_DECIMALS = 6
VOLATILITY_DECIMALS = 6
PREDICTED_PRICE_DECIMALS = 2


# ============================================================================
# Heuristic allocation
# ============================================================================

# Exponent applied to risk is ALPHA_BASE + risk_tolerance (0.5 .. 1.5 for r in [0, 1])
ALPHA_BASE = 0.5

# Bounds the HTTP layer clamps risk tolerance into
MIN_RISK_TOLERANCE = 0.0
MAX_RISK_TOLERANCE = 1.0
DEFAULT_RISK_TOLERANCE = 0.5

# Score sums with magnitude below this are treated as zero (equal-weight fallback)
ZERO_SCORE_TOLERANCE = 1e-12

WEIGHT_DECIMALS = 4
AGGREGATE_DECIMALS = 4


# ============================================================================
# Cloud migration estimate
# ============================================================================

# Flat saving assumed for any migration
MIGRATION_SAVINGS_RATIO = 0.2
MIGRATION_DECIMALS = 2
MIGRATION_ASSUMPTIONS = (
    "Simple 20% savings assumption for demonstration. Not financial advice."
)


# ============================================================================
# Payments
# ============================================================================

# Invoice ids are INV-{INVOICE_ID_BASE + payment_count + 1}
INVOICE_ID_BASE = 2040
