"""Portfolio API - demo REST backend for portfolio projects and mock finance endpoints."""

__version__ = "0.1.0"
