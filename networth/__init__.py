"""
Net Worth Forecast Engine - Source Package

Reconstructs per-period account balances from sparse balance history,
estimates trends, projects future balances per account category and
aggregates everything into net worth time series.

DESIGN PRINCIPLES:
1. The engine is pure: all I/O happens up front in the services
2. Money is Decimal, never float
3. Per-request state is passed explicitly, never stored
4. Empty inputs give empty results, not errors
5. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Net Worth Tracker Team"
