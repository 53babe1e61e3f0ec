"""Audit and portfolio analytics."""

from epiaudit.analytics.financials import AuditFinancials, payback_period
from epiaudit.analytics.portfolio import PortfolioFilter, PortfolioStats, available_years

__all__ = [
    "AuditFinancials",
    "PortfolioFilter",
    "PortfolioStats",
    "available_years",
    "payback_period",
]
