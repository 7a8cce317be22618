"""Business logic services."""

from bookkeeper.services.balance_service import BalanceService
from bookkeeper.services.report_service import ReportService

__all__ = ["BalanceService", "ReportService"]
