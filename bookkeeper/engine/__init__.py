"""Pure aggregation and report derivation. No database access."""

from bookkeeper.engine.aggregation import AggregationEngine, validate_balanced
from bookkeeper.engine.reports import ReportEngine

__all__ = ["AggregationEngine", "ReportEngine", "validate_balanced"]
