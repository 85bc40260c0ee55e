from backend.engine.analysis.analyzer import (
    NO_ROUTE,
    PieceHistory,
    RouteAnalyzer,
    RouteDisplay,
    RouteSuccess,
)

__all__ = ["NO_ROUTE", "PieceHistory", "RouteAnalyzer", "RouteDisplay", "RouteSuccess"]
