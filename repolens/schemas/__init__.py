"""Pydantic schemas for engine output."""

from repolens.schemas.analysis import (
    MAX_COMPONENTS,
    MAX_DEPENDENCIES,
    MAX_ENTRY_POINTS,
    MAX_EXPORTS,
    MAX_ROUTES,
    AnalysisResult,
    ComponentInfo,
    DependencyInfo,
    ExportInfo,
    RouteInfo,
)

__all__ = [
    "AnalysisResult",
    "ComponentInfo",
    "DependencyInfo",
    "ExportInfo",
    "RouteInfo",
    "MAX_COMPONENTS",
    "MAX_DEPENDENCIES",
    "MAX_ENTRY_POINTS",
    "MAX_EXPORTS",
    "MAX_ROUTES",
]
