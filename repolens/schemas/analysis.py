"""Pydantic schemas for the engine's analysis result.

`AnalysisResult` is the only thing the engine hands back to callers. It is
meant to be serialized as-is (`model_dump()` / `model_dump_json()`) into a
persistence layer or passed to a prompt-construction component.

List caps are enforced by the classifier through truncation; the
`max_length` constraints below restate them so a violation fails loudly.
"""

from typing import Literal

from pydantic import BaseModel, Field

MAX_ENTRY_POINTS = 5
MAX_EXPORTS = 30
MAX_ROUTES = 20
MAX_COMPONENTS = 20
MAX_DEPENDENCIES = 20

ExportKind = Literal["function", "const", "class", "interface", "type", "component"]
ComponentKind = Literal["functional", "page", "layout"]


# ─────────────────────────────────────────────────────────────
# Extraction Sub-Models
# ─────────────────────────────────────────────────────────────


class ExportInfo(BaseModel):
    """A publicly exported symbol found in a sampled file."""

    name: str = Field(description="Exported identifier, e.g., 'createClient'")
    kind: ExportKind = Field(description="Declaration kind")
    path: str = Field(description="Repository-relative path of the source file")


class RouteInfo(BaseModel):
    """An HTTP-style route found in a sampled file."""

    method: str = Field(description="Upper-case HTTP verb, or 'ALL' for catch-all handlers")
    path: str = Field(description="Route path, e.g., '/api/users'")
    source_file: str = Field(description="Repository-relative path of the defining file")


class ComponentInfo(BaseModel):
    """A UI component declared in a sampled file."""

    name: str = Field(description="Component identifier, e.g., 'Sidebar'")
    kind: ComponentKind = Field(description="'layout', 'page' or 'functional'")
    path: str = Field(description="Repository-relative path of the source file")


class DependencyInfo(BaseModel):
    """A runtime dependency annotated with a human description."""

    name: str
    version: str
    description: str


# ─────────────────────────────────────────────────────────────
# Top-Level Result
# ─────────────────────────────────────────────────────────────


class AnalysisResult(BaseModel):
    """Structured description of a repository inferred from sampled evidence."""

    architecture: str = Field(description="Single inferred project-type label")
    tech_stack: list[str] = Field(
        default_factory=list, description="Human-readable stack entries in check order"
    )
    patterns: list[str] = Field(
        default_factory=list, description="De-duplicated design/idiom signatures"
    )
    entry_points: list[str] = Field(default_factory=list, max_length=MAX_ENTRY_POINTS)
    exports: list[ExportInfo] = Field(default_factory=list, max_length=MAX_EXPORTS)
    routes: list[RouteInfo] = Field(default_factory=list, max_length=MAX_ROUTES)
    components: list[ComponentInfo] = Field(default_factory=list, max_length=MAX_COMPONENTS)
    dependencies: list[DependencyInfo] = Field(default_factory=list, max_length=MAX_DEPENDENCIES)
