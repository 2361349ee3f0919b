"""
Technology stack extraction and dependency annotation.

Both are driven purely by manifest dependency names and the static
reference tables in `constants`.
"""

from repolens.schemas.analysis import MAX_DEPENDENCIES, DependencyInfo
from repolens.services.classifier.constants import (
    DEPENDENCY_DESCRIPTIONS,
    GENERIC_DEPENDENCY_DESCRIPTION,
    TECH_STACK_CHECKS,
)
from repolens.services.manifest import Manifest


def extract_tech_stack(manifest: Manifest | None) -> list[str]:
    """Human-readable stack entries, in check order (not alphabetical)."""
    if manifest is None:
        return []

    dependency_names = manifest.dependency_names()
    stack: dict[str, None] = {}
    for dependency, label in TECH_STACK_CHECKS:
        if dependency in dependency_names:
            stack[label] = None
    return list(stack)


def describe_dependency(name: str) -> str:
    """Look up a description by exact name, then by scope-stripped head segment."""
    description = DEPENDENCY_DESCRIPTIONS.get(name)
    if description is None:
        normalized = name.removeprefix("@").split("/")[0]
        description = DEPENDENCY_DESCRIPTIONS.get(normalized, GENERIC_DEPENDENCY_DESCRIPTION)
    return description


def annotate_dependencies(manifest: Manifest | None) -> list[DependencyInfo]:
    """
    Annotate runtime dependencies with human descriptions.

    Args:
        manifest: Parsed manifest, or None

    Returns:
        At most MAX_DEPENDENCIES entries, in manifest order
    """
    if manifest is None:
        return []

    return [
        DependencyInfo(name=name, version=version, description=describe_dependency(name))
        for name, version in list(manifest.dependencies.items())[:MAX_DEPENDENCIES]
    ]
