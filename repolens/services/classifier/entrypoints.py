"""Entry-point detection for codebase analysis."""

from collections.abc import Iterable

from repolens.schemas.analysis import MAX_ENTRY_POINTS
from repolens.services.classifier.constants import ENTRY_POINT_PATTERNS
from repolens.services.sampler.types import CodeSample


def _is_entry_point(path: str) -> bool:
    return any(pattern.search(path) for pattern in ENTRY_POINT_PATTERNS)


def find_entry_points(samples: Iterable[CodeSample], paths: Iterable[str]) -> list[str]:
    """
    Find entry-point files.

    Sampled files come first, then the rest of the tree; duplicates are
    dropped and the result is capped at MAX_ENTRY_POINTS.
    """
    entry_points: dict[str, None] = {}

    for path in [*(sample.path for sample in samples), *paths]:
        if len(entry_points) >= MAX_ENTRY_POINTS:
            break
        if _is_entry_point(path):
            entry_points[path] = None

    return list(entry_points)
