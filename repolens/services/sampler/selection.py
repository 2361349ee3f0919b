"""
Sampler path selection.

Pure, deterministic functions: exclusion, categorization and the greedy
category-capped admission walk. No I/O happens here.
"""

import logging
from collections import Counter
from collections.abc import Iterable
from typing import Any

from repolens.core.exceptions import InvalidInputError
from repolens.services.sampler.constants import (
    CATEGORY_CAPS,
    CATEGORY_PRIORITY,
    CATEGORY_RULES,
    HASH_COMMENT_LANGUAGES,
    LANGUAGE_BY_EXTENSION,
    SKIP_PATTERNS,
    SOURCE_EXTENSIONS,
)
from repolens.services.sampler.types import FileCategory, SelectedPath

logger = logging.getLogger(__name__)


def coerce_paths(paths: Any) -> list[str]:
    """Validate a path listing and drop entries that are not non-empty strings."""
    if isinstance(paths, str | bytes) or not isinstance(paths, Iterable):
        raise InvalidInputError("paths", "expected an iterable of path strings")
    return [path for path in paths if isinstance(path, str) and path]


def should_skip(path: str) -> bool:
    """Check if a path is noise (dependencies, build output, assets, ...)."""
    return any(pattern.search(path) for pattern in SKIP_PATTERNS)


def is_source_file(path: str) -> bool:
    """Check if a path has an extension the classifier can reason about."""
    return path.endswith(SOURCE_EXTENSIONS)


def categorize_path(path: str) -> FileCategory:
    """Assign a path to exactly one category; first matching rule wins."""
    for category, patterns in CATEGORY_RULES:
        if any(pattern.search(path) for pattern in patterns):
            return category
    return FileCategory.OTHER


def language_for_path(path: str) -> str:
    """Infer a language tag from the file extension."""
    filename = path.rsplit("/", 1)[-1]
    if "." not in filename:
        return ""
    ext = filename.rsplit(".", 1)[-1].lower()
    return LANGUAGE_BY_EXTENSION.get(ext, ext)


def truncation_marker(language: str, omitted: int) -> str:
    """Single marker line appended to truncated content."""
    comment = "#" if language in HASH_COMMENT_LANGUAGES else "//"
    return f"{comment} ... truncated ({omitted} more lines)"


def select_paths(paths: Iterable[str], max_files: int) -> list[SelectedPath]:
    """
    Select a diverse, capped set of paths worth reading.

    Noise is excluded first, then non-source files. Remaining paths are
    categorized and stably sorted by category priority (ties keep input
    order), then admitted greedily while their category is under its cap
    and the total is under `max_files`.

    Args:
        paths: Full repository path listing
        max_files: Overall ceiling on admitted paths

    Returns:
        Admitted paths in admission order
    """
    candidates: list[SelectedPath] = []
    for path in coerce_paths(paths):
        if should_skip(path) or not is_source_file(path):
            continue
        category = categorize_path(path)
        candidates.append(SelectedPath(path, category, CATEGORY_PRIORITY[category]))

    candidates.sort(key=lambda c: c.priority)

    selected: list[SelectedPath] = []
    counts: Counter[FileCategory] = Counter()

    for candidate in candidates:
        if len(selected) >= max_files:
            break
        if counts[candidate.category] < CATEGORY_CAPS[candidate.category]:
            selected.append(candidate)
            counts[candidate.category] += 1

    logger.debug(
        f"Selected {len(selected)} of {len(candidates)} candidates: "
        + ", ".join(f"{category.value}={count}" for category, count in counts.items())
    )
    return selected
