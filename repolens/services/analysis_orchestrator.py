"""
Analysis Orchestrator for a single repository.

Runs the two stages in sequence:
1. FileSampler - select and fetch a budget-bounded set of files
2. classify - turn manifest, language stats, paths and samples into an AnalysisResult
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from repolens.schemas.analysis import AnalysisResult
from repolens.services.classifier import classify
from repolens.services.manifest import Manifest
from repolens.services.sampler import FetchFn, FileSampler
from repolens.services.sampler.selection import coerce_paths

logger = logging.getLogger(__name__)


async def analyze_repository(
    paths: Iterable[str],
    fetch: FetchFn,
    manifest: Manifest | Mapping[str, Any] | str | None = None,
    languages: Mapping[str, int] | None = None,
    *,
    max_files: int | None = None,
    max_lines_per_file: int | None = None,
    batch_size: int | None = None,
) -> AnalysisResult:
    """
    Sample a repository and classify it.

    Args:
        paths: Full repository path listing
        fetch: Content fetch capability, path -> text or None
        manifest: Manifest, parsed mapping, raw JSON text, or None
        languages: Language name -> byte count
        max_files: Sampling ceiling (defaults to settings.max_files)
        max_lines_per_file: Line budget per file (defaults to settings.max_lines_per_file)
        batch_size: Concurrent fetches per batch (defaults to settings.fetch_batch_size)

    Returns:
        AnalysisResult for the repository
    """
    sampler = FileSampler(
        max_files=max_files,
        max_lines_per_file=max_lines_per_file,
        batch_size=batch_size,
    )

    # Materialize once: the sampler and the classifier both walk the listing
    path_list = coerce_paths(paths)
    samples = await sampler.sample(path_list, fetch)
    logger.info(f"Fetched {len(samples)} source files for analysis")

    return classify(samples, manifest=manifest, languages=languages, paths=path_list)
