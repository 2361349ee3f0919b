"""
Classifier - turns repository evidence into an AnalysisResult.

Pure and synchronous: no I/O, no shared mutable state. Identical inputs
always produce an identical result.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from repolens.schemas.analysis import AnalysisResult
from repolens.services.classifier.architecture import ArchitectureEvidence, detect_architecture
from repolens.services.classifier.components import extract_components
from repolens.services.classifier.entrypoints import find_entry_points
from repolens.services.classifier.exports import extract_exports
from repolens.services.classifier.patterns import detect_patterns
from repolens.services.classifier.routes import extract_routes
from repolens.services.classifier.tech_stack import annotate_dependencies, extract_tech_stack
from repolens.services.manifest import Manifest, parse_manifest
from repolens.services.sampler.selection import coerce_paths
from repolens.services.sampler.types import CodeSample

logger = logging.getLogger(__name__)


def _normalize_paths(paths: Iterable[str] | None) -> tuple[str, ...]:
    if paths is None:
        return ()
    return tuple(coerce_paths(paths))


def _normalize_languages(languages: Mapping[str, Any] | None) -> dict[str, int]:
    """Keep positive integer byte counts only."""
    if not isinstance(languages, Mapping):
        if languages is not None:
            logger.warning(f"Ignoring language stats of type {type(languages).__name__}")
        return {}
    return {
        str(name): count
        for name, count in languages.items()
        if isinstance(count, int) and not isinstance(count, bool) and count > 0
    }


def _normalize_samples(samples: Iterable[CodeSample] | None) -> list[CodeSample]:
    if samples is None:
        return []
    return [sample for sample in samples if isinstance(sample, CodeSample)]


def classify(
    samples: Iterable[CodeSample] | None = None,
    manifest: Manifest | Mapping[str, Any] | str | None = None,
    languages: Mapping[str, int] | None = None,
    paths: Iterable[str] | None = None,
) -> AnalysisResult:
    """
    Classify a repository from its sampled evidence.

    Args:
        samples: CodeSamples produced by the FileSampler
        manifest: Manifest, parsed package descriptor mapping, raw JSON text, or None
        languages: Language name -> byte count
        paths: Full repository path listing

    Returns:
        AnalysisResult; missing evidence yields fallback values, never an error
    """
    sample_list = _normalize_samples(samples)
    parsed_manifest = parse_manifest(manifest)
    path_tuple = _normalize_paths(paths)

    evidence = ArchitectureEvidence(
        manifest=parsed_manifest,
        languages=_normalize_languages(languages),
        paths=path_tuple,
    )

    result = AnalysisResult(
        architecture=detect_architecture(evidence),
        tech_stack=extract_tech_stack(parsed_manifest),
        patterns=detect_patterns(sample_list, parsed_manifest),
        entry_points=find_entry_points(sample_list, path_tuple),
        exports=extract_exports(sample_list),
        routes=extract_routes(sample_list),
        components=extract_components(sample_list),
        dependencies=annotate_dependencies(parsed_manifest),
    )

    logger.info(
        f"Classified as {result.architecture!r}: "
        f"{len(result.patterns)} patterns, {len(result.routes)} routes, "
        f"{len(result.components)} components, {len(result.exports)} exports"
    )
    return result
