"""repolens - repository architecture and pattern inference engine."""

from repolens.core.exceptions import InvalidInputError, RepoLensError
from repolens.core.logging_setup import setup_logging
from repolens.schemas.analysis import AnalysisResult
from repolens.services.analysis_orchestrator import analyze_repository
from repolens.services.classifier import classify
from repolens.services.manifest import Manifest, parse_manifest
from repolens.services.sampler import CodeSample, FileSampler

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "CodeSample",
    "FileSampler",
    "InvalidInputError",
    "Manifest",
    "RepoLensError",
    "analyze_repository",
    "classify",
    "parse_manifest",
    "setup_logging",
]
