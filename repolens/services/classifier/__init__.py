"""
Classifier package for repository architecture and pattern inference.

Module structure:
- classifier.py: classify() entry point
- architecture.py: Ordered architecture rule cascade
- patterns.py: Design pattern signatures
- tech_stack.py: Tech stack extraction and dependency annotation
- entrypoints.py: Entry-point detection
- exports.py: Exported symbol extraction
- routes.py: HTTP route extraction
- components.py: UI component extraction
- constants.py: Static reference tables
"""

from repolens.services.classifier.architecture import (
    ARCHITECTURE_RULES,
    FALLBACK_ARCHITECTURE,
    ArchitectureEvidence,
    ArchitectureRule,
    detect_architecture,
)
from repolens.services.classifier.classifier import classify
from repolens.services.classifier.components import extract_components
from repolens.services.classifier.constants import (
    DEPENDENCY_DESCRIPTIONS,
    ENTRY_POINT_PATTERNS,
    TECH_STACK_CHECKS,
)
from repolens.services.classifier.entrypoints import find_entry_points
from repolens.services.classifier.exports import extract_exports
from repolens.services.classifier.patterns import PATTERN_SIGNATURES, PatternSignature, detect_patterns
from repolens.services.classifier.routes import extract_routes
from repolens.services.classifier.tech_stack import (
    annotate_dependencies,
    describe_dependency,
    extract_tech_stack,
)

__all__ = [
    # Main entry point
    "classify",
    # Architecture
    "ArchitectureEvidence",
    "ArchitectureRule",
    "detect_architecture",
    # Extraction functions
    "annotate_dependencies",
    "describe_dependency",
    "detect_patterns",
    "extract_components",
    "extract_exports",
    "extract_routes",
    "extract_tech_stack",
    "find_entry_points",
    "PatternSignature",
    # Constants
    "ARCHITECTURE_RULES",
    "DEPENDENCY_DESCRIPTIONS",
    "ENTRY_POINT_PATTERNS",
    "FALLBACK_ARCHITECTURE",
    "PATTERN_SIGNATURES",
    "TECH_STACK_CHECKS",
]
