"""
UI component extraction for codebase analysis.

Scans `.tsx`/`.jsx` samples for capitalized function declarations and
capitalized arrow-function assignments.
"""

import re
from collections.abc import Iterable

from repolens.schemas.analysis import MAX_COMPONENTS, ComponentInfo, ComponentKind
from repolens.services.classifier.constants import PAGE_DIRECTORIES, UI_EXTENSIONS
from repolens.services.sampler.types import CodeSample

# Scans inside a declaration are bounded so an unclosed "(" on a long
# minified line costs at most MAX_SCAN characters per candidate.
MAX_SCAN = 500

COMPONENT_PATTERNS: tuple[re.Pattern[str], ...] = (
    # function Sidebar(...) / export default function Page(...)
    re.compile(r"(?:export\s+)?(?:default\s+)?function\s+([A-Z]\w+)\s*\("),
    # const Header: React.FC<Props> = (props) => ...
    re.compile(
        rf"(?:export\s+)?const\s+([A-Z]\w+)\s*(?::\s*(?:React\.)?FC[^=]{{0,{MAX_SCAN}}})?\s*=\s*"
        rf"(?:async\s+)?(?:\([^)]{{0,{MAX_SCAN}}}\)|\w+)\s*(?::\s*[\w.<>\[\]]{{1,{MAX_SCAN}}}\s*)?=>"
    ),
)


def component_kind(name: str, path: str) -> ComponentKind:
    """Tag a component as layout, page or functional from its name and path."""
    segments = path.lower().split("/")
    if "layout" in name.lower() or any("layout" in segment for segment in segments):
        return "layout"
    if PAGE_DIRECTORIES.intersection(segments[:-1]):
        return "page"
    return "functional"


def extract_components(samples: Iterable[CodeSample]) -> list[ComponentInfo]:
    """
    Extract UI components from sampled files.

    A name found by both declaration forms in one file is recorded once.

    Args:
        samples: Sampled files to scan

    Returns:
        ComponentInfo entries in first-found order, at most MAX_COMPONENTS
    """
    components: list[ComponentInfo] = []

    for sample in samples:
        if not sample.path.endswith(UI_EXTENSIONS):
            continue

        matches = sorted(
            (match for pattern in COMPONENT_PATTERNS for match in pattern.finditer(sample.content)),
            key=lambda match: match.start(),
        )
        seen: set[str] = set()
        for match in matches:
            name = match.group(1)
            if name in seen:
                continue
            seen.add(name)
            components.append(
                ComponentInfo(name=name, kind=component_kind(name, sample.path), path=sample.path)
            )
            if len(components) >= MAX_COMPONENTS:
                return components

    return components
