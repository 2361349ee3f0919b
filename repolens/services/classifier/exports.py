"""
Exported symbol extraction for codebase analysis.

Line-oriented matching of JavaScript/TypeScript `export` declarations and
module-level public Python definitions. Nothing is parsed; lines that match
no rule contribute nothing.
"""

import re
from collections.abc import Callable, Iterable

from repolens.schemas.analysis import MAX_EXPORTS, ExportInfo, ExportKind
from repolens.services.sampler.types import CodeSample

# Capitalized camel-case: "App", "UserCard" (not "HTTP" or "URLParser")
_COMPONENT_NAME_RE = re.compile(r"^[A-Z][a-z0-9]\w*$")


def _default_kind(fallback: ExportKind) -> Callable[[re.Match[str]], tuple[str, ExportKind]]:
    def transform(match: re.Match[str]) -> tuple[str, ExportKind]:
        name = match.group(1)
        return name, "component" if _COMPONENT_NAME_RE.match(name) else fallback

    return transform


def _fixed_kind(kind: ExportKind) -> Callable[[re.Match[str]], tuple[str, ExportKind]]:
    return lambda match: (match.group(1), kind)


ExportRule = tuple[re.Pattern[str], Callable[[re.Match[str]], tuple[str, ExportKind]]]

# First matching rule per line wins
SCRIPT_EXPORT_RULES: tuple[ExportRule, ...] = (
    (
        re.compile(r"export\s+default\s+(?:async\s+)?function\b\s*\*?\s*(\w+)"),
        _default_kind("function"),
    ),
    (
        re.compile(r"export\s+default\s+(?:abstract\s+)?class\s+(?!extends\b)(\w+)"),
        _default_kind("class"),
    ),
    (re.compile(r"export\s+(?:async\s+)?function\b\s*\*?\s*(\w+)"), _fixed_kind("function")),
    (re.compile(r"export\s+const\s+(\w+)"), _fixed_kind("const")),
    (re.compile(r"export\s+(?:abstract\s+)?class\s+(?!extends\b)(\w+)"), _fixed_kind("class")),
    (
        re.compile(r"export\s+(interface|type)\s+(\w+)"),
        lambda match: (match.group(2), match.group(1)),
    ),
)

PYTHON_EXPORT_RULES: tuple[ExportRule, ...] = (
    (re.compile(r"^(?:async\s+)?def\s+([A-Za-z]\w*)\s*\("), _fixed_kind("function")),
    (re.compile(r"^class\s+([A-Za-z]\w*)\b"), _fixed_kind("class")),
)


def extract_exports(samples: Iterable[CodeSample]) -> list[ExportInfo]:
    """
    Extract exported symbols from sampled files.

    Args:
        samples: Sampled files to scan

    Returns:
        ExportInfo entries in first-found order, at most MAX_EXPORTS
    """
    exports: list[ExportInfo] = []

    for sample in samples:
        rules = PYTHON_EXPORT_RULES if sample.path.endswith(".py") else SCRIPT_EXPORT_RULES
        for line in sample.content.split("\n"):
            for pattern, transform in rules:
                match = pattern.search(line)
                if match:
                    name, kind = transform(match)
                    exports.append(ExportInfo(name=name, kind=kind, path=sample.path))
                    if len(exports) >= MAX_EXPORTS:
                        return exports
                    break

    return exports
