"""
Architecture detection for codebase analysis.

Assigns a single architecture label by walking an ordered rule cascade:
manifest dependency signatures (most specific first), then Python
dominance with its marker files, then build-system markers, then byte
statistics. The first matching rule wins.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from functools import cached_property

from repolens.services.manifest import Manifest

FALLBACK_ARCHITECTURE = "Software Project"


@dataclass(frozen=True)
class ArchitectureEvidence:
    """Everything the cascade may look at, normalized."""

    manifest: Manifest | None
    languages: dict[str, int]
    paths: tuple[str, ...]

    @cached_property
    def dependency_names(self) -> frozenset[str]:
        return self.manifest.dependency_names() if self.manifest else frozenset()

    @cached_property
    def dominant_language(self) -> str | None:
        """Language with the most bytes; ties go to the first listed."""
        if not self.languages:
            return None
        return max(self.languages, key=lambda name: self.languages[name])

    def has_file(self, pattern: re.Pattern[str]) -> bool:
        return any(pattern.search(path) for path in self.paths)

    def language_bytes(self, name: str) -> int:
        return self.languages.get(name, 0)


@dataclass(frozen=True)
class ArchitectureRule:
    """One (predicate, label) pair in the cascade."""

    label: str
    matches: Callable[[ArchitectureEvidence], bool]


def _has_all(*names: str) -> Callable[[ArchitectureEvidence], bool]:
    return lambda evidence: all(name in evidence.dependency_names for name in names)


def _has_any(*names: str) -> Callable[[ArchitectureEvidence], bool]:
    return lambda evidence: any(name in evidence.dependency_names for name in names)


def _python_dominant_with(*markers: re.Pattern[str]) -> Callable[[ArchitectureEvidence], bool]:
    return lambda evidence: evidence.dominant_language == "Python" and all(
        evidence.has_file(marker) for marker in markers
    )


_LIBRARY_INDEX_RE = re.compile(r"^(src/)?index\.(ts|js)$")
_CARGO_RE = re.compile(r"^Cargo\.toml$")
_GO_MOD_RE = re.compile(r"^go\.mod$")
_MANAGE_PY_RE = re.compile(r"(^|/)manage\.py$")
_APP_PY_RE = re.compile(r"(^|/)app\.py$")
_MAIN_PY_RE = re.compile(r"(^|/)main\.py$")
_API_DIR_RE = re.compile(r"(^|/)api/")


ARCHITECTURE_RULES: tuple[ArchitectureRule, ...] = (
    # Manifest dependencies: meta-frameworks before the libraries they build on
    ArchitectureRule("Next.js Application (React SSR/SSG Framework)", _has_all("next")),
    ArchitectureRule("React SPA with Vite", _has_all("react", "vite")),
    ArchitectureRule("React SPA (Create React App)", _has_all("react", "react-scripts")),
    ArchitectureRule("Nuxt.js Application (Vue SSR)", _has_any("nuxt")),
    ArchitectureRule("Vue.js Application", _has_any("vue")),
    ArchitectureRule("Angular Application", _has_any("@angular/core")),
    ArchitectureRule("SvelteKit Application", _has_any("@sveltejs/kit")),
    ArchitectureRule("Svelte Application", _has_any("svelte")),
    ArchitectureRule("NestJS Application", _has_any("@nestjs/core")),
    ArchitectureRule("Express.js REST API", _has_any("express")),
    ArchitectureRule("Fastify REST API", _has_any("fastify")),
    ArchitectureRule("Electron Desktop Application", _has_any("electron")),
    ArchitectureRule("React Native Mobile Application", _has_any("react-native")),
    ArchitectureRule("Node.js CLI Tool", _has_any("commander", "yargs", "inquirer")),
    ArchitectureRule("Django Application", _has_any("django")),
    ArchitectureRule("FastAPI Application", _has_any("fastapi")),
    ArchitectureRule("Flask Application", _has_any("flask")),
    ArchitectureRule(
        "JavaScript/TypeScript Library",
        lambda e: bool(e.manifest and e.manifest.main) and e.has_file(_LIBRARY_INDEX_RE),
    ),
    # Python dominance, disambiguated by marker files
    ArchitectureRule("Django Application", _python_dominant_with(_MANAGE_PY_RE)),
    ArchitectureRule("Flask Application", _python_dominant_with(_APP_PY_RE)),
    ArchitectureRule("FastAPI Application", _python_dominant_with(_MAIN_PY_RE, _API_DIR_RE)),
    ArchitectureRule("Python Application", _python_dominant_with()),
    # Build-system markers
    ArchitectureRule("Rust Application", lambda e: e.has_file(_CARGO_RE)),
    ArchitectureRule("Go Application", lambda e: e.has_file(_GO_MOD_RE)),
    # Byte statistics
    ArchitectureRule("Go Application", lambda e: e.language_bytes("Go") > 10_000),
    ArchitectureRule("Rust Application", lambda e: e.language_bytes("Rust") > 0),
    # Weak manifest signal
    ArchitectureRule("React Application", _has_any("react")),
)


def detect_architecture(
    evidence: ArchitectureEvidence,
    rules: tuple[ArchitectureRule, ...] = ARCHITECTURE_RULES,
) -> str:
    """
    Return the label of the first rule matching the evidence.

    Falls back to "<dominant language> Project", then "Software Project".
    """
    for rule in rules:
        if rule.matches(evidence):
            return rule.label

    if evidence.dominant_language:
        return f"{evidence.dominant_language} Project"
    return FALLBACK_ARCHITECTURE
