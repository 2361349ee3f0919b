"""
Design pattern detection for codebase analysis.

Detects state-management, API-routing, ORM, authentication, testing and
styling idioms from sampled file text and manifest dependencies.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from repolens.services.manifest import Manifest
from repolens.services.sampler.types import CodeSample


@dataclass(frozen=True)
class PatternSignature:
    """A named pattern, evidenced by dependencies and/or a content regex."""

    name: str
    dependencies: tuple[str, ...] = ()
    content: re.Pattern[str] | None = None

    def matches(self, dependency_names: frozenset[str], text: str) -> bool:
        if any(dep in dependency_names for dep in self.dependencies):
            return True
        return self.content is not None and self.content.search(text) is not None


PATTERN_SIGNATURES: tuple[PatternSignature, ...] = (
    # State management
    PatternSignature("React Hooks", content=re.compile(r"useState|useEffect|useCallback|useMemo")),
    PatternSignature("React Context API", content=re.compile(r"useContext|createContext")),
    PatternSignature("Redux State Management", dependencies=("redux", "@reduxjs/toolkit")),
    PatternSignature("Zustand State Management", dependencies=("zustand",)),
    # API styles
    PatternSignature(
        "RESTful API Routes",
        content=re.compile(r"\b(?:router|app)\.(?:get|post|put|delete|patch)\s*\("),
    ),
    PatternSignature(
        "RESTful API Routes",
        content=re.compile(r"@\w+\.(?:get|post|put|delete|patch|route)\s*\("),
    ),
    PatternSignature("GraphQL API", content=re.compile(r"graphql|gql`|@Query|@Mutation")),
    PatternSignature("Dependency Injection", content=re.compile(r"@Controller|@Injectable|@Module")),
    # Databases
    PatternSignature("Prisma ORM", dependencies=("@prisma/client", "prisma")),
    PatternSignature("MongoDB with Mongoose", dependencies=("mongoose",)),
    PatternSignature("TypeORM", dependencies=("typeorm",)),
    PatternSignature(
        "SQLAlchemy ORM",
        dependencies=("sqlalchemy", "sqlmodel"),
        content=re.compile(r"^\s*(?:from|import) sqlalchemy\b", re.MULTILINE),
    ),
    PatternSignature("Django ORM", content=re.compile(r"from django\.db import models")),
    # Authentication
    PatternSignature("JWT Authentication", content=re.compile(r"jwt|jsonwebtoken|Bearer")),
    PatternSignature("Supabase Auth", dependencies=("@supabase/supabase-js",)),
    PatternSignature("NextAuth.js", dependencies=("next-auth",)),
    # Testing
    PatternSignature("Unit Testing", dependencies=("jest", "vitest", "pytest")),
    PatternSignature("E2E Testing", dependencies=("cypress", "playwright", "@playwright/test")),
    # Build and styling
    PatternSignature("TypeScript", dependencies=("typescript",)),
    PatternSignature("Tailwind CSS", dependencies=("tailwindcss",)),
)


def detect_patterns(
    samples: Iterable[CodeSample],
    manifest: Manifest | None,
    signatures: tuple[PatternSignature, ...] = PATTERN_SIGNATURES,
) -> list[str]:
    """
    Detect design patterns in sampled code.

    Args:
        samples: Sampled files whose text is scanned
        manifest: Parsed manifest, or None

    Returns:
        De-duplicated pattern names in signature order
    """
    text = "\n".join(sample.content for sample in samples)
    dependency_names = manifest.dependency_names() if manifest else frozenset()

    found: dict[str, None] = {}
    for signature in signatures:
        if signature.name not in found and signature.matches(dependency_names, text):
            found[signature.name] = None
    return list(found)
