"""
Sampler constants and configuration.

Contains the noise filter, source extensions, ordered category rules,
per-category caps and the extension -> language table.
"""

import re

from repolens.services.sampler.types import FileCategory


# ─────────────────────────────────────────────────────────────
# Exclusion
# ─────────────────────────────────────────────────────────────

# Paths matching any of these are never candidates, whatever their category
SKIP_PATTERNS: list[re.Pattern[str]] = [
    # Dependency caches and virtualenvs
    re.compile(r"(^|/)node_modules/"),
    re.compile(r"(^|/)(vendor|bower_components|\.venv|venv|__pycache__)/"),
    # Version-control metadata
    re.compile(r"(^|/)\.(git|hg|svn)/"),
    # Build output
    re.compile(r"(^|/)(dist|build|out|target|coverage|\.next|\.nuxt|\.output|\.turbo)/"),
    # Lockfiles
    re.compile(r"\.lock$"),
    re.compile(r"lock\.(json|ya?ml)$"),
    # Bundles, source maps, declaration-only files
    re.compile(r"\.min\.(js|css)$"),
    re.compile(r"\.map$"),
    re.compile(r"\.d\.ts$"),
    # Binary and media assets
    re.compile(r"\.(png|jpe?g|gif|svg|ico|webp|bmp|avif)$", re.IGNORECASE),
    re.compile(r"\.(woff2?|ttf|eot|otf)$", re.IGNORECASE),
    re.compile(r"\.(mp3|mp4|wav|avi|mov|webm|ogg)$", re.IGNORECASE),
    re.compile(r"\.(zip|tar|gz|tgz|bz2|xz|7z|rar|jar|pdf|exe|dll|so|dylib|pyc|class)$", re.IGNORECASE),
]

# Extensions the classifier knows how to reason about
SOURCE_EXTENSIONS: tuple[str, ...] = (
    ".ts",
    ".tsx",
    ".js",
    ".jsx",
    ".mjs",
    ".cjs",
    ".py",
    ".go",
    ".rs",
    ".java",
    ".rb",
    ".php",
)


# ─────────────────────────────────────────────────────────────
# Categorization
# ─────────────────────────────────────────────────────────────

# Evaluated top to bottom; the first matching rule wins. Within one category
# the first pattern in list order wins as well.
CATEGORY_RULES: list[tuple[FileCategory, list[re.Pattern[str]]]] = [
    (
        FileCategory.ENTRY,
        [
            re.compile(r"^(src/)?(index|main|app|server)\.(ts|js|tsx|jsx|mjs|cjs)$"),
            re.compile(r"^(src/)?App\.(ts|js|tsx|jsx)$"),
            re.compile(r"^(src/|app/)?(main|app|server|manage|wsgi|asgi|__main__)\.py$"),
            re.compile(r"^(cmd/[^/]+/)?main\.go$"),
            re.compile(r"^src/(main|lib)\.rs$"),
        ],
    ),
    (
        FileCategory.CONFIG,
        [
            re.compile(r"^(vite|next|webpack|tailwind|rollup|postcss|vitest|jest)\.config\.(ts|js|mjs|cjs)$"),
            re.compile(r"^(src/)?(config|settings)\.(ts|js|py)$"),
            re.compile(r"^(src/)?[^/]+/(settings|config)\.py$"),
            re.compile(r"^(src/)?config/.+\.(ts|js|py)$"),
        ],
    ),
    (
        FileCategory.TYPES,
        [
            re.compile(r"^(src/)?types?/(index|.+)\.ts$"),
            re.compile(r"^(src/)?interfaces?/.+\.ts$"),
            re.compile(r"(^|/)(models?|schemas?)\.py$"),
        ],
    ),
    (
        FileCategory.ROUTES,
        [
            re.compile(r"^(src/)?(routes|api|pages/api)/.+\.(ts|js|tsx|jsx)$"),
            re.compile(r"^(src/)?app/api/.+\.(ts|js)$"),
            re.compile(r"^(src/)?controllers?/.+\.(ts|js)$"),
            re.compile(r"(^|/)(routers?|routes|api|endpoints)/.+\.py$"),
            re.compile(r"(^|/)(urls|views|routes)\.py$"),
            re.compile(r"(^|/)handlers?/.+\.go$"),
        ],
    ),
    (
        FileCategory.SERVICES,
        [
            re.compile(r"^(src/)?(services?|lib|utils?)/.+\.(ts|js)$"),
            re.compile(r"(^|/)(services?|domain|core)/.+\.py$"),
            re.compile(r"^internal/.+\.go$"),
        ],
    ),
    (
        FileCategory.COMPONENTS,
        [
            re.compile(r"^(src/)?components?/.+\.(tsx|jsx)$"),
            re.compile(r"^(src/)?(pages?|views?)/.+\.(tsx|jsx)$"),
        ],
    ),
]

# Lower number = admitted first
CATEGORY_PRIORITY: dict[FileCategory, int] = {
    FileCategory.ENTRY: 1,
    FileCategory.CONFIG: 2,
    FileCategory.TYPES: 3,
    FileCategory.ROUTES: 4,
    FileCategory.SERVICES: 5,
    FileCategory.COMPONENTS: 6,
    FileCategory.OTHER: 10,
}

# Maximum sampled files per category in a single analysis
CATEGORY_CAPS: dict[FileCategory, int] = {
    FileCategory.ENTRY: 3,
    FileCategory.CONFIG: 3,
    FileCategory.TYPES: 2,
    FileCategory.ROUTES: 4,
    FileCategory.SERVICES: 4,
    FileCategory.COMPONENTS: 4,
    FileCategory.OTHER: 2,
}


# ─────────────────────────────────────────────────────────────
# Language Inference
# ─────────────────────────────────────────────────────────────

LANGUAGE_BY_EXTENSION: dict[str, str] = {
    "ts": "typescript",
    "tsx": "tsx",
    "js": "javascript",
    "jsx": "jsx",
    "mjs": "javascript",
    "cjs": "javascript",
    "py": "python",
    "rb": "ruby",
    "go": "go",
    "rs": "rust",
    "java": "java",
    "kt": "kotlin",
    "swift": "swift",
    "php": "php",
    "cs": "csharp",
    "cpp": "cpp",
    "c": "c",
    "json": "json",
    "yaml": "yaml",
    "yml": "yaml",
    "md": "markdown",
    "css": "css",
    "scss": "scss",
    "html": "html",
}

# Languages whose line comments start with "#"
HASH_COMMENT_LANGUAGES = frozenset({"python", "ruby", "yaml"})
