"""
Sampler package for budget-bounded file sampling.

Module structure:
- sampler.py: Main FileSampler class and truncation
- selection.py: Exclusion, categorization and capped selection
- types.py: Data types (FileCategory, SelectedPath, CodeSample)
- constants.py: Skip patterns, category rules, caps, language table
"""

from repolens.services.sampler.constants import (
    CATEGORY_CAPS,
    CATEGORY_PRIORITY,
    CATEGORY_RULES,
    SKIP_PATTERNS,
    SOURCE_EXTENSIONS,
)
from repolens.services.sampler.sampler import FileSampler, truncate_content
from repolens.services.sampler.selection import (
    categorize_path,
    coerce_paths,
    is_source_file,
    language_for_path,
    select_paths,
    should_skip,
)
from repolens.services.sampler.types import CodeSample, FetchFn, FileCategory, SelectedPath

__all__ = [
    # Main class
    "FileSampler",
    # Types
    "CodeSample",
    "FetchFn",
    "FileCategory",
    "SelectedPath",
    # Constants
    "CATEGORY_CAPS",
    "CATEGORY_PRIORITY",
    "CATEGORY_RULES",
    "SKIP_PATTERNS",
    "SOURCE_EXTENSIONS",
    # Utilities
    "categorize_path",
    "coerce_paths",
    "is_source_file",
    "language_for_path",
    "select_paths",
    "should_skip",
    "truncate_content",
]
