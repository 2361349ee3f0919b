"""
Sampler data types.

Data classes for categorized candidate paths and fetched code samples.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum

# Caller-supplied content fetch: path -> text, or None when the file is absent.
# Synchronous callables returning text are accepted too.
FetchFn = Callable[[str], Awaitable[str | None] | str | None]


class FileCategory(str, Enum):
    """Sampling category assigned to a path."""

    ENTRY = "entry"
    CONFIG = "config"
    TYPES = "types"
    ROUTES = "routes"
    SERVICES = "services"
    COMPONENTS = "components"
    OTHER = "other"


@dataclass(frozen=True)
class SelectedPath:
    """A candidate path admitted by the selection step."""

    path: str
    category: FileCategory
    priority: int


@dataclass(frozen=True)
class CodeSample:
    """Content of a sampled file, possibly truncated to the line budget."""

    path: str
    language: str
    content: str
    line_count: int  # Original line count before truncation
    truncated: bool
