"""
File Sampler service.

Selects a small, diverse, budget-bounded subset of a repository's files and
materializes their content through a caller-supplied fetch capability.
"""

import asyncio
import inspect
import logging
from collections.abc import Iterable

from repolens.config import settings
from repolens.core.exceptions import InvalidInputError
from repolens.services.sampler.selection import (
    language_for_path,
    select_paths,
    truncation_marker,
)
from repolens.services.sampler.types import CodeSample, FetchFn, SelectedPath

logger = logging.getLogger(__name__)


def truncate_content(path: str, content: str, max_lines: int) -> CodeSample:
    """
    Build a CodeSample, keeping at most `max_lines` lines of content.

    Truncated content is exactly the first `max_lines` lines followed by one
    marker line. The original line count is recorded either way; a single
    trailing newline terminates the last line rather than starting a new one.
    """
    language = language_for_path(path)
    lines = content.split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    line_count = len(lines)

    if line_count <= max_lines:
        return CodeSample(path, language, content, line_count, truncated=False)

    omitted = line_count - max_lines
    truncated_content = "\n".join([*lines[:max_lines], truncation_marker(language, omitted)])
    return CodeSample(path, language, truncated_content, line_count, truncated=True)


def _check_budget(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidInputError(name, f"must be a positive integer, got {value!r}")
    return value


class FileSampler:
    """
    Select and fetch the files worth reading from a repository tree.

    Selection is deterministic for a given path order. Fetching runs in
    fixed-size batches; each batch completes before the next starts, so no
    more than `batch_size` fetches are ever in flight.
    """

    def __init__(
        self,
        max_files: int | None = None,
        max_lines_per_file: int | None = None,
        batch_size: int | None = None,
    ) -> None:
        self.max_files = _check_budget(
            "max_files", settings.max_files if max_files is None else max_files
        )
        self.max_lines_per_file = _check_budget(
            "max_lines_per_file",
            settings.max_lines_per_file if max_lines_per_file is None else max_lines_per_file,
        )
        self.batch_size = _check_budget(
            "batch_size", settings.fetch_batch_size if batch_size is None else batch_size
        )

    def select(self, paths: Iterable[str]) -> list[SelectedPath]:
        """Choose which paths to read, without fetching anything."""
        return select_paths(paths, self.max_files)

    async def sample(self, paths: Iterable[str], fetch: FetchFn) -> list[CodeSample]:
        """
        Select paths, fetch their content and apply the line budget.

        Args:
            paths: Full repository path listing
            fetch: Content fetch capability; None or an exception means absent

        Returns:
            CodeSamples in selection order, at most `max_files` of them
        """
        if not callable(fetch):
            raise InvalidInputError("fetch", "expected a callable content fetch capability")

        selected = self.select(paths)
        samples: list[CodeSample] = []

        for start in range(0, len(selected), self.batch_size):
            batch = selected[start : start + self.batch_size]
            results = await asyncio.gather(*(self._fetch_one(fetch, s.path) for s in batch))
            samples.extend(sample for sample in results if sample is not None)

        logger.info(
            f"Sampled {len(samples)} of {len(selected)} selected files "
            f"({sum(1 for s in samples if s.truncated)} truncated)"
        )
        return samples

    async def _fetch_one(self, fetch: FetchFn, path: str) -> CodeSample | None:
        """Fetch a single file; any failure resolves to None."""
        try:
            content = fetch(path)
            if inspect.isawaitable(content):
                content = await content
        except Exception as e:
            logger.warning(f"Failed to fetch {path}: {e}")
            return None

        if not content:
            logger.debug(f"No content for {path}, skipping")
            return None
        if not isinstance(content, str):
            logger.warning(f"Fetch for {path} returned {type(content).__name__}, skipping")
            return None

        return truncate_content(path, content, self.max_lines_per_file)
