"""
Tests for the FileSampler service.

Tests cover:
- Noise exclusion and source-file filtering
- Path categorization and first-match tiebreak
- Category-capped greedy selection
- Line-budget truncation
- Batched fetching, failure isolation and input validation
"""

import logging

import pytest

from repolens.core.exceptions import InvalidInputError
from repolens.services.sampler import (
    CATEGORY_CAPS,
    FileCategory,
    FileSampler,
    categorize_path,
    is_source_file,
    language_for_path,
    select_paths,
    should_skip,
    truncate_content,
)
from tests.helpers.fakes import FakeRepo

ENTRY_FILES = ["src/index.ts", "src/main.ts", "src/App.tsx", "server.js"]
CONFIG_FILES = [
    "vite.config.ts",
    "next.config.js",
    "tailwind.config.js",
    "src/config.ts",
    "config/database.ts",
]
TYPES_FILES = ["src/types/index.ts", "src/types/user.ts", "types/api.ts"]
ROUTES_FILES = [
    "src/routes/users.ts",
    "src/routes/auth.ts",
    "src/routes/posts.ts",
    "src/api/health.ts",
    "src/controllers/user.ts",
    "src/controllers/post.ts",
]
SERVICES_FILES = [
    "src/services/auth.ts",
    "src/services/email.ts",
    "src/lib/db.ts",
    "src/utils/format.ts",
    "src/utils/date.ts",
]
COMPONENT_FILES = [
    "src/components/Header.tsx",
    "src/components/Footer.tsx",
    "src/components/Sidebar.tsx",
    "src/pages/Home.tsx",
]


def numbered_lines(count: int) -> str:
    return "\n".join(f"line {i}" for i in range(1, count + 1))


class TestExclusion:
    """Tests for noise and non-source filtering."""

    def test_dependency_and_build_dirs_are_skipped(self) -> None:
        """Vendored dependencies and build output are never candidates."""
        assert should_skip("node_modules/react/index.js")
        assert should_skip("packages/web/node_modules/lodash/lodash.js")
        assert should_skip("dist/index.js")
        assert should_skip("build/main.js")
        assert should_skip(".next/server/app.js")
        assert should_skip("venv/lib/site.py")
        assert should_skip("app/__pycache__/main.py")

    def test_lockfiles_and_generated_files_are_skipped(self) -> None:
        """Lockfiles, bundles, maps and declaration files are noise."""
        assert should_skip("package-lock.json")
        assert should_skip("pnpm-lock.yaml")
        assert should_skip("yarn.lock")
        assert should_skip("public/vendor.min.js")
        assert should_skip("dist/app.js.map")
        assert should_skip("types/global.d.ts")

    def test_media_is_skipped(self) -> None:
        """Images, fonts and archives are noise."""
        assert should_skip("public/logo.svg")
        assert should_skip("assets/Hero.PNG")
        assert should_skip("fonts/inter.woff2")

    def test_regular_source_is_kept(self) -> None:
        """Ordinary source files pass the filter."""
        assert not should_skip("src/index.ts")
        assert not should_skip("app/services/billing.py")

    def test_source_extensions(self) -> None:
        """Only code the classifier understands is a candidate."""
        assert is_source_file("src/index.ts")
        assert is_source_file("main.go")
        assert is_source_file("app/models.py")
        assert not is_source_file("README.md")
        assert not is_source_file("package.json")
        assert not is_source_file("Dockerfile")


class TestCategorization:
    """Tests for path -> FileCategory assignment."""

    @pytest.mark.parametrize("path", ENTRY_FILES + ["main.py", "manage.py", "cmd/api/main.go"])
    def test_entry_files(self, path: str) -> None:
        assert categorize_path(path) == FileCategory.ENTRY

    @pytest.mark.parametrize("path", CONFIG_FILES + ["app/config.py", "mysite/settings.py"])
    def test_config_files(self, path: str) -> None:
        assert categorize_path(path) == FileCategory.CONFIG

    @pytest.mark.parametrize("path", TYPES_FILES + ["app/models.py", "api/schemas.py"])
    def test_types_files(self, path: str) -> None:
        assert categorize_path(path) == FileCategory.TYPES

    @pytest.mark.parametrize(
        "path", ROUTES_FILES + ["app/routers/items.py", "blog/urls.py", "pages/api/users.ts"]
    )
    def test_routes_files(self, path: str) -> None:
        assert categorize_path(path) == FileCategory.ROUTES

    @pytest.mark.parametrize("path", SERVICES_FILES + ["app/services/billing.py"])
    def test_services_files(self, path: str) -> None:
        assert categorize_path(path) == FileCategory.SERVICES

    @pytest.mark.parametrize("path", COMPONENT_FILES)
    def test_component_files(self, path: str) -> None:
        assert categorize_path(path) == FileCategory.COMPONENTS

    def test_unmatched_is_other(self) -> None:
        """Paths no rule claims fall into OTHER."""
        assert categorize_path("scripts/seed.ts") == FileCategory.OTHER
        assert categorize_path("tests/test_users.py") == FileCategory.OTHER

    def test_first_rule_wins(self) -> None:
        """A path several rules could claim takes the earliest category."""
        # Matches both the config rule and the Python services rule
        assert categorize_path("core/settings.py") == FileCategory.CONFIG
        # Matches both the types rule and the routes rule
        assert categorize_path("api/models.py") == FileCategory.TYPES

    def test_language_inference(self) -> None:
        """Language tags come from the extension."""
        assert language_for_path("src/index.ts") == "typescript"
        assert language_for_path("src/App.tsx") == "tsx"
        assert language_for_path("main.py") == "python"
        assert language_for_path("lib/thing.zig") == "zig"
        assert language_for_path("Makefile") == ""


class TestSelection:
    """Tests for the category-capped greedy selection."""

    def test_caps_and_priority_fill(self) -> None:
        """Higher-priority categories fill to their caps before lower ones get slots."""
        paths = (
            COMPONENT_FILES + SERVICES_FILES + ROUTES_FILES + TYPES_FILES + CONFIG_FILES + ENTRY_FILES
        )

        selected = select_paths(paths, max_files=20)
        by_category: dict[FileCategory, list[str]] = {}
        for item in selected:
            by_category.setdefault(item.category, []).append(item.path)

        assert len(selected) == 20
        assert by_category[FileCategory.ENTRY] == ENTRY_FILES[:3]
        assert by_category[FileCategory.CONFIG] == CONFIG_FILES[:3]
        assert by_category[FileCategory.TYPES] == TYPES_FILES[:2]
        assert by_category[FileCategory.ROUTES] == ROUTES_FILES[:4]
        assert by_category[FileCategory.SERVICES] == SERVICES_FILES[:4]
        assert by_category[FileCategory.COMPONENTS] == COMPONENT_FILES[:4]

    def test_selection_order_follows_priority(self) -> None:
        """Admitted paths come back grouped by ascending category priority."""
        paths = ["src/components/Button.tsx", "src/services/api.ts", "src/index.ts"]

        selected = select_paths(paths, max_files=20)

        assert [item.path for item in selected] == [
            "src/index.ts",
            "src/services/api.ts",
            "src/components/Button.tsx",
        ]
        assert [item.priority for item in selected] == [1, 5, 6]

    def test_total_cap_is_respected(self) -> None:
        """The overall ceiling wins over unused category room."""
        paths = ENTRY_FILES + CONFIG_FILES + ROUTES_FILES

        selected = select_paths(paths, max_files=5)

        assert [item.path for item in selected] == ENTRY_FILES[:3] + CONFIG_FILES[:2]

    def test_other_category_is_capped(self) -> None:
        """Uncategorized files only ever take two slots."""
        paths = [f"scripts/task_{i}.ts" for i in range(10)]

        selected = select_paths(paths, max_files=20)

        assert len(selected) == CATEGORY_CAPS[FileCategory.OTHER] == 2

    def test_noise_never_selected(self) -> None:
        """Skipped and non-source paths never appear in the selection."""
        paths = [
            "node_modules/react/index.js",
            "dist/index.js",
            "package-lock.json",
            "README.md",
            "src/logo.svg",
            "src/index.ts",
        ]

        selected = select_paths(paths, max_files=20)

        assert [item.path for item in selected] == ["src/index.ts"]

    def test_selection_is_deterministic(self) -> None:
        """Same input order gives the same selection."""
        paths = ROUTES_FILES + ENTRY_FILES + SERVICES_FILES

        assert select_paths(paths, 10) == select_paths(list(paths), 10)

    def test_non_string_paths_are_dropped(self) -> None:
        """Junk entries in the listing are ignored, not fatal."""
        selected = select_paths(["src/index.ts", None, 42, ""], max_files=20)  # type: ignore[list-item]

        assert [item.path for item in selected] == ["src/index.ts"]

    def test_bare_string_is_rejected(self) -> None:
        """A single string is not a path listing."""
        with pytest.raises(InvalidInputError):
            select_paths("src/index.ts", max_files=20)


class TestTruncation:
    """Tests for line-budget truncation."""

    def test_short_content_is_untouched(self) -> None:
        """Content within budget is returned verbatim."""
        content = numbered_lines(10)

        sample = truncate_content("src/index.ts", content, max_lines=300)

        assert sample.content == content
        assert sample.line_count == 10
        assert not sample.truncated
        assert sample.language == "typescript"

    def test_content_at_budget_is_untouched(self) -> None:
        """Exactly max_lines lines is not truncated."""
        sample = truncate_content("src/index.ts", numbered_lines(300), max_lines=300)

        assert not sample.truncated

    def test_long_content_keeps_first_lines_plus_marker(self) -> None:
        """Truncated content is the first N lines followed by one marker line."""
        content = numbered_lines(305)

        sample = truncate_content("src/index.ts", content, max_lines=300)
        lines = sample.content.split("\n")

        assert sample.truncated
        assert sample.line_count == 305
        assert len(lines) == 301
        assert lines[:300] == content.split("\n")[:300]
        assert lines[-1] == "// ... truncated (5 more lines)"

    def test_trailing_newline_is_not_a_line(self) -> None:
        """A file at budget that ends in a newline is not truncated."""
        content = numbered_lines(300) + "\n"

        sample = truncate_content("src/index.ts", content, max_lines=300)

        assert not sample.truncated
        assert sample.line_count == 300
        assert sample.content == content

    def test_truncated_count_ignores_trailing_newline(self) -> None:
        sample = truncate_content("src/index.ts", numbered_lines(12) + "\n", max_lines=10)

        assert sample.line_count == 12
        assert sample.content.split("\n")[-1] == "// ... truncated (2 more lines)"

    def test_python_marker_uses_hash_comment(self) -> None:
        """The marker is a comment in the file's own language."""
        sample = truncate_content("app/main.py", numbered_lines(12), max_lines=10)

        assert sample.content.split("\n")[-1] == "# ... truncated (2 more lines)"


class TestFileSamplerInit:
    """Tests for sampler budgets."""

    def test_defaults_come_from_settings(self) -> None:
        """Unspecified budgets use the configured defaults."""
        from repolens.config import settings

        sampler = FileSampler()

        assert sampler.max_files == settings.max_files
        assert sampler.max_lines_per_file == settings.max_lines_per_file
        assert sampler.batch_size == settings.fetch_batch_size

    @pytest.mark.parametrize(
        "kwargs",
        [{"max_files": 0}, {"max_lines_per_file": -1}, {"batch_size": 0}, {"max_files": True}],
    )
    def test_invalid_budgets_raise(self, kwargs: dict) -> None:
        with pytest.raises(InvalidInputError):
            FileSampler(**kwargs)

    def test_invalid_input_error_is_type_error(self) -> None:
        """Callers catching TypeError also catch bad engine input."""
        with pytest.raises(TypeError):
            FileSampler(max_files=0)


class TestFileSamplerSample:
    """Tests for fetching and sampling."""

    @pytest.mark.asyncio
    async def test_samples_selected_files_in_order(self, next_app_repo: FakeRepo) -> None:
        """Only selected files are fetched; samples follow selection order."""
        sampler = FileSampler()

        samples = await sampler.sample(next_app_repo.paths, next_app_repo.fetch)

        assert [s.path for s in samples] == [
            "src/pages/api/users.ts",
            "src/components/Header.tsx",
            "src/pages/index.tsx",
        ]
        assert "node_modules/react/index.js" not in next_app_repo.calls
        assert "README.md" not in next_app_repo.calls

    @pytest.mark.asyncio
    async def test_missing_and_empty_files_are_dropped(self) -> None:
        """None or empty content means absent."""
        repo = FakeRepo({"src/index.ts": "export const a = 1", "src/main.ts": ""})

        samples = await FileSampler().sample(["src/index.ts", "src/main.ts", "src/app.ts"], repo.fetch)

        assert [s.path for s in samples] == ["src/index.ts"]

    @pytest.mark.asyncio
    async def test_fetch_failure_is_isolated(self, caplog: pytest.LogCaptureFixture) -> None:
        """One failing fetch drops that file only and is logged."""
        repo = FakeRepo(
            {"src/index.ts": "a", "src/main.ts": "b", "src/config.ts": "c"},
            failing={"src/main.ts"},
        )

        with caplog.at_level(logging.WARNING):
            samples = await FileSampler().sample(repo.paths, repo.fetch)

        assert [s.path for s in samples] == ["src/index.ts", "src/config.ts"]
        assert "src/main.ts" in caplog.text

    @pytest.mark.asyncio
    async def test_batch_ceiling(self) -> None:
        """No more than batch_size fetches are ever in flight."""
        files = {f"src/services/s{i}.ts": "x" for i in range(4)}
        files.update({f"src/routes/r{i}.ts": "x" for i in range(4)})
        files.update({f"src/components/C{i}.tsx": "x" for i in range(4)})
        repo = FakeRepo(files)

        samples = await FileSampler(batch_size=5).sample(repo.paths, repo.fetch)

        assert len(samples) == 12
        assert repo.peak_in_flight == 5

    @pytest.mark.asyncio
    async def test_sequential_with_batch_size_one(self) -> None:
        """A batch size of one fetches strictly one file at a time."""
        repo = FakeRepo({"src/index.ts": "a", "src/main.ts": "b", "src/config.ts": "c"})

        await FileSampler(batch_size=1).sample(repo.paths, repo.fetch)

        assert repo.peak_in_flight == 1
        assert len(repo.calls) == 3

    @pytest.mark.asyncio
    async def test_sync_fetch_is_accepted(self) -> None:
        """A plain function returning text works as a fetch capability."""
        files = {"src/index.ts": "export const a = 1"}

        samples = await FileSampler().sample(files, files.get)

        assert [s.content for s in samples] == ["export const a = 1"]

    @pytest.mark.asyncio
    async def test_long_files_are_truncated(self) -> None:
        """The line budget applies to fetched content."""
        repo = FakeRepo({"src/index.ts": numbered_lines(50)})

        samples = await FileSampler(max_lines_per_file=10).sample(repo.paths, repo.fetch)

        assert samples[0].truncated
        assert samples[0].line_count == 50
        assert len(samples[0].content.split("\n")) == 11

    @pytest.mark.asyncio
    async def test_non_callable_fetch_raises(self) -> None:
        with pytest.raises(InvalidInputError):
            await FileSampler().sample(["src/index.ts"], None)  # type: ignore[arg-type]

    @pytest.mark.asyncio
    async def test_string_paths_raise(self) -> None:
        repo = FakeRepo({})

        with pytest.raises(InvalidInputError):
            await FileSampler().sample("src/index.ts", repo.fetch)

    @pytest.mark.asyncio
    async def test_empty_listing_yields_no_samples(self) -> None:
        repo = FakeRepo({})

        assert await FileSampler().sample([], repo.fetch) == []
        assert repo.calls == []
