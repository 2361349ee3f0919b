"""
Project manifest parsing.

Turns a caller-supplied package descriptor (already-parsed mapping, raw JSON
text, requirements.txt or pyproject.toml text) into a `Manifest`. Anything
malformed degrades to `None` ("no manifest") instead of raising.
"""

import json
import logging
import re
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

# PEP 508 requirement head: name, optional extras, optional version spec
_REQUIREMENT_RE = re.compile(r"^\s*([A-Za-z0-9][A-Za-z0-9._-]*)\s*(?:\[[^\]]*\])?\s*(.*)$")


@dataclass(frozen=True)
class Manifest:
    """Parsed project descriptor."""

    name: str | None = None
    version: str | None = None
    dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)
    scripts: dict[str, str] = field(default_factory=dict)
    main: str | None = None  # Package entry field (package.json "main")

    def all_dependencies(self) -> dict[str, str]:
        """Runtime then development dependencies, runtime keys first."""
        merged = dict(self.dependencies)
        for name, version in self.dev_dependencies.items():
            merged[name] = version
        return merged

    def dependency_names(self) -> frozenset[str]:
        return frozenset(self.all_dependencies())


def _string_mapping(value: Any) -> dict[str, str]:
    """Coerce a manifest sub-field to a flat str -> str mapping."""
    if not isinstance(value, Mapping):
        return {}
    return {
        str(key): value_ if isinstance(value_, str) else json.dumps(value_)
        for key, value_ in value.items()
    }


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def manifest_from_mapping(data: Mapping[str, Any]) -> Manifest:
    """Build a Manifest from a package.json-shaped mapping."""
    return Manifest(
        name=_optional_str(data.get("name")),
        version=_optional_str(data.get("version")),
        dependencies=_string_mapping(data.get("dependencies")),
        dev_dependencies=_string_mapping(data.get("devDependencies")),
        scripts=_string_mapping(data.get("scripts")),
        main=_optional_str(data.get("main")),
    )


def parse_manifest(raw: Any) -> Manifest | None:
    """
    Parse a caller-supplied manifest.

    Args:
        raw: A Manifest, an already-parsed mapping, raw JSON text/bytes, or None

    Returns:
        Manifest, or None when the input is absent or malformed
    """
    if raw is None:
        return None
    if isinstance(raw, Manifest):
        return raw
    if isinstance(raw, Mapping):
        return manifest_from_mapping(raw)

    if isinstance(raw, bytes | bytearray):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("Failed to decode manifest bytes as UTF-8")
            return None

    if isinstance(raw, str):
        if not raw.strip():
            return None
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Failed to parse manifest JSON")
            return None
        if not isinstance(data, Mapping):
            logger.warning(f"Manifest JSON is a {type(data).__name__}, expected an object")
            return None
        return manifest_from_mapping(data)

    logger.warning(f"Ignoring manifest of unsupported type {type(raw).__name__}")
    return None


def _split_requirement(line: str) -> tuple[str, str] | None:
    """Split a requirement line into (normalized name, version spec)."""
    line = line.split("#", 1)[0].split(";", 1)[0].strip()
    if not line or line.startswith("-"):
        return None
    match = _REQUIREMENT_RE.match(line)
    if not match:
        return None
    name = match.group(1).lower().replace("_", "-")
    return name, match.group(2).strip() or "*"


def manifest_from_requirements(content: str) -> Manifest:
    """Build a Manifest from requirements.txt text."""
    dependencies: dict[str, str] = {}
    for line in content.splitlines():
        parsed = _split_requirement(line)
        if parsed:
            dependencies.setdefault(*parsed)
    return Manifest(dependencies=dependencies)


def manifest_from_pyproject(content: str) -> Manifest | None:
    """
    Build a Manifest from pyproject.toml text.

    Reads PEP 621 `[project]` tables and Poetry `[tool.poetry]` tables.
    Optional dependency groups and Poetry dev groups become dev dependencies.

    Returns:
        Manifest, or None when the TOML cannot be parsed
    """
    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError:
        logger.warning("Failed to parse pyproject.toml")
        return None

    dependencies: dict[str, str] = {}
    dev_dependencies: dict[str, str] = {}
    scripts: dict[str, str] = {}
    name = version = None

    project = data.get("project")
    if isinstance(project, dict):
        name = _optional_str(project.get("name"))
        version = _optional_str(project.get("version"))
        for requirement in project.get("dependencies") or []:
            parsed = _split_requirement(str(requirement))
            if parsed:
                dependencies.setdefault(*parsed)
        optional = project.get("optional-dependencies") or {}
        if isinstance(optional, dict):
            for group in optional.values():
                for requirement in group or []:
                    parsed = _split_requirement(str(requirement))
                    if parsed:
                        dev_dependencies.setdefault(*parsed)
        scripts.update(_string_mapping(project.get("scripts")))

    tool = data.get("tool")
    poetry = tool.get("poetry") if isinstance(tool, dict) else None
    if isinstance(poetry, dict):
        name = name or _optional_str(poetry.get("name"))
        version = version or _optional_str(poetry.get("version"))
        for dep_name, spec in _string_mapping(poetry.get("dependencies")).items():
            if dep_name.lower() != "python":
                dependencies.setdefault(dep_name.lower(), spec)
        groups = poetry.get("group") or {}
        if isinstance(groups, dict):
            for group in groups.values():
                if isinstance(group, dict):
                    for dep_name, spec in _string_mapping(group.get("dependencies")).items():
                        dev_dependencies.setdefault(dep_name.lower(), spec)
        scripts.update(_string_mapping(poetry.get("scripts")))

    return Manifest(
        name=name,
        version=version,
        dependencies=dependencies,
        dev_dependencies=dev_dependencies,
        scripts=scripts,
    )
