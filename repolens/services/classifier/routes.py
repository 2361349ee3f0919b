"""
HTTP route extraction for codebase analysis.

Two sources of routes:
- router/method-call idioms (`router.get('/path', ...)`, `@app.post("/path")`,
  Flask `@bp.route("/path", methods=[...])`), in document order;
- file-based API directories (`pages/api/`, `app/api/`), one route per
  exported HTTP-verb handler, or a single "ALL" route for a default handler.
"""

import re
from collections.abc import Callable, Iterable, Iterator

from repolens.schemas.analysis import MAX_ROUTES, RouteInfo
from repolens.services.classifier.constants import (
    API_DIRECTORY_RE,
    API_PREFIX_RE,
    HTTP_METHODS,
    SCRIPT_EXTENSION_RE,
)
from repolens.services.sampler.types import CodeSample

RouteRule = tuple[re.Pattern[str], Callable[[re.Match[str]], list[tuple[str, str]]]]


def _method_call(match: re.Match[str]) -> list[tuple[str, str]]:
    return [(match.group(1).upper(), match.group(2))]


def _flask_route(match: re.Match[str]) -> list[tuple[str, str]]:
    methods = re.findall(r"\w+", match.group(2) or "") or ["GET"]
    return [(method.upper(), match.group(1)) for method in methods]


ROUTE_RULES: tuple[RouteRule, ...] = (
    (
        re.compile(
            r"(?<!@)\b(?:router|app|server|fastify)\.(get|post|put|patch|delete)\s*\(\s*['\"`]([^'\"`]+)['\"`]",
            re.IGNORECASE,
        ),
        _method_call,
    ),
    # FastAPI-style verb decorators, any router variable: @items_router.get("/items")
    (
        re.compile(r"@\w+\.(get|post|put|patch|delete)\s*\(\s*['\"]([^'\"]+)['\"]"),
        _method_call,
    ),
    (
        re.compile(
            r"@\w+\.route\(\s*['\"]([^'\"]+)['\"](?:[^)\n]*?methods\s*=\s*[\[(]([^\])]*)[\])])?"
        ),
        _flask_route,
    ),
)

_HANDLER_RE = {
    method: re.compile(rf"export\s+(?:(?:async\s+)?function|const)\s+{method}\b")
    for method in HTTP_METHODS
}


def api_route_path(file_path: str) -> str:
    """Derive a route path from a file under an API directory."""
    route = API_PREFIX_RE.sub("/api", file_path, count=1)
    route = SCRIPT_EXTENSION_RE.sub("", route)
    route = re.sub(r"/route$", "", route)
    route = re.sub(r"/index$", "", route)
    return route


def _call_routes(sample: CodeSample) -> Iterator[RouteInfo]:
    found: list[tuple[int, str, str]] = []
    for pattern, transform in ROUTE_RULES:
        for match in pattern.finditer(sample.content):
            for method, path in transform(match):
                found.append((match.start(), method, path))

    for _, method, path in sorted(found, key=lambda item: item[0]):
        yield RouteInfo(method=method, path=path, source_file=sample.path)


def _file_routes(sample: CodeSample) -> Iterator[RouteInfo]:
    if not API_DIRECTORY_RE.search(sample.path) or not SCRIPT_EXTENSION_RE.search(sample.path):
        return

    route = api_route_path(sample.path)
    methods = [m for m in HTTP_METHODS if _HANDLER_RE[m].search(sample.content)]

    if methods:
        for method in methods:
            yield RouteInfo(method=method, path=route, source_file=sample.path)
    elif "export default" in sample.content:
        yield RouteInfo(method="ALL", path=route, source_file=sample.path)


def extract_routes(samples: Iterable[CodeSample]) -> list[RouteInfo]:
    """
    Extract HTTP routes from sampled files.

    Args:
        samples: Sampled files to scan

    Returns:
        RouteInfo entries in first-found order, at most MAX_ROUTES
    """
    routes: list[RouteInfo] = []

    for sample in samples:
        for route in (*_call_routes(sample), *_file_routes(sample)):
            routes.append(route)
            if len(routes) >= MAX_ROUTES:
                return routes

    return routes
