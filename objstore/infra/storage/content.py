"""Content-Type and Cache-Control inference from object paths."""

from __future__ import annotations

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Order matters: ".json" must be tried before ".js". Matching is by substring,
# so an extension anywhere in the path (e.g. a "site.html/" directory) counts.
CONTENT_TYPES: tuple[tuple[str, str], ...] = (
    (".html", "text/html"),
    (".css", "text/css"),
    (".json", "application/json"),
    (".js", "application/x-javascript"),
    (".png", "image/png"),
    (".jpg", "image/jpg"),
)

NO_CACHE = "no-cache"
LONG_CACHE = "max-age=31536000"
NO_CACHE_SUFFIXES: tuple[str, ...] = (".html", ".json", ".log")


def content_type_for(path: str) -> str:
    lowered = path.lower()
    for extension, content_type in CONTENT_TYPES:
        if extension in lowered:
            return content_type
    return DEFAULT_CONTENT_TYPE


def cache_control_for(path: str) -> str:
    if path.lower().endswith(NO_CACHE_SUFFIXES):
        return NO_CACHE
    return LONG_CACHE
