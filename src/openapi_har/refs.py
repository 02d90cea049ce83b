"""Local JSON pointer (`#/a/b/c`) resolution.

Resolution never mutates the document: every resolved value is a deep copy,
and repeated lookups are served from a per-resolver cache.
"""

import copy
import logging
from typing import Any
from urllib.parse import unquote

from openapi_har.config import get_settings
from openapi_har.errors import ReferenceUnresolvable

logger = logging.getLogger(__name__)


def is_ref(value: Any) -> bool:
    """True for a `{"$ref": "#/..."}` mapping."""
    return isinstance(value, dict) and isinstance(value.get("$ref"), str) and value["$ref"].startswith("#")


def _pointer_segments(ref: str) -> list[str]:
    parts = ref.split("/")
    return [unquote(p).replace("~1", "/").replace("~0", "~") for p in parts[1:]]


class RefResolver:
    """Resolves local references against one document."""

    def __init__(self, document: dict, max_depth: int | None = None):
        self.document = document
        self.max_depth = max_depth if max_depth is not None else get_settings().max_ref_depth
        self._cache: dict[str, Any] = {}

    def resolve(self, ref: str) -> Any:
        """Return a copy of the value `ref` points to, following chained refs."""
        if ref in self._cache:
            return copy.deepcopy(self._cache[ref])

        seen = [ref]
        value = self._walk(ref)
        while is_ref(value):
            next_ref = value["$ref"]
            if next_ref in seen or len(seen) >= self.max_depth:
                raise ReferenceUnresolvable(ref, "reference resolution depth exceeded")
            seen.append(next_ref)
            value = self._walk(next_ref)

        self._cache[ref] = value
        return copy.deepcopy(value)

    def deref(self, value: Any) -> Any:
        """Resolve `value` when it is a reference, otherwise return it unchanged."""
        if is_ref(value):
            return self.resolve(value["$ref"])
        return value

    def _walk(self, ref: str) -> Any:
        if not ref.startswith("#"):
            raise ReferenceUnresolvable(ref, "external reference not supported")

        segments = _pointer_segments(ref)
        if not segments:
            logger.warning("Reference %r has no path segments, using empty object", ref)
            return {}

        current: Any = self.document
        for segment in segments:
            if isinstance(current, dict) and segment in current:
                current = current[segment]
            elif isinstance(current, list) and segment.isdigit() and int(segment) < len(current):
                current = current[int(segment)]
            else:
                raise ReferenceUnresolvable(ref, f"missing segment {segment!r}")
        return current


def resolve_ref(document: dict, ref: str) -> Any:
    """Resolve a single reference without keeping a cache around."""
    return RefResolver(document).resolve(ref)
