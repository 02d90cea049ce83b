"""Assemble HAR request objects for single operations or a whole document."""

import logging
from dataclasses import dataclass, field
from typing import Any

from openapi_har.builder.headers import get_headers
from openapi_har.builder.params import get_operation
from openapi_har.builder.payload import get_payload
from openapi_har.builder.query import get_query_strings
from openapi_har.builder.url import get_base_url, get_full_path
from openapi_har.errors import DocumentMalformed, HarError
from openapi_har.models import HarEntry, HarRequest
from openapi_har.refs import RefResolver
from openapi_har.sampler import Sampler

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")
NO_DESCRIPTION = "No description available"


@dataclass
class ConversionResult:
    """Outcome of converting a whole document: entries, or the error that stopped it."""

    entries: list[HarEntry] = field(default_factory=list)
    error: HarError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def get_endpoint(
    document: dict,
    path: str,
    method: str,
    query_values: dict[str, Any] | None = None,
    sampler: Sampler | None = None,
) -> HarRequest:
    """Build the HAR request for one path + method pair.

    `query_values` overrides synthesised query parameter values by name.
    """
    resolver = RefResolver(document)
    logger.debug("Building HAR request for %s %s", method.upper(), path)

    return HarRequest(
        method=method.upper(),
        url=get_base_url(document) + get_full_path(document, path, method, resolver),
        headers=get_headers(document, path, method, resolver),
        query_string=get_query_strings(document, path, method, query_values, resolver),
        post_data=get_payload(document, path, method, sampler, resolver),
    )


def _entries(document: dict, sampler: Sampler | None) -> list[HarEntry]:
    paths = document.get("paths")
    if not isinstance(paths, dict):
        raise DocumentMalformed("document has no 'paths' mapping")

    base_url = get_base_url(document)
    entries = []
    for path, path_item in paths.items():
        for method in path_item or {}:
            if method.lower() not in HTTP_METHODS:
                continue
            operation = get_operation(document, path, method)
            entries.append(
                HarEntry(
                    method=method.upper(),
                    url=base_url + path,
                    description=operation.get("description") or NO_DESCRIPTION,
                    har=get_endpoint(document, path, method, sampler=sampler),
                )
            )
    return entries


def convert(document: dict, sampler: Sampler | None = None) -> ConversionResult:
    """Convert every operation; failures are reported in the result, not raised."""
    try:
        return ConversionResult(entries=_entries(document, sampler))
    except HarError as e:
        logger.exception("Failed to convert document")
        return ConversionResult(error=e)
    except Exception as e:
        logger.exception("Failed to convert document")
        error = DocumentMalformed(str(e))
        error.__cause__ = e
        return ConversionResult(error=error)


def get_all(document: dict, sampler: Sampler | None = None) -> list[HarEntry] | None:
    """HAR entries for every operation in the document, or None if any failed."""
    result = convert(document, sampler)
    if not result.ok:
        return None
    return result.entries
