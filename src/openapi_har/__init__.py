"""Convert OpenAPI / Swagger documents into HAR request objects."""

from openapi_har.errors import DocumentMalformed, HarError, ReferenceUnresolvable, SamplingFailed
from openapi_har.har import ConversionResult, convert, get_all, get_endpoint

__all__ = [
    "ConversionResult",
    "DocumentMalformed",
    "HarError",
    "ReferenceUnresolvable",
    "SamplingFailed",
    "convert",
    "get_all",
    "get_endpoint",
]
