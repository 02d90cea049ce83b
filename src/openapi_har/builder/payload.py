"""Request body synthesis.

Swagger 2 bodies come from `in: body` and `in: formData` parameters,
OpenAPI 3 bodies from `requestBody.content`. Both sources are evaluated in
that order and the last one that produces a body wins; multipart fields
accumulate instead of replacing each other.
"""

import json
import logging
from typing import Any

from openapi_har.builder.params import (
    get_operation,
    location,
    operation_parameters,
    param_type,
    path_parameters,
    placeholder,
    stringify,
)
from openapi_har.errors import SamplingFailed
from openapi_har.models import NameValue, PostData
from openapi_har.refs import RefResolver
from openapi_har.sampler import Sampler, SchemaSampler

logger = logging.getLogger(__name__)

JSON_MIME = "application/json"
MULTIPART_MIME = "multipart/form-data"


def _sample(sampler: Sampler, schema: dict, document: dict) -> Any:
    try:
        return sampler.sample(schema, skip_read_only=True, document=document)
    except Exception as e:
        raise SamplingFailed(f"could not sample schema: {e}") from e


def _json_payload(sample: Any) -> PostData:
    return PostData(mime_type=JSON_MIME, text=json.dumps(sample))


def _add_form_fields(payload: PostData | None, fields: list[NameValue]) -> PostData | None:
    if not fields:
        return payload
    if payload is None or not payload.params:
        return PostData(mime_type=MULTIPART_MIME, text="", params=fields)
    payload.params.extend(fields)
    return payload


def _parameter_payload(payload: PostData | None, param: dict, sampler: Sampler, document: dict) -> PostData | None:
    where = location(param)
    if where == "body" and isinstance(param.get("schema"), dict):
        return _json_payload(_sample(sampler, param["schema"], document))
    if where == "formdata":
        field = NameValue(name=str(param.get("name")), value=placeholder(param_type(param)))
        return _add_form_fields(payload, [field])
    return payload


def _request_body_payload(
    payload: PostData | None, request_body: dict, sampler: Sampler, document: dict
) -> PostData | None:
    for content_type, media in (request_body.get("content") or {}).items():
        schema = media.get("schema") if isinstance(media, dict) else None
        if not schema:
            continue
        if content_type == MULTIPART_MIME:
            sample = _sample(sampler, schema, document)
            if isinstance(sample, dict):
                fields = [
                    NameValue(name=name, value=placeholder(stringify(value)))
                    for name, value in sample.items()
                ]
                payload = _add_form_fields(payload, fields)
        elif content_type in (JSON_MIME, "*/*"):
            payload = _json_payload(_sample(sampler, schema, document))
    return payload


def get_payload(
    document: dict,
    path: str,
    method: str,
    sampler: Sampler | None = None,
    resolver: RefResolver | None = None,
) -> PostData | None:
    """Sample request body for the operation, or None when it has none.

    A schema that cannot be sampled is logged and yields None for the whole
    operation.
    """
    sampler = sampler or SchemaSampler()
    resolver = resolver or RefResolver(document)
    operation = get_operation(document, path, method)

    params = path_parameters(resolver, document, path) + operation_parameters(resolver, document, path, method)

    payload = None
    try:
        for param in params:
            payload = _parameter_payload(payload, param, sampler, document)

        request_body = resolver.deref(operation.get("requestBody"))
        if isinstance(request_body, dict):
            payload = _request_body_payload(payload, request_body, sampler, document)
    except SamplingFailed:
        logger.exception("Sampling failed for %s %s", method.upper(), path)
        return None
    return payload
