"""Header synthesis: content negotiation, header parameters and authentication.

Authentication is inferred from the security requirements that apply to the
operation. At most one credential header is added, picked in the order
Basic, API key, Bearer, and never when a header parameter of the same name
was already declared.
"""

import logging

from openapi_har.builder.params import (
    get_operation,
    location,
    merge_by_name,
    operation_parameters,
    param_type,
    path_parameters,
    placeholder,
)
from openapi_har.errors import DocumentMalformed
from openapi_har.models import NameValue
from openapi_har.refs import RefResolver

logger = logging.getLogger(__name__)

BASIC_AUTH_VALUE = "Basic REPLACE_BASIC_AUTH"
BEARER_AUTH_VALUE = "Bearer REPLACE_BEARER_TOKEN"
API_KEY_VALUE = "REPLACE_KEY_VALUE"


def _media_type_headers(document: dict, operation: dict) -> list[NameValue]:
    headers = []
    # Swagger 2 lists, operation level replacing the document level
    consumes = operation.get("consumes")
    if consumes is None:
        consumes = document.get("consumes") or []
    headers += [NameValue(name="accept", value=t) for t in consumes]

    produces = operation.get("produces")
    if produces is None:
        produces = document.get("produces") or []
    headers += [NameValue(name="content-type", value=t) for t in produces]
    return headers


def _request_body_headers(resolver: RefResolver, operation: dict) -> list[NameValue]:
    request_body = resolver.deref(operation.get("requestBody"))
    if not isinstance(request_body, dict):
        return []
    content = request_body.get("content") or {}
    return [NameValue(name="content-type", value=t) for t in content]


def _header_entries(params: list[dict]) -> list[NameValue]:
    return [
        NameValue(name=str(p.get("name")), value=placeholder(param_type(p)))
        for p in params
        if location(p) == "header"
    ]


def _security_scheme(resolver: RefResolver, document: dict, name: str) -> dict:
    if "securityDefinitions" in document:
        schemes = document.get("securityDefinitions") or {}
    else:
        schemes = (document.get("components") or {}).get("securitySchemes") or {}

    if name not in schemes:
        raise DocumentMalformed(f"security scheme not defined: {name}")
    scheme = resolver.deref(schemes[name])
    if not isinstance(scheme, dict) or "type" not in scheme:
        raise DocumentMalformed(f"security scheme has no type: {name}")
    return scheme


def _auth_header(resolver: RefResolver, document: dict, operation: dict, declared: set[str]) -> NameValue | None:
    requirements = operation.get("security")
    if requirements is None:
        requirements = document.get("security") or []

    basic = api_key = bearer = None
    for requirement in requirements:
        for name in requirement or {}:
            scheme = _security_scheme(resolver, document, name)
            auth_type = str(scheme["type"]).lower()
            http_scheme = str(scheme.get("scheme") or "").lower()

            if auth_type == "basic" or (auth_type == "http" and http_scheme == "basic"):
                basic = name
            elif auth_type == "apikey":
                if scheme.get("in") == "header":
                    api_key = scheme
            elif auth_type == "oauth2" or (auth_type == "http" and http_scheme == "bearer"):
                bearer = name
            else:
                logger.debug("Ignoring security scheme %s of type %s", name, auth_type)

    if basic and "authorization" not in declared:
        return NameValue(name="Authorization", value=BASIC_AUTH_VALUE)
    if api_key and str(api_key.get("name", "")).casefold() not in declared:
        return NameValue(name=str(api_key.get("name")), value=API_KEY_VALUE)
    if bearer and "authorization" not in declared:
        return NameValue(name="Authorization", value=BEARER_AUTH_VALUE)
    return None


def get_headers(document: dict, path: str, method: str, resolver: RefResolver | None = None) -> list[NameValue]:
    """All headers for one operation, in HAR order."""
    resolver = resolver or RefResolver(document)
    operation = get_operation(document, path, method)

    headers = _media_type_headers(document, operation)
    headers += _request_body_headers(resolver, operation)

    declared = merge_by_name(
        _header_entries(path_parameters(resolver, document, path)),
        _header_entries(operation_parameters(resolver, document, path, method)),
    )
    headers += declared.values()

    auth = _auth_header(resolver, document, operation, set(declared))
    if auth is not None:
        headers.append(auth)
    return headers
