"""Query string synthesis."""

from typing import Any

from openapi_har.builder.params import (
    location,
    merge_by_name,
    operation_parameters,
    param_type,
    path_parameters,
    placeholder,
    stringify,
)
from openapi_har.models import NameValue
from openapi_har.refs import RefResolver


def _query_value(param: dict, values: dict[str, Any]) -> str:
    name = param.get("name")
    if name in values:
        return stringify(values[name])
    if "default" in param:
        return stringify(param["default"])
    schema = param.get("schema")
    if isinstance(schema, dict) and "example" in schema:
        return stringify(schema["example"])
    return placeholder(param_type(param))


def _query_entries(params: list[dict], values: dict[str, Any]) -> list[NameValue]:
    return [
        NameValue(name=str(p.get("name")), value=_query_value(p, values))
        for p in params
        if location(p) == "query"
    ]


def get_query_strings(
    document: dict,
    path: str,
    method: str,
    values: dict[str, Any] | None = None,
    resolver: RefResolver | None = None,
) -> list[NameValue]:
    """Query parameters of the path and the operation, operation level winning.

    `values` overrides the synthesised value of a parameter by exact name.
    """
    values = values or {}
    resolver = resolver or RefResolver(document)

    merged = merge_by_name(
        _query_entries(path_parameters(resolver, document, path), values),
        _query_entries(operation_parameters(resolver, document, path, method), values),
    )
    return list(merged.values())
