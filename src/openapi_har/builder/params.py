"""Shared lookups over path items, operations and their parameters."""

import json
from typing import Any, Iterable

from openapi_har.errors import DocumentMalformed
from openapi_har.models import NameValue
from openapi_har.refs import RefResolver, is_ref


def get_path_item(document: dict, path: str) -> dict:
    paths = document.get("paths")
    if not isinstance(paths, dict):
        raise DocumentMalformed("document has no 'paths' mapping")
    path_item = paths.get(path)
    if not isinstance(path_item, dict):
        raise DocumentMalformed(f"path not found: {path}")
    return path_item


def get_operation(document: dict, path: str, method: str) -> dict:
    """Operation under `path` for `method`, matching the method key case-insensitively."""
    path_item = get_path_item(document, path)
    operation = path_item.get(method)
    if operation is None:
        operation = next((v for k, v in path_item.items() if str(k).lower() == method.lower()), None)
    if not isinstance(operation, dict):
        raise DocumentMalformed(f"operation not found: {method} {path}")
    return operation


def resolve_parameter(resolver: RefResolver, param: Any) -> dict:
    """Return the parameter with its own `$ref` and its schema `$ref` resolved.

    A referenced schema without an explicit type is treated as an object.
    """
    resolved = resolver.deref(param)
    if not isinstance(resolved, dict):
        return {}
    resolved = dict(resolved)
    schema = resolved.get("schema")
    if is_ref(schema):
        schema = resolver.resolve(schema["$ref"])
        if isinstance(schema, dict):
            schema.setdefault("type", "object")
        resolved["schema"] = schema
    return resolved


def path_parameters(resolver: RefResolver, document: dict, path: str) -> list[dict]:
    """Resolved parameters declared on the path item."""
    params = get_path_item(document, path).get("parameters") or []
    return [resolve_parameter(resolver, p) for p in params]


def operation_parameters(resolver: RefResolver, document: dict, path: str, method: str) -> list[dict]:
    """Resolved parameters declared on the operation itself."""
    params = get_operation(document, path, method).get("parameters") or []
    return [resolve_parameter(resolver, p) for p in params]


def location(param: dict) -> str:
    return str(param.get("in", "")).lower()


def param_type(param: dict) -> str:
    schema = param.get("schema") if isinstance(param.get("schema"), dict) else {}
    return str(param.get("type") or schema.get("type") or "string")


def placeholder(type_name: str) -> str:
    """Synthesised stand-in value, e.g. `SOME_INTEGER_VALUE`."""
    return f"SOME_{type_name.upper()}_VALUE"


def stringify(value: Any) -> str:
    """Render a scalar the way it would appear in JSON text."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(stringify(v) for v in value)
    if isinstance(value, dict):
        return json.dumps(value)
    return str(value)


def merge_by_name(*levels: Iterable[NameValue]) -> dict[str, NameValue]:
    """Merge entries case-insensitively; a later entry replaces and moves to the end."""
    merged: dict[str, NameValue] = {}
    for entries in levels:
        for entry in entries:
            key = entry.name.casefold()
            merged.pop(key, None)
            merged[key] = entry
    return merged
