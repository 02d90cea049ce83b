"""Deterministic sample values for JSON schemas.

The payload builder only needs something with a `sample()` method; this is
the implementation used when the caller does not bring their own.

Priority for any schema node: const, example, examples, default, enum, then
a value derived from format and type. `allOf` branches are merged, `oneOf`
and `anyOf` use their first branch.
"""

import copy
import logging
from typing import Any, Protocol

from openapi_har.config import get_settings
from openapi_har.refs import RefResolver, is_ref

logger = logging.getLogger(__name__)

_FORMAT_SAMPLES = {
    "date-time": "2019-08-24T14:15:22Z",
    "date": "2019-08-24",
    "time": "14:15:22Z",
    "email": "user@example.com",
    "uuid": "095be615-a8ad-4c33-8e9c-c7612fbf6c9f",
    "uri": "http://example.com",
    "url": "http://example.com",
    "hostname": "example.com",
    "ipv4": "192.168.0.1",
    "ipv6": "2001:0db8:85a3:0000:0000:8a2e:0370:7334",
    "password": "pa$$word",
    "byte": "U3dhZ2dlciByb2Nrcw==",
    "binary": "string",
}

_TYPE_SAMPLES = {
    "string": "string",
    "integer": 0,
    "number": 0,
    "boolean": True,
    "null": None,
}

_EMPTY = {"object": dict, "array": list}


class Sampler(Protocol):
    def sample(self, schema: dict, *, skip_read_only: bool = True, document: dict | None = None) -> Any: ...


class SchemaSampler:
    """Builds one example instance of a schema."""

    def __init__(self, max_depth: int | None = None):
        self.max_depth = max_depth if max_depth is not None else get_settings().max_sample_depth

    def sample(self, schema: dict, *, skip_read_only: bool = True, document: dict | None = None) -> Any:
        if not isinstance(schema, dict):
            raise TypeError(f"schema must be a mapping, got {type(schema).__name__}")
        resolver = RefResolver(document or {})
        return self._sample(schema, resolver, skip_read_only, frozenset(), 0)

    def _sample(self, schema: dict, resolver: RefResolver, skip_read_only: bool, visited: frozenset, depth: int) -> Any:
        if is_ref(schema):
            ref = schema["$ref"]
            if ref in visited or depth > self.max_depth:
                logger.debug("Circular or deep reference %s sampled as empty value", ref)
                return _empty_for(resolver.resolve(ref))
            return self._sample(resolver.resolve(ref), resolver, skip_read_only, visited | {ref}, depth + 1)

        if depth > self.max_depth:
            return _empty_for(schema)

        if "const" in schema:
            return copy.deepcopy(schema["const"])
        if "example" in schema:
            return copy.deepcopy(schema["example"])
        if isinstance(schema.get("examples"), list) and schema["examples"]:
            return copy.deepcopy(schema["examples"][0])
        if "default" in schema:
            return copy.deepcopy(schema["default"])
        if schema.get("enum"):
            return copy.deepcopy(schema["enum"][0])

        if "allOf" in schema:
            return self._sample_all_of(schema, resolver, skip_read_only, visited, depth)
        for keyword in ("oneOf", "anyOf"):
            if schema.get(keyword):
                return self._sample(schema[keyword][0], resolver, skip_read_only, visited, depth + 1)

        schema_type = _schema_type(schema)
        if schema_type == "object":
            return self._sample_object(schema, resolver, skip_read_only, visited, depth)
        if schema_type == "array":
            return self._sample_array(schema, resolver, skip_read_only, visited, depth)
        if schema_type == "string":
            return _FORMAT_SAMPLES.get(schema.get("format"), "string")
        if schema_type in ("integer", "number"):
            return schema.get("minimum", 0)
        return _TYPE_SAMPLES.get(schema_type)

    def _sample_all_of(self, schema: dict, resolver: RefResolver, skip_read_only: bool, visited: frozenset, depth: int) -> Any:
        rest = {k: v for k, v in schema.items() if k != "allOf"}
        merged: Any = None
        for part in [*schema["allOf"], rest]:
            if not part:
                continue
            value = self._sample(part, resolver, skip_read_only, visited, depth + 1)
            if isinstance(merged, dict) and isinstance(value, dict):
                merged.update(value)
            elif value is not None:
                merged = dict(value) if isinstance(value, dict) else value
        return merged

    def _sample_object(self, schema: dict, resolver: RefResolver, skip_read_only: bool, visited: frozenset, depth: int) -> dict:
        result = {}
        for name, prop in (schema.get("properties") or {}).items():
            prop_schema = resolver.deref(prop) if is_ref(prop) and prop["$ref"] not in visited else prop
            if skip_read_only and isinstance(prop_schema, dict) and prop_schema.get("readOnly"):
                continue
            result[name] = self._sample(prop, resolver, skip_read_only, visited, depth + 1)

        additional = schema.get("additionalProperties")
        if isinstance(additional, dict) and additional:
            value = self._sample(additional, resolver, skip_read_only, visited, depth + 1)
            result["property1"] = value
            result["property2"] = value
        return result

    def _sample_array(self, schema: dict, resolver: RefResolver, skip_read_only: bool, visited: frozenset, depth: int) -> list:
        items = schema.get("items")
        if not isinstance(items, dict):
            return []
        return [self._sample(items, resolver, skip_read_only, visited, depth + 1)]


def _schema_type(schema: dict) -> str | None:
    schema_type = schema.get("type")
    if isinstance(schema_type, list):
        schema_type = next((t for t in schema_type if t != "null"), None)
    if schema_type is None:
        if "properties" in schema or "additionalProperties" in schema:
            return "object"
        if "items" in schema:
            return "array"
    return schema_type


def _empty_for(schema: Any) -> Any:
    if isinstance(schema, dict):
        factory = _EMPTY.get(_schema_type(schema))
        if factory:
            return factory()
    return None
