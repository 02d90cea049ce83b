"""Base URL and path rendering."""

from openapi_har.builder.params import get_operation, get_path_item, location, resolve_parameter, stringify
from openapi_har.errors import DocumentMalformed
from openapi_har.refs import RefResolver


def get_base_url(document: dict) -> str:
    """First server URL (OpenAPI 3) or `scheme://host[basePath]` (Swagger 2)."""
    servers = document.get("servers")
    if isinstance(servers, list) and servers:
        if not isinstance(servers[0], dict):
            raise DocumentMalformed("first server entry is not a mapping")
        return servers[0].get("url", "")

    schemes = document.get("schemes")
    scheme = schemes[0] if schemes else "http"
    host = document.get("host") or ""
    base_path = document.get("basePath")

    if not base_path or base_path == "/":
        return f"{scheme}://{host}"
    return f"{scheme}://{host}{base_path}"


def get_full_path(document: dict, path: str, method: str, resolver: RefResolver | None = None) -> str:
    """Fill `{name}` placeholders with the `example` of matching path parameters.

    Operation parameters replace the path-level list outright when present.
    """
    resolver = resolver or RefResolver(document)
    params = get_operation(document, path, method).get("parameters") or get_path_item(document, path).get("parameters") or []

    full_path = path
    for raw in params:
        param = resolve_parameter(resolver, raw)
        if location(param) == "path" and "example" in param:
            full_path = full_path.replace("{" + str(param.get("name")) + "}", stringify(param["example"]), 1)
    return full_path
