"""Read OpenAPI / Swagger documents from disk."""

from pathlib import Path

import yaml

from openapi_har.errors import DocumentMalformed


def load_document(file_path: Path) -> dict:
    """Parse a YAML or JSON document into a dict."""
    text = file_path.read_text(encoding="utf-8")
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentMalformed(f"cannot parse {file_path}: {e}") from e

    if not isinstance(doc, dict):
        raise DocumentMalformed(f"{file_path} does not contain a mapping")
    return doc


def detect_version(doc: dict) -> str:
    """Return '2.0' for Swagger documents or the `openapi` version string."""
    if "swagger" in doc:
        return str(doc["swagger"])
    if "openapi" in doc:
        return str(doc["openapi"])
    raise DocumentMalformed("neither 'swagger' nor 'openapi' version field present")
