"""CLI entry point for openapi-har."""

import json
from pathlib import Path

import click

from openapi_har.config import get_settings
from openapi_har.errors import HarError
from openapi_har.har import convert, get_endpoint
from openapi_har.loader import detect_version, load_document
from openapi_har.logging import configure_logging


def _parse_query_values(pairs: tuple[str, ...]) -> dict[str, str]:
    """Turn ('limit=10', ...) into {'limit': '10'}."""
    values = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"expected NAME=VALUE, got {pair!r}", param_hint="--query")
        values[name] = value
    return values


def _load(doc_path: Path) -> dict:
    try:
        doc = load_document(doc_path)
        version = detect_version(doc)
    except HarError as e:
        raise click.ClickException(f"[{e.code}] {e}")
    click.echo(f"Loaded {doc_path} (version {version})", err=True)
    return doc


def _write(data, output: Path | None) -> None:
    text = json.dumps(data, indent=get_settings().indent)
    if output is None:
        click.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    click.echo(f"Saved to {output}", err=True)


@click.group()
@click.option("--log-level", default=None, help="Logging level (default from OPENAPI_HAR_LOG_LEVEL).")
def main(log_level: str | None):
    """openapi-har: turn OpenAPI / Swagger documents into HAR requests."""
    configure_logging(log_level or get_settings().log_level)


@main.command("all")
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output JSON file (default: stdout).")
def all_(doc_path: Path, output: Path | None):
    """Generate HAR requests for every operation in DOC_PATH."""
    doc = _load(doc_path)
    result = convert(doc)
    if not result.ok:
        raise click.ClickException(f"[{result.error.code}] {result.error}")

    click.echo(f"Generated {len(result.entries)} requests.", err=True)
    _write([entry.to_har() for entry in result.entries], output)


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("path")
@click.argument("method")
@click.option("-q", "--query", "query", multiple=True, help="Query parameter override as NAME=VALUE.")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output JSON file (default: stdout).")
def endpoint(doc_path: Path, path: str, method: str, query: tuple[str, ...], output: Path | None):
    """Generate the HAR request for PATH and METHOD in DOC_PATH."""
    values = _parse_query_values(query)
    doc = _load(doc_path)
    try:
        har = get_endpoint(doc, path, method, values)
    except HarError as e:
        raise click.ClickException(f"[{e.code}] {e}")
    _write(har.to_har(), output)
