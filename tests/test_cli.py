import json
from pathlib import Path

from click.testing import CliRunner

from openapi_har.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


class TestCliAll:
    def test_writes_every_request(self, tmp_path):
        output = tmp_path / "out" / "requests.json"
        result = CliRunner().invoke(main, ["all", str(FIXTURES / "petstore_v2.yaml"), "-o", str(output)])

        assert result.exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert len(data) == 4
        assert data[0]["har"]["method"] == "GET"

    def test_stdout_when_no_output(self):
        result = CliRunner().invoke(main, ["all", str(FIXTURES / "store_v3.yaml")])
        assert result.exit_code == 0
        assert '"url": "https://x.io/api/orders"' in result.output

    def test_failure_exits_non_zero(self, tmp_path):
        doc = tmp_path / "broken.yaml"
        doc.write_text("openapi: 3.0.0\ninfo: {title: t, version: '1'}\n")
        result = CliRunner().invoke(main, ["all", str(doc)])
        assert result.exit_code == 1
        assert "document_malformed" in result.output


class TestCliEndpoint:
    def test_query_override(self, tmp_path):
        output = tmp_path / "har.json"
        result = CliRunner().invoke(main, [
            "endpoint", str(FIXTURES / "petstore_v2.yaml"), "/pets", "GET",
            "-q", "limit=5",
            "-o", str(output),
        ])

        assert result.exit_code == 0
        har = json.loads(output.read_text(encoding="utf-8"))
        assert {"name": "limit", "value": "5"} in har["queryString"]

    def test_bad_query_pair(self):
        result = CliRunner().invoke(main, [
            "endpoint", str(FIXTURES / "petstore_v2.yaml"), "/pets", "get", "-q", "limit",
        ])
        assert result.exit_code == 2

    def test_unknown_path(self):
        result = CliRunner().invoke(main, ["endpoint", str(FIXTURES / "petstore_v2.yaml"), "/nope", "get"])
        assert result.exit_code == 1
        assert "operation not found" in result.output or "path not found" in result.output

    def test_upper_case_method_keys(self, tmp_path):
        doc = tmp_path / "upper.yaml"
        doc.write_text("swagger: '2.0'\nhost: h.io\npaths:\n  /ping:\n    GET:\n      description: ping\n")
        output = tmp_path / "har.json"
        result = CliRunner().invoke(main, ["endpoint", str(doc), "/ping", "GET", "-o", str(output)])

        assert result.exit_code == 0
        har = json.loads(output.read_text(encoding="utf-8"))
        assert har["method"] == "GET"
        assert har["url"] == "http://h.io/ping"
