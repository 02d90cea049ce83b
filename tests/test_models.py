from openapi_har.models import HarEntry, HarRequest, NameValue, PostData


class TestPostData:
    def test_alias_and_field_name_both_accepted(self):
        assert PostData(mime_type="application/json", text="{}").mime_type == "application/json"
        assert PostData(mimeType="text/plain", text="").mime_type == "text/plain"

    def test_params_omitted_when_absent(self):
        req = HarRequest(method="POST", url="http://h", post_data=PostData(mime_type="application/json", text="{}"))
        assert req.to_har()["postData"] == {"mimeType": "application/json", "text": "{}"}


class TestHarRequest:
    def test_defaults(self):
        har = HarRequest(method="GET", url="http://h/x").to_har()
        assert har == {
            "method": "GET",
            "url": "http://h/x",
            "httpVersion": "HTTP/1.1",
            "cookies": [],
            "headers": [],
            "queryString": [],
            "headersSize": 0,
            "bodySize": 0,
        }

    def test_default_lists_not_shared(self):
        first = HarRequest(method="GET", url="http://h")
        first.headers.append(NameValue(name="a", value="b"))
        assert HarRequest(method="GET", url="http://h").headers == []


class TestHarEntry:
    def test_to_har_nests_request(self):
        entry = HarEntry(method="GET", url="http://h/x", description="d", har=HarRequest(method="GET", url="http://h/x"))
        data = entry.to_har()
        assert data["description"] == "d"
        assert data["har"]["queryString"] == []
