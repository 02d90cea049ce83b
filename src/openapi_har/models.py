"""HAR 1.2 request models produced by the converter.

Field names follow the HAR specification (camelCase) when serialised with
`by_alias=True`; Python code uses the snake_case attribute names.
"""

from pydantic import BaseModel, ConfigDict, Field


class NameValue(BaseModel):
    """A header, query string entry, or multipart form field."""

    name: str
    value: str


class PostData(BaseModel):
    """Request body: JSON text or multipart params."""

    mime_type: str = Field(alias="mimeType")
    text: str
    params: list[NameValue] | None = None

    model_config = ConfigDict(populate_by_name=True)


class HarRequest(BaseModel):
    """A HAR request object for one path + method pair."""

    method: str
    url: str
    http_version: str = Field(default="HTTP/1.1", alias="httpVersion")
    cookies: list[NameValue] = []
    headers: list[NameValue] = []
    query_string: list[NameValue] = Field(default=[], alias="queryString")
    post_data: PostData | None = Field(default=None, alias="postData")
    headers_size: int = Field(default=0, alias="headersSize")
    body_size: int = Field(default=0, alias="bodySize")

    model_config = ConfigDict(populate_by_name=True)

    def to_har(self) -> dict:
        """Serialise with HAR field names, leaving out absent `postData`/`params`."""
        return self.model_dump(by_alias=True, exclude_none=True)


class HarEntry(BaseModel):
    """One item of the document-wide listing."""

    method: str
    url: str
    description: str
    har: HarRequest

    def to_har(self) -> dict:
        return {
            "method": self.method,
            "url": self.url,
            "description": self.description,
            "har": self.har.to_har(),
        }
