"""HTTP-shaped response returned by every entry point."""

from pydantic import BaseModel, Field

JSON_HEADERS = {"Content-Type": "application/json"}


def _json_headers() -> dict[str, str]:
    return dict(JSON_HEADERS)


class HandlerResponse(BaseModel):
    """Status, body and headers in the shape of an API gateway proxy response."""

    status_code: int = 200
    is_base64_encoded: bool = False
    body: str = ""
    headers: dict[str, str] = Field(default_factory=_json_headers)

    @classmethod
    def ok(cls, body: str = "") -> "HandlerResponse":
        return cls(status_code=200, body=body)

    @classmethod
    def bad_request(cls, body: str) -> "HandlerResponse":
        return cls(status_code=400, body=body)
