"""Tests for Pydantic models."""

import httpx
import pytest
from pydantic import ValidationError

from atlauncher_api._internal.dispatch.models import (
    INVALID_API_KEY_MESSAGE,
    ApiResponse,
    Codec,
    RequestSpec,
    UsernameList,
)


class TestRequestSpec:
    """Tests for RequestSpec model."""

    def test_valid_get(self):
        """Should create a GET descriptor without body."""
        request = RequestSpec(url="https://api.atlauncher.com/v1/pack/Foo", method="GET")
        assert request.method == "GET"
        assert request.headers == {}
        assert request.body is None

    def test_valid_put_with_body(self):
        request = RequestSpec(
            url="https://api.atlauncher.com/v1/admin/pack/Foo/versions/1/xml",
            method="PUT",
            headers={"API-KEY": "ABC"},
            body={"data": "<version/>"},
        )
        assert request.body == {"data": "<version/>"}

    def test_rejects_relative_url(self):
        """Should reject URLs that are not absolute."""
        with pytest.raises(ValidationError):
            RequestSpec(url="v1/pack/Foo", method="GET")

    def test_rejects_unknown_method(self):
        with pytest.raises(ValidationError):
            RequestSpec(url="https://api.atlauncher.com/v1/", method="PATCH")

    def test_rejects_body_on_get(self):
        """Should refuse a body on non-mutating verbs."""
        with pytest.raises(ValidationError) as exc_info:
            RequestSpec(url="https://api.atlauncher.com/v1/", method="GET", body={"a": 1})
        assert "cannot carry a body" in str(exc_info.value)


class TestApiResponse:
    """Tests for ApiResponse envelope."""

    def test_defaults(self):
        response = ApiResponse()
        assert response.error is False
        assert response.code is None
        assert response.message is None
        assert response.data is None

    def test_bool_like_error(self):
        """Should coerce bool-like error indicators."""
        assert ApiResponse(error=1).error is True
        assert ApiResponse(error="false").error is False

    def test_keeps_extra_fields(self):
        response = ApiResponse.model_validate({"error": False, "data": [], "total": 3})
        assert response.model_extra == {"total": 3}

    def test_from_http_ignores_status(self):
        """Should parse the body even for non-2xx responses."""
        raw = httpx.Response(404, json={"error": True, "code": 404, "message": "Not found"})
        response = ApiResponse.from_http(raw)
        assert response.error is True
        assert response.code == 404

    def test_from_http_invalid_json(self):
        """Should raise ValueError for non-JSON bodies."""
        with pytest.raises(ValueError):
            ApiResponse.from_http(httpx.Response(502, text="<html>Bad Gateway</html>"))

    def test_invalid_api_key_requires_exact_message(self):
        assert ApiResponse(error=True, code=401, message=INVALID_API_KEY_MESSAGE).is_invalid_api_key
        assert not ApiResponse(error=True, code=401, message="Forbidden").is_invalid_api_key
        assert not ApiResponse(error=True, code=403, message=INVALID_API_KEY_MESSAGE).is_invalid_api_key

    def test_rate_limited(self):
        assert ApiResponse(error=True, code=429).is_rate_limited
        assert not ApiResponse(code=200).is_rate_limited


class TestUsernameList:
    """Tests for UsernameList payload."""

    def test_dumps_as_bare_list(self):
        assert UsernameList(["Notch", "jeb_"]).model_dump() == ["Notch", "jeb_"]

    def test_strips_whitespace(self):
        assert UsernameList([" Notch "]).model_dump() == ["Notch"]

    def test_rejects_blank(self):
        with pytest.raises(ValidationError):
            UsernameList(["Notch", "  "])

    def test_rejects_non_strings(self):
        with pytest.raises(ValidationError):
            UsernameList([{"name": "Notch"}])


class TestCodec:
    def test_values(self):
        assert Codec("base64") is Codec.BASE64
        assert Codec("raw") is Codec.RAW
