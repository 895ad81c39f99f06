"""Tests for public exceptions."""

import pytest

from atlauncher_api.exceptions import (
    ATLauncherAPIError,
    ATLauncherConfigError,
    ATLauncherError,
    ATLauncherRateLimitError,
    ATLauncherTransportError,
    ATLauncherValidationError,
)


class TestATLauncherError:
    """Tests for base ATLauncherError."""

    def test_is_exception(self):
        """ATLauncherError should be an Exception."""
        assert issubclass(ATLauncherError, Exception)

    def test_can_be_raised(self):
        """ATLauncherError should be raisable with message."""
        with pytest.raises(ATLauncherError) as exc_info:
            raise ATLauncherError("test error")
        assert str(exc_info.value) == "test error"


class TestATLauncherAPIError:
    """Tests for ATLauncherAPIError."""

    def test_inherits_from_base(self):
        assert issubclass(ATLauncherAPIError, ATLauncherError)

    def test_with_message_only(self):
        """Should create error with message only."""
        error = ATLauncherAPIError("Pack not found")
        assert str(error) == "Pack not found"
        assert error.status_code is None
        assert error.response is None

    def test_with_status_code_and_response(self):
        """Should store status code and the response envelope."""
        envelope = {"error": True, "code": 404}
        error = ATLauncherAPIError("Not found", status_code=404, response=envelope)
        assert error.status_code == 404
        assert error.response is envelope


class TestATLauncherRateLimitError:
    """Tests for ATLauncherRateLimitError."""

    def test_is_api_error(self):
        """Rate limits should be catchable as API errors."""
        assert issubclass(ATLauncherRateLimitError, ATLauncherAPIError)

    def test_carries_code(self):
        error = ATLauncherRateLimitError("Rate limited", status_code=429)
        assert error.status_code == 429


class TestOtherErrors:
    """Tests for config, validation and transport errors."""

    @pytest.mark.parametrize(
        "error_cls",
        [ATLauncherConfigError, ATLauncherValidationError, ATLauncherTransportError],
    )
    def test_inherits_from_base(self, error_cls):
        assert issubclass(error_cls, ATLauncherError)
        assert not issubclass(error_cls, ATLauncherAPIError)

    def test_config_error_message(self):
        """Should be raisable with message."""
        with pytest.raises(ATLauncherConfigError) as exc_info:
            raise ATLauncherConfigError("Missing API key")
        assert str(exc_info.value) == "Missing API key"
