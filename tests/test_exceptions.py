"""Tests for public exceptions."""

import pytest

from mirlo_node.exceptions import (
    MirloAPIError,
    MirloConfigError,
    MirloError,
    MirloValidationError,
)


class TestMirloError:
    """Tests for base MirloError."""

    def test_is_exception(self):
        """MirloError should be an Exception."""
        assert issubclass(MirloError, Exception)

    def test_can_be_raised(self):
        """MirloError should be raisable with message."""
        with pytest.raises(MirloError) as exc_info:
            raise MirloError("test error")
        assert str(exc_info.value) == "test error"


class TestMirloAPIError:
    """Tests for MirloAPIError."""

    def test_inherits_from_mirlo_error(self):
        """MirloAPIError should inherit from MirloError."""
        assert issubclass(MirloAPIError, MirloError)

    def test_with_message_only(self):
        """Should create error with message only."""
        error = MirloAPIError("Connection refused")
        assert str(error) == "Connection refused"
        assert error.status_code is None

    def test_with_status_code(self):
        """Should store status code."""
        error = MirloAPIError("Not found", status_code=404)
        assert str(error) == "Not found"
        assert error.status_code == 404

    def test_caught_as_mirlo_error(self):
        """Callers catching MirloError should see API failures with their status."""
        with pytest.raises(MirloError) as exc_info:
            raise MirloAPIError("Unauthorized", status_code=401)
        assert exc_info.value.status_code == 401


class TestMirloConfigError:
    """Tests for MirloConfigError."""

    def test_inherits_from_mirlo_error(self):
        """MirloConfigError should inherit from MirloError."""
        assert issubclass(MirloConfigError, MirloError)


class TestMirloValidationError:
    """Tests for MirloValidationError."""

    def test_inherits_from_mirlo_error(self):
        """MirloValidationError should inherit from MirloError."""
        assert issubclass(MirloValidationError, MirloError)

    def test_can_be_raised(self):
        """Should be raisable with message."""
        with pytest.raises(MirloValidationError) as exc_info:
            raise MirloValidationError("Invalid recipients JSON format")
        assert str(exc_info.value) == "Invalid recipients JSON format"
