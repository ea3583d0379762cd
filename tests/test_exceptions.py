"""Tests for custom exceptions."""

from dir2tree.exceptions import AccessError


class TestAccessError:
    def test_message_with_reason(self):
        error = AccessError("/srv/private", "Permission denied")
        assert str(error) == "Cannot list directory: /srv/private (Permission denied)"
        assert error.path == "/srv/private"
        assert error.reason == "Permission denied"

    def test_message_without_reason(self):
        error = AccessError("/srv/private")
        assert str(error) == "Cannot list directory: /srv/private"
        assert error.reason is None

    def test_is_not_an_os_error(self):
        # Callers distinguish listing failures from a missing or non-directory root
        error = AccessError("/x")
        assert isinstance(error, Exception)
        assert not isinstance(error, OSError)
