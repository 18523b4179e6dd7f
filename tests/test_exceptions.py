"""Tests for custom exception hierarchy."""

import pytest

from equata.utils.exceptions import (
    EquataError,
    ValidationError,
    LevelError,
    InsufficientRootsError,
)


class TestExceptionHierarchy:
    """Tests for the exception class hierarchy."""

    def test_all_exceptions_inherit_from_base(self):
        """All custom exceptions should inherit from EquataError."""
        for exc_cls in [ValidationError, LevelError, InsufficientRootsError]:
            assert issubclass(exc_cls, EquataError), (
                f"{exc_cls.__name__} does not inherit from EquataError"
            )

    def test_base_is_exception(self):
        """EquataError should inherit from Exception."""
        assert issubclass(EquataError, Exception)

    def test_insufficient_roots_is_level_error(self):
        assert issubclass(InsufficientRootsError, LevelError)

    def test_exceptions_can_be_raised_and_caught(self):
        """All exceptions can be raised and caught by their base."""
        with pytest.raises(EquataError):
            raise ValidationError("bad input")

        with pytest.raises(LevelError):
            raise InsufficientRootsError("needs at least two roots")

    def test_exception_message_preserved(self):
        """Exception message should be preserved."""
        msg = "Level needs at least two roots"
        exc = InsufficientRootsError(msg)
        assert str(exc) == msg

    def test_roots_attribute(self):
        """InsufficientRootsError carries the roots that were found."""
        assert InsufficientRootsError("x", roots=[0.5]).roots == [0.5]
        assert InsufficientRootsError("x").roots == []
