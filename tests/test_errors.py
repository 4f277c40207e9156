"""Tests for poyo.errors — exception hierarchy and error messages."""

import pytest

from poyo.errors import (
    ActionExistsError,
    ConfigurationError,
    FileOperationError,
    IdempotentConflict,
    NotFoundError,
    PersistenceError,
    PoyoError,
    ValidationError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc_type",
        [
            ConfigurationError,
            ValidationError,
            NotFoundError,
            PersistenceError,
            FileOperationError,
            IdempotentConflict,
        ],
    )
    def test_is_poyo_error(self, exc_type: type[Exception]) -> None:
        assert issubclass(exc_type, PoyoError)

    def test_action_exists_is_idempotent_conflict(self) -> None:
        assert issubclass(ActionExistsError, IdempotentConflict)


class TestMessages:
    def test_not_found(self) -> None:
        err = NotFoundError("/Blog")
        assert err.path == "/Blog"
        assert str(err) == "route not found: /Blog"

    def test_action_exists(self) -> None:
        err = ActionExistsError("BlogController", "List")
        assert err.controller == "BlogController"
        assert err.action == "List"
        assert str(err) == "action 'List' already exists in BlogController.cs"
