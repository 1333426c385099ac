"""Unit tests for domain exceptions."""

import pytest

from regwatch.domain.exceptions import (
    NotFound,
    RegWatchError,
    RetrievalError,
    ValidationError,
)


def test_not_found_inherits_regwatch_error() -> None:
    assert issubclass(NotFound, RegWatchError)


def test_retrieval_error_inherits_regwatch_error() -> None:
    assert issubclass(RetrievalError, RegWatchError)


def test_validation_error_inherits_regwatch_error() -> None:
    assert issubclass(ValidationError, RegWatchError)


def test_not_found_is_distinct_from_retrieval_error() -> None:
    """Missing change and unreachable store are different failure kinds."""
    assert not issubclass(NotFound, RetrievalError)
    assert not issubclass(RetrievalError, NotFound)


def test_not_found_message_and_fields() -> None:
    with pytest.raises(NotFound, match="Change abc not found") as exc_info:
        raise NotFound("Change", "abc")
    assert exc_info.value.resource == "Change"
    assert exc_info.value.identifier == "abc"
