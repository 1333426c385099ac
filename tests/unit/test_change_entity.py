"""Unit tests for Change entity and review state machine."""

from dataclasses import FrozenInstanceError

import pytest

from regwatch.domain.value_objects import ReviewState

from tests.conftest import make_change


def test_review_state_from_flag() -> None:
    assert ReviewState.from_flag(False) is ReviewState.UNREVIEWED
    assert ReviewState.from_flag(True) is ReviewState.REVIEWED


def test_mark_reviewed_from_unreviewed() -> None:
    assert ReviewState.UNREVIEWED.mark_reviewed() is ReviewState.REVIEWED


def test_mark_reviewed_is_terminal() -> None:
    """Reviewed stays Reviewed."""
    assert ReviewState.REVIEWED.mark_reviewed() is ReviewState.REVIEWED


def test_change_defaults_to_unreviewed() -> None:
    change = make_change()
    assert change.reviewed is False
    assert change.review_state is ReviewState.UNREVIEWED


def test_change_mark_reviewed_returns_new_value() -> None:
    change = make_change()
    reviewed = change.mark_reviewed()
    assert reviewed.reviewed is True
    assert change.reviewed is False
    assert reviewed.old_content == change.old_content
    assert reviewed.new_content == change.new_content


def test_change_mark_reviewed_idempotent() -> None:
    change = make_change(reviewed=True)
    assert change.mark_reviewed() is change


def test_change_content_is_immutable() -> None:
    change = make_change()
    with pytest.raises(FrozenInstanceError):
        change.new_content = "edited"  # type: ignore[misc]


def test_change_is_new_regulation() -> None:
    assert make_change(old_content="").is_new_regulation
    assert not make_change().is_new_regulation


def test_change_summary_has_no_content() -> None:
    change = make_change(title="Permits", url="https://example.gov/permits")
    summary = change.summary()
    assert summary.id == change.id
    assert summary.regulation_id == change.regulation.id
    assert summary.regulation_title == "Permits"
    assert summary.regulation_url == "https://example.gov/permits"
    assert summary.detected_at == change.detected_at
    assert not hasattr(summary, "old_content")


def test_change_summary_review_state() -> None:
    assert make_change().summary().review_state is ReviewState.UNREVIEWED
    assert make_change(reviewed=True).summary().review_state is ReviewState.REVIEWED
