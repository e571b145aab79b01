"""Tests for the round tracker."""

from image_deck.domain.rounds import FIXED_ROUND_LIMIT, RoundTracker


def test_limit_is_fixed_at_five() -> None:
    assert FIXED_ROUND_LIMIT == 5
    assert RoundTracker().limit == 5


def test_mark_shown_opens_the_run() -> None:
    tracker = RoundTracker()

    tracker.mark_shown()

    assert tracker.shown == 1
    assert tracker.in_progress


def test_limit_checks() -> None:
    tracker = RoundTracker()
    for _ in range(FIXED_ROUND_LIMIT):
        tracker.mark_shown()

    assert tracker.is_limit_reached()

    tracker.finish()

    assert tracker.is_limit_reached()
    assert not tracker.in_progress


def test_reset_clears_counters() -> None:
    tracker = RoundTracker()
    tracker.start()
    tracker.mark_shown()

    tracker.reset()

    assert tracker.shown == 0
    assert not tracker.in_progress
