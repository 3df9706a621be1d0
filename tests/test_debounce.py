"""Tests for the debounce clock, driven by synthetic timestamps."""

from __future__ import annotations

import threading

import pytest

from mdreader.watcher.debounce import DebounceClock, should_accept


class TestShouldAccept:
    """The pure accept/reject decision."""

    def test_accepts_when_window_elapsed(self) -> None:
        assert should_accept(0.0, 0.2, 0.1) is True

    def test_accepts_exactly_at_window(self) -> None:
        assert should_accept(0, 100, 100) is True

    def test_rejects_inside_window(self) -> None:
        assert should_accept(0.0, 0.05, 0.1) is False

    def test_initial_value_always_accepts(self) -> None:
        assert should_accept(float("-inf"), 0.0, 0.1) is True


class TestDebounceClock:
    """Acceptance is measured from the previous acceptance."""

    def test_first_event_is_accepted(self) -> None:
        clock = DebounceClock(window_seconds=0.1)
        assert clock.try_accept(0.0) is True
        assert clock.last_accepted == 0.0

    def test_close_events_collapse(self) -> None:
        clock = DebounceClock(window_seconds=0.1)
        assert clock.try_accept(1.0) is True
        assert clock.try_accept(1.05) is False
        assert clock.last_accepted == 1.0

    def test_spaced_events_both_accepted(self) -> None:
        clock = DebounceClock(window_seconds=0.1)
        assert clock.try_accept(1.0) is True
        assert clock.try_accept(1.2) is True

    def test_three_rapid_saves_then_one_later(self) -> None:
        # Milliseconds as units keep the arithmetic exact
        clock = DebounceClock(window_seconds=100)
        accepted = [clock.try_accept(t) for t in (0, 40, 90, 250)]
        assert accepted == [True, False, False, True]

    def test_sustained_burst_does_not_starve(self) -> None:
        """Events 60 units apart never satisfy 'since last raw event' but still get through."""
        clock = DebounceClock(window_seconds=100)
        accepted = [t for t in range(0, 600, 60) if clock.try_accept(t)]
        assert accepted == [0, 120, 240, 360, 480]

    def test_rejected_events_do_not_move_the_clock(self) -> None:
        clock = DebounceClock(window_seconds=100)
        clock.try_accept(0)
        clock.try_accept(50)
        assert clock.last_accepted == 0
        assert clock.try_accept(100) is True

    def test_uses_injected_clock_when_now_omitted(self) -> None:
        ticks = iter([10.0, 10.01, 11.0])
        clock = DebounceClock(window_seconds=0.1, clock=lambda: next(ticks))

        assert [clock.try_accept(), clock.try_accept(), clock.try_accept()] == [True, False, True]

    @pytest.mark.parametrize("workers", [2, 8, 32])
    def test_concurrent_acceptance_in_same_window(self, workers: int) -> None:
        clock = DebounceClock(window_seconds=100)
        barrier = threading.Barrier(workers)
        results: list[bool] = []
        results_lock = threading.Lock()

        def attempt() -> None:
            barrier.wait()
            accepted = clock.try_accept(5)
            with results_lock:
                results.append(accepted)

        threads = [threading.Thread(target=attempt) for _ in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=5)

        assert results.count(True) == 1
        assert len(results) == workers
