"""Unit tests for OccurrenceLog pruning."""

from __future__ import annotations

from breaker_commons.resilience.circuit_breaker import OccurrenceLog


class TestOccurrenceLog:
    def test_record_returns_count_inside_horizon(self) -> None:
        log = OccurrenceLog()
        assert log.record(10, horizon=5) == 1
        assert log.record(12, horizon=5) == 2
        assert log.record(16, horizon=5) == 2
        assert log.snapshot() == (12, 16)

    def test_entry_at_cutoff_is_kept(self) -> None:
        log = OccurrenceLog()
        log.record(10, horizon=5)
        assert log.record(15, horizon=5) == 2

    def test_entry_just_past_cutoff_is_dropped(self) -> None:
        log = OccurrenceLog()
        log.record(10, horizon=5)
        assert log.record(16, horizon=5) == 1

    def test_pruning_stops_at_first_entry_inside_window(self) -> None:
        log = OccurrenceLog()
        log.record(10, horizon=100)
        log.record(3, horizon=100)
        # cutoff 5: 10 is inside the window, so the older 3 behind it survives
        assert log.record(11, horizon=6) == 3
        assert log.snapshot() == (10, 3, 11)

    def test_expired_entries_all_dropped(self) -> None:
        log = OccurrenceLog()
        log.record(1, horizon=10)
        log.record(2, horizon=10)
        assert log.record(100, horizon=10) == 1
        assert len(log) == 1

    def test_clear(self) -> None:
        log = OccurrenceLog()
        log.record(1, horizon=10)
        log.clear()
        assert log.snapshot() == ()
