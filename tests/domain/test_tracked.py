"""Tests for TrackedZoneSet."""

from __future__ import annotations

from tzctl.domain.tracked import TrackedZoneSet


class TestTrackedZoneSet:
    def test_add_reports_new_zone(self) -> None:
        tracked = TrackedZoneSet()
        assert tracked.add("Asia/Tokyo") is True
        assert "Asia/Tokyo" in tracked
        assert len(tracked) == 1

    def test_duplicate_add_is_noop(self) -> None:
        tracked = TrackedZoneSet(["Asia/Tokyo"])
        assert tracked.add("Asia/Tokyo") is False
        assert tracked.snapshot() == ("Asia/Tokyo",)

    def test_remove(self) -> None:
        tracked = TrackedZoneSet(["Asia/Tokyo", "UTC"])
        assert tracked.remove("Asia/Tokyo") is True
        assert tracked.snapshot() == ("UTC",)

    def test_remove_missing(self) -> None:
        assert TrackedZoneSet().remove("UTC") is False

    def test_insertion_order(self) -> None:
        tracked = TrackedZoneSet(["Europe/Paris", "UTC", "Asia/Seoul", "UTC"])
        assert list(tracked) == ["Europe/Paris", "UTC", "Asia/Seoul"]

    def test_snapshot_is_detached(self) -> None:
        tracked = TrackedZoneSet(["UTC"])
        snap = tracked.snapshot()
        tracked.add("Asia/Tokyo")
        assert snap == ("UTC",)

    def test_iteration_tolerates_mutation(self) -> None:
        tracked = TrackedZoneSet(["UTC", "Asia/Tokyo"])
        for zone in tracked:
            tracked.remove(zone)
        assert len(tracked) == 0
