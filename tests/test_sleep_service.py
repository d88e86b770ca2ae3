"""Tests for the SleepService controller."""

from __future__ import annotations

import json

import pytest

from BackEnd.core.settings import GOAL_KEY, LOGS_KEY
from BackEnd.services.sleep_service import SleepService


@pytest.fixture
def service(qt_app, memory_kv):
    svc = SleepService(kv=memory_kv)
    svc.init()
    return svc


class TestInit:
    def test_defaults_on_empty_store(self, service) -> None:
        snap = service.snapshot()
        assert snap.entries == []
        assert snap.goal_hours == 8.0
        assert snap.stats.average == 0
        assert snap.stats.consistency_percent == 0
        assert not snap.has_trend

    def test_malformed_store_falls_back(self, qt_app, memory_kv) -> None:
        memory_kv.data[LOGS_KEY] = "{broken"
        memory_kv.data[GOAL_KEY] = "eight"
        snap = SleepService(kv=memory_kv).init()
        assert snap.entries == []
        assert snap.goal_hours == 8.0

    def test_loads_persisted_state(self, qt_app, memory_kv, entry_factory) -> None:
        memory_kv.data[LOGS_KEY] = json.dumps([entry_factory(2).to_record(), entry_factory(1).to_record()])
        memory_kv.data[GOAL_KEY] = "7.5"
        snap = SleepService(kv=memory_kv).init()
        assert [e.id for e in snap.entries] == [2, 1]
        assert snap.goal_hours == 7.5
        assert [e.id for e in snap.series] == [1, 2]

    def test_emits_initial_state(self, qt_app, memory_kv) -> None:
        svc = SleepService(kv=memory_kv)
        seen = []
        svc.logs_changed.connect(lambda entries: seen.append(("logs", entries)))
        svc.goal_changed.connect(lambda goal: seen.append(("goal", goal)))
        svc.init()
        assert seen == [("logs", []), ("goal", 8.0)]


class TestMutations:
    def test_add_log(self, service, memory_kv) -> None:
        entry = service.add_log("22:00", "06:00")
        assert entry.duration == 8.0
        assert service.store.ids() == [entry.id]
        stored = json.loads(memory_kv.data[LOGS_KEY])
        assert stored[0]["id"] == entry.id
        assert stored[0]["duration"] == 8.0

    def test_ids_strictly_increase(self, service) -> None:
        first = service.add_log("23:00", "07:00")
        second = service.add_log("23:00", "07:00")
        assert second.id > first.id

    def test_add_recomputes_stats(self, service) -> None:
        snaps = []
        service.stats_changed.connect(snaps.append)
        service.add_log("22:00", "06:00")
        service.add_log("00:00", "06:00")
        assert snaps[-1].stats.average == 7.0
        assert snaps[-1].stats.consistency_percent == 50
        assert snaps[-1].has_trend
        assert [e.duration for e in snaps[-1].series] == [8.0, 6.0]

    def test_delete_log(self, service) -> None:
        keep = service.add_log("22:00", "06:00")
        drop = service.add_log("23:00", "06:00")
        service.delete_log(drop.id)
        assert service.store.ids() == [keep.id]

    def test_delete_unknown_is_noop(self, service) -> None:
        service.add_log("22:00", "06:00")
        before = service.store.entries
        service.delete_log(123)
        assert service.store.entries == before

    def test_set_goal(self, service, memory_kv) -> None:
        goals = []
        service.goal_changed.connect(goals.append)
        service.add_log("23:00", "06:00")
        assert service.set_goal(7) == 7.0
        assert goals == [7.0]
        assert memory_kv.data[GOAL_KEY] == "7"
        assert service.snapshot().stats.consistency_percent == 100

    def test_set_goal_is_clamped(self, service) -> None:
        assert service.set_goal(20) == 12.0
        assert service.set_goal(6.6) == 6.5

    def test_state_survives_restart(self, qt_app, sqlite_kv) -> None:
        first = SleepService(kv=sqlite_kv)
        first.init()
        first.add_log("22:15", "06:45")
        first.set_goal(9)
        again = SleepService(kv=sqlite_kv).init()
        assert again.entries == first.store.entries
        assert again.goal_hours == 9.0

    def test_storage_failure_does_not_interrupt(self, qt_app, tmp_path) -> None:
        from BackEnd.repos.kv_repo import SqliteKeyValueStore

        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        svc = SleepService(kv=SqliteKeyValueStore(blocker / "sleep.db"))
        assert svc.init().entries == []
        entry = svc.add_log("22:00", "06:00")
        svc.set_goal(7)
        svc.delete_log(entry.id)
        assert len(svc.store) == 0
