"""Tests for the health store."""

import asyncio
import logging
from datetime import timedelta

import pytest

from wellness_tracker.adapters.snapshot_codec import SnapshotError
from wellness_tracker.domain.actions import MedicationChanges
from wellness_tracker.domain.analytics import Metric
from wellness_tracker.domain.models import DailyGoals, Frequency, HealthState
from wellness_tracker.services.storage import InMemoryKeyValueStorage
from wellness_tracker.services.store import DEFAULT_STORAGE_KEY, HealthStore
from tests.conftest import FailingStorage, FixedClock, RecordingStorage


def _add_vitamin(store: HealthStore) -> str:
    medication = store.add_medication(
        name="Vitamin D",
        dosage="1000 IU",
        frequency=Frequency.ONCE_DAILY,
        time="08:00",
    )
    return medication.id


def test_today_water_sums_entries(store: HealthStore) -> None:
    store.add_water_entry(500)
    store.add_water_entry(300)

    assert store.get_today_water() == 800


def test_today_water_ignores_other_days(store: HealthStore, clock: FixedClock) -> None:
    store.add_water_entry(500)
    clock.advance(days=1)
    store.add_water_entry(250)

    assert store.get_today_water() == 250


def test_step_entry_derives_distance_and_calories(store: HealthStore) -> None:
    entry = store.add_step_entry(12000)
    odd = store.add_step_entry(1234)

    assert entry.distance == 9.6
    assert entry.calories == 480
    assert odd.distance == 0.99
    assert odd.calories == 49


def test_step_progress_rounds_to_goal_percentage(store: HealthStore) -> None:
    store.add_step_entry(12000)
    goal = store.state.user.daily_goals.steps

    assert round(store.get_today_steps() / goal * 100) == 120


def test_sleep_duration_is_never_negative(
    store: HealthStore, clock: FixedClock
) -> None:
    wake = clock.now()

    backwards = store.add_sleep_entry(wake, wake - timedelta(hours=2), quality=3)
    night = store.add_sleep_entry(wake - timedelta(hours=7.5), wake, quality=4)

    assert backwards.duration == 0
    assert night.duration == 7.5
    assert store.get_last_sleep() == night


def test_last_sleep_is_none_without_entries(store: HealthStore) -> None:
    assert store.get_last_sleep() is None


def test_log_medication_marks_taken(store: HealthStore) -> None:
    medication_id = _add_vitamin(store)

    store.log_medication(medication_id, True)

    [status] = store.get_today_medications()
    assert status.medication.id == medication_id
    assert status.taken is True


def test_skipped_medication_is_not_taken(store: HealthStore) -> None:
    medication_id = _add_vitamin(store)

    log = store.log_medication(medication_id, False)

    assert log.skipped is True
    assert store.get_today_medications()[0].taken is False


def test_yesterdays_log_does_not_count_today(
    store: HealthStore, clock: FixedClock
) -> None:
    medication_id = _add_vitamin(store)
    store.log_medication(medication_id)
    clock.advance(days=1)

    assert store.get_today_medications()[0].taken is False


def test_delete_medication_keeps_logs(store: HealthStore) -> None:
    medication_id = _add_vitamin(store)
    store.log_medication(medication_id)

    store.delete_medication(medication_id)

    assert store.state.medications == ()
    assert store.get_today_medications() == []
    assert store.state.medication_logs[0].medication_id == medication_id


def test_inactive_medications_are_hidden(store: HealthStore) -> None:
    medication_id = _add_vitamin(store)

    store.update_medication(medication_id, MedicationChanges(is_active=False))

    assert store.get_today_medications() == []


def test_weekly_data_via_store(store: HealthStore, clock: FixedClock) -> None:
    clock.advance(days=-6)
    store.add_step_entry(8000)
    clock.advance(days=3)
    store.add_step_entry(5000)
    clock.advance(days=3)

    week = store.get_weekly_data(Metric.STEPS)

    assert [day.value for day in week] == [8000, 0, 0, 5000, 0, 0, 0]


def test_actions_persist_snapshot(
    store: HealthStore, storage: InMemoryKeyValueStorage
) -> None:
    store.add_water_entry(500)

    saved = asyncio.run(storage.get_item(DEFAULT_STORAGE_KEY))

    assert saved is not None
    assert '"waterEntries"' in saved


def test_saves_inside_event_loop_complete_on_flush(clock: FixedClock) -> None:
    storage = RecordingStorage()
    store = HealthStore(storage=storage, clock=clock)

    async def scenario() -> None:
        store.add_water_entry(500)
        store.add_step_entry(4000)
        await store.flush()

    asyncio.run(scenario())

    assert len(storage.writes) == 2
    assert storage.items[DEFAULT_STORAGE_KEY] == store.export_snapshot()


def test_noop_transition_is_not_saved(clock: FixedClock) -> None:
    storage = RecordingStorage()
    store = HealthStore(storage=storage, clock=clock)

    store.update_medication("missing", MedicationChanges(name="X"))
    store.delete_medication("missing")

    assert storage.writes == []


def test_load_restores_saved_state(
    store: HealthStore, storage: InMemoryKeyValueStorage, clock: FixedClock
) -> None:
    store.add_water_entry(500)
    store.set_user(name="Sam", daily_goals=DailyGoals(2500, 8000, 7))
    medication_id = _add_vitamin(store)
    store.log_medication(medication_id)

    restored = HealthStore(storage=storage, clock=clock)
    asyncio.run(restored.load())

    assert restored.state == store.state


def test_load_without_snapshot_keeps_defaults(store: HealthStore) -> None:
    asyncio.run(store.load())

    assert store.state == HealthState()


def test_load_malformed_snapshot_keeps_defaults(
    clock: FixedClock, caplog: pytest.LogCaptureFixture
) -> None:
    storage = RecordingStorage(items={DEFAULT_STORAGE_KEY: "{not json"})
    store = HealthStore(storage=storage, clock=clock)

    with caplog.at_level(logging.ERROR):
        asyncio.run(store.load())

    assert store.state == HealthState()
    assert "Failed to decode saved data" in caplog.text


def test_storage_failures_are_logged_not_raised(
    clock: FixedClock, caplog: pytest.LogCaptureFixture
) -> None:
    storage = FailingStorage()
    store = HealthStore(storage=storage, clock=clock)

    with caplog.at_level(logging.ERROR):
        asyncio.run(store.load())
        store.add_water_entry(500)

    assert store.get_today_water() == 500
    assert storage.attempts == ["get:myhealth-data", "set:myhealth-data"]
    assert "Failed to read saved data" in caplog.text
    assert "Failed to save data" in caplog.text


def test_subscribers_receive_new_state(store: HealthStore) -> None:
    seen: list[HealthState] = []
    unsubscribe = store.subscribe(seen.append)

    store.add_water_entry(250)
    unsubscribe()
    store.add_water_entry(250)

    assert len(seen) == 1
    assert seen[0].water_entries[0].amount == 250


def test_failing_listener_does_not_block_save(
    store: HealthStore, storage: InMemoryKeyValueStorage
) -> None:
    def render(_: HealthState) -> None:
        raise RuntimeError("render failed")

    store.subscribe(render)

    with pytest.raises(RuntimeError, match="render failed"):
        store.add_water_entry(500)

    saved = asyncio.run(storage.get_item(DEFAULT_STORAGE_KEY))
    assert store.get_today_water() == 500
    assert saved is not None
    assert "500" in saved


def test_reset_restores_defaults(store: HealthStore) -> None:
    store.add_water_entry(250)
    store.set_user(name="Sam")

    store.reset()

    assert store.state == HealthState()


def test_import_snapshot_rejects_malformed_payload(store: HealthStore) -> None:
    with pytest.raises(SnapshotError):
        store.import_snapshot('{"waterEntries": [{"amount": "lots"}]}')

    assert store.state == HealthState()


def test_ids_are_unique(store: HealthStore) -> None:
    entries = [store.add_water_entry(100) for _ in range(50)]

    assert len({entry.id for entry in entries}) == 50
