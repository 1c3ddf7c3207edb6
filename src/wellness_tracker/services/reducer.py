"""Pure state transition function."""

from dataclasses import fields, replace

from wellness_tracker.domain.actions import (
    Action,
    AddMedication,
    AddSleepEntry,
    AddStepEntry,
    AddWaterEntry,
    DeleteMedication,
    LoadData,
    LogMedication,
    MedicationChanges,
    ResetData,
    SetUser,
    UpdateMedication,
)
from wellness_tracker.domain.models import HealthState, Medication


def reduce(state: HealthState, action: Action) -> HealthState:
    """Apply an action and return the next state."""
    match action:
        case SetUser():
            return replace(state, user=replace(state.user, **_provided(action)))
        case AddWaterEntry(entry=entry):
            return replace(state, water_entries=(*state.water_entries, entry))
        case AddStepEntry(entry=entry):
            return replace(state, step_entries=(*state.step_entries, entry))
        case AddSleepEntry(entry=entry):
            return replace(state, sleep_entries=(*state.sleep_entries, entry))
        case AddMedication(medication=medication):
            return replace(state, medications=(*state.medications, medication))
        case UpdateMedication(medication_id=medication_id, changes=changes):
            if not any(med.id == medication_id for med in state.medications):
                return state
            return replace(
                state,
                medications=tuple(
                    _apply_changes(med, changes) if med.id == medication_id else med
                    for med in state.medications
                ),
            )
        case DeleteMedication(medication_id=medication_id):
            if not any(med.id == medication_id for med in state.medications):
                return state
            return replace(
                state,
                medications=tuple(
                    med for med in state.medications if med.id != medication_id
                ),
            )
        case LogMedication(log=log):
            return replace(state, medication_logs=(*state.medication_logs, log))
        case LoadData():
            return replace(state, **_provided(action))
        case ResetData():
            return HealthState()
    raise TypeError(f"Unknown action: {action!r}")


def _apply_changes(medication: Medication, changes: MedicationChanges) -> Medication:
    return replace(medication, **_provided(changes))


def _provided(value: object) -> dict[str, object]:
    """Return the dataclass fields of value that are not None."""
    return {
        item.name: getattr(value, item.name)
        for item in fields(value)
        if getattr(value, item.name) is not None
    }
