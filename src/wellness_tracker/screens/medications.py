"""Medication view-model."""

from dataclasses import dataclass

from wellness_tracker.domain.models import Frequency, MedicationStatus
from wellness_tracker.screens.forms import require_text, validate_time
from wellness_tracker.services.store import HealthStore


@dataclass(frozen=True)
class MedicationsView:
    """Medication screen contents."""

    medications: list[MedicationStatus]
    taken_count: int
    progress: float
    frequencies: list[Frequency]


@dataclass
class MedicationScreen:
    """Manage medications and mark them taken for today."""

    store: HealthStore

    def view(self) -> MedicationsView:
        """Build the medication list for today."""
        medications = self.store.get_today_medications()
        taken = sum(1 for status in medications if status.taken)
        return MedicationsView(
            medications=medications,
            taken_count=taken,
            progress=taken / len(medications) * 100 if medications else 0,
            frequencies=list(Frequency),
        )

    def add_medication(  # noqa: PLR0913
        self,
        name: str,
        dosage: str,
        frequency: Frequency = Frequency.ONCE_DAILY,
        time: str = "08:00",
        notes: str = "",
    ) -> str:
        """Add a medication. Raises FormError for missing name or dosage."""
        clean_name, clean_dosage = require_text(name, dosage)
        self.store.add_medication(
            name=clean_name,
            dosage=clean_dosage,
            frequency=frequency,
            time=validate_time(time),
            notes=notes.strip(),
        )
        return "Medication added successfully!"

    def toggle_taken(self, medication_id: str) -> str:
        """Flip today's taken status for a medication."""
        current = next(
            (
                status
                for status in self.store.get_today_medications()
                if status.medication.id == medication_id
            ),
            None,
        )
        taken = current.taken if current else False
        self.store.log_medication(medication_id, not taken)
        return f"Medication {'unmarked' if taken else 'taken'} successfully!"

    def delete_medication(self, medication_id: str) -> None:
        """Permanently remove a medication."""
        self.store.delete_medication(medication_id)
