"""Healthcare service - patients, prescriptions and the per-patient index."""

import logging
from collections import defaultdict
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from itemvault.models.domain import Patient, Prescription
from itemvault.repositories.memory_repository import KeyedRepository

logger = logging.getLogger(__name__)


class HealthcareService:
    """
    Service for patient and prescription lookups.

    The prescription map (patient id -> prescriptions) is derived from the
    prescription repository. It remembers the repository version it was
    built from and is rebuilt in full on the first lookup after any add or
    remove, including ones made directly on ``prescriptions``.
    """

    def __init__(self):
        self.patients: KeyedRepository[Patient] = KeyedRepository("Patient")
        self.prescriptions: KeyedRepository[Prescription] = KeyedRepository("Prescription")
        self._prescription_map: Optional[Dict[int, List[Prescription]]] = None
        self._map_version = -1

    def seed_data(self) -> None:
        """Load sample patients and prescriptions."""
        now = datetime.now()

        self.patients.add(Patient(1, "Alicia Jones", 20, "Female"))
        self.patients.add(Patient(2, "Damson Idris", 29, "Male"))
        self.patients.add(Patient(3, "Max Emilian Verstappen", 27, "Male"))

        self.add_prescription(Prescription(1, 1, "Amoxicillin", now - timedelta(days=10)))
        self.add_prescription(Prescription(2, 2, "Ibuprofen", now - timedelta(days=7)))
        self.add_prescription(Prescription(3, 1, "Nexium", now - timedelta(days=3)))
        self.add_prescription(Prescription(4, 3, "Nugel-O", now - timedelta(days=2)))
        self.add_prescription(Prescription(5, 1, "Cetirizine", now - timedelta(days=1)))

    def add_prescription(self, prescription: Prescription) -> Prescription:
        """Store a prescription and invalidate the map."""
        self.prescriptions.add(prescription)
        self._prescription_map = None
        return prescription

    def remove_prescription(self, id: int) -> None:
        """Remove a prescription and invalidate the map."""
        self.prescriptions.remove(id)
        self._prescription_map = None

    def build_prescription_map(self) -> Dict[int, List[Prescription]]:
        """Group all prescriptions by patient id."""
        grouped: Dict[int, List[Prescription]] = defaultdict(list)
        for prescription in self.prescriptions.list():
            grouped[prescription.patient_id].append(prescription)

        self._prescription_map = dict(grouped)
        self._map_version = self.prescriptions.version
        logger.debug("Built prescription map for %d patients", len(self._prescription_map))
        return self._prescription_map

    def get_prescriptions_by_patient_id(self, patient_id: int) -> List[Prescription]:
        """Prescriptions for a patient; empty if there are none."""
        if self._prescription_map is None or self._map_version != self.prescriptions.version:
            self.build_prescription_map()
        return list(self._prescription_map.get(patient_id, []))

    def format_patients(self) -> List[str]:
        return [str(patient) for patient in self.patients.list()]

    def format_prescriptions_for_patient(self, patient_id: int) -> List[str]:
        """Report lines for one patient's prescriptions."""
        prescriptions = self.get_prescriptions_by_patient_id(patient_id)
        if not prescriptions:
            return [f"No prescriptions found for Patient ID {patient_id}."]

        lines = [f"Prescriptions for Patient ID {patient_id}:"]
        for p in prescriptions:
            lines.append(
                f"Prescription ID: {p.id}, Medication: {p.medication_name}, "
                f"Date: {p.date_issued:%Y-%m-%d}"
            )
        return lines
