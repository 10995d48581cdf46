"""Unit tests for HealthcareService."""

from datetime import datetime

import pytest

from itemvault.errors import DuplicateKeyError, NotFoundError
from itemvault.models.domain import Prescription
from itemvault.services.healthcare_service import HealthcareService


@pytest.fixture
def service():
    service = HealthcareService()
    service.seed_data()
    return service


class TestHealthcareService:
    """Test patient listing and the prescription map."""

    def test_build_prescription_map(self, service):
        prescription_map = service.build_prescription_map()

        assert sorted(prescription_map) == [1, 2, 3]
        assert [p.id for p in prescription_map[1]] == [1, 3, 5]

    def test_get_prescriptions_unknown_patient_is_empty(self, service):
        assert service.get_prescriptions_by_patient_id(99) == []

    def test_map_rebuilt_after_add(self, service):
        service.build_prescription_map()

        service.add_prescription(Prescription(6, 2, "Loratadine", datetime(2026, 1, 5)))

        assert [p.id for p in service.get_prescriptions_by_patient_id(2)] == [2, 6]

    def test_map_rebuilt_after_remove(self, service):
        service.build_prescription_map()

        service.remove_prescription(4)

        assert service.get_prescriptions_by_patient_id(3) == []

    def test_map_rebuilt_after_direct_repository_add(self, service):
        assert [p.id for p in service.get_prescriptions_by_patient_id(2)] == [2]

        service.prescriptions.add(Prescription(6, 2, "Loratadine", datetime(2026, 1, 5)))

        assert [p.id for p in service.get_prescriptions_by_patient_id(2)] == [2, 6]

    def test_map_rebuilt_after_direct_repository_remove(self, service):
        assert [p.id for p in service.get_prescriptions_by_patient_id(1)] == [1, 3, 5]

        service.prescriptions.remove(3)

        assert [p.id for p in service.get_prescriptions_by_patient_id(1)] == [1, 5]

    def test_failed_add_keeps_map(self, service):
        before = service.get_prescriptions_by_patient_id(1)

        with pytest.raises(DuplicateKeyError):
            service.add_prescription(Prescription(1, 1, "Other", datetime(2026, 1, 1)))

        assert service.get_prescriptions_by_patient_id(1) == before

    def test_remove_missing_prescription(self, service):
        with pytest.raises(NotFoundError):
            service.remove_prescription(42)

    def test_returned_list_does_not_alias_map(self, service):
        service.get_prescriptions_by_patient_id(1).clear()

        assert len(service.get_prescriptions_by_patient_id(1)) == 3

    def test_format_patients(self, service):
        lines = service.format_patients()

        assert lines[0] == "[Patient] ID: 1, Name: Alicia Jones, Age: 20, Gender: Female"
        assert len(lines) == 3

    def test_format_prescriptions_for_patient(self, service):
        lines = service.format_prescriptions_for_patient(2)

        assert lines[0] == "Prescriptions for Patient ID 2:"
        assert lines[1].startswith("Prescription ID: 2, Medication: Ibuprofen, Date: ")

    def test_format_prescriptions_none_found(self, service):
        assert service.format_prescriptions_for_patient(7) == [
            "No prescriptions found for Patient ID 7."
        ]
