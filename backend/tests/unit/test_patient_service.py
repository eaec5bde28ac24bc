"""
Unit tests for PatientService against a mocked repository.
"""

import pytest

from healthcare.core.exceptions import EntityNotFoundError
from healthcare.services.patient_service import PatientService


@pytest.fixture
def service(mock_patient_repo) -> PatientService:
    return PatientService(mock_patient_repo)


@pytest.mark.unit
@pytest.mark.services
def test_create_patient_returns_generated_id(service, mock_patient_repo, make_patient):
    mock_patient_repo.create.return_value = make_patient(id="p1")

    created = service.create_patient(make_patient())

    assert created.id == "p1"
    assert created.age == 30
    assert created.gender == "Female"


@pytest.mark.unit
@pytest.mark.services
def test_get_patient_by_id_absent_is_not_an_error(service, mock_patient_repo):
    mock_patient_repo.get_by_id.return_value = None

    assert service.get_patient_by_id("nope") is None


@pytest.mark.unit
@pytest.mark.services
def test_update_patient_full_replace(service, mock_patient_repo, make_patient):
    mock_patient_repo.get_by_id.return_value = make_patient(id="p1")
    mock_patient_repo.update.side_effect = lambda patient: patient

    result = service.update_patient(
        "p1",
        make_patient(
            id="other",
            name="Jane Roe",
            age=31,
            gender="F",
            email="roe@x.com",
            phone_number="0987654321",
        ),
    )

    assert result.id == "p1"
    assert (result.name, result.age, result.gender) == ("Jane Roe", 31, "F")
    assert (result.email, result.phone_number) == ("roe@x.com", "0987654321")


@pytest.mark.unit
@pytest.mark.services
def test_update_patient_not_found(service, mock_patient_repo, make_patient):
    mock_patient_repo.get_by_id.return_value = None

    with pytest.raises(EntityNotFoundError, match="Patient not found with ID: p9"):
        service.update_patient("p9", make_patient())

    mock_patient_repo.update.assert_not_called()


@pytest.mark.unit
@pytest.mark.services
def test_delete_patient_not_found(service, mock_patient_repo):
    mock_patient_repo.exists.return_value = False

    with pytest.raises(EntityNotFoundError):
        service.delete_patient("p9")

    mock_patient_repo.delete_by_id.assert_not_called()


@pytest.mark.unit
@pytest.mark.services
def test_delete_patient(service, mock_patient_repo):
    mock_patient_repo.exists.return_value = True

    service.delete_patient("p1")

    mock_patient_repo.delete_by_id.assert_called_once_with("p1")


@pytest.mark.unit
@pytest.mark.services
def test_search_operations_delegate(service, mock_patient_repo):
    mock_patient_repo.find_by_age_greater_than.return_value = []
    mock_patient_repo.find_by_gender_ignore_case.return_value = []
    mock_patient_repo.find_by_name_containing_ignore_case.return_value = []

    service.find_patients_by_age_greater_than(18)
    service.find_patients_by_gender("female")
    service.search_patients_by_name("doe")

    mock_patient_repo.find_by_age_greater_than.assert_called_once_with(18)
    mock_patient_repo.find_by_gender_ignore_case.assert_called_once_with("female")
    mock_patient_repo.find_by_name_containing_ignore_case.assert_called_once_with(
        "doe"
    )
