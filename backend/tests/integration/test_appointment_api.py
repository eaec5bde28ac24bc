"""
HTTP tests for /api/appointments through the Flask test client.
"""

import pytest

pytestmark = [pytest.mark.integration, pytest.mark.controllers]


@pytest.fixture
def seeded(client, appointment_payload):
    created = []
    for date_time, patient_id, doctor_id in (
        ("2025-03-01T09:00:00", "patient-1", "doctor-1"),
        ("2025-03-02T14:00:00", "patient-2", "doctor-1"),
        ("2025-03-03T10:00:00", "patient-1", "doctor-2"),
    ):
        response = client.post(
            "/api/appointments",
            json=dict(
                appointment_payload,
                dateTime=date_time,
                patientId=patient_id,
                doctorId=doctor_id,
            ),
        )
        assert response.status_code == 201
        created.append(response.get_json())
    return created


def test_create_and_get(client, appointment_payload):
    response = client.post("/api/appointments", json=appointment_payload)

    assert response.status_code == 201
    created = response.get_json()
    assert created["dateTime"] == "2025-03-01T09:30:00"
    assert created["patientId"] == "patient-1"
    assert client.get(f"/api/appointments/{created['id']}").get_json() == created


def test_create_normalizes_utc_timestamps(client, appointment_payload):
    response = client.post(
        "/api/appointments",
        json=dict(appointment_payload, dateTime="2025-03-01T11:30:00+02:00"),
    )

    assert response.get_json()["dateTime"] == "2025-03-01T09:30:00"


def test_create_requires_date_time(client, appointment_payload):
    response = client.post(
        "/api/appointments", json=dict(appointment_payload, dateTime=None)
    )

    assert response.status_code == 400
    assert response.get_json()["data"]["errors"] == [
        "dateTime: Appointment date and time cannot be null"
    ]


def test_update_and_delete(client, appointment_payload):
    created = client.post("/api/appointments", json=appointment_payload).get_json()

    updated = client.put(
        f"/api/appointments/{created['id']}",
        json=dict(appointment_payload, reason="Follow-up"),
    )
    assert updated.status_code == 200
    assert updated.get_json()["reason"] == "Follow-up"
    assert updated.get_json()["id"] == created["id"]

    assert client.delete(f"/api/appointments/{created['id']}").status_code == 204
    assert client.get(f"/api/appointments/{created['id']}").status_code == 404


def test_missing_appointment_returns_404(client, appointment_payload):
    assert client.get("/api/appointments/missing").status_code == 404
    assert (
        client.put("/api/appointments/missing", json=appointment_payload).status_code
        == 404
    )
    assert client.delete("/api/appointments/missing").status_code == 404


def test_by_patient_and_doctor(client, seeded):
    by_patient = client.get("/api/appointments/patient/patient-1").get_json()
    by_doctor = client.get("/api/appointments/doctor/doctor-1").get_json()

    assert {a["id"] for a in by_patient} == {seeded[0]["id"], seeded[2]["id"]}
    assert {a["id"] for a in by_doctor} == {seeded[0]["id"], seeded[1]["id"]}


def test_between_is_inclusive(client, seeded):
    response = client.get(
        "/api/appointments/between"
        "?start=2025-03-01T09:00:00&end=2025-03-02T14:00:00"
    )

    assert response.status_code == 200
    assert {a["id"] for a in response.get_json()} == {
        seeded[0]["id"],
        seeded[1]["id"],
    }


@pytest.mark.parametrize(
    "query",
    [
        "?start=2025-03-01T09:00:00",
        "?start=yesterday&end=2025-03-02T14:00:00",
        "?start=2025-03-02T14:00:00&end=2025-03-01T09:00:00",
    ],
)
def test_between_rejects_bad_ranges(client, query):
    assert client.get(f"/api/appointments/between{query}").status_code == 400


def test_upcoming_for_doctor(client, seeded):
    response = client.get(
        "/api/appointments/doctor/doctor-1/upcoming?since=2025-03-02T00:00:00"
    )

    assert [a["id"] for a in response.get_json()] == [seeded[1]["id"]]


def test_upcoming_defaults_to_now(client, seeded):
    # All seeded appointments are in the past
    response = client.get("/api/appointments/doctor/doctor-1/upcoming")

    assert response.get_json() == []


def test_history_for_patient(client, seeded):
    until_first = client.get(
        "/api/appointments/patient/patient-1/history?until=2025-03-01T09:00:00"
    ).get_json()
    until_now = client.get("/api/appointments/patient/patient-1/history").get_json()

    assert [a["id"] for a in until_first] == [seeded[0]["id"]]
    assert len(until_now) == 2
