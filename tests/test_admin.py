"""
Tests for the admin endpoints and the admin role guard.
"""
from clinic_gate.auth.models import UserRole
from clinic_gate.core.security import decode_access_token


def test_issue_token_as_patient_is_forbidden(client, make_user, auth_header):
    """
    A valid token for a patient does not open admin routes.
    """
    patient = make_user(role=UserRole.PATIENT)

    response = client.post("/api/admin/tokens", json={"user_id": patient.id}, headers=auth_header(patient))

    assert response.status_code == 403
    assert response.json() == {"message": "Access denied. Admin privileges required."}


def test_issue_token_as_admin(client, make_user, auth_header):
    admin = make_user(role=UserRole.ADMIN)
    patient = make_user(role=UserRole.PATIENT)

    response = client.post("/api/admin/tokens", json={"user_id": patient.id}, headers=auth_header(admin))

    assert response.status_code == 201
    assert decode_access_token(response.json()["token"]) == str(patient.id)


def test_issue_token_for_missing_account(client, make_user, auth_header):
    admin = make_user(role=UserRole.ADMIN)

    response = client.post("/api/admin/tokens", json={"user_id": 999}, headers=auth_header(admin))

    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


def test_admin_route_without_token(client):
    response = client.post("/api/admin/tokens", json={"user_id": 1})
    assert response.status_code == 401
    assert response.json() == {"message": "Access denied. No token provided."}


def test_deactivated_admin_is_unauthenticated(client, make_user, auth_header):
    admin = make_user(role=UserRole.ADMIN, is_active=False)

    response = client.post("/api/admin/tokens", json={"user_id": admin.id}, headers=auth_header(admin))

    assert response.status_code == 401
    assert response.json() == {"message": "Account is deactivated."}


def test_doctor_is_not_admin(client, make_user, make_doctor, auth_header):
    user = make_user(role=UserRole.DOCTOR)
    make_doctor(user, is_verified=True)

    response = client.put("/api/admin/users/1/status", json={"is_active": False}, headers=auth_header(user))

    assert response.status_code == 403


def test_verify_doctor(client, make_user, make_doctor, auth_header):
    admin = make_user(role=UserRole.ADMIN)
    doctor_user = make_user(role=UserRole.DOCTOR)
    doctor = make_doctor(doctor_user, is_verified=False)

    assert client.get("/api/doctors/profile/me", headers=auth_header(doctor_user)).status_code == 403

    response = client.put(
        f"/api/admin/doctors/{doctor.id}/verify",
        json={"is_verified": True},
        headers=auth_header(admin),
    )
    assert response.status_code == 200
    assert response.json()["is_verified"] is True

    assert client.get("/api/doctors/profile/me", headers=auth_header(doctor_user)).status_code == 200


def test_verify_missing_doctor(client, make_user, auth_header):
    admin = make_user(role=UserRole.ADMIN)

    response = client.put("/api/admin/doctors/999/verify", json={"is_verified": True}, headers=auth_header(admin))

    assert response.status_code == 404
    assert response.json() == {"message": "Doctor not found"}


def test_verify_doctor_rejects_malformed_body(client, make_user, make_doctor, auth_header):
    admin = make_user(role=UserRole.ADMIN)
    doctor = make_doctor(make_user(role=UserRole.DOCTOR))

    response = client.put(
        f"/api/admin/doctors/{doctor.id}/verify",
        json={"is_verified": "maybe"},
        headers=auth_header(admin),
    )

    assert response.status_code == 400
    data = response.json()
    assert data["message"] == "Validation failed"
    assert data["errors"][0]["field"] == "is_verified"


def test_deactivating_account_revokes_access(client, make_user, auth_header):
    """
    Deactivation takes effect on the next request, even for unexpired tokens.
    """
    admin = make_user(role=UserRole.ADMIN)
    patient = make_user(role=UserRole.PATIENT)
    patient_headers = auth_header(patient)

    assert client.get("/api/auth/me", headers=patient_headers).status_code == 200

    response = client.put(
        f"/api/admin/users/{patient.id}/status",
        json={"is_active": False},
        headers=auth_header(admin),
    )
    assert response.status_code == 200
    assert response.json()["is_active"] is False

    response = client.get("/api/auth/me", headers=patient_headers)
    assert response.status_code == 401
    assert response.json() == {"message": "Account is deactivated."}


def test_update_status_of_missing_account(client, make_user, auth_header):
    admin = make_user(role=UserRole.ADMIN)

    response = client.put("/api/admin/users/999/status", json={"is_active": True}, headers=auth_header(admin))

    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}
