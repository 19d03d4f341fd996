from fastapi.testclient import TestClient
import pytest

from app.main import app
from app.core.config import settings
from app.services.sms_service import SMSService
import app.api.sms as sms_api

client = TestClient(app)


@pytest.fixture(autouse=True)
def mock_sms_service(monkeypatch):
    """Route every request through a fresh mock-mode service."""
    service = SMSService(bulk_delay_seconds=0)
    monkeypatch.setattr(sms_api, "sms_service", service)
    return service


def test_root_lists_endpoints():
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "TAARA Pet Adoption API"
    assert data["endpoints"]["sms"]["sendGeneral"] == "POST /api/sms/send"


def test_health_reports_twilio_configuration(monkeypatch):
    monkeypatch.setattr(settings, "TWILIO_ACCOUNT_SID", "AC123")
    monkeypatch.setattr(settings, "TWILIO_AUTH_TOKEN", "secret")

    response = client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Server is running"
    assert data["timestamp"].endswith("Z")
    assert data["twilioConfigured"] is True


def test_health_without_twilio(monkeypatch):
    monkeypatch.setattr(settings, "TWILIO_ACCOUNT_SID", None)

    response = client.get("/api/health")

    assert response.json()["twilioConfigured"] is False


def test_send_sms_success():
    response = client.post("/api/sms/send", json={"to": "+639171234567", "message": "Hello"})

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "SMS sent successfully"
    assert data["messageSid"].startswith("MOCK_")


def test_send_sms_invalid_number_is_500():
    response = client.post("/api/sms/send", json={"to": "09171234567", "message": "Hello"})

    assert response.status_code == 500
    data = response.json()
    assert data["success"] is False
    assert "format" in data["error"]


def test_send_sms_missing_fields_is_500():
    response = client.post("/api/sms/send", json={})

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Phone number and message are required"}


def test_provider_failure_is_500(mock_sms_service):
    async def failing_send(to, message):
        return {"success": False, "error": "Authenticate", "code": 20003}

    mock_sms_service.send_sms = failing_send

    response = client.post("/api/sms/send", json={"to": "+639171234567", "message": "Hello"})

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Authenticate"}


def test_adoption_approval_endpoint(mock_sms_service):
    sent = []

    async def recording_send(to, message):
        sent.append((to, message))
        return {"success": True, "message_sid": "MOCK_42"}

    mock_sms_service.send_sms = recording_send

    response = client.post("/api/sms/adoption-approval", json={
        "adopterPhone": "+639171234567",
        "petName": "Bantay",
        "organizationName": "TAARA Rescue",
        "contactInfo": "0917 555 0000",
    })

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Adoption approval sent",
        "messageSid": "MOCK_42",
    }
    to, message = sent[0]
    assert to == "+639171234567"
    assert "APPROVED by TAARA Rescue" in message
    assert "Contact us: 0917 555 0000" in message


def test_adoption_request_endpoint():
    response = client.post("/api/sms/adoption-request", json={
        "adminPhone": "+639170000001",
        "adopterName": "Maria Santos",
        "petName": "Bantay",
        "adopterPhone": "+639170000002",
    })

    assert response.status_code == 200
    assert response.json()["success"] is True


def test_adoption_rejection_reason_is_optional():
    response = client.post("/api/sms/adoption-rejection", json={
        "adopterPhone": "+639171234567",
        "petName": "Bantay",
        "organizationName": "TAARA Rescue",
    })

    assert response.status_code == 200


def test_donation_confirmation_endpoint():
    response = client.post("/api/sms/donation-confirmation", json={
        "donorPhone": "+639171234567",
        "amount": 500,
        "organizationName": "TAARA Rescue",
        "donorName": "Juan",
    })

    assert response.status_code == 200
    assert response.json()["message"] == "Donation confirmation sent"


def test_templated_endpoint_missing_required_field_is_422():
    response = client.post("/api/sms/donation-confirmation", json={"donorPhone": "+639171234567"})

    assert response.status_code == 422
    data = response.json()
    assert data["success"] is False
    assert data["code"] == "VALIDATION_ERROR"


def test_validate_phone_formats_local_number():
    response = client.post("/api/sms/validate-phone", json={"phoneNumber": "0917-123-4567"})

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "phoneNumber": "0917-123-4567",
        "formatted": "+639171234567",
        "valid": True,
    }


def test_validate_phone_with_country_code():
    response = client.post("/api/sms/validate-phone", json={"phoneNumber": "456", "countryCode": "+1"})

    data = response.json()
    assert data["formatted"] == "+1456"
    assert data["valid"] is False
