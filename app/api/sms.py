"""
app/api/sms.py

Purpose: SMS notification endpoints

- Called by the admin dashboard to dispatch notifications
- Delegates all validation and sending to the SMS service
- Any failed send is reported as 500 {"success": false, "error": ...}
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from typing import Dict, Any

from app.core.config import settings
from app.core.logging import get_logger
from app.schemas.sms import (
    SendSMSRequest,
    AdoptionRequestNotice,
    AdoptionApprovalNotice,
    AdoptionRejectionNotice,
    DonationConfirmationNotice,
    ValidatePhoneRequest,
)
from app.services.sms_service import sms_service

logger = get_logger(__name__)
router = APIRouter()


def _dispatch_response(result: Dict[str, Any], success_message: str):
    """Maps an SMS service result onto the HTTP response shape."""
    if not result.get("success"):
        logger.error(f"❌ SMS Send Error: {result.get('error')}")
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": result.get("error")}
        )

    return {
        "success": True,
        "message": success_message,
        "messageSid": result.get("message_sid")
    }


@router.post("/send")
async def send_sms(payload: SendSMSRequest):
    """
    Sends a free-form SMS.

    Body: {"to": "+639171234567", "message": "..."}
    """
    result = await sms_service.send_sms(payload.to, payload.message)
    return _dispatch_response(result, "SMS sent successfully")


@router.post("/adoption-request")
async def adoption_request(payload: AdoptionRequestNotice):
    """Notifies an admin about a new adoption request."""
    result = await sms_service.send_adoption_request_notification(
        payload.admin_phone,
        payload.adopter_name,
        payload.pet_name,
        payload.adopter_phone
    )
    return _dispatch_response(result, "Adoption request notification sent")


@router.post("/adoption-approval")
async def adoption_approval(payload: AdoptionApprovalNotice):
    result = await sms_service.send_adoption_approval(
        payload.adopter_phone,
        payload.pet_name,
        payload.organization_name,
        payload.contact_info
    )
    return _dispatch_response(result, "Adoption approval sent")


@router.post("/adoption-rejection")
async def adoption_rejection(payload: AdoptionRejectionNotice):
    result = await sms_service.send_adoption_rejection(
        payload.adopter_phone,
        payload.pet_name,
        payload.organization_name,
        payload.reason
    )
    return _dispatch_response(result, "Adoption rejection sent")


@router.post("/donation-confirmation")
async def donation_confirmation(payload: DonationConfirmationNotice):
    result = await sms_service.send_donation_confirmation(
        payload.donor_phone,
        payload.amount,
        payload.organization_name,
        payload.donor_name
    )
    return _dispatch_response(result, "Donation confirmation sent")


@router.post("/validate-phone")
async def validate_phone(payload: ValidatePhoneRequest):
    """
    Formats a local number and reports whether the result is sendable.

    Body: {"phoneNumber": "0917 123 4567", "countryCode": "+63"}
    """
    country_code = payload.country_code or settings.DEFAULT_COUNTRY_CODE
    formatted = sms_service.format_phone_number(payload.phone_number, country_code)

    return {
        "success": True,
        "phoneNumber": payload.phone_number,
        "formatted": formatted,
        "valid": sms_service.validate_phone_number(formatted)
    }
