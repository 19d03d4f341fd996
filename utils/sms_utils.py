"""
utils/sms_utils.py

Purpose: SMS message builders

- Fills the notification templates from utils/constants.py
- Every supplied field is embedded as-is, no escaping or trimming
- Pure functions: no I/O, safe to call from tests
"""

from typing import Any

from utils.constants import (
    ADOPTION_REQUEST_TEMPLATE,
    ADOPTION_APPROVAL_TEMPLATE,
    ADOPTION_REJECTION_TEMPLATE,
    REJECTION_REASON_TEMPLATE,
    DONATION_CONFIRMATION_TEMPLATE,
    VOLUNTEER_WELCOME_TEMPLATE,
    APPOINTMENT_REMINDER_TEMPLATE,
    VERIFICATION_CODE_TEMPLATE,
    VERIFICATION_CODE_EXPIRY_MINUTES,
    PASSWORD_RESET_TEMPLATE,
    PASSWORD_RESET_EXPIRY_MINUTES,
    PET_STATUS_UPDATE_TEMPLATE,
)


def build_adoption_request_message(adopter_name: str, pet_name: str, adopter_phone: str) -> str:
    """
    Builds the admin-facing notice for a new adoption request.
    """
    return ADOPTION_REQUEST_TEMPLATE.format(
        adopter_name=adopter_name,
        pet_name=pet_name,
        adopter_phone=adopter_phone
    )


def build_adoption_approval_message(pet_name: str, organization_name: str, contact_info: str) -> str:
    return ADOPTION_APPROVAL_TEMPLATE.format(
        pet_name=pet_name,
        organization_name=organization_name,
        contact_info=contact_info
    )


def build_adoption_rejection_message(pet_name: str, organization_name: str, reason: str = "") -> str:
    """
    Builds the adopter-facing rejection notice.

    The "Reason:" paragraph is only included when a reason is given.
    """
    reason_text = REJECTION_REASON_TEMPLATE.format(reason=reason) if reason else ""

    return ADOPTION_REJECTION_TEMPLATE.format(
        pet_name=pet_name,
        organization_name=organization_name,
        reason_text=reason_text
    )


def build_donation_confirmation_message(amount: Any, organization_name: str, donor_name: str) -> str:
    """
    Builds the donation thank-you message.

    Args:
        amount: Donation amount, rendered as given after a "$" sign
        organization_name: Receiving organization
        donor_name: Donor's display name
    """
    return DONATION_CONFIRMATION_TEMPLATE.format(
        amount=amount,
        organization_name=organization_name,
        donor_name=donor_name
    )


def build_volunteer_welcome_message(organization_name: str, volunteer_name: str) -> str:
    return VOLUNTEER_WELCOME_TEMPLATE.format(
        organization_name=organization_name,
        volunteer_name=volunteer_name
    )


def build_appointment_reminder_message(
    pet_name: str,
    appointment_date: str,
    appointment_time: str,
    location: str
) -> str:
    return APPOINTMENT_REMINDER_TEMPLATE.format(
        pet_name=pet_name,
        appointment_date=appointment_date,
        appointment_time=appointment_time,
        location=location
    )


def build_verification_code_message(code: str, user_name: str) -> str:
    return VERIFICATION_CODE_TEMPLATE.format(
        code=code,
        user_name=user_name,
        expiry_minutes=VERIFICATION_CODE_EXPIRY_MINUTES
    )


def build_password_reset_message(code: str, user_name: str) -> str:
    return PASSWORD_RESET_TEMPLATE.format(
        code=code,
        user_name=user_name,
        expiry_minutes=PASSWORD_RESET_EXPIRY_MINUTES
    )


def build_pet_status_update_message(pet_name: str, status: str, message: str) -> str:
    """
    Builds a free-form pet status update.

    Args:
        pet_name: Pet the update is about
        status: Short status label (e.g. "Vaccinated")
        message: Body text written by staff
    """
    return PET_STATUS_UPDATE_TEMPLATE.format(
        pet_name=pet_name,
        status=status,
        message=message
    )
