"""
app/services/sms_service.py

Purpose: SMS notification dispatch

- Validates recipient and message before anything is sent
- Sends through Twilio, or logs a mock SMS when Twilio is not configured
- Templated senders for adoption, donation, volunteer and account notices
- Sequential bulk sending with a fixed pause between messages

Every public send method returns a result dict and never raises:
    {"success": True, "message_sid": ..., "status": ..., "to": ..., "from": ...}
    {"success": False, "error": ..., "code": ...}
"""

import asyncio
import time
from typing import Dict, Any, List, Optional

from app.core.config import settings
from app.core.exceptions import TaaraError, ProviderError, ValidationError
from app.core.logging import get_logger, LogContext
from app.services.twilio_service import TwilioClient, is_configured
from utils.constants import (
    MOCK_FROM_NUMBER,
    MOCK_SID_PREFIX,
    DEFAULT_COUNTRY_CODE,
    MISSING_FIELDS_ERROR,
    INVALID_PHONE_ERROR,
    NOTIFICATION_ADOPTION_REQUEST,
    NOTIFICATION_ADOPTION_APPROVAL,
    NOTIFICATION_ADOPTION_REJECTION,
    NOTIFICATION_DONATION_CONFIRMATION,
    NOTIFICATION_VOLUNTEER_WELCOME,
    NOTIFICATION_APPOINTMENT_REMINDER,
    NOTIFICATION_VERIFICATION_CODE,
    NOTIFICATION_PASSWORD_RESET,
    NOTIFICATION_PET_STATUS_UPDATE,
    NOTIFICATION_BULK,
)
from utils.sms_utils import (
    build_adoption_request_message,
    build_adoption_approval_message,
    build_adoption_rejection_message,
    build_donation_confirmation_message,
    build_volunteer_welcome_message,
    build_appointment_reminder_message,
    build_verification_code_message,
    build_password_reset_message,
    build_pet_status_update_message,
)
from utils import validation_utils

logger = get_logger(__name__)


class SMSService:
    """
    Sends SMS notifications through Twilio.

    Mode is decided once, here: with all three Twilio values the service is
    live, otherwise every send is logged and answered with a MOCK_ result.
    """

    def __init__(
        self,
        account_sid: Optional[str] = None,
        auth_token: Optional[str] = None,
        phone_number: Optional[str] = None,
        client: Optional[TwilioClient] = None,
        bulk_delay_seconds: float = 1.0
    ):
        self.bulk_delay_seconds = bulk_delay_seconds

        if is_configured(account_sid, auth_token, phone_number):
            self.client = client or TwilioClient(account_sid, auth_token)
            self.from_number = phone_number
            self.enabled = True
            logger.info("✅ SMS Service enabled with Twilio")
        else:
            self.client = None
            self.from_number = MOCK_FROM_NUMBER
            self.enabled = False
            logger.info("📱 SMS Service running in MOCK mode")

    async def send_sms(self, to: str, message: str) -> Dict[str, Any]:
        """
        Sends a single SMS.

        Args:
            to: Recipient phone number (+639171234567)
            message: Message content

        Returns:
            Result dict with success status (see module docstring)
        """
        try:
            if not to or not message:
                raise ValidationError(MISSING_FIELDS_ERROR)

            if not self.validate_phone_number(to):
                raise ValidationError(INVALID_PHONE_ERROR, details={"to": to})

            if not self.enabled:
                return self._send_mock(to, message)

            result = await self.client.create_message(
                body=message,
                from_=self.from_number,
                to=to
            )

            logger.info(f"✅ SMS sent successfully: {result['sid']}")
            return {
                "success": True,
                "message_sid": result["sid"],
                "status": result["status"],
                "to": result["to"],
                "from": result["from"]
            }

        except ProviderError as e:
            logger.error(f"❌ Error sending SMS: {e.message}")
            return {
                "success": False,
                "error": e.message,
                "code": e.provider_code if e.provider_code is not None else e.code
            }
        except ValidationError as e:
            logger.warning(f"SMS rejected: {e.message}")
            return {
                "success": False,
                "error": e.message,
                "code": e.code
            }
        except TaaraError as e:
            logger.error(f"❌ Error sending SMS: {e.message}")
            return {
                "success": False,
                "error": e.message,
                "code": e.code
            }
        except Exception as e:
            logger.error(f"❌ Unexpected error sending SMS: {e}", exc_info=True)
            return {
                "success": False,
                "error": str(e),
                "code": "INTERNAL_ERROR"
            }

    def _send_mock(self, to: str, message: str) -> Dict[str, Any]:
        """Logs the SMS instead of sending it."""
        message_sid = f"{MOCK_SID_PREFIX}{int(time.time() * 1000)}"

        logger.info(
            f"📱 MOCK SMS\nTo: {to}\nFrom: {self.from_number}\nMessage:\n{message}",
            extra={"message_sid": message_sid, "mock": True}
        )

        return {
            "success": True,
            "message_sid": message_sid,
            "status": "sent",
            "to": to,
            "from": self.from_number,
            "mock": True
        }

    # ------------------------------------------------------------
    # Templated notifications
    # ------------------------------------------------------------

    async def send_adoption_request_notification(
        self,
        admin_phone: str,
        adopter_name: str,
        pet_name: str,
        adopter_phone: str
    ) -> Dict[str, Any]:
        """
        Notifies an admin that a new adoption request came in.
        """
        with LogContext(notification=NOTIFICATION_ADOPTION_REQUEST, recipient=admin_phone):
            message = build_adoption_request_message(adopter_name, pet_name, adopter_phone)
            return await self.send_sms(admin_phone, message)

    async def send_adoption_approval(
        self,
        adopter_phone: str,
        pet_name: str,
        organization_name: str,
        contact_info: str
    ) -> Dict[str, Any]:
        with LogContext(notification=NOTIFICATION_ADOPTION_APPROVAL, recipient=adopter_phone):
            message = build_adoption_approval_message(pet_name, organization_name, contact_info)
            return await self.send_sms(adopter_phone, message)

    async def send_adoption_rejection(
        self,
        adopter_phone: str,
        pet_name: str,
        organization_name: str,
        reason: str = ""
    ) -> Dict[str, Any]:
        with LogContext(notification=NOTIFICATION_ADOPTION_REJECTION, recipient=adopter_phone):
            message = build_adoption_rejection_message(pet_name, organization_name, reason)
            return await self.send_sms(adopter_phone, message)

    async def send_donation_confirmation(
        self,
        donor_phone: str,
        amount: Any,
        organization_name: str,
        donor_name: str
    ) -> Dict[str, Any]:
        with LogContext(notification=NOTIFICATION_DONATION_CONFIRMATION, recipient=donor_phone):
            message = build_donation_confirmation_message(amount, organization_name, donor_name)
            return await self.send_sms(donor_phone, message)

    async def send_volunteer_welcome(
        self,
        volunteer_phone: str,
        organization_name: str,
        volunteer_name: str
    ) -> Dict[str, Any]:
        with LogContext(notification=NOTIFICATION_VOLUNTEER_WELCOME, recipient=volunteer_phone):
            message = build_volunteer_welcome_message(organization_name, volunteer_name)
            return await self.send_sms(volunteer_phone, message)

    async def send_appointment_reminder(
        self,
        user_phone: str,
        pet_name: str,
        appointment_date: str,
        appointment_time: str,
        location: str
    ) -> Dict[str, Any]:
        with LogContext(notification=NOTIFICATION_APPOINTMENT_REMINDER, recipient=user_phone):
            message = build_appointment_reminder_message(
                pet_name, appointment_date, appointment_time, location
            )
            return await self.send_sms(user_phone, message)

    async def send_verification_code(self, user_phone: str, code: str, user_name: str) -> Dict[str, Any]:
        with LogContext(notification=NOTIFICATION_VERIFICATION_CODE, recipient=user_phone):
            message = build_verification_code_message(code, user_name)
            return await self.send_sms(user_phone, message)

    async def send_password_reset_code(self, user_phone: str, code: str, user_name: str) -> Dict[str, Any]:
        with LogContext(notification=NOTIFICATION_PASSWORD_RESET, recipient=user_phone):
            message = build_password_reset_message(code, user_name)
            return await self.send_sms(user_phone, message)

    async def send_pet_status_update(
        self,
        user_phone: str,
        pet_name: str,
        status: str,
        message: str
    ) -> Dict[str, Any]:
        with LogContext(notification=NOTIFICATION_PET_STATUS_UPDATE, recipient=user_phone):
            status_message = build_pet_status_update_message(pet_name, status, message)
            return await self.send_sms(user_phone, status_message)

    # ------------------------------------------------------------
    # Bulk
    # ------------------------------------------------------------

    async def send_bulk_sms(self, recipients: List[str], message: str) -> Dict[str, Any]:
        """
        Sends the same message to each recipient, one at a time.

        A failure for one recipient does not stop the loop. The pause after
        each send keeps us under Twilio's free-tier rate (1 SMS/second).

        Returns:
            {
                "total_sent": 2,
                "total_failed": 1,
                "results": [{"to": ..., "success": ..., ...}, ...]  # input order
            }
        """
        results = []

        for recipient in recipients:
            with LogContext(notification=NOTIFICATION_BULK, recipient=recipient):
                result = await self.send_sms(recipient, message)

            results.append({"to": recipient, **result})

            await asyncio.sleep(self.bulk_delay_seconds)

        successful = sum(1 for r in results if r["success"])
        failed = len(results) - successful

        logger.info(f"📊 Bulk SMS Results: {successful} sent, {failed} failed")

        return {
            "total_sent": successful,
            "total_failed": failed,
            "results": results
        }

    # ------------------------------------------------------------
    # Phone helpers
    # ------------------------------------------------------------

    def validate_phone_number(self, phone_number: str) -> bool:
        return validation_utils.validate_phone_number(phone_number)

    def format_phone_number(self, phone_number: str, country_code: str = DEFAULT_COUNTRY_CODE) -> str:
        return validation_utils.format_phone_number(phone_number, country_code)


# Singleton instance
sms_service = SMSService(
    account_sid=settings.TWILIO_ACCOUNT_SID,
    auth_token=settings.TWILIO_AUTH_TOKEN,
    phone_number=settings.TWILIO_PHONE_NUMBER,
    bulk_delay_seconds=settings.SMS_BULK_DELAY_SECONDS
)
