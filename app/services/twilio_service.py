"""
app/services/twilio_service.py

Purpose: Twilio SMS API client

- Creates SMS messages via the Twilio REST API
- Converts Twilio error payloads into ProviderError (with Twilio's error code)
- No retries: callers decide what to do with a failure
"""

import httpx
from typing import Dict, Any, Optional
from app.core.config import settings
from app.core.exceptions import ProviderError
from app.core.logging import get_logger

logger = get_logger(__name__)


class TwilioClient:
    """Thin async client for Twilio's Messages resource"""

    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.account_sid = account_sid
        self.auth_token = auth_token
        self.base_url = (base_url or settings.TWILIO_API_BASE_URL).rstrip("/")
        self.timeout = timeout or settings.TWILIO_TIMEOUT_SECONDS
        self._transport = transport

    @property
    def messages_url(self) -> str:
        return f"{self.base_url}/2010-04-01/Accounts/{self.account_sid}/Messages.json"

    async def create_message(self, body: str, from_: str, to: str) -> Dict[str, Any]:
        """
        Sends an SMS via Twilio

        Args:
            body: Message text
            from_: Sender number (+1234567890)
            to: Recipient number (+639171234567)

        Returns:
            {
                "sid": "SMxxx...",
                "status": "queued",
                "to": "+639171234567",
                "from": "+1234567890"
            }

        Raises:
            ProviderError: Twilio rejected the request or could not be reached
        """
        data = {
            "Body": body,
            "From": from_,
            "To": to
        }

        logger.info(f"📤 Sending Twilio SMS to {to}")

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                response = await client.post(
                    self.messages_url,
                    data=data,
                    auth=(self.account_sid, self.auth_token)
                )
        except httpx.TimeoutException:
            logger.error("Twilio API timeout")
            raise ProviderError("Twilio API timeout")
        except httpx.HTTPError as e:
            logger.error(f"Twilio API unreachable: {e}")
            raise ProviderError(f"Twilio API unreachable: {e}")

        if response.status_code not in (200, 201):
            raise self._error_from_response(response)

        result = response.json()
        logger.info(f"✅ Twilio accepted SMS: SID={result.get('sid')}")

        return {
            "sid": result.get("sid"),
            "status": result.get("status"),
            "to": result.get("to", to),
            "from": result.get("from", from_)
        }

    @staticmethod
    def _error_from_response(response: httpx.Response) -> ProviderError:
        """
        Twilio error bodies look like:
            {"code": 21211, "message": "The 'To' number ... is not a valid phone number.",
             "more_info": "https://www.twilio.com/docs/errors/21211", "status": 400}
        """
        try:
            payload = response.json()
        except ValueError:
            payload = {}

        message = payload.get("message") or f"Twilio API error: {response.status_code}"
        logger.error(f"❌ Twilio API error: {response.status_code} - {message}")

        return ProviderError(
            message,
            provider_code=payload.get("code"),
            details={
                "status": response.status_code,
                "more_info": payload.get("more_info")
            }
        )


def is_configured(
    account_sid: Optional[str],
    auth_token: Optional[str],
    phone_number: Optional[str]
) -> bool:
    """Check if all three Twilio values are present"""
    return bool(account_sid and auth_token and phone_number)
