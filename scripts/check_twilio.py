"""
Check Twilio SMS Integration

Run this script to verify Twilio is configured correctly
and can send messages (or see what mock mode would send).

Usage: python scripts/check_twilio.py
"""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from app.core.config import settings, describe_twilio_settings
from app.services.sms_service import sms_service


async def check_twilio_config():
    """Print Twilio configuration status"""
    print("=" * 60)
    print("  Twilio Configuration Check")
    print("=" * 60 + "\n")

    status = describe_twilio_settings()
    print(f"Account SID: {status['account_sid']}")
    print(f"Auth Token: {status['auth_token']}")
    print(f"Phone Number: {status['phone_number']}")
    print(f"\nMode: {'✅ LIVE' if sms_service.enabled else '📱 MOCK'}\n")

    if not sms_service.enabled:
        print("⚠️  Set TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN and TWILIO_PHONE_NUMBER in .env to send real SMS")


async def send_test_message():
    """Send a test SMS to a number typed in by the operator"""
    print("=" * 60)
    print("  Test Message Sending")
    print("=" * 60 + "\n")

    phone = input(f"Enter a phone number (e.g. 09171234567 or +639171234567): ").strip()
    phone = sms_service.format_phone_number(phone, settings.DEFAULT_COUNTRY_CODE)

    print(f"\n📤 Sending test message to {phone}...")

    result = await sms_service.send_sms(
        phone,
        "🧪 Test Message from TAARA\n\nIf you received this, SMS notifications are working! ✅"
    )

    if result["success"]:
        print(f"\n✅ Message sent successfully!")
        print(f"Message SID: {result.get('message_sid')}")
        print(f"Status: {result.get('status')}")
    else:
        print(f"\n❌ Failed to send message")
        print(f"Error: {result.get('error')} (code: {result.get('code')})")


async def main():
    print("\n🧪 TAARA Twilio Integration Check\n")

    await check_twilio_config()

    answer = input("\nDo you want to send a test message? (y/n): ")
    if answer.lower() == "y":
        await send_test_message()

    print("\n" + "=" * 60 + "\n")


if __name__ == "__main__":
    asyncio.run(main())
