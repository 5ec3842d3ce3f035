"""
Send a test OTP through a running OTP relay

Prints which providers are configured, then optionally posts a test
email and/or SMS to the service.

Usage: python scripts/send_test_otp.py [base_url]
"""

import asyncio
import secrets
import sys
from pathlib import Path

import httpx
from dotenv import load_dotenv

sys.path.insert(0, str(Path(__file__).parent.parent))

# Load environment variables before Settings reads them
load_dotenv()

from app.core.config import get_settings, describe_settings


def check_config():
    """Show which delivery paths are usable"""
    settings = get_settings()

    print("=" * 60)
    print("  OTP Relay Configuration")
    print("=" * 60 + "\n")

    print(f"Resend:   {'✅ configured' if settings.resend_configured else '⚠️  logging only'}")
    print(f"Twilio:   {'✅ configured' if settings.twilio_configured else '❌ incomplete'}")
    print(f"Supabase: {'✅ configured' if settings.supabase_configured else '❌ not set'}")

    for warning in describe_settings(settings):
        print(f"  - {warning}")
    print()


async def post(base_url: str, path: str, payload: dict):
    async with httpx.AsyncClient(timeout=30.0) as client:
        response = await client.post(f"{base_url}{path}", json=payload)

    print(f"\n{path} -> HTTP {response.status_code}")
    print(response.text)


async def main():
    base_url = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:8000"
    otp = f"{secrets.randbelow(1_000_000):06d}"

    check_config()

    email = input("Email address for a test OTP (blank to skip): ").strip()
    if email:
        await post(base_url, "/send-email", {
            "email": email,
            "subject": "Your verification code",
            "message": f"Your code is {otp}",
            "otp": otp,
        })

    phone = input("\nPhone number for a test SMS (E.164, blank to skip): ").strip()
    if phone:
        if not phone.startswith("+"):
            print("❌ Phone number must start with + and country code")
            return
        await post(base_url, "/send-sms", {
            "phone_number": phone,
            "message": f"Your verification code is {otp}",
            "otp": otp,
        })

    print("\n✅ Done")


if __name__ == "__main__":
    asyncio.run(main())
