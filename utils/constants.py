"""
utils/constants.py

Purpose: Centralized static content

- All outgoing SMS templates
- Phone number defaults
- Notification type names used in logs

(Prevents hardcoding across the codebase)
"""

# ============================================================
# GENERAL
# ============================================================

APP_SIGNATURE = "- Pet Adoption App"

# Sender shown in mock mode when no Twilio number is configured
MOCK_FROM_NUMBER = "+1234567890"
MOCK_SID_PREFIX = "MOCK_"

DEFAULT_COUNTRY_CODE = "+63"

# ============================================================
# ADOPTION
# ============================================================

ADOPTION_REQUEST_TEMPLATE = """🐾 NEW ADOPTION REQUEST

Adopter: {adopter_name}
Pet: {pet_name}
Contact: {adopter_phone}

Please review the request in your admin dashboard.

""" + APP_SIGNATURE

ADOPTION_APPROVAL_TEMPLATE = """🎉 CONGRATULATIONS!

Your adoption request for {pet_name} has been APPROVED by {organization_name}!

We're excited to help you welcome {pet_name} to your family. Our team will contact you soon with the next steps.

Contact us: {contact_info}

""" + APP_SIGNATURE

ADOPTION_REJECTION_TEMPLATE = """📋 ADOPTION APPLICATION UPDATE

Thank you for your interest in adopting {pet_name} from {organization_name}.

Unfortunately, your application was not approved at this time.{reason_text}

Please don't be discouraged! Feel free to browse other available pets and submit another application.

""" + APP_SIGNATURE

REJECTION_REASON_TEMPLATE = "\n\nReason: {reason}"

# ============================================================
# DONATIONS & VOLUNTEERS
# ============================================================

DONATION_CONFIRMATION_TEMPLATE = """❤️ DONATION CONFIRMED

Dear {donor_name},

Thank you for your generous donation of ${amount} to {organization_name}!

Your support helps us:
• Feed and care for rescued animals
• Provide medical treatment
• Find loving homes for pets in need

Every contribution makes a difference!

""" + APP_SIGNATURE

VOLUNTEER_WELCOME_TEMPLATE = """🌟 WELCOME TO OUR TEAM!

Hi {volunteer_name},

Thank you for joining {organization_name} as a volunteer!

We're thrilled to have you on board. You'll receive updates about:
• Volunteer opportunities
• Special events
• Ways to help our furry friends

Together, we can make a difference!

""" + APP_SIGNATURE

# ============================================================
# APPOINTMENTS & PET UPDATES
# ============================================================

APPOINTMENT_REMINDER_TEMPLATE = """📅 APPOINTMENT REMINDER

Pet: {pet_name}
Date: {appointment_date}
Time: {appointment_time}
Location: {location}

We're looking forward to seeing you! Please arrive 10 minutes early.

To reschedule, please contact us.

""" + APP_SIGNATURE

PET_STATUS_UPDATE_TEMPLATE = """🐕 PET UPDATE: {pet_name}

Status: {status}

{message}

""" + APP_SIGNATURE

# ============================================================
# ACCOUNT CODES
# ============================================================

VERIFICATION_CODE_EXPIRY_MINUTES = 10
PASSWORD_RESET_EXPIRY_MINUTES = 15

VERIFICATION_CODE_TEMPLATE = """🔐 VERIFICATION CODE

Hi {user_name},

Your verification code is: {code}

This code will expire in {expiry_minutes} minutes.

Do not share this code with anyone.

""" + APP_SIGNATURE

PASSWORD_RESET_TEMPLATE = """🔑 PASSWORD RESET

Hi {user_name},

Your password reset code is: {code}

This code will expire in {expiry_minutes} minutes.

If you didn't request this, please ignore this message.

""" + APP_SIGNATURE

# ============================================================
# NOTIFICATION TYPES (log context)
# ============================================================

NOTIFICATION_ADOPTION_REQUEST = "adoption_request"
NOTIFICATION_ADOPTION_APPROVAL = "adoption_approval"
NOTIFICATION_ADOPTION_REJECTION = "adoption_rejection"
NOTIFICATION_DONATION_CONFIRMATION = "donation_confirmation"
NOTIFICATION_VOLUNTEER_WELCOME = "volunteer_welcome"
NOTIFICATION_APPOINTMENT_REMINDER = "appointment_reminder"
NOTIFICATION_VERIFICATION_CODE = "verification_code"
NOTIFICATION_PASSWORD_RESET = "password_reset"
NOTIFICATION_PET_STATUS_UPDATE = "pet_status_update"
NOTIFICATION_BULK = "bulk"

# Error Messages
MISSING_FIELDS_ERROR = "Phone number and message are required"
INVALID_PHONE_ERROR = "Invalid phone number format. Use international format: +1234567890"
