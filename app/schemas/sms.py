"""
app/schemas/sms.py

Purpose: SMS API request schemas

- JSON bodies arrive in camelCase from the admin dashboard
- Fields are optional where the SMS service itself reports missing values,
  so those failures come back in the service's own error shape
"""

from pydantic import BaseModel, Field
from typing import Optional, Union


class CamelModel(BaseModel):
    class Config:
        populate_by_name = True


class SendSMSRequest(CamelModel):
    """Body for POST /api/sms/send"""
    to: Optional[str] = Field(None, description="Recipient in international format")
    message: Optional[str] = Field(None, description="Message text")

    class Config:
        json_schema_extra = {
            "example": {
                "to": "+639171234567",
                "message": "Hello from TAARA!"
            }
        }


class AdoptionRequestNotice(CamelModel):
    admin_phone: Optional[str] = Field(None, alias="adminPhone")
    adopter_name: str = Field(..., alias="adopterName")
    pet_name: str = Field(..., alias="petName")
    adopter_phone: str = Field(..., alias="adopterPhone")


class AdoptionApprovalNotice(CamelModel):
    adopter_phone: Optional[str] = Field(None, alias="adopterPhone")
    pet_name: str = Field(..., alias="petName")
    organization_name: str = Field(..., alias="organizationName")
    contact_info: str = Field(..., alias="contactInfo")


class AdoptionRejectionNotice(CamelModel):
    adopter_phone: Optional[str] = Field(None, alias="adopterPhone")
    pet_name: str = Field(..., alias="petName")
    organization_name: str = Field(..., alias="organizationName")
    reason: str = Field("", description="Optional reason shown to the adopter")


class DonationConfirmationNotice(CamelModel):
    donor_phone: Optional[str] = Field(None, alias="donorPhone")
    amount: Union[int, float, str] = Field(..., description="Donation amount, shown after '$'")
    organization_name: str = Field(..., alias="organizationName")
    donor_name: str = Field(..., alias="donorName")


class ValidatePhoneRequest(CamelModel):
    phone_number: str = Field(..., alias="phoneNumber")
    country_code: Optional[str] = Field(None, alias="countryCode")
