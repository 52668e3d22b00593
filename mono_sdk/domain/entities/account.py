"""Account information, income and identity response models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MonoModel(BaseModel):
    """Base model for Mono payloads: camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Institution(MonoModel):
    name: Optional[str] = None
    bank_code: Optional[str] = Field(None, alias="bankCode")
    type: Optional[str] = None


class Account(MonoModel):
    """A connected bank account."""

    id: str = Field(..., alias="_id")
    institution: Optional[Institution] = None
    name: Optional[str] = None
    account_number: Optional[str] = Field(None, alias="accountNumber")
    type: Optional[str] = None
    balance: Optional[int] = None  # kobo
    currency: Optional[str] = None
    bvn: Optional[str] = None


class InformationMeta(MonoModel):
    data_status: Optional[str] = None
    auth_method: Optional[str] = None


class InformationResponse(MonoModel):
    """Payload of GET accounts/{id}."""

    meta: Optional[InformationMeta] = None
    account: Account


class IncomeResponse(MonoModel):
    """Payload of GET accounts/{id}/income."""

    type: Optional[str] = None
    amount: Optional[int] = None
    employer: Optional[str] = None
    confidence: Optional[float] = None


class IdentityResponse(MonoModel):
    """Payload of GET accounts/{id}/identity."""

    full_name: Optional[str] = Field(None, alias="fullName")
    email: Optional[str] = None
    phone: Optional[str] = None
    gender: Optional[str] = None
    dob: Optional[str] = None
    bvn: Optional[str] = None
    marital_status: Optional[str] = Field(None, alias="maritalStatus")
    address_line1: Optional[str] = Field(None, alias="addressLine1")
    address_line2: Optional[str] = Field(None, alias="addressLine2")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
