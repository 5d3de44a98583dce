"""
Records exchanged with the XPO pickup API.

Attribute names are snake_case; every field is aliased to XPO's own wire
name (pkupDate, totWeight, garntInd, ...) and those names are what goes out
on the wire. Zero-valued optional fields are still serialized.
"""
from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import ROLE_CODES

# XPO timestamps look like 2024-05-01T08:00:00
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


class XPOModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_xpo_format(self) -> dict:
        """Convert to the XPO wire format."""
        return self.model_dump(mode="json", by_alias=True)


# --- Request Records ---

class Weight(XPOModel):
    weight: float = 0.0


class Email(XPOModel):
    email_addr: str = Field("", alias="emailAddr")


class Phone(XPOModel):
    phone_nbr: str = Field("", alias="phoneNbr")


class Contact(XPOModel):
    company_name: str = Field("", alias="companyName")
    email: Email = Field(default_factory=Email)
    full_name: str = Field("", alias="fullName")
    phone: Phone = Field(default_factory=Phone)


class Requestor(XPOModel):
    """Who asked for the pickup, and their role on the shipment (S, C or 3)."""

    contact: Contact = Field(default_factory=Contact)
    role_cd: str = Field("", alias="roleCd")

    @field_validator("role_cd")
    @classmethod
    def check_role(cls, value):
        if value and value not in ROLE_CODES:
            raise ValueError(f"roleCd must be one of {ROLE_CODES}, got {value!r}")
        return value


class Shipper(XPOModel):
    # required by XPO
    address_line1: str = Field("", alias="addressLine1")
    city_name: str = Field("", alias="cityName")
    state_cd: str = Field("", alias="stateCd", max_length=2)

    name: str = ""
    address_line2: str = Field("", alias="addressLine2")
    postal_cd: str = Field("", alias="postalCd")
    phone: Phone = Field(default_factory=Phone)


class PickupItem(XPOModel):
    """A single freight item being picked up."""

    tot_weight: Weight = Field(alias="totWeight")

    dest_zip6: str = Field("", alias="destZip6")
    loose_pieces_cnt: int = Field(0, alias="loosePiecesCnt", ge=0)
    pallet_cnt: int = Field(0, alias="palletCnt", ge=0)
    garnt_ind: bool = Field(False, alias="garntInd")  # guaranteed service
    hazmat_ind: bool = Field(False, alias="hazmatInd")
    frzble_ind: bool = Field(False, alias="frzbleInd")
    hol_dlvr_ind: bool = Field(False, alias="holDlvrInd")  # holiday or weekend delivery
    food_ind: bool = Field(False, alias="foodInd")
    blk_liquid_ind: bool = Field(False, alias="blkLiquidInd")  # bulk liquid over 119 US gallons
    remarks: str = ""


# XPO's own name for the item record
PkupItem = PickupItem


class PickupDetails(XPOModel):
    """Everything XPO needs to schedule one pickup. XPO accepts up to 50 items."""

    pkup_date: str = Field(alias="pkupDate")
    ready_time: str = Field(alias="readyTime")
    close_time: str = Field(alias="closeTime")
    pkup_item: List[PickupItem] = Field(default_factory=list, alias="pkupItem")

    special_equipment_cd: str = Field("", alias="specialEquipmentCd")
    inside_pkup_ind: bool = Field(False, alias="insidePkupInd")
    shipper: Shipper = Field(default_factory=Shipper)
    requestor: Requestor = Field(default_factory=Requestor)
    contact: Contact = Field(default_factory=Contact)  # usually the requestor's contact
    remarks: str = ""
    tot_pallet_cnt: int = Field(0, alias="totPalletCnt", ge=0)
    tot_loose_pieces_cnt: int = Field(0, alias="totLoosePiecesCnt", ge=0)
    tot_weight: Weight = Field(default_factory=Weight, alias="totWeight")

    @field_validator("pkup_date", "ready_time", "close_time", mode="before")
    @classmethod
    def format_timestamp(cls, value):
        if isinstance(value, datetime):
            return value.strftime(TIMESTAMP_FORMAT)
        return value


class PickupRequest(XPOModel):
    """Envelope XPO wants around the pickup details."""

    pickup_rqst_info: PickupDetails = Field(alias="pickupRqstInfo")


# --- Response Records ---

class XPOResponseModel(XPOModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


class PickupConfirmation(XPOResponseModel):
    confirmation_nbr: str = Field("", alias="confirmationNbr")


class SuccessResponse(XPOResponseModel):
    """JSON body XPO returns when a pickup is scheduled."""

    code: str = ""
    transaction_timestamp: str = Field("", alias="transactionTimestamp")
    data: PickupConfirmation = Field(default_factory=PickupConfirmation)

    @field_validator("data", mode="before")
    @classmethod
    def null_data(cls, value):
        return {} if value is None else value

    @property
    def confirmation_number(self) -> str:
        return self.data.confirmation_nbr


class FaultResponse(XPOResponseModel):
    """XML fault XPO returns instead of JSON when a pickup is rejected."""

    code: str = ""
    type: str = ""
    message: str = ""
    description: str = ""


class TokenResponse(XPOResponseModel):
    access_token: str = ""
    refresh_token: str = ""
    scope: str = ""
    token_type: str = ""
    expires_in: int = 0
