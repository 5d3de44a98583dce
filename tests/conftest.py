"""Test fixtures for the XPO pickup client."""

import json
from unittest.mock import MagicMock

import pytest

from xpo_pickup.config import ROLE_SHIPPER, XPOConfig
from xpo_pickup.models import (
    Contact,
    Email,
    Phone,
    PickupDetails,
    PickupItem,
    Requestor,
    Shipper,
    Weight,
)

SUCCESS_BODY = b'{"code":"0","transactionTimestamp":"123","data":{"confirmationNbr":"ABC123"}}'
EMPTY_CONFIRMATION_BODY = b'{"code":"0","transactionTimestamp":"123","data":{"confirmationNbr":""}}'
FAULT_BODY = (
    b"<fault><code>400</code><type>Validation</type>"
    b"<message>Bad</message><description>Missing shipper</description></fault>"
)


def make_response(body, status_code=200):
    response = MagicMock()
    response.content = body
    response.text = body.decode("utf-8", errors="replace")
    response.status_code = status_code
    return response


def token_response(access_token="bearer-123", expires_in=43200):
    body = json.dumps({
        "access_token": access_token,
        "refresh_token": "refresh-456",
        "scope": "default",
        "token_type": "Bearer",
        "expires_in": expires_in,
    }).encode()
    return make_response(body)


@pytest.fixture
def mock_session():
    """Stands in for requests.Session; set post.return_value or side_effect per test."""
    return MagicMock()


@pytest.fixture
def no_auth_config():
    return XPOConfig(bearer_auth=False)


@pytest.fixture
def bearer_config():
    return XPOConfig(username="dock@example.com", password="secret", access_token="YWNjb3VudDprZXk=")


@pytest.fixture
def contact():
    return Contact(
        company_name="Acme Freight",
        email=Email(email_addr="dock@example.com"),
        full_name="Pat Jones",
        phone=Phone(phone_nbr="5551234567"),
    )


@pytest.fixture
def pickup_details(contact):
    """Sample two-item pickup from a shipper dock."""
    return PickupDetails(
        pkup_date="2024-05-01T00:00:00",
        ready_time="2024-05-01T08:00:00",
        close_time="2024-05-01T17:00:00",
        pkup_item=[
            PickupItem(tot_weight=Weight(weight=1200.5), dest_zip6="30301", pallet_cnt=2, hazmat_ind=True),
            PickupItem(tot_weight=Weight(weight=80), loose_pieces_cnt=3, remarks="fragile"),
        ],
        special_equipment_cd="LG",
        inside_pkup_ind=True,
        shipper=Shipper(
            name="Acme Freight",
            address_line1="1 Dock Rd",
            city_name="Columbus",
            state_cd="OH",
            postal_cd="43004",
            phone=Phone(phone_nbr="5551234567"),
        ),
        requestor=Requestor(contact=contact, role_cd=ROLE_SHIPPER),
        contact=contact,
        remarks="call on arrival",
        tot_pallet_cnt=2,
        tot_loose_pieces_cnt=3,
        tot_weight=Weight(weight=1280.5),
    )
