"""Client for scheduling LTL freight pickups through the XPO Logistics API."""
from .auth import TokenManager, fetch_token
from .config import (
    ROLE_CONSIGNEE,
    ROLE_SHIPPER,
    ROLE_THIRD_PARTY,
    XPO_PRODUCTION_URL,
    XPO_TEST_URL,
    XPO_TOKEN_URL,
    XPOConfig,
)
from .errors import (
    CarrierRejected,
    ConfigurationError,
    LogicalFailure,
    SerializationError,
    TokenError,
    TransportError,
    UnparseableResponse,
    XPOError,
)
from .models import (
    Contact,
    Email,
    FaultResponse,
    Phone,
    PickupConfirmation,
    PickupDetails,
    PickupItem,
    PickupRequest,
    PkupItem,
    Requestor,
    Shipper,
    SuccessResponse,
    TokenResponse,
    Weight,
)
from .pickup import XPOClient, build_payload, request_pickup
from .responses import DecodedResponse, decode_fault, decode_pickup_response, decode_success

__version__ = "0.1.0"
