"""
Pickup requests against the XPO LTL API.

To request a pickup:
- Build an XPOClient, in test mode unless production is chosen explicitly.
- Fill in PickupDetails with the shipper, requestor and items.
- Call request_pickup() and handle any XPOError.

XPO also emails a confirmation to the requestor; that is not checked here.
"""
import logging
from contextlib import contextmanager
from typing import Optional

import requests
from pydantic import ValidationError

from .auth import TokenManager
from .config import MAX_PICKUP_ITEMS, XPOConfig
from .errors import (
    CarrierRejected,
    LogicalFailure,
    SerializationError,
    TransportError,
    UnparseableResponse,
)
from .models import PickupDetails, PickupRequest, SuccessResponse
from .responses import FAULT, UNPARSEABLE, decode_fault, decode_pickup_response

logger = logging.getLogger(__name__)


def build_payload(details: PickupDetails) -> str:
    """Wraps the details in XPO's envelope and encodes it as JSON."""
    if not details.pkup_item:
        raise SerializationError("a pickup needs at least one item")
    if len(details.pkup_item) > MAX_PICKUP_ITEMS:
        raise SerializationError(
            f"a pickup can hold at most {MAX_PICKUP_ITEMS} items, got {len(details.pkup_item)}"
        )
    try:
        return PickupRequest(pickup_rqst_info=details).model_dump_json(by_alias=True)
    except (ValidationError, ValueError, TypeError) as e:
        raise SerializationError(f"could not marshal json: {e}") from e


class XPOClient:
    """
    Client for XPO's pickup API.

    Each client owns its configuration and token cache. Pass a
    requests.Session to reuse connections; otherwise every call opens and
    closes its own. A session passed in is handed over to the client:
    close(), or leaving the with block, closes it.
    """

    def __init__(self, config: Optional[XPOConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or XPOConfig()
        self.session = session
        self.tokens = TokenManager(self.config)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        if self.session is not None:
            self.session.close()
            self.session = None

    # --- Configuration ---

    def set_credentials(self, username: str, password: str, access_token: Optional[str] = None):
        """Stores the XPO login, and the long-lived account token if given."""
        self.config.username = username
        self.config.password = password
        if access_token is not None:
            self.config.access_token = access_token
        self.tokens.clear()

    def set_production_mode(self, yes: bool):
        self.config.production = yes

    def set_timeout(self, seconds: float):
        """Use this to wait longer if XPO is slow to answer."""
        self.config.timeout = seconds

    # --- Requests ---

    @contextmanager
    def _http(self):
        if self.session is not None:
            yield self.session
            return
        with requests.Session() as session:
            yield session

    def request_pickup(self, details: PickupDetails) -> SuccessResponse:
        """
        Schedules a pickup with XPO.

        Returns the parsed success body; its confirmation_number is the
        pickup confirmation.

        Raises:
            ConfigurationError: bearer auth is on and credentials are missing
            SerializationError: the details could not be encoded
            TransportError: the token or pickup call failed on the wire
            TokenError: the token endpoint did not return a token
            CarrierRejected: XPO returned a fault document
            UnparseableResponse: the body was neither JSON nor a fault
            LogicalFailure: the JSON body had no confirmation number
        """
        payload = build_payload(details)
        url = self.config.pickup_url
        headers = {"Content-Type": "application/json"}

        with self._http() as session:
            if self.config.bearer_auth:
                token = self.tokens.get_token(session)
                headers["Authorization"] = f"Bearer {token}"

            logger.info(f"Requesting XPO pickup for {details.pkup_date} ({len(details.pkup_item)} items)")
            try:
                response = session.post(url, data=payload, headers=headers, timeout=self.config.timeout)
            except requests.RequestException as e:
                logger.error(f"XPO pickup request failed: {e}")
                raise TransportError(f"could not make post request: {e}") from e

            body = response.content
            status = response.status_code

        return self._handle_response(body, status)

    def _handle_response(self, body: bytes, status: int) -> SuccessResponse:
        decoded = decode_pickup_response(body)

        if decoded.kind == UNPARSEABLE:
            logger.error(f"XPO pickup response could not be read: {status} - {body[:500]!r}")
            raise UnparseableResponse(
                "could not unmarshal response",
                details={"status": status, "body": body},
            )

        if decoded.kind == FAULT:
            fault = decoded.fault
            logger.error(
                f"XPO rejected pickup: code={fault.code} type={fault.type} "
                f"message={fault.message} description={fault.description}"
            )
            raise CarrierRejected(fault, details={"status": status})

        response = decoded.success
        if not response.confirmation_number:
            logger.error("XPO pickup request failed")
            logger.error(body.decode("utf-8", errors="replace"))
            fault = decode_fault(body)
            if fault is not None:
                logger.error(f"XPO fault details: {fault.model_dump()}")
            raise LogicalFailure("pickup request failed", details={"status": status, "body": body})

        logger.info(f"XPO pickup scheduled, confirmation {response.confirmation_number}")
        return response


def request_pickup(
    details: PickupDetails,
    config: Optional[XPOConfig] = None,
    session: Optional[requests.Session] = None,
) -> SuccessResponse:
    """One-shot pickup request without keeping a client around."""
    return XPOClient(config, session=session).request_pickup(details)
