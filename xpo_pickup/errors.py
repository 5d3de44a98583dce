from typing import Any, Dict, Optional

# --- Steps ---
STEP_CONFIG = "config"
STEP_SERIALIZE = "serialize"
STEP_TOKEN = "token"
STEP_SUBMIT = "submit"
STEP_PARSE = "parse"


class XPOError(Exception):
    """Base error for the XPO pickup client, tagged with the step that failed."""

    step = STEP_SUBMIT

    def __init__(self, message: str, step: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message
        if step:
            self.step = step
        self.details = details or {}
        super().__init__(message)

    def __str__(self):
        return f"xpo.{self.step} - {self.message}"


class ConfigurationError(XPOError):
    """Raised when credentials are missing before a bearer-token call."""

    step = STEP_CONFIG


class SerializationError(XPOError):
    """Raised when the pickup payload cannot be encoded."""

    step = STEP_SERIALIZE


class TransportError(XPOError):
    """Raised when the HTTP call itself fails (network, timeout, reset)."""


class TokenError(XPOError):
    step = STEP_TOKEN


class CarrierRejected(XPOError):
    """XPO answered with a fault document. The message is the fault description."""

    step = STEP_PARSE

    def __init__(self, fault, details: Optional[Dict[str, Any]] = None):
        self.fault = fault
        super().__init__(fault.description, details=details)


class UnparseableResponse(XPOError):
    step = STEP_PARSE


class LogicalFailure(XPOError):
    """XPO answered with success-shaped JSON but no confirmation number."""

    step = STEP_PARSE
