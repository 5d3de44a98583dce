"""
Decoding of XPO pickup responses.

XPO takes JSON in but answers with either a JSON success body or an XML
fault body, on the same endpoint and often with the same status code. Each
decoder here returns the record or None; nothing raises on a bad body.
"""
from dataclasses import dataclass
from typing import Optional, Union

from lxml import etree
from pydantic import ValidationError

from .models import FaultResponse, SuccessResponse

# --- Decode Outcomes ---
SUCCESS = "success"
FAULT = "fault"
UNPARSEABLE = "unparseable"

FAULT_ELEMENT = "fault"
FAULT_FIELDS = ("code", "type", "message", "description")


@dataclass
class DecodedResponse:
    kind: str
    success: Optional[SuccessResponse] = None
    fault: Optional[FaultResponse] = None


def _as_bytes(body: Union[bytes, str]) -> bytes:
    return body.encode("utf-8") if isinstance(body, str) else body


def _local_name(tag: str) -> str:
    # Drops both {namespace} and an undeclared "am:" style prefix, which the
    # recovering parser leaves in the tag
    return tag.rsplit("}", 1)[-1].split(":")[-1]


def decode_success(body: Union[bytes, str]) -> Optional[SuccessResponse]:
    """Reads the body as the JSON success shape. A bare null reads as an empty response."""
    body = _as_bytes(body)
    if body.strip() == b"null":
        return SuccessResponse()
    try:
        return SuccessResponse.model_validate_json(body)
    except ValidationError:
        return None


def decode_fault(body: Union[bytes, str]) -> Optional[FaultResponse]:
    """Reads the body as an XML <fault> document. Fields may carry the am: prefix."""
    # XPO sends am: prefixed tags without declaring the namespace
    parser = etree.XMLParser(resolve_entities=False, no_network=True, recover=True)
    try:
        root = etree.fromstring(_as_bytes(body), parser=parser)
    except (etree.XMLSyntaxError, ValueError):
        return None

    if root is None or _local_name(root.tag) != FAULT_ELEMENT:
        return None

    fields = {}
    for child in root:
        if not isinstance(child.tag, str):
            continue  # comments, processing instructions
        name = _local_name(child.tag)
        if name in FAULT_FIELDS and name not in fields:
            fields[name] = (child.text or "").strip()
    return FaultResponse(**fields)


def decode_pickup_response(body: Union[bytes, str]) -> DecodedResponse:
    """Tries the JSON success shape first, then the XML fault shape."""
    success = decode_success(body)
    if success is not None:
        return DecodedResponse(kind=SUCCESS, success=success)

    fault = decode_fault(body)
    if fault is not None:
        return DecodedResponse(kind=FAULT, fault=fault)

    return DecodedResponse(kind=UNPARSEABLE)
