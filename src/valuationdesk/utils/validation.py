"""
Valuation Request Validation

Field rules applied to a candidate request payload before it is sent to the
backend. Every rule is independent, so one payload can fail several fields
at once.

Payloads are camelCase mappings as they arrive from a form or a JSON body.
"""

import math
from typing import Any, Dict, Mapping

from valuationdesk.core.constants import MAX_ADDRESS_LENGTH, MAX_PURPOSE_LENGTH
from valuationdesk.core.models import CreateRequestPayload, PropertyType, RequestStatus
from valuationdesk.exceptions import ValidationError

ValidationErrors = Dict[str, str]


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _free_text(value: Any) -> str:
    # Free-text fields must arrive as strings; anything else counts as missing
    return value if isinstance(value, str) else ""


def _is_positive_number(value: Any) -> bool:
    # bool is an int subclass; True must not count as 1
    if value is None or isinstance(value, bool):
        return False
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(number) and number > 0


def validate(payload: Mapping[str, Any]) -> ValidationErrors:
    """Validate a valuation request payload.

    Args:
        payload: camelCase mapping with propertyAddress, propertyType,
            stateId, purpose, estimatedValue and optionally status.

    Returns:
        Mapping of field name to error message. Empty when the payload
        can be submitted.

    Example:
        >>> validate({"propertyAddress": "", "propertyType": "Residential",
        ...           "stateId": "1", "purpose": "x", "estimatedValue": 1})
        {'propertyAddress': 'Property address is required'}
    """
    errors: ValidationErrors = {}

    address = _free_text(payload.get("propertyAddress"))
    if not address.strip():
        errors["propertyAddress"] = "Property address is required"
    elif len(address) > MAX_ADDRESS_LENGTH:
        errors["propertyAddress"] = (
            f"Property address must not exceed {MAX_ADDRESS_LENGTH} characters"
        )

    property_type = _text(payload.get("propertyType"))
    if not property_type:
        errors["propertyType"] = "Property type is required"
    elif property_type not in PropertyType.values():
        errors["propertyType"] = (
            "Property type must be one of: " + ", ".join(PropertyType.values())
        )

    if not _text(payload.get("stateId")).strip():
        errors["stateId"] = "State is required"

    purpose = _free_text(payload.get("purpose"))
    if not purpose.strip():
        errors["purpose"] = "Purpose is required"
    elif len(purpose) > MAX_PURPOSE_LENGTH:
        errors["purpose"] = f"Purpose must not exceed {MAX_PURPOSE_LENGTH} characters"

    if not _is_positive_number(payload.get("estimatedValue")):
        errors["estimatedValue"] = "Estimated value must be greater than 0"

    status = _text(payload.get("status"))
    if status and status not in RequestStatus.values():
        errors["status"] = "Status must be one of: " + ", ".join(RequestStatus.values())

    return errors


def is_valid(payload: Mapping[str, Any]) -> bool:
    return not validate(payload)


def parse_payload(payload: Mapping[str, Any]) -> CreateRequestPayload:
    """Validate a raw payload and build a CreateRequestPayload from it.

    Raises:
        ValidationError: With the field error mapping if any rule fails.
    """
    errors = validate(payload)
    if errors:
        raise ValidationError("Request payload failed validation", errors=errors)

    value = payload["estimatedValue"]
    if isinstance(value, str):
        number = float(value)
        value = int(number) if number.is_integer() else number

    return CreateRequestPayload.from_dict({
        "propertyAddress": payload["propertyAddress"],
        "propertyType": payload["propertyType"],
        "stateId": _text(payload["stateId"]),
        "purpose": payload["purpose"],
        "estimatedValue": value,
        "status": payload.get("status"),
    })
