"""
Data Models for the Valuation Desk

Dataclass definitions for states, users, sessions and valuation requests.
All models serialize to the camelCase dictionaries used on the wire.
"""

import json
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional, Dict, Any, Union

Number = Union[int, float]


class PropertyType(str, Enum):
    """Kinds of property a valuation can be requested for."""

    RESIDENTIAL = "Residential"
    COMMERCIAL = "Commercial"
    INDUSTRIAL = "Industrial"

    @classmethod
    def values(cls):
        return [member.value for member in cls]


class RequestStatus(str, Enum):
    """Lifecycle status of a valuation request."""

    DRAFT = "Draft"
    SUBMITTED = "Submitted"
    COMPLETED = "Completed"

    @classmethod
    def values(cls):
        return [member.value for member in cls]


@dataclass(frozen=True)
class State:
    """Reference state entity."""

    id: str
    name: str
    code: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class User:
    """Authenticated user identity."""

    id: str
    name: str
    email: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            email=str(data.get("email", "")),
        )

    @classmethod
    def from_email(cls, user_id: str, email: str) -> "User":
        """Build a user whose display name is the email's local part."""
        return cls(id=user_id, name=email.split("@")[0], email=email)


@dataclass(frozen=True)
class Session:
    """Token plus the user it was issued to."""

    token: str
    user: User

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"token": self.token, "user": self.user.to_dict()}


@dataclass(frozen=True)
class CreateRequestPayload:
    """Caller-supplied fields of a new valuation request."""

    property_address: str
    property_type: PropertyType
    state_id: str
    purpose: str
    estimated_value: Number
    status: RequestStatus = RequestStatus.DRAFT

    def to_dict(self) -> Dict[str, Any]:
        """Convert to camelCase dictionary."""
        return {
            "propertyAddress": self.property_address,
            "propertyType": self.property_type.value,
            "stateId": self.state_id,
            "purpose": self.purpose,
            "estimatedValue": self.estimated_value,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CreateRequestPayload":
        """Build from a camelCase mapping.

        The mapping is expected to have passed validation already; this
        only coerces types.

        Raises:
            ValueError: If propertyType or status is not a known value.
            KeyError: If a required field is missing.
        """
        return cls(
            property_address=data["propertyAddress"],
            property_type=PropertyType(data["propertyType"]),
            state_id=str(data["stateId"]),
            purpose=data["purpose"],
            estimated_value=data["estimatedValue"],
            status=RequestStatus(data.get("status") or RequestStatus.DRAFT.value),
        )


@dataclass(frozen=True)
class ValuationRequest:
    """A stored valuation request."""

    id: str
    property_address: str
    property_type: PropertyType
    state_id: str
    state_name: str
    purpose: str
    estimated_value: Number
    status: RequestStatus
    requested_by_name: str
    created_at: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to camelCase dictionary."""
        return {
            "id": self.id,
            "propertyAddress": self.property_address,
            "propertyType": self.property_type.value,
            "stateId": self.state_id,
            "stateName": self.state_name,
            "purpose": self.purpose,
            "estimatedValue": self.estimated_value,
            "status": self.status.value,
            "requestedByName": self.requested_by_name,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ValuationRequest":
        return cls(
            id=str(data["id"]),
            property_address=data["propertyAddress"],
            property_type=PropertyType(data["propertyType"]),
            state_id=str(data["stateId"]),
            state_name=data.get("stateName", ""),
            purpose=data["purpose"],
            estimated_value=data["estimatedValue"],
            status=RequestStatus(data["status"]),
            requested_by_name=data.get("requestedByName", ""),
            created_at=data["createdAt"],
        )


def find_state(states, state_id: Optional[str]) -> Optional[State]:
    """Look up a state by id, or None."""
    for state in states:
        if state.id == state_id:
            return state
    return None
