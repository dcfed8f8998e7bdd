"""
Shared Constants for the Valuation Desk

Contains all constant values used across the application.
"""

from typing import Dict, List, Tuple

# Reference states as (id, name, code). Seeded once, read-only.
MALAYSIAN_STATES: List[Tuple[str, str, str]] = [
    ("1", "Johor", "JHR"),
    ("2", "Kedah", "KDH"),
    ("3", "Kuala Lumpur", "KUL"),
    ("4", "Kelantan", "KTN"),
    ("5", "Labuan", "LBN"),
    ("6", "Melaka", "MLK"),
    ("7", "Negeri Sembilan", "NSN"),
    ("8", "Pahang", "PHG"),
    ("9", "Penang", "PNG"),
    ("10", "Perak", "PRK"),
    ("11", "Perlis", "PLS"),
    ("12", "Putrajaya", "PJY"),
    ("13", "Sabah", "SBH"),
    ("14", "Sarawak", "SWK"),
    ("15", "Selangor", "SLG"),
    ("16", "Terengganu", "TRG"),
]

# Demo requests present in a freshly seeded store, in storage order
DEMO_REQUESTS: List[Dict] = [
    {
        "id": "1",
        "propertyAddress": "123 Jalan Ampang, Kuala Lumpur",
        "propertyType": "Residential",
        "stateId": "3",
        "stateName": "Kuala Lumpur",
        "purpose": "Purchase financing",
        "estimatedValue": 850000,
        "status": "Submitted",
        "requestedByName": "John Tan",
        "createdAt": "2026-01-15T10:30:00Z",
    },
    {
        "id": "2",
        "propertyAddress": "45 Jalan Sultan Ismail, Kuala Lumpur",
        "propertyType": "Commercial",
        "stateId": "3",
        "stateName": "Kuala Lumpur",
        "purpose": "Refinancing",
        "estimatedValue": 2500000,
        "status": "Completed",
        "requestedByName": "Sarah Lee",
        "createdAt": "2026-01-10T14:20:00Z",
    },
]

# Field limits for validation
MAX_ADDRESS_LENGTH: int = 500
MAX_PURPOSE_LENGTH: int = 200

# Identifier prefixes
TOKEN_PREFIX: str = "mock-jwt-token"
REQUEST_ID_PREFIX: str = "REQ"
USER_ID_PREFIX: str = "user"

# Label used when a request is created without a session
DEFAULT_REQUESTER_NAME: str = "Current User"

# Session store keys
SESSION_TOKEN_KEY: str = "auth_token"
SESSION_USER_KEY: str = "user"

# Session store table name
TABLE_SESSION: str = "session_store"

# User-facing notices
LOGIN_FAILED_MESSAGE: str = "Invalid email or password. Please try again."
LOAD_FAILED_MESSAGE: str = "Failed to load data. Please try again."
CREATE_FAILED_MESSAGE: str = "Failed to create request. Please try again."
CREATE_SUCCESS_MESSAGE: str = "Valuation request created successfully!"
