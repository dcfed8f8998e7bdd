"""
API Routes for the Valuation Desk

JSON facade over the mock backend:
- Session: login, logout, current session
- Reference data: states
- Valuation requests: list (with filters) and create
- Health check
"""

from flask import Blueprint, current_app, jsonify, request

from valuationdesk.backend.mock_api import MockBackend
from valuationdesk.controller.filters import RequestFilters, filter_requests
from valuationdesk.exceptions import (
    InvalidCredentialsError,
    ValidationError,
    ValuationDeskError,
)
from valuationdesk.logging_config import get_logger
from valuationdesk.utils.validation import parse_payload

logger = get_logger(__name__)

BACKEND_EXTENSION = "valuationdesk_backend"

# Create blueprint
api = Blueprint("api", __name__, url_prefix="/api")


def get_backend() -> MockBackend:
    """Backend instance attached to the current app."""
    return current_app.extensions[BACKEND_EXTENSION]


@api.errorhandler(ValuationDeskError)
def handle_app_error(e: ValuationDeskError):
    logger.error("Unhandled application error: %s", e, exc_info=True)
    return jsonify({"status": "error", "error": e.message}), 500


# Health
@api.route("/health", methods=["GET"])
def health_check():
    """Health check endpoint."""
    return jsonify({"status": "healthy", **get_backend().snapshot()})


# Session Endpoints
@api.route("/login", methods=["POST"])
async def login():
    """Open a session. Any non-empty email/password is accepted."""
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        data = {}

    try:
        session = await get_backend().login(
            str(data.get("email") or ""),
            str(data.get("password") or ""),
        )
    except InvalidCredentialsError:
        return jsonify({
            "status": "error",
            "error": "Invalid email or password",
        }), 401

    return jsonify(session.to_dict())


@api.route("/logout", methods=["POST"])
def logout():
    get_backend().logout()
    return jsonify({"status": "success"})


@api.route("/session", methods=["GET"])
def current_session():
    """Whether a session is open, and for whom."""
    backend = get_backend()
    user = backend.get_current_user()
    return jsonify({
        "authenticated": backend.is_authenticated(),
        "user": user.to_dict() if user else None,
    })


# Reference Data
@api.route("/states", methods=["GET"])
async def list_states():
    states = await get_backend().list_states()
    return jsonify([s.to_dict() for s in states])


# Valuation Requests
@api.route("/requests", methods=["GET"])
async def list_requests():
    """List requests in storage order.

    Query params propertyType, status, stateId and search narrow the list;
    all given filters must match.
    """
    requests = await get_backend().list_requests()
    filters = RequestFilters.from_mapping(request.args)
    if filters.is_active:
        requests = filter_requests(requests, filters)
    return jsonify([r.to_dict() for r in requests])


@api.route("/requests", methods=["POST"])
async def create_request():
    """Validate and store a new valuation request."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({
            "status": "error",
            "error": "Request body must be a JSON object",
        }), 400

    try:
        payload = parse_payload(data)
    except ValidationError as e:
        return jsonify({
            "status": "error",
            "error": e.message,
            "errors": e.errors,
        }), 400

    created = await get_backend().create_request(payload)
    return jsonify(created.to_dict()), 201


def register_routes(app):
    """Register API routes with Flask app."""
    app.register_blueprint(api)
    logger.info("API routes registered")
