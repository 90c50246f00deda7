"""Authentication blueprint: register, login and email verification."""

from __future__ import annotations
from http import HTTPStatus

from flask import Blueprint, jsonify, request
from werkzeug.exceptions import BadRequest, InternalServerError, Unauthorized

from services import (
    AccountError,
    InvalidCredentials,
    account_service,
    verification_service,
)
from utils.request_validation import parse_json_request

auth_bp = Blueprint("auth", __name__)


def _parse_user_id(raw) -> int:
    """Accept an integer or a string of digits; floats and booleans are rejected."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and raw.strip().isdigit():
        return int(raw.strip())
    raise BadRequest("userId must be a valid user identifier.")


@auth_bp.route("/register", methods=["POST"])
def register() -> tuple:
    """Register a new user together with their first address."""
    payload = parse_json_request(request)

    try:
        user = account_service().register(payload, payload.get("address"))
    except AccountError as error:
        raise InternalServerError(f"Registration error: {error.message}") from error

    return jsonify({"success": True, "data": user.to_dict()}), HTTPStatus.CREATED


@auth_bp.route("/login", methods=["POST"])
def login() -> tuple:
    """Authenticate a user and return a JWT access token.

    Unverified users get a 403 carrying their id instead of a token so the
    client can route them to the verify/resend flow.
    """
    payload = parse_json_request(request, required_keys=("email", "password"))

    try:
        user, token = account_service().login(payload.get("email"), payload.get("password"))
    except InvalidCredentials as error:
        raise Unauthorized(error.message) from error

    if not user.is_verified:
        return (
            jsonify(
                {
                    "success": False,
                    "message": "Email not verified",
                    "userId": user.id,
                }
            ),
            HTTPStatus.FORBIDDEN,
        )

    data = user.to_dict()
    data["token"] = token
    return jsonify({"success": True, "data": data}), HTTPStatus.OK


@auth_bp.route("/verify-email", methods=["POST"])
def verify_email() -> tuple:
    """Consume a verification code and mark the user verified."""
    payload = parse_json_request(request, required_keys=("userId", "verificationCode"))
    user_id = _parse_user_id(payload.get("userId"))

    try:
        user = verification_service().consume(user_id, str(payload["verificationCode"]))
    except AccountError as error:
        raise BadRequest(error.message) from error

    return (
        jsonify(
            {
                "success": True,
                "message": "Email verified successfully",
                "data": user.to_dict(),
            }
        ),
        HTTPStatus.OK,
    )


@auth_bp.route("/resend-verification", methods=["POST"])
def resend_verification() -> tuple:
    """Issue a fresh code for a user who has not verified yet."""
    payload = parse_json_request(request, required_keys=("userId",))
    user_id = _parse_user_id(payload.get("userId"))

    try:
        verification = verification_service().resend(user_id)
    except AccountError as error:
        raise BadRequest(error.message) from error

    return (
        jsonify(
            {
                "success": True,
                "message": "Verification code sent",
                "data": verification,
            }
        ),
        HTTPStatus.OK,
    )
