"""User profile and address blueprint. Every route needs a bearer token."""

from __future__ import annotations
from http import HTTPStatus

from flask import Blueprint, current_app, g, jsonify, request
from flask_jwt_extended import get_jwt_identity, jwt_required
from werkzeug.exceptions import BadRequest

from services import AccountError, Forbidden, account_service
from utils.request_validation import parse_json_request

users_bp = Blueprint("users", __name__)


@users_bp.errorhandler(AccountError)
def _handle_account_error(error: AccountError):
    """Ownership failures are 403; every other service error is reported as 500."""

    if isinstance(error, Forbidden):
        status = HTTPStatus.FORBIDDEN
    else:
        status = HTTPStatus.INTERNAL_SERVER_ERROR
        current_app.logger.warning("User operation failed: %s", error.message)
    return (
        jsonify(
            {
                "success": False,
                "message": error.message,
                "request_id": g.get("request_id"),
            }
        ),
        status,
    )


def _current_user_id() -> int:
    return int(get_jwt_identity())


def _require_self(user_id: int, message: str) -> None:
    if user_id != _current_user_id():
        raise Forbidden(message)


def _user_response(user, status: HTTPStatus = HTTPStatus.OK) -> tuple:
    return jsonify({"success": True, "data": user.to_dict()}), status


@users_bp.route("/profile", methods=["GET"])
@jwt_required()
def get_profile():
    """Return the authenticated user's own profile."""

    return _user_response(account_service().get_user(_current_user_id()))


@users_bp.route("/<int:user_id>", methods=["GET"])
@jwt_required()
def get_user(user_id: int):
    return _user_response(account_service().get_user(user_id))


@users_bp.route("/<int:user_id>", methods=["PUT"])
@jwt_required()
def update_user(user_id: int):
    """Partially update the caller's own profile fields."""

    _require_self(user_id, "Not authorized to update this user")
    payload = parse_json_request(request)
    return _user_response(account_service().update_user(user_id, payload))


@users_bp.route("/<int:user_id>", methods=["DELETE"])
@jwt_required()
def delete_user(user_id: int):
    _require_self(user_id, "Not authorized to delete this user")
    account_service().delete_user(user_id)
    return jsonify({"success": True, "message": "User deleted successfully"}), HTTPStatus.OK


@users_bp.route("/<int:user_id>/seller-status", methods=["PUT"])
@jwt_required()
def update_seller_status(user_id: int):
    """Toggle whether the user may sell."""

    payload = parse_json_request(request)
    is_seller = payload.get("isSellerStatus")
    if not isinstance(is_seller, bool):
        raise BadRequest("isSellerStatus must be a boolean value")
    return _user_response(account_service().update_seller_status(user_id, is_seller))


@users_bp.route("/<int:user_id>/addresses", methods=["POST"])
@jwt_required()
def add_address(user_id: int):
    _require_self(user_id, "Not authorized to add address to this user")
    payload = parse_json_request(request)
    user = account_service().add_address(user_id, payload)
    return _user_response(user, HTTPStatus.CREATED)


@users_bp.route("/<int:user_id>/addresses/<int:address_id>", methods=["PUT"])
@jwt_required()
def update_address(user_id: int, address_id: int):
    _require_self(user_id, "Not authorized to update this address")
    payload = parse_json_request(request)
    return _user_response(account_service().update_address(user_id, address_id, payload))


@users_bp.route("/<int:user_id>/addresses/<int:address_id>/default", methods=["PUT"])
@jwt_required()
def set_default_address(user_id: int, address_id: int):
    _require_self(user_id, "Not authorized to update this user")
    return _user_response(account_service().set_default_address(user_id, address_id))


@users_bp.route("/<int:user_id>/addresses/<int:address_id>", methods=["DELETE"])
@jwt_required()
def remove_address(user_id: int, address_id: int):
    _require_self(user_id, "Not authorized to remove this address")
    return _user_response(account_service().remove_address(user_id, address_id))
