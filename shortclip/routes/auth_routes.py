from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity

from shortclip.routes.errors import service_errors
from shortclip.services import auth_service


auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/register", methods=["POST"])
@service_errors("Failed to register user", "Register")
def register():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON body"}), 400

    user = auth_service.register(
        data.get("username"),
        data.get("email"),
        data.get("password"),
        data.get("displayName"),
    )
    return jsonify(user), 201


@auth_bp.route("/login", methods=["POST"])
@service_errors("Failed to login", "Login")
def login():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON body"}), 400

    try:
        tokens = auth_service.login(data.get("username"), data.get("password"))
    except ValueError as e:
        return jsonify({"error": str(e)}), 401
    return jsonify(tokens), 200


@auth_bp.route("/refresh", methods=["POST"])
@jwt_required(refresh=True)
def refresh():
    return jsonify(auth_service.refresh_access_token(get_jwt_identity())), 200
