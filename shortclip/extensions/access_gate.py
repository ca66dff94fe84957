from flask import jsonify
from flask_jwt_extended import JWTManager

from shortclip.repositories import user_repository


jwt = JWTManager()


@jwt.user_lookup_loader
def load_user(_jwt_header, jwt_data):
    return user_repository.get_by_username(jwt_data["sub"])


@jwt.user_lookup_error_loader
def user_not_found(_jwt_header, _jwt_data):
    return jsonify({"error": "User not found"}), 401


@jwt.unauthorized_loader
def missing_token(reason):
    return jsonify({"error": "Access token required"}), 401


@jwt.invalid_token_loader
def invalid_token(reason):
    return jsonify({"error": "Invalid or expired token"}), 403


@jwt.expired_token_loader
def expired_token(_jwt_header, _jwt_data):
    return jsonify({"error": "Invalid or expired token"}), 403

