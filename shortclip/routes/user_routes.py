from flask import Blueprint, jsonify, request
from flask_jwt_extended import current_user, jwt_required

from shortclip.routes.errors import service_errors
from shortclip.services import user_service


user_bp = Blueprint("users", __name__)


@user_bp.route("/<username>", methods=["GET"])
@service_errors("Failed to get user", "Get user")
def get_user(username):
    return jsonify(user_service.get_profile(username)), 200


@user_bp.route("/<username>/posts", methods=["GET"])
@service_errors("Failed to get posts", "Get user posts")
def get_user_posts(username):
    limit = request.args.get("limit", default=None, type=int)
    offset = request.args.get("offset", default=None, type=int)

    return jsonify(user_service.get_user_posts(username, limit, offset)), 200


@user_bp.route("/profile", methods=["PUT"])
@jwt_required()
@service_errors("Failed to update profile", "Update profile")
def update_profile():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON body"}), 400

    profile = user_service.update_profile(
        current_user,
        display_name=data.get("displayName"),
        bio=data.get("bio"),
        profile_image_url=data.get("profileImageUrl"),
    )
    return jsonify(profile), 200


@user_bp.route("/<username>/follow", methods=["POST"])
@jwt_required()
@service_errors("Failed to follow user", "Follow")
def follow_user(username):
    created = user_service.follow(current_user, username)
    return jsonify(
        {"message": "Followed successfully"} if created else {"message": "Already following"}
    ), 200


@user_bp.route("/<username>/follow", methods=["DELETE"])
@jwt_required()
@service_errors("Failed to unfollow user", "Unfollow")
def unfollow_user(username):
    user_service.unfollow(current_user, username)
    return jsonify({"message": "Unfollowed successfully"}), 200
