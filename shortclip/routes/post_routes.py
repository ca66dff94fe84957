from flask import Blueprint, request, jsonify
from flask_jwt_extended import current_user, jwt_required

from shortclip.routes.errors import service_errors
from shortclip.services import post_service

post_bp = Blueprint("posts", __name__)


def _page_args():
    limit = request.args.get("limit", default=None, type=int)
    offset = request.args.get("offset", default=None, type=int)
    return limit, offset


@post_bp.route("/feed", methods=["GET"])
@service_errors("Failed to get feed", "Get feed")
def get_feed():
    limit, offset = _page_args()
    return jsonify(post_service.get_feed(limit, offset)), 200


@post_bp.route("/<int:post_id>", methods=["GET"])
@service_errors("Failed to get post", "Get post")
def get_post(post_id):
    return jsonify(post_service.get_post(post_id)), 200


@post_bp.route("", methods=["POST"])
@jwt_required()
@service_errors("Failed to create post", "Create post")
def create_post():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON body"}), 400

    post = post_service.create_post(
        current_user,
        video_url=data.get("videoUrl"),
        thumbnail_url=data.get("thumbnailUrl"),
        caption=data.get("caption"),
        music_name=data.get("musicName"),
    )
    return jsonify(post), 201


@post_bp.route("/<int:post_id>/like", methods=["POST"])
@jwt_required()
@service_errors("Failed to like post", "Like post")
def like_post(post_id):
    created = post_service.like_post(current_user, post_id)
    return jsonify(
        {"message": "Liked successfully"} if created else {"message": "Already liked"}
    ), 200


@post_bp.route("/<int:post_id>/like", methods=["DELETE"])
@jwt_required()
@service_errors("Failed to unlike post", "Unlike post")
def unlike_post(post_id):
    post_service.unlike_post(current_user, post_id)
    return jsonify({"message": "Unliked successfully"}), 200


@post_bp.route("/<int:post_id>/comments", methods=["GET"])
@service_errors("Failed to get comments", "Get comments")
def list_comments(post_id):
    limit, offset = _page_args()
    return jsonify(post_service.get_comments(post_id, limit, offset)), 200


@post_bp.route("/<int:post_id>/comments", methods=["POST"])
@jwt_required()
@service_errors("Failed to add comment", "Add comment")
def create_comment(post_id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON body"}), 400

    comment = post_service.add_comment(current_user, post_id, data.get("commentText"))
    return jsonify(comment), 201


@post_bp.route("/<int:post_id>", methods=["DELETE"])
@jwt_required()
@service_errors("Failed to delete post", "Delete post")
def delete_post(post_id):
    post_service.delete_post(current_user, post_id)
    return jsonify({"message": "Post deleted successfully"}), 200
