from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required

from shortclip.routes.errors import service_errors
from shortclip.services import video_service


video_bp = Blueprint("videos", __name__)


@video_bp.route("/upload", methods=["POST"])
@jwt_required()
@service_errors("Failed to upload video", "Video upload")
def upload_video():
    return jsonify(video_service.upload_video(request.files.get("video"))), 200


@video_bp.route("/upload-thumbnail", methods=["POST"])
@jwt_required()
@service_errors("Failed to upload thumbnail", "Thumbnail upload")
def upload_thumbnail():
    return jsonify(video_service.upload_thumbnail(request.files.get("thumbnail"))), 200


# Object names carry their namespace ("videos/<id>.mp4"), so accept slashes.
@video_bp.route("/<path:file_name>", methods=["GET"])
@service_errors("Failed to get video URL", "Get video URL")
def get_video_url(file_name):
    return jsonify(video_service.get_video_url(file_name)), 200
