import logging

from flask import Flask, jsonify

from shortclip.config import Config
from shortclip.db import db
from shortclip.extensions.access_gate import jwt
from shortclip.extensions.extensions import cors, ma
from shortclip.repositories import media_repository
from shortclip.routes.auth_routes import auth_bp
from shortclip.routes.main_routes import main_bp
from shortclip.routes.post_routes import post_bp
from shortclip.routes.user_routes import user_bp
from shortclip.routes.video_routes import video_bp

# Imported for table registration with db.create_all().
from shortclip.models import (  # noqa: F401
    comment_model,
    follow_model,
    like_model,
    post_model,
    user_model,
)

logger = logging.getLogger(__name__)


def _register_error_handlers(app):
    @app.errorhandler(404)
    @app.errorhandler(405)
    def route_not_found(_error):
        return jsonify({"error": "Route not found"}), 404

    @app.errorhandler(413)
    def payload_too_large(_error):
        return jsonify({"error": "File too large"}), 413

    @app.errorhandler(500)
    def internal_error(_error):
        return jsonify({"error": "Internal Server Error"}), 500


def create_app(config_overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)
    app.config["MAX_CONTENT_LENGTH"] = (
        app.config["MAX_UPLOAD_BYTES"] + app.config["MULTIPART_OVERHEAD_BYTES"]
    )

    db.init_app(app)
    jwt.init_app(app)
    ma.init_app(app)
    cors.init_app(
        app,
        origins=app.config["CORS_ALLOWED_ORIGINS"],
        supports_credentials=True,
    )

    app.register_blueprint(main_bp)
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(user_bp, url_prefix="/api/users")
    app.register_blueprint(post_bp, url_prefix="/api/posts")
    app.register_blueprint(video_bp, url_prefix="/api/videos")
    _register_error_handlers(app)

    with app.app_context():
        logger.info("Initializing database")
        db.create_all()

        if app.config["STORAGE_INIT_ON_STARTUP"]:
            logger.info("Initializing MinIO")
            media_repository.ensure_bucket()

    return app
