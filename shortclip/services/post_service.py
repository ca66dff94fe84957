from flask import current_app

from shortclip.repositories import comment_repository, post_repository
from shortclip.schemas.comment_schema import CommentResponseSchema, CommentSchema
from shortclip.schemas.post_schema import FeedPostSchema, PostSchema
from shortclip.services import counter_service
from shortclip.services.errors import ForbiddenError, NotFoundError


def _require_non_empty_string(value):
    return isinstance(value, str) and value.strip()


def clamp_page(limit, offset):
    max_limit = current_app.config["FEED_MAX_LIMIT"]
    if limit is None:
        limit = current_app.config["FEED_DEFAULT_LIMIT"]
    if offset is None:
        offset = 0

    limit = min(max(limit, 1), max_limit)
    offset = min(max(offset, 0), current_app.config["FEED_MAX_OFFSET"])
    return limit, offset


def _get_post_or_404(post_id: int):
    post = post_repository.get_by_id(post_id)
    if not post:
        raise NotFoundError("Post not found")
    return post


def get_feed(limit=None, offset=None):
    limit, offset = clamp_page(limit, offset)
    posts = post_repository.list_posts(limit, offset)
    return FeedPostSchema(many=True).dump(posts)


def get_post(post_id: int):
    if not counter_service.apply_view(post_id):
        raise NotFoundError("Post not found")

    post = post_repository.get_with_author(post_id)
    if not post:
        raise NotFoundError("Post not found")
    return FeedPostSchema().dump(post)


def create_post(user, video_url, thumbnail_url=None, caption=None, music_name=None):
    if not _require_non_empty_string(video_url):
        raise ValueError("Video URL is required")

    post = post_repository.create_post(
        user_id=user.id,
        video_url=video_url,
        thumbnail_url=thumbnail_url,
        caption=caption,
        music_name=music_name,
    )
    return PostSchema().dump(post)


def like_post(user, post_id: int) -> bool:
    post = _get_post_or_404(post_id)
    return counter_service.apply_like(user.id, post.id, post.user_id)


def unlike_post(user, post_id: int) -> bool:
    post = _get_post_or_404(post_id)
    return counter_service.remove_like(user.id, post.id, post.user_id)


def get_comments(post_id: int, limit=None, offset=None):
    limit, offset = clamp_page(limit, offset)
    comments = comment_repository.get_comments_by_post(post_id, limit, offset)
    return CommentResponseSchema(many=True).dump(comments)


def add_comment(user, post_id: int, text):
    if not _require_non_empty_string(text):
        raise ValueError("Comment text is required")

    post = _get_post_or_404(post_id)
    comment = counter_service.apply_comment(user.id, post.id, text)
    return CommentSchema().dump(comment)


def delete_post(user, post_id: int):
    post = _get_post_or_404(post_id)
    if post.user_id != user.id:
        raise ForbiddenError("Unauthorized")

    counter_service.release_post(post)
