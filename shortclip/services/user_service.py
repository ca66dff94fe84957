from datetime import datetime

from shortclip.db import db
from shortclip.repositories import post_repository, user_repository
from shortclip.schemas.post_schema import FeedPostSchema
from shortclip.schemas.user_schema import UpdatedProfileSchema, UserProfileSchema
from shortclip.services import counter_service
from shortclip.services.errors import NotFoundError
from shortclip.services.post_service import clamp_page


def _get_user_or_404(username: str):
    user = user_repository.get_by_username(username)
    if not user:
        raise NotFoundError("User not found")
    return user


def get_profile(username: str):
    return UserProfileSchema().dump(_get_user_or_404(username))


def get_user_posts(username: str, limit=None, offset=None):
    user = _get_user_or_404(username)
    limit, offset = clamp_page(limit, offset)
    posts = post_repository.list_posts(limit, offset, user_id=user.id)
    return FeedPostSchema(many=True).dump(posts)


def update_profile(user, display_name=None, bio=None, profile_image_url=None):
    if display_name is not None:
        user.display_name = display_name
    if bio is not None:
        user.bio = bio
    if profile_image_url is not None:
        user.profile_image_url = profile_image_url

    user.updated_at = datetime.utcnow()
    db.session.commit()
    return UpdatedProfileSchema().dump(user)


def follow(user, username: str) -> bool:
    target = _get_user_or_404(username)
    if target.id == user.id:
        raise ValueError("Cannot follow yourself")

    return counter_service.apply_follow(user.id, target.id)


def unfollow(user, username: str) -> bool:
    target = _get_user_or_404(username)
    if target.id == user.id:
        raise ValueError("Cannot unfollow yourself")

    return counter_service.remove_follow(user.id, target.id)
