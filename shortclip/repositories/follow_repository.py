from sqlalchemy import delete

from shortclip.db import db, insert_ignoring_conflict
from shortclip.models.follow_model import Follow


def create_follow(follower_id: int, following_id: int) -> bool:
    return insert_ignoring_conflict(
        Follow,
        ("follower_id", "following_id"),
        follower_id=follower_id,
        following_id=following_id,
    )


def delete_follow(follower_id: int, following_id: int) -> bool:
    result = db.session.execute(
        delete(Follow).where(
            Follow.follower_id == follower_id,
            Follow.following_id == following_id,
        )
    )
    return result.rowcount > 0
