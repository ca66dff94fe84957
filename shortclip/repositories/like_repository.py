from sqlalchemy import delete

from shortclip.db import db, insert_ignoring_conflict
from shortclip.models.like_model import Like


def create_like(user_id: int, post_id: int) -> bool:
    return insert_ignoring_conflict(
        Like,
        ("user_id", "post_id"),
        user_id=user_id,
        post_id=post_id,
    )


def delete_like(user_id: int, post_id: int) -> bool:
    result = db.session.execute(
        delete(Like).where(Like.user_id == user_id, Like.post_id == post_id)
    )
    return result.rowcount > 0
