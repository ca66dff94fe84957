from sqlalchemy.orm import joinedload

from shortclip.db import db
from shortclip.models.comment_model import Comment


def create_comment(user_id, post_id, text):
    comment = Comment(
        user_id=user_id,
        post_id=post_id,
        comment_text=text,
    )

    db.session.add(comment)
    return comment


def get_comments_by_post(post_id: int, limit: int, offset: int):
    return (
        Comment.query
        .options(joinedload(Comment.author))
        .filter(Comment.post_id == post_id)
        .order_by(Comment.created_at.desc(), Comment.id.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )
