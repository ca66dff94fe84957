from sqlalchemy import update
from sqlalchemy.orm import joinedload

from shortclip.db import db
from shortclip.models.post_model import Post


def get_by_id(post_id: int):
    return db.session.get(Post, post_id)


def get_with_author(post_id: int):
    return (
        Post.query
        .options(joinedload(Post.author))
        .filter(Post.id == post_id)
        .first()
    )


def create_post(user_id, video_url, thumbnail_url=None, caption=None, music_name=None):
    post = Post(
        user_id=user_id,
        video_url=video_url,
        thumbnail_url=thumbnail_url,
        caption=caption,
        music_name=music_name,
    )
    db.session.add(post)
    db.session.commit()
    return post


def list_posts(limit: int, offset: int, user_id=None):
    query = Post.query.options(joinedload(Post.author))
    if user_id is not None:
        query = query.filter(Post.user_id == user_id)

    return (
        query
        .order_by(Post.created_at.desc(), Post.id.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )


def adjust_counter(post_id: int, column: str, delta: int) -> int:
    counter = getattr(Post, column)
    result = db.session.execute(
        update(Post)
        .where(Post.id == post_id)
        .values(**{column: counter + delta})
    )
    return result.rowcount


def delete_post(post):
    db.session.delete(post)
