"""Denormalized counter maintenance.

Every operation pairs a relationship change with its counter deltas inside a
single transaction. Counters only move when the relationship row was actually
inserted or deleted, so repeated requests cannot push them out of step with the
``likes`` and ``follows`` tables. Deltas are applied as ``col = col + n`` in
SQL so concurrent requests never lose an update.
"""
from shortclip.db import db
from shortclip.repositories import (
    comment_repository,
    follow_repository,
    like_repository,
    post_repository,
    user_repository,
)


def _commit_or_rollback(operation):
    try:
        result = operation()
        db.session.commit()
        return result
    except Exception:
        db.session.rollback()
        raise


def apply_like(user_id: int, post_id: int, author_id: int) -> bool:
    def operation():
        created = like_repository.create_like(user_id, post_id)
        if created:
            post_repository.adjust_counter(post_id, "likes_count", 1)
            user_repository.adjust_counter(author_id, "likes_count", 1)
        return created

    return _commit_or_rollback(operation)


def remove_like(user_id: int, post_id: int, author_id: int) -> bool:
    def operation():
        removed = like_repository.delete_like(user_id, post_id)
        if removed:
            post_repository.adjust_counter(post_id, "likes_count", -1)
            user_repository.adjust_counter(author_id, "likes_count", -1)
        return removed

    return _commit_or_rollback(operation)


def apply_follow(follower_id: int, following_id: int) -> bool:
    def operation():
        created = follow_repository.create_follow(follower_id, following_id)
        if created:
            user_repository.adjust_counter(following_id, "followers_count", 1)
            user_repository.adjust_counter(follower_id, "following_count", 1)
        return created

    return _commit_or_rollback(operation)


def remove_follow(follower_id: int, following_id: int) -> bool:
    def operation():
        removed = follow_repository.delete_follow(follower_id, following_id)
        if removed:
            user_repository.adjust_counter(following_id, "followers_count", -1)
            user_repository.adjust_counter(follower_id, "following_count", -1)
        return removed

    return _commit_or_rollback(operation)


def apply_comment(user_id: int, post_id: int, text: str):
    def operation():
        comment = comment_repository.create_comment(user_id, post_id, text)
        db.session.flush()
        post_repository.adjust_counter(post_id, "comments_count", 1)
        return comment

    return _commit_or_rollback(operation)


def apply_view(post_id: int) -> bool:
    return _commit_or_rollback(
        lambda: post_repository.adjust_counter(post_id, "views_count", 1) > 0
    )


def release_post(post) -> None:
    """Delete a post and take its likes back off the author's total."""
    def operation():
        if post.likes_count:
            user_repository.adjust_counter(post.user_id, "likes_count", -post.likes_count)
        post_repository.delete_post(post)

    _commit_or_rollback(operation)
