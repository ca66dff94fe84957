from sqlalchemy import or_, update

from shortclip.db import db
from shortclip.models.user_model import User


def get_by_username(username: str):
    return User.query.filter_by(username=username).first()


def get_by_username_or_email(username: str, email: str):
    return User.query.filter(
        or_(User.username == username, User.email == email)
    ).first()


def create_user(username, email, password_hash, display_name=None):
    user = User(
        username=username,
        email=email,
        password_hash=password_hash,
        display_name=display_name or username,
    )
    db.session.add(user)
    db.session.commit()
    return user


def adjust_counter(user_id: int, column: str, delta: int) -> int:
    counter = getattr(User, column)
    result = db.session.execute(
        update(User)
        .where(User.id == user_id)
        .values(**{column: counter + delta})
    )
    return result.rowcount
