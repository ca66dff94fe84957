from werkzeug.security import generate_password_hash, check_password_hash
from flask_jwt_extended import create_access_token, create_refresh_token

from shortclip.repositories import user_repository


def _require_non_empty_string(value):
    return isinstance(value, str) and value.strip()


def register(username, email, password, display_name=None):
    if (
        not _require_non_empty_string(username)
        or not _require_non_empty_string(email)
        or not _require_non_empty_string(password)
    ):
        raise ValueError("Missing fields")

    username = username.strip()
    email = email.strip().lower()
    if display_name is not None:
        if not _require_non_empty_string(display_name):
            raise ValueError("Display name must be a non-empty string")
        display_name = display_name.strip()

    if user_repository.get_by_username_or_email(username, email):
        raise ValueError("Username or email already exists")

    user = user_repository.create_user(
        username=username,
        email=email,
        password_hash=generate_password_hash(password),
        display_name=display_name,
    )
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "display_name": user.display_name,
    }


def login(username, password):
    if not _require_non_empty_string(username) or not _require_non_empty_string(password):
        raise ValueError("Invalid credentials")

    username = username.strip()

    user = user_repository.get_by_username(username)
    if not user or not check_password_hash(user.password_hash, password):
        raise ValueError("Invalid credentials")

    return {
        "access_token": create_access_token(identity=username),
        "refresh_token": create_refresh_token(identity=username)
    }


def refresh_access_token(username):
    return {
        "access_token": create_access_token(identity=username)
    }
