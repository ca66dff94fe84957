from datetime import datetime

from shortclip.db import db


class Post(db.Model):
    __tablename__ = "posts"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    video_url = db.Column(db.Text, nullable=False)
    thumbnail_url = db.Column(db.Text, nullable=True)
    caption = db.Column(db.Text, nullable=True)
    music_name = db.Column(db.String(200), nullable=True)

    likes_count = db.Column(db.Integer, default=0, nullable=False)
    comments_count = db.Column(db.Integer, default=0, nullable=False)
    shares_count = db.Column(db.Integer, default=0, nullable=False)
    views_count = db.Column(db.Integer, default=0, nullable=False)

    created_at = db.Column(
        db.DateTime, default=datetime.utcnow, nullable=False, index=True
    )

    author = db.relationship("User")

    likes = db.relationship(
        "Like",
        backref="post",
        lazy="select",
        cascade="all, delete-orphan",
    )
    comments = db.relationship(
        "Comment",
        backref="post",
        lazy="select",
        cascade="all, delete-orphan",
    )
