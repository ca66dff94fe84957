from shortclip.extensions.extensions import ma


class PostSchema(ma.Schema):
    id = ma.Integer()
    user_id = ma.Integer()
    video_url = ma.String()
    thumbnail_url = ma.String()
    caption = ma.String()
    music_name = ma.String()
    likes_count = ma.Integer()
    comments_count = ma.Integer()
    shares_count = ma.Integer()
    views_count = ma.Integer()
    created_at = ma.DateTime()


class FeedPostSchema(PostSchema):
    username = ma.String(attribute="author.username")
    display_name = ma.String(attribute="author.display_name")
    profile_image_url = ma.String(attribute="author.profile_image_url")
