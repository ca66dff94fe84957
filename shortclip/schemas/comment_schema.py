from shortclip.extensions.extensions import ma


class CommentSchema(ma.Schema):
    id = ma.Integer()
    user_id = ma.Integer()
    post_id = ma.Integer()
    comment_text = ma.String()
    likes_count = ma.Integer()
    created_at = ma.DateTime()


class CommentResponseSchema(CommentSchema):
    username = ma.String(attribute="author.username")
    display_name = ma.String(attribute="author.display_name")
    profile_image_url = ma.String(attribute="author.profile_image_url")
