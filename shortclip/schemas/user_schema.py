from shortclip.extensions.extensions import ma


class UserProfileSchema(ma.Schema):
    id = ma.Integer()
    username = ma.String()
    display_name = ma.String()
    bio = ma.String()
    profile_image_url = ma.String()
    followers_count = ma.Integer()
    following_count = ma.Integer()
    likes_count = ma.Integer()
    created_at = ma.DateTime()


class UpdatedProfileSchema(ma.Schema):
    id = ma.Integer()
    username = ma.String()
    display_name = ma.String()
    bio = ma.String()
    profile_image_url = ma.String()
