import os
import tempfile
import unittest

from minio.error import S3Error


TEST_JWT_SECRET = "test-secret-key-long-enough-for-hs256-signing"


class FakeMinio:
    def __init__(self):
        self.buckets = set()
        self.policies = {}
        self.objects = {}
        self.presign_calls = []

    def bucket_exists(self, bucket_name):
        return bucket_name in self.buckets

    def make_bucket(self, bucket_name):
        self.buckets.add(bucket_name)

    def set_bucket_policy(self, bucket_name, policy):
        self.policies[bucket_name] = policy

    def put_object(self, bucket_name, object_name, data, length, content_type, part_size=0):
        self.objects[object_name] = {
            "bucket_name": bucket_name,
            "data": data.read(),
            "length": length,
            "content_type": content_type,
        }

    def stat_object(self, bucket_name, object_name):
        if object_name not in self.objects:
            raise S3Error(
                response=None,
                code="NoSuchKey",
                message="Object does not exist",
                resource=f"/{bucket_name}/{object_name}",
                request_id="req-1",
                host_id="host-1",
                bucket_name=bucket_name,
                object_name=object_name,
            )
        return self.objects[object_name]

    def presigned_get_object(self, bucket_name, object_name, expires):
        self.presign_calls.append((object_name, expires))
        return (
            f"http://minio.test:9000/{bucket_name}/{object_name}"
            f"?X-Amz-Expires={int(expires.total_seconds())}&X-Amz-Signature=sig"
        )


class ApiTestCase(unittest.TestCase):
    config_overrides = {}

    @classmethod
    def setUpClass(cls):
        db_fd, cls.db_path = tempfile.mkstemp(suffix=".db")
        os.close(db_fd)

        from shortclip import create_app
        from shortclip.db import db
        from shortclip.services import auth_service

        cls.app = create_app({
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{cls.db_path}",
            "JWT_SECRET_KEY": TEST_JWT_SECRET,
            "STORAGE_INIT_ON_STARTUP": False,
            **cls.config_overrides,
        })
        cls.client = cls.app.test_client()
        cls.db = db
        cls.auth_service = auth_service

    @classmethod
    def tearDownClass(cls):
        with cls.app.app_context():
            cls.db.engine.dispose()

        if os.path.exists(cls.db_path):
            os.remove(cls.db_path)

    def setUp(self):
        with self.app.app_context():
            self.db.drop_all()
            self.db.create_all()

    def _register(self, username, password="pass123"):
        with self.app.app_context():
            return self.auth_service.register(
                username, f"{username}@example.com", password
            )["id"]

    def _auth_header(self, username, password="pass123"):
        with self.app.app_context():
            token = self.auth_service.login(username, password)["access_token"]
        return {"Authorization": f"Bearer {token}"}

    def _create_post(self, headers, caption="clip", video_url="http://cdn.test/videos/a.mp4"):
        response = self.client.post(
            "/api/posts",
            json={"videoUrl": video_url, "caption": caption},
            headers=headers,
        )
        self.assertEqual(response.status_code, 201)
        return response.get_json()["id"]

    def _user_counters(self, username):
        response = self.client.get(f"/api/users/{username}")
        self.assertEqual(response.status_code, 200)
        return response.get_json()

    def _post_row(self, post_id):
        from shortclip.models.post_model import Post

        with self.app.app_context():
            post = self.db.session.get(Post, post_id)
            if post is None:
                return None
            return {
                "likes_count": post.likes_count,
                "comments_count": post.comments_count,
                "views_count": post.views_count,
            }

    def _count(self, model, **filters):
        with self.app.app_context():
            return model.query.filter_by(**filters).count()
