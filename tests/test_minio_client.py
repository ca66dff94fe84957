import unittest
from unittest.mock import patch

from shortclip import create_app
from shortclip.extensions import minio_client


class TestMinioClientCache(unittest.TestCase):
    def setUp(self):
        self.app = create_app({
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": "sqlite://",
            "STORAGE_INIT_ON_STARTUP": False,
            "MINIO_ENDPOINT": "minio.test",
            "MINIO_PORT": 9000,
        })
        for name in ("_minio_client", "_minio_settings"):
            patcher = patch.object(minio_client, name, None)
            patcher.start()
            self.addCleanup(patcher.stop)

    def test_settings_follow_app_config(self):
        with self.app.app_context():
            settings = minio_client.current_settings()

        self.assertEqual(settings.endpoint, "minio.test:9000")
        self.assertEqual(settings.access_key, self.app.config["MINIO_ACCESS_KEY"])
        self.assertEqual(settings.secret_key, self.app.config["MINIO_SECRET_KEY"])
        self.assertEqual(settings.secure, self.app.config["MINIO_SECURE"])
        self.assertEqual(settings.read_timeout, self.app.config["MINIO_READ_TIMEOUT"])

    def test_client_is_built_once_for_unchanged_settings(self):
        with patch.object(
            minio_client, "build_client", side_effect=[object(), object()]
        ) as build, self.app.app_context():
            first = minio_client.get_minio_client()
            second = minio_client.get_minio_client()

        self.assertIs(first, second)
        self.assertEqual(build.call_count, 1)

    def test_client_is_rebuilt_when_port_changes(self):
        with patch.object(
            minio_client, "build_client", side_effect=[object(), object()]
        ) as build, self.app.app_context():
            first = minio_client.get_minio_client()
            self.app.config["MINIO_PORT"] = 9100
            second = minio_client.get_minio_client()

        self.assertIsNot(first, second)
        self.assertEqual(build.call_count, 2)
        self.assertEqual(build.call_args.args[0].endpoint, "minio.test:9100")

    def test_build_client_uses_settings(self):
        settings = minio_client.MinioSettings(
            endpoint="minio.test:9000",
            access_key="key",
            secret_key="secret",
            secure=True,
            connect_timeout=2.0,
            read_timeout=30.0,
            pool_maxsize=4,
        )
        with patch.object(minio_client, "Minio") as minio_cls:
            minio_client.build_client(settings)

        args, kwargs = minio_cls.call_args
        self.assertEqual(args, ("minio.test:9000",))
        self.assertEqual(kwargs["access_key"], "key")
        self.assertEqual(kwargs["secret_key"], "secret")
        self.assertTrue(kwargs["secure"])
        http_client = kwargs["http_client"]
        self.assertEqual(http_client.connection_pool_kw["maxsize"], 4)
        self.assertFalse(http_client.connection_pool_kw["retries"])


if __name__ == "__main__":
    unittest.main()
