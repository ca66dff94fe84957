import unittest

from api_test_case import ApiTestCase


class TestAuthRoutes(ApiTestCase):
    def test_register_and_login_success(self):
        register_response = self.client.post(
            "/api/auth/register",
            json={
                "username": "api_user",
                "email": "api_user@example.com",
                "password": "pass123",
                "displayName": "Api User",
            },
        )
        self.assertEqual(register_response.status_code, 201)
        self.assertEqual(register_response.get_json()["display_name"], "Api User")

        login_response = self.client.post(
            "/api/auth/login",
            json={"username": "api_user", "password": "pass123"},
        )
        self.assertEqual(login_response.status_code, 200)
        body = login_response.get_json()
        self.assertIn("access_token", body)
        self.assertIn("refresh_token", body)

    def test_register_rejects_missing_email(self):
        response = self.client.post(
            "/api/auth/register",
            json={"username": "no_email", "password": "pass123"},
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "Missing fields")

    def test_register_rejects_blank_password(self):
        response = self.client.post(
            "/api/auth/register",
            json={
                "username": "blank_pass",
                "email": "blank@example.com",
                "password": "   ",
            },
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "Missing fields")

    def test_register_rejects_duplicate_username(self):
        self._register("alice")
        response = self.client.post(
            "/api/auth/register",
            json={
                "username": "alice",
                "email": "other@example.com",
                "password": "pass123",
            },
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.get_json()["error"], "Username or email already exists"
        )

    def test_register_rejects_invalid_json(self):
        response = self.client.post(
            "/api/auth/register",
            data="not-json",
            headers={"Content-Type": "application/json"},
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "Invalid JSON body")

    def test_login_rejects_wrong_password(self):
        self._register("alice")
        response = self.client.post(
            "/api/auth/login",
            json={"username": "alice", "password": "wrong"},
        )
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.get_json()["error"], "Invalid credentials")

    def test_refresh_returns_access_token(self):
        self._register("alice")
        with self.app.app_context():
            refresh_token = self.auth_service.login("alice", "pass123")["refresh_token"]

        response = self.client.post(
            "/api/auth/refresh",
            headers={"Authorization": f"Bearer {refresh_token}"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.get_json()["access_token"])

    def test_refresh_rejects_access_token(self):
        self._register("alice")
        response = self.client.post("/api/auth/refresh", headers=self._auth_header("alice"))
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.get_json()["error"], "Invalid or expired token")


if __name__ == "__main__":
    unittest.main()
