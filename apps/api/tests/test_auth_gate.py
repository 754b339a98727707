"""Auth gate, current-user, and login endpoint tests."""

from __future__ import annotations

import os
import unittest

from fastapi import Request
from fastapi.testclient import TestClient

from portfolio.adapters.auth import AuthVerificationError, MockAccount, MockTokenVerifier
from portfolio.core.config import Settings, get_settings
from portfolio.domain.access import GateState, ensure_role, role_satisfies
from portfolio.errors import ApiError
from portfolio.main import build_token_verifier, create_app
from portfolio.routes.dependencies import get_content_admin_service
from portfolio.schemas.auth import AuthenticatedUser, UserRole
from portfolio.schemas.content import ContentRecord
from portfolio.services.rate_limit import RateLimiter


class _CapturingContentService:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def list_content(self) -> list[ContentRecord]:
        self.calls.append("list_content")
        return []


class _SettingsEnvCase(unittest.TestCase):
    _env_keys = (
        "PORTFOLIO_AUTH_PROVIDER",
        "PORTFOLIO_CONTENT_STORE",
        "PORTFOLIO_BLOB_PROVIDER",
        "PORTFOLIO_ENVIRONMENT",
        "PORTFOLIO_CONTENT_DIR",
    )

    def setUp(self) -> None:
        self._old_env = {k: os.environ.get(k) for k in self._env_keys}
        os.environ["PORTFOLIO_AUTH_PROVIDER"] = "mock"
        os.environ["PORTFOLIO_CONTENT_STORE"] = "memory"
        os.environ["PORTFOLIO_BLOB_PROVIDER"] = "memory"
        os.environ["PORTFOLIO_ENVIRONMENT"] = "test"
        os.environ["PORTFOLIO_CONTENT_DIR"] = "does-not-exist"
        get_settings.cache_clear()

    def tearDown(self) -> None:
        for key, value in self._old_env.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value
        get_settings.cache_clear()


class AuthGateApiTests(_SettingsEnvCase):
    def test_missing_authorization_header_returns_401_and_no_store_access(self) -> None:
        app = create_app()
        client = TestClient(app)

        response = client.post("/api/admin/content", json={"title": "Draft"})

        self.assertEqual(response.status_code, 401)
        self.assertEqual(
            response.json(),
            {"success": False, "error": "Authentication required", "code": "NO_AUTH"},
        )
        self.assertEqual(response.headers["WWW-Authenticate"], "Bearer")
        self.assertEqual(app.state.content_store.read_count, 0)
        self.assertEqual(app.state.content_store.write_count, 0)

    def test_invalid_token_on_write_never_reaches_store(self) -> None:
        app = create_app()
        client = TestClient(app)
        headers = {"Authorization": "Bearer expired-or-forged"}

        create = client.post("/api/admin/content", headers=headers, json={"title": "Draft"})
        update = client.patch("/api/admin/content/draft", headers=headers, json={"title": "New"})
        delete = client.delete("/api/admin/content/draft", headers=headers)

        for response in (create, update, delete):
            self.assertEqual(response.status_code, 401)
            self.assertEqual(response.json()["code"], "NO_AUTH")
            self.assertFalse(response.json()["success"])
        self.assertEqual(app.state.content_store.read_count, 0)
        self.assertEqual(app.state.content_store.write_count, 0)

    def test_invalid_token_wins_over_invalid_body(self) -> None:
        app = create_app()
        client = TestClient(app)

        response = client.post(
            "/api/admin/content",
            headers={"Authorization": "Bearer nope"},
            json={"unexpected": True},
        )

        self.assertEqual(response.status_code, 401)

    def test_non_bearer_scheme_is_rejected(self) -> None:
        client = TestClient(create_app())

        response = client.get("/api/admin/content", headers={"Authorization": "Basic dXNlcjpwYXNz"})

        self.assertEqual(response.status_code, 401)

    def test_rejection_is_logged(self) -> None:
        client = TestClient(create_app())

        with self.assertLogs("portfolio.routes.dependencies", level="WARNING") as logs:
            client.get("/api/admin/content")

        self.assertIn("auth.rejected", logs.output[0])
        self.assertIn("reason=invalid_or_missing_bearer", logs.output[0])

    def test_valid_token_reaches_handler_and_attaches_user(self) -> None:
        app = create_app()
        client = TestClient(app)
        service = _CapturingContentService()
        observed: dict[str, object] = {}

        def _override(request: Request) -> _CapturingContentService:
            observed["request"] = request
            return service

        app.dependency_overrides[get_content_admin_service] = _override

        response = client.get("/api/admin/content", headers={"Authorization": "Bearer test:user-7:editor"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"success": True, "data": []})
        self.assertEqual(service.calls, ["list_content"])
        request = observed["request"]
        assert isinstance(request, Request)
        self.assertEqual(request.state.auth_state, GateState.AUTHENTICATED)
        user = request.state.auth_user
        assert isinstance(user, AuthenticatedUser)
        self.assertEqual(user.id, "user-7")
        self.assertEqual(user.role, UserRole.EDITOR)


class CurrentUserApiTests(_SettingsEnvCase):
    def test_me_returns_identity(self) -> None:
        client = TestClient(create_app())

        response = client.get(
            "/api/admin/auth/me",
            headers={"Authorization": "Bearer test:user-1:admin:owner@site.dev"},
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {"success": True, "data": {"id": "user-1", "email": "owner@site.dev", "role": "admin"}},
        )

    def test_me_requires_authentication(self) -> None:
        response = TestClient(create_app()).get("/api/admin/auth/me")

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["code"], "NO_AUTH")


class LoginApiTests(_SettingsEnvCase):
    def _client(self) -> TestClient:
        verifier = MockTokenVerifier(
            {"owner@site.dev": MockAccount(password="correct horse", user_id="owner-1", role=UserRole.ADMIN)}
        )
        return TestClient(create_app(token_verifier=verifier))

    def test_login_returns_token_accepted_by_gate(self) -> None:
        client = self._client()

        response = client.post(
            "/api/admin/auth/login",
            json={"email": "Owner@site.dev", "password": "correct horse"},
        )

        self.assertEqual(response.status_code, 200)
        session = response.json()["data"]
        self.assertEqual(session["user"], {"id": "owner-1", "email": "owner@site.dev", "role": "admin"})

        me = client.get("/api/admin/auth/me", headers={"Authorization": f"Bearer {session['access_token']}"})
        self.assertEqual(me.json()["data"]["id"], "owner-1")

    def test_wrong_password_returns_401(self) -> None:
        response = self._client().post(
            "/api/admin/auth/login",
            json={"email": "owner@site.dev", "password": "wrong"},
        )

        self.assertEqual(response.status_code, 401)
        self.assertEqual(
            response.json(),
            {"success": False, "error": "Invalid credentials provided", "code": "NO_AUTH"},
        )

    def test_missing_fields_return_validation_envelope(self) -> None:
        response = self._client().post("/api/admin/auth/login", json={"email": "owner@site.dev"})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["code"], "VALIDATION_ERROR")
        self.assertEqual(response.json()["details"][0]["loc"], ["body", "password"])

    def test_repeated_attempts_are_rate_limited_per_client(self) -> None:
        client = self._client()
        body = {"email": "owner@site.dev", "password": "wrong"}
        attacker = {"X-Forwarded-For": "203.0.113.9, 10.0.0.1"}

        statuses = [client.post("/api/admin/auth/login", json=body, headers=attacker).status_code for _ in range(5)]
        self.assertEqual(statuses, [401] * 5)

        limited = client.post("/api/admin/auth/login", json=body, headers=attacker)
        self.assertEqual(limited.status_code, 429)
        self.assertEqual(limited.json()["code"], "RATE_LIMITED")
        self.assertEqual(limited.headers["X-RateLimit-Limit"], "5")
        self.assertGreater(int(limited.headers["Retry-After"]), 0)

        other = client.post("/api/admin/auth/login", json=body, headers={"X-Forwarded-For": "198.51.100.4"})
        self.assertEqual(other.status_code, 401)


class AuthAdapterUnitTests(unittest.TestCase):
    def test_mock_token_verifier_normalizes_user(self) -> None:
        user = MockTokenVerifier().verify_token("test:user-999:admin")

        self.assertEqual(user.id, "user-999")
        self.assertEqual(user.role, UserRole.ADMIN)
        self.assertEqual(user.email, "user-999@example.test")

    def test_mock_token_verifier_defaults_to_editor(self) -> None:
        self.assertEqual(MockTokenVerifier().verify_token("test:user-1").role, UserRole.EDITOR)

    def test_mock_token_verifier_rejects_invalid_tokens(self) -> None:
        verifier = MockTokenVerifier()

        for token in ("invalid", "test:", "test:user:owner", "prod:user:admin"):
            with self.subTest(token=token), self.assertRaises(AuthVerificationError):
                verifier.verify_token(token)

    def test_settings_select_mock_verifier(self) -> None:
        verifier = build_token_verifier(Settings(auth_provider="mock"))

        self.assertIsInstance(verifier, MockTokenVerifier)


class RoleRuleTests(unittest.TestCase):
    def test_admin_satisfies_every_role(self) -> None:
        self.assertTrue(role_satisfies(UserRole.ADMIN, UserRole.ADMIN))
        self.assertTrue(role_satisfies(UserRole.ADMIN, UserRole.EDITOR))

    def test_editor_only_satisfies_editor(self) -> None:
        self.assertTrue(role_satisfies(UserRole.EDITOR, UserRole.EDITOR))
        self.assertFalse(role_satisfies(UserRole.EDITOR, UserRole.ADMIN))

    def test_insufficient_role_raises_forbidden(self) -> None:
        with self.assertRaises(ApiError) as context:
            ensure_role(AuthenticatedUser(id="u", role=UserRole.EDITOR), UserRole.ADMIN)

        self.assertEqual(context.exception.status_code, 403)
        self.assertEqual(context.exception.payload.code, "INSUFFICIENT_ROLE")


class RateLimiterUnitTests(unittest.TestCase):
    def test_window_resets_after_expiry(self) -> None:
        now = [1000.0]
        limiter = RateLimiter(limit=2, window_seconds=60, clock=lambda: now[0])

        self.assertTrue(limiter.hit("a").allowed)
        self.assertTrue(limiter.hit("a").allowed)
        blocked = limiter.hit("a")
        self.assertFalse(blocked.allowed)
        self.assertEqual(blocked.remaining, 0)
        self.assertEqual(blocked.retry_after(now[0]), 60)

        now[0] += 60
        self.assertTrue(limiter.hit("a").allowed)

    def test_keys_are_independent(self) -> None:
        limiter = RateLimiter(limit=1, window_seconds=60, clock=lambda: 0.0)

        self.assertTrue(limiter.hit("a").allowed)
        self.assertTrue(limiter.hit("b").allowed)
        self.assertFalse(limiter.hit("a").allowed)


if __name__ == "__main__":
    unittest.main()
