"""
Shared test fixtures.

The ``app`` fixture builds a fresh application from test settings and
overrides every storage dependency with an in-memory fake, so API tests
run without Supabase. Passwords are hashed with real bcrypt at the
lowest cost factor.
"""
from typing import Callable, Dict

import pytest
from fastapi.testclient import TestClient

from api import deps
from backend.main import create_app
from backend.passwords import BcryptPasswordHasher
from backend.settings import Settings
from backend.tokens import JWTTokenService
from tests.fakes import FakeMetricRepository, FakeUserRepository, FakeWorkoutRepository

TEST_JWT_SECRET = "test-secret-for-unit-tests-only-0123456789"
TEST_PASSWORD = "correct horse battery staple"


@pytest.fixture
def test_settings() -> Settings:
    """Settings for tests: no .env file, no Supabase, fast bcrypt."""
    return Settings(
        _env_file=None,
        environment="test",
        jwt_secret=TEST_JWT_SECRET,
        bcrypt_rounds=4,
        supabase_url=None,
        supabase_service_role_key=None,
        supabase_anon_key=None,
        sentry_dsn=None,
    )


@pytest.fixture
def user_repo() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def workout_repo() -> FakeWorkoutRepository:
    return FakeWorkoutRepository()


@pytest.fixture
def metric_repo() -> FakeMetricRepository:
    return FakeMetricRepository()


@pytest.fixture
def password_hasher(test_settings) -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=test_settings.bcrypt_rounds)


@pytest.fixture
def token_service(test_settings) -> JWTTokenService:
    return JWTTokenService(test_settings.jwt_secret, test_settings.token_ttl_seconds)


@pytest.fixture
def app(test_settings, user_repo, workout_repo, metric_repo, password_hasher, token_service):
    """Application wired to the fakes."""
    application = create_app(settings=test_settings)
    application.dependency_overrides[deps.get_settings] = lambda: test_settings
    application.dependency_overrides[deps.get_user_repo] = lambda: user_repo
    application.dependency_overrides[deps.get_workout_repo] = lambda: workout_repo
    application.dependency_overrides[deps.get_metric_repo] = lambda: metric_repo
    application.dependency_overrides[deps.get_password_hasher] = lambda: password_hasher
    application.dependency_overrides[deps.get_token_service] = lambda: token_service
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def login_as(client) -> Callable[..., Dict[str, str]]:
    """Factory: register an account through the API and return its auth headers."""

    def _login_as(username: str, password: str = TEST_PASSWORD) -> Dict[str, str]:
        response = client.post(
            "/auth/register",
            json={
                "username": username,
                "password": password,
                "birth_date": "1990-01-01",
                "height": "180",
            },
        )
        assert response.status_code == 201, response.text
        response = client.post("/auth/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login_as


@pytest.fixture
def auth_headers(login_as) -> Dict[str, str]:
    """Auth headers of a freshly registered user "alice"."""
    return login_as("alice")
