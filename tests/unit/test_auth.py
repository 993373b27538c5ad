"""
Unit tests for backend/auth.py
"""
import pytest

from application.errors import InvalidTokenError, UnauthorizedError
from backend.auth import Identity, authenticate_header, extract_bearer_token
from backend.tokens import JWTTokenService

pytestmark = pytest.mark.unit

SECRET = "unit-test-signing-secret-0123456789abcdef"


@pytest.fixture
def tokens() -> JWTTokenService:
    return JWTTokenService(SECRET)


class TestExtractBearerToken:
    @pytest.mark.parametrize("header", [None, ""])
    def test_missing_header(self, header):
        with pytest.raises(UnauthorizedError, match="Authorization header is missing"):
            extract_bearer_token(header)

    @pytest.mark.parametrize("header", ["Token abc", "bearer abc", "Basic dXNlcjpwYXNz", "Bearer "])
    def test_wrong_format(self, header):
        with pytest.raises(UnauthorizedError, match="Invalid token format"):
            extract_bearer_token(header)

    def test_extracts_token(self):
        assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"


class TestAuthenticateHeader:
    def test_valid_token_gives_identity(self, tokens):
        identity = authenticate_header(f"Bearer {tokens.issue('alice')}", tokens)
        assert identity == Identity(username="alice")

    def test_invalid_token(self, tokens):
        with pytest.raises(InvalidTokenError):
            authenticate_header("Bearer not-a-token", tokens)

    def test_identity_is_immutable(self):
        identity = Identity(username="alice")
        with pytest.raises(AttributeError):
            identity.username = "mallory"
