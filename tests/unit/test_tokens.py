"""
Unit tests for backend/tokens.py
"""
import time

import jwt
import pytest

from application.errors import InvalidTokenError, TokenExpiredError, UnauthorizedError
from backend.settings import MAX_TOKEN_TTL_SECONDS
from backend.tokens import JWT_ALGORITHM, JWTTokenService

SECRET = "unit-test-signing-secret-0123456789abcdef"
OTHER_SECRET = "another-signing-secret-0123456789abcdef"


@pytest.fixture
def service() -> JWTTokenService:
    return JWTTokenService(SECRET, ttl_seconds=300)


@pytest.mark.unit
class TestConstruction:
    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError):
            JWTTokenService("")

    def test_blank_secret_rejected(self):
        with pytest.raises(ValueError):
            JWTTokenService("   ")

    @pytest.mark.parametrize("ttl", [0, -1, MAX_TOKEN_TTL_SECONDS + 1])
    def test_ttl_out_of_range_rejected(self, ttl):
        with pytest.raises(ValueError):
            JWTTokenService(SECRET, ttl_seconds=ttl)

    def test_ttl_at_cap_accepted(self):
        assert JWTTokenService(SECRET, ttl_seconds=MAX_TOKEN_TTL_SECONDS).ttl_seconds == MAX_TOKEN_TTL_SECONDS


@pytest.mark.unit
class TestIssue:
    def test_claims(self):
        service = JWTTokenService(SECRET, ttl_seconds=300, clock=lambda: 1_700_000_000)
        token = service.issue("alice")

        claims = jwt.decode(
            token,
            SECRET,
            algorithms=[JWT_ALGORITHM],
            options={"verify_exp": False},
        )
        assert claims["sub"] == "alice"
        assert claims["username"] == "alice"
        assert claims["iat"] == 1_700_000_000
        assert claims["exp"] == 1_700_000_300

    def test_header_uses_hs256(self, service):
        assert jwt.get_unverified_header(service.issue("alice"))["alg"] == "HS256"


@pytest.mark.unit
class TestValidate:
    def test_round_trip_within_ttl(self, service):
        assert service.validate(service.issue("alice")) == "alice"

    def test_expired_token(self):
        issued_long_ago = JWTTokenService(SECRET, ttl_seconds=300, clock=lambda: time.time() - 3600)
        token = issued_long_ago.issue("alice")

        with pytest.raises(TokenExpiredError):
            JWTTokenService(SECRET).validate(token)

    def test_leeway_tolerates_small_skew(self):
        issuer = JWTTokenService(SECRET, ttl_seconds=60, clock=lambda: time.time() - 70)
        token = issuer.issue("alice")

        assert JWTTokenService(SECRET, leeway_seconds=30).validate(token) == "alice"

    def test_other_secret_rejected(self, service):
        token = JWTTokenService(OTHER_SECRET).issue("alice")

        with pytest.raises(InvalidTokenError):
            service.validate(token)

    def test_other_hmac_algorithm_rejected(self, service):
        token = jwt.encode(
            {"sub": "alice", "exp": int(time.time()) + 300},
            SECRET,
            algorithm="HS512",
        )
        with pytest.raises(InvalidTokenError):
            service.validate(token)

    def test_unsigned_token_rejected(self, service):
        token = jwt.encode(
            {"sub": "alice", "exp": int(time.time()) + 300},
            None,
            algorithm="none",
        )
        with pytest.raises(InvalidTokenError):
            service.validate(token)

    def test_missing_exp_rejected(self, service):
        token = jwt.encode({"sub": "alice"}, SECRET, algorithm=JWT_ALGORITHM)
        with pytest.raises(InvalidTokenError):
            service.validate(token)

    def test_missing_subject_rejected(self, service):
        token = jwt.encode({"exp": int(time.time()) + 300}, SECRET, algorithm=JWT_ALGORITHM)
        with pytest.raises(InvalidTokenError):
            service.validate(token)

    def test_empty_subject_rejected(self, service):
        token = jwt.encode(
            {"sub": " ", "exp": int(time.time()) + 300},
            SECRET,
            algorithm=JWT_ALGORITHM,
        )
        with pytest.raises(InvalidTokenError):
            service.validate(token)

    @pytest.mark.parametrize("garbage", ["", "not-a-token", "a.b.c"])
    def test_garbage_rejected(self, service, garbage):
        with pytest.raises(InvalidTokenError):
            service.validate(garbage)

    def test_token_errors_are_unauthorized(self):
        assert issubclass(InvalidTokenError, UnauthorizedError)
        assert issubclass(TokenExpiredError, UnauthorizedError)
