"""
Unit tests for UserAccountUseCase.

Run against the in-memory fake repository and real bcrypt at the lowest
cost factor.
"""
import pytest

from application.errors import (
    BadRequestError,
    ConflictError,
    NotFoundError,
    UnauthorizedError,
)
from application.use_cases import UserAccountUseCase, UserChanges
from backend.passwords import BcryptPasswordHasher
from backend.tokens import JWTTokenService
from tests.fakes import FakeUserRepository

pytestmark = pytest.mark.unit

SECRET = "unit-test-signing-secret-0123456789abcdef"


@pytest.fixture
def repo() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def tokens() -> JWTTokenService:
    return JWTTokenService(SECRET)


@pytest.fixture
def accounts(repo, tokens) -> UserAccountUseCase:
    return UserAccountUseCase(
        user_repo=repo,
        password_hasher=BcryptPasswordHasher(rounds=4),
        token_service=tokens,
    )


class TestRegister:
    def test_creates_account(self, accounts, repo):
        user = accounts.register("alice", "s3cret", birth_date="1990-01-01", height="170")

        assert user.id is not None
        assert user.username == "alice"
        assert user.birth_date == "1990-01-01"
        assert user.height == "170"
        assert repo.find_active("alice") is not None

    def test_stores_hash_not_password(self, accounts, repo):
        accounts.register("alice", "s3cret")
        stored = repo.find_active("alice")
        assert stored.password_hash
        assert stored.password_hash != "s3cret"

    def test_hash_never_serialized(self, accounts):
        user = accounts.register("alice", "s3cret")
        assert "password_hash" not in user.model_dump()
        assert "s3cret" not in user.model_dump_json()

    def test_duplicate_username(self, accounts):
        accounts.register("alice", "s3cret")
        with pytest.raises(ConflictError):
            accounts.register("alice", "other")

    @pytest.mark.parametrize("username,password", [("", "s3cret"), ("alice", ""), ("  ", "s3cret")])
    def test_blank_fields(self, accounts, username, password):
        with pytest.raises(BadRequestError, match="is required"):
            accounts.register(username, password)

    def test_reregister_after_delete(self, accounts, repo):
        first = accounts.register("alice", "s3cret")
        accounts.delete("alice")

        second = accounts.register("alice", "n3w")
        assert second.id != first.id
        assert len(repo.get_all()) == 2


class TestAuthenticate:
    def test_token_maps_back_to_username(self, accounts, tokens):
        accounts.register("alice", "s3cret")
        token = accounts.authenticate("alice", "s3cret")
        assert tokens.validate(token) == "alice"

    def test_wrong_password(self, accounts):
        accounts.register("alice", "s3cret")
        with pytest.raises(UnauthorizedError, match="Invalid login or password"):
            accounts.authenticate("alice", "wrong")

    def test_unknown_user(self, accounts):
        with pytest.raises(NotFoundError):
            accounts.authenticate("nobody", "s3cret")

    def test_deleted_user(self, accounts):
        accounts.register("alice", "s3cret")
        accounts.delete("alice")
        with pytest.raises(NotFoundError):
            accounts.authenticate("alice", "s3cret")

    def test_blank_password(self, accounts):
        with pytest.raises(BadRequestError):
            accounts.authenticate("alice", "")


class TestUpdate:
    def test_merges_non_empty_fields(self, accounts, repo):
        accounts.register("alice", "s3cret", birth_date="1990-01-01", height="170")

        accounts.update("alice", UserChanges(height="172", birth_date=""))

        stored = repo.find_active("alice")
        assert stored.height == "172"
        assert stored.birth_date == "1990-01-01"

    def test_new_password_is_rehashed(self, accounts):
        accounts.register("alice", "s3cret")
        accounts.update("alice", UserChanges(password="n3w-pass"))

        assert accounts.authenticate("alice", "n3w-pass")
        with pytest.raises(UnauthorizedError):
            accounts.authenticate("alice", "s3cret")

    def test_blank_password_rejected(self, accounts, repo):
        accounts.register("alice", "s3cret")
        before = repo.find_active("alice").password_hash

        with pytest.raises(BadRequestError, match="field password is required"):
            accounts.update("alice", UserChanges(password="   "))

        assert repo.find_active("alice").password_hash == before
        assert accounts.authenticate("alice", "s3cret")

    def test_same_username_allowed(self, accounts, repo):
        accounts.register("alice", "s3cret")
        accounts.update("alice", UserChanges(username="alice", height="180"))
        assert repo.find_active("alice").height == "180"

    def test_rename_rejected(self, accounts, repo):
        accounts.register("alice", "s3cret")
        with pytest.raises(BadRequestError, match="Username cannot be changed"):
            accounts.update("alice", UserChanges(username="bob"))
        assert repo.find_active("bob") is None

    def test_no_changes_is_noop(self, accounts, repo):
        user = accounts.register("alice", "s3cret", height="170")
        assert accounts.update("alice", UserChanges()).height == user.height

    def test_missing_user(self, accounts):
        with pytest.raises(NotFoundError):
            accounts.update("nobody", UserChanges(height="180"))


class TestDelete:
    def test_soft_delete(self, accounts, repo):
        accounts.register("alice", "s3cret")
        accounts.delete("alice")

        with pytest.raises(NotFoundError):
            accounts.get_by_username("alice")
        # Row is kept, only flagged
        assert [u.is_deleted for u in repo.get_all()] == [True]

    def test_delete_twice(self, accounts):
        accounts.register("alice", "s3cret")
        accounts.delete("alice")
        with pytest.raises(NotFoundError):
            accounts.delete("alice")

    def test_delete_unknown(self, accounts):
        with pytest.raises(NotFoundError):
            accounts.delete("nobody")
