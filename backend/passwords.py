"""
Password hashing with bcrypt.
"""
import logging

import bcrypt

from application.errors import BadRequestError, InternalError

logger = logging.getLogger(__name__)

# bcrypt ignores everything past this many bytes of input.
BCRYPT_MAX_PASSWORD_BYTES = 72
DEFAULT_ROUNDS = 14


class BcryptPasswordHasher:
    """
    Salted bcrypt hashing.

    ``rounds`` is the log2 cost factor: the default of 14 means 2^14 key
    expansion iterations per hash. Tests pass a low value to stay fast.
    """

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self._rounds = rounds

    def hash(self, plaintext: str) -> str:
        password = plaintext.encode("utf-8")
        if len(password) > BCRYPT_MAX_PASSWORD_BYTES:
            raise BadRequestError(
                f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes",
            )
        try:
            digest = bcrypt.hashpw(password, bcrypt.gensalt(rounds=self._rounds))
        except (ValueError, OSError) as e:
            logger.exception("Password hashing failed")
            raise InternalError(
                "Password hashing error", developer_message=str(e)
            ) from e
        return digest.decode("ascii")

    def verify(self, plaintext: str, hashed: str) -> bool:
        password = plaintext.encode("utf-8")
        if not hashed or len(password) > BCRYPT_MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(password, hashed.encode("ascii"))
        except ValueError:
            # Malformed stored hash
            logger.warning("Stored password hash is not a valid bcrypt digest")
            return False
