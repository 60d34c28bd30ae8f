import logging
from functools import lru_cache

from argon2 import PasswordHasher, Type
from argon2.exceptions import VerifyMismatchError

from security_service.clock import now_millis
from security_service.errors import PasswordMismatchError, PasswordNotFoundError
from security_service.models.records import PasswordRecord
from security_service.storage.repository import Repository

logger = logging.getLogger("security-service")


@lru_cache(maxsize=1)
def get_hasher() -> PasswordHasher:
    """Argon2id hasher. Salt and parameters are encoded in each hash."""
    return PasswordHasher(
        time_cost=3,
        memory_cost=65536,
        parallelism=4,
        hash_len=32,
        salt_len=16,
        type=Type.ID,
    )


def hash_password(value: str) -> str:
    return get_hasher().hash(value)


class PasswordService:
    def __init__(self, repository: Repository[PasswordRecord]):
        self.repository = repository

    def save(self, id: int, value: str) -> PasswordRecord:
        """Create or replace the password of an account."""
        existing = self.repository.get(id)
        now = now_millis()
        password = PasswordRecord(
            id=id,
            hash=hash_password(value),
            created=existing.created if existing else now,
            updated=now,
        )
        self.repository.put(password)
        logger.info("Password %s %s", id, "updated" if existing else "created")
        return password

    def verify(self, id: int, value: str) -> None:
        password = self.repository.get(id)
        if password is None:
            raise PasswordNotFoundError(f"Password not found: {id}")

        try:
            get_hasher().verify(password.hash, value)
        except VerifyMismatchError:
            logger.info("Password %s mismatch", id)
            raise PasswordMismatchError("Password mismatch") from None

    def delete(self, id: int) -> None:
        # Deleting an unknown id is not an error
        if not self.repository.delete(id):
            logger.info("Password %s not found, nothing to delete", id)
