"""bcrypt password hashing."""

import bcrypt
from starlette.concurrency import run_in_threadpool

from core.config import settings


class BcryptPasswordHasher:
    """Salted one-way password hashing backed by bcrypt.

    bcrypt is deliberately slow, so both operations run in the threadpool to
    keep the event loop free. bcrypt only looks at the first 72 bytes of its
    input; longer passwords are rejected at the API boundary.
    """

    def __init__(self, rounds: int = settings.bcrypt_rounds) -> None:
        self._rounds = rounds

    async def hash(self, password: str) -> str:
        return await run_in_threadpool(self._hash, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        return await run_in_threadpool(self._verify, password, password_hash)

    def _hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def _verify(password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
