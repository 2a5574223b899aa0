"""bcrypt password hashing, run off the event loop."""

from __future__ import annotations

import asyncio

import bcrypt

from noodlebar.core.config import DEFAULT_BCRYPT_ROUNDS


class PasswordHasher:
    """Salted adaptive hashing with a fixed cost factor.

    bcrypt is CPU-bound, so both operations are pushed to a worker thread
    and awaited; the event loop keeps serving other requests meanwhile.
    """

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> None:
        if not 4 <= rounds <= 31:
            raise ValueError(f"bcrypt rounds must be between 4 and 31, got {rounds}")
        self.rounds = rounds
        # Pre-computed hash for timing-safe login (user-not-found path)
        self.dummy_hash = self._hash_sync("dummy")

    def _hash_sync(self, password: str) -> str:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self.rounds)).decode()

    @staticmethod
    def _verify_sync(password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode(), password_hash.encode())
        except ValueError:
            # stored value is not a bcrypt hash
            return False

    async def hash(self, password: str) -> str:
        """Return a salted bcrypt hash of *password*."""
        return await asyncio.to_thread(self._hash_sync, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        """Check *password* against a stored bcrypt hash."""
        return await asyncio.to_thread(self._verify_sync, password, password_hash)
