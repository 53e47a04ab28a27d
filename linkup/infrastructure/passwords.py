"""Password Hashing — bcrypt hashing and verification off the event loop.

Invariants:
    - Plaintext passwords are never stored or logged
    - Only the first 72 UTF-8 bytes of a password are significant, for both
      hashing and verification (bcrypt's input limit)
    - verify_password() returns False (never raises) for empty or malformed hashes
"""

import asyncio
import logging

import bcrypt

logger = logging.getLogger(__name__)

BCRYPT_MAX_BYTES = 72


def _secret(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def _hash(password: str, rounds: int) -> str:
    return bcrypt.hashpw(
        _secret(password), bcrypt.gensalt(rounds=rounds),
    ).decode("utf-8")


def _verify(password: str, password_hash: str) -> bool:
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(_secret(password), password_hash.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False


async def hash_password(password: str, rounds: int = 10) -> str:
    """Hash with bcrypt in a worker thread (cost factor `rounds`)."""
    return await asyncio.to_thread(_hash, password, rounds)


async def verify_password(password: str, password_hash: str | None) -> bool:
    return await asyncio.to_thread(_verify, password, password_hash or "")
