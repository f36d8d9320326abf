"""비밀번호 해싱 및 검증 유틸리티 모듈.

Password hashing and verification utility module.
Customer and provider passwords are stored only as salted bcrypt hashes.

bcrypt only reads the first 72 bytes of its input (and bcrypt>=5 rejects
longer input outright), so passwords are first reduced to the base64 of
their SHA-256 digest (44 ASCII bytes). Every length and every character
counts toward the hash.
"""

import base64
import hashlib

import bcrypt

# bcrypt 작업 비용 — bcrypt work factor (2^12 rounds)
BCRYPT_ROUNDS: int = 12


def _prehash(password: str) -> bytes:
    """SHA-256 → base64 사전 해시 (Fixed-length bcrypt input, 44 bytes)."""
    digest: bytes = hashlib.sha256(password.encode("utf-8")).digest()
    return base64.b64encode(digest)


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """평문 비밀번호를 bcrypt 해시로 변환합니다.

    Hash a plain text password of any length using bcrypt with a random salt.

    Args:
        password: 평문 비밀번호 (Plain text password to hash)
        rounds: bcrypt 비용 인자 (bcrypt cost factor)

    Returns:
        str: bcrypt 해시 문자열 (Bcrypt hash string, ~60 chars)
    """
    salt: bytes = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_prehash(password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """평문 비밀번호와 저장된 bcrypt 해시를 비교합니다.

    Verify a plain text password against a stored bcrypt hash.
    A malformed stored hash counts as a mismatch.

    Args:
        plain_password: 검증할 평문 비밀번호 (Plain text password to verify)
        hashed_password: 저장된 bcrypt 해시 (Stored bcrypt hash)

    Returns:
        bool: 일치하면 True (True if password matches hash)
    """
    try:
        return bcrypt.checkpw(_prehash(plain_password), hashed_password.encode("utf-8"))
    except ValueError:
        return False
