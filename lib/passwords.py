# =============================================================================
# lib/passwords.py - Password Hashing
# =============================================================================
# Argon2id hashing with the library defaults.
#
# Usage:
#   hashed = hash_password("tester")
#   verify_password(hashed, "tester")  -> True
# =============================================================================

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    """Hash a plain password for storage."""
    return _hasher.hash(password)


def verify_password(hashed: str, password: str) -> bool:
    """
    Check a plain password against a stored hash.

    Returns False for mismatches and for hashes argon2 cannot read.
    """
    try:
        return _hasher.verify(hashed, password)
    except (VerifyMismatchError, InvalidHashError, VerificationError):
        return False
