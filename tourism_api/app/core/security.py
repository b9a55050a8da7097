"""
Password hashing helpers.

Passwords are hashed with PBKDF2‑HMAC (SHA‑256) and a random 16‑byte
salt before a user record is stored.  The stored form is
``<salt hex>$<hash hex>``, which ``verify_password`` can check later.
"""

import hashlib
import hmac
import os

ITERATIONS = 100_000


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A fresh salt is generated for each call, so hashing the same
    password twice yields different strings.

    Parameters
    ----------
    password : str
        The plain text password to hash.

    Returns
    -------
    str
        Salt and hash concatenated with ``$``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored salt+hash string.

    Returns ``False`` for malformed stored values instead of raising.
    """
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, ITERATIONS)
    return hmac.compare_digest(dk, expected)
