"""
Credential Engine - Salts, Password Hashes and Access Codes

This module holds every credential primitive the directory relies on. Hashes
are compatible with ``salt:hash`` pairs produced by the legacy system, which
means the digest scheme is fixed: MD5 over ``salt + secret``, rendered as a
32-character lowercase hex string.

Features:
    - Random salt generation (once per user)
    - Salted MD5 hashing and verification
    - ``salt:hash`` pair parsing for imported credentials
    - Six-character alphanumeric access codes for phone sign-in

Note:
    MD5 is kept for compatibility with imported credentials only. It offers no
    real protection for stored passwords.
"""

import hashlib
import logging
import secrets
from typing import Optional, Tuple

from ..config.settings import (
    ACCESS_CODE_ALPHABET,
    ACCESS_CODE_LENGTH,
    SALT_LENGTH,
    SALTHASH_SEPARATOR,
)

# Set up module logger
logger = logging.getLogger(__name__)


def generate_salt() -> str:
    """
    Generate a fresh random salt.

    Returns:
        str: A 32-character hexadecimal string (16 random bytes)

    Example:
        >>> len(generate_salt())
        32
    """
    salt = secrets.token_hex(SALT_LENGTH)
    logger.debug("Generated new salt")
    return salt


def hash_password(password: str, salt: str) -> str:
    """
    Hash a secret with salt using the legacy MD5 scheme.

    Args:
        password (str): Plain text password or access code
        salt (str): Salt stored alongside the hash

    Returns:
        str: 32-character lowercase hexadecimal digest, zero-padded

    Process:
        1. Concatenate salt + password
        2. Encode as UTF-8 bytes
        3. Compute the MD5 digest
        4. Return as hexadecimal string

    Example:
        >>> hash_password("def", "abc")
        'e80b5017098950fc58aad83c8c14978e'
    """
    try:
        if not isinstance(password, str) or not isinstance(salt, str):
            raise ValueError("Password and salt must be strings")

        salted_password = salt + password
        password_hash = hashlib.md5(salted_password.encode("utf-8")).hexdigest()

        logger.debug("Successfully generated password hash")
        return password_hash

    except Exception as e:
        logger.error(f"Password hashing failed: {e}")
        raise


def encrypt(password: str, salt: Optional[str] = None) -> Tuple[str, str]:
    """
    Hash a secret and return the salt it was hashed with.

    A salt is generated when none is supplied, so callers always get back a
    complete ``(salt, hash)`` pair and never hold a half-initialized credential.

    Args:
        password (str): Plain text secret
        salt (Optional[str]): Existing salt to reuse

    Returns:
        Tuple[str, str]: ``(salt, password_hash)``
    """
    if not salt:
        salt = generate_salt()
    return salt, hash_password(password, salt)


def verify_password(password: str, salt: str, expected_hash: str) -> bool:
    """
    Verify a password against its stored hash and salt.

    Args:
        password (str): Plain text password to verify
        salt (str): Salt used for the original hash
        expected_hash (str): Stored hash to compare against

    Returns:
        bool: True if password matches the hash, False otherwise

    Example:
        >>> salt, stored_hash = encrypt("mypassword")
        >>> verify_password("mypassword", salt, stored_hash)
        True
        >>> verify_password("wrongpassword", salt, stored_hash)
        False
    """
    if not all(isinstance(x, str) for x in [password, salt, expected_hash]):
        logger.warning("Invalid input types for password verification")
        return False

    is_valid = hash_password(password, salt) == expected_hash

    if is_valid:
        logger.debug("Password verification succeeded")
    else:
        logger.debug("Password verification failed")

    return is_valid


def parse_salthash(salthash: str) -> Tuple[str, str]:
    """
    Split an externally supplied ``salt:hash`` pair.

    Both parts are adopted verbatim, without re-hashing.

    Raises:
        ValueError: unless the value splits into exactly two non-empty parts
    """
    values = salthash.split(SALTHASH_SEPARATOR)
    if len(values) != 2 or not all(values):
        raise ValueError("salthash must be in the form salt:hash")
    salt, password_hash = values
    return salt, password_hash


def generate_access_code(length: int = ACCESS_CODE_LENGTH) -> str:
    """
    Generate a random access code for phone sign-in.

    Each character is drawn uniformly, with replacement, from ``[A-Za-z0-9]``.

    Example:
        >>> code = generate_access_code()
        >>> len(code)
        6
    """
    code = "".join(secrets.choice(ACCESS_CODE_ALPHABET) for _ in range(length))
    logger.debug(f"Generated access code of length {length}")
    return code
