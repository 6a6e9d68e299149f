"""One time passwords stored as salted-free SHA-512 digests in a CSV string."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import secrets
from typing import Optional, Sequence

OTP_SIZE = 16
MAX_OTPS = 5

PAGE_LOGIN = "otplogin"
PAGE_ADD = "otpadd"
PAGE_CLEAR = "otpclear"

DATA_NUMBER_OTPS = "otp_count"
DATA_OTP = "otp"


class OTPLimitError(Exception):
    """Raised when a user already holds the maximum number of passwords."""


def split_otps(otps: str) -> list[str]:
    """Split a comma separated string of hashed passwords."""
    if not otps:
        return []
    return otps.split(",")


def join_otps(otps: Sequence[str]) -> str:
    """Join hashed passwords into a comma separated string."""
    return ",".join(otps)


def hash_otp(otp: str) -> str:
    """Return the standard base64 encoding of the SHA-512 digest of ``otp``."""
    return base64.b64encode(hashlib.sha512(otp.encode()).digest()).decode("ascii")


def generate_otp() -> tuple[str, str]:
    """Create a new password and its hash.

    The password is four groups of eight hex digits separated by dashes.
    """
    secret = secrets.token_bytes(OTP_SIZE)
    otp = "-".join(secret[start:start + 4].hex() for start in range(0, OTP_SIZE, 4))
    return otp, hash_otp(otp)


def match_otp(passwords: Sequence[str], password: str) -> Optional[int]:
    """Return the index of the stored hash matching ``password``, or None.

    Raises ValueError if a stored hash is not valid base64.
    """
    input_sum = hashlib.sha512(password.encode()).digest()
    for index, stored in enumerate(passwords):
        try:
            db_sum = base64.b64decode(stored, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValueError("otp in database was not valid base64") from exc
        if hmac.compare_digest(input_sum, db_sum):
            return index
    return None


def count_otps(encoded: str) -> int:
    """Number of passwords in a comma separated string."""
    return len(split_otps(encoded))


def add_otp(encoded: str) -> tuple[str, str]:
    """Generate a password and add its hash to ``encoded``.

    Returns the new password and the updated string. Raises OTPLimitError
    when the limit has been reached.
    """
    current = split_otps(encoded)
    if len(current) >= MAX_OTPS:
        raise OTPLimitError(f"you cannot have more than {MAX_OTPS} one time passwords")
    otp, digest = generate_otp()
    current.append(digest)
    return otp, join_otps(current)


def consume_otp(encoded: str, password: str) -> Optional[str]:
    """Remove the hash matching ``password`` from ``encoded``.

    Returns the updated string, or None if nothing matched. The last hash
    takes the place of the one removed.
    """
    passwords = split_otps(encoded)
    index = match_otp(passwords, password)
    if index is None:
        return None
    passwords[index] = passwords[-1]
    passwords.pop()
    return join_otps(passwords)