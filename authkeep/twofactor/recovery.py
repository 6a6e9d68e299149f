"""Recovery codes for two-factor authentication."""

from __future__ import annotations

import secrets
from typing import Optional, Sequence

import bcrypt

PAGE_RECOVERY_2FA = "recovery2fa"
PAGE_VERIFY_2FA = "twofactor_verify"
PAGE_VERIFY_END_2FA = "twofactor_verify_end"

EMAIL_VERIFY_HTML = "twofactor_verify_email_html"
EMAIL_VERIFY_TXT = "twofactor_verify_email_txt"

FORM_VALUE_TOKEN = "token"

DATA_RECOVERY_CODE = "recovery_code"
DATA_RECOVERY_CODES = "recovery_codes"
DATA_NUM_RECOVERY_CODES = "n_recovery_codes"
DATA_VERIFY_EMAIL = "email"
DATA_VERIFY_URL = "url"

ALPHABET = "abcdefghijkmnopqrstuvwxyz0123456789"
RECOVERY_CODE_LENGTH = 10
RECOVERY_CODE_COUNT = 10
VERIFY_EMAIL_TOKEN_SIZE = 16
BCRYPT_COST = 10


def generate_recovery_codes() -> list[str]:
    """Create ten codes of the form ``abd34-1b24d`` drawn from ALPHABET."""
    half = RECOVERY_CODE_LENGTH // 2
    codes = []
    for _ in range(RECOVERY_CODE_COUNT):
        chars = [ALPHABET[byte % len(ALPHABET)] for byte in secrets.token_bytes(RECOVERY_CODE_LENGTH)]
        codes.append("".join(chars[:half]) + "-" + "".join(chars[half:]))
    return codes


def bcrypt_recovery_codes(codes: Sequence[str]) -> list[str]:
    """Return a bcrypt hash of each code, in order."""
    return [
        bcrypt.hashpw(code.encode(), bcrypt.gensalt(rounds=BCRYPT_COST, prefix=b"2a")).decode("ascii")
        for code in codes
    ]


def _matches(hashed: str, code: bytes) -> bool:
    try:
        return bcrypt.checkpw(code, hashed.encode())
    except ValueError:
        return False


def use_recovery_code(codes: Sequence[str], input_code: str) -> Optional[list[str]]:
    """Remove the hash matching ``input_code``.

    Returns the remaining hashes in their original order, or None if no
    hash matched.
    """
    code = input_code.encode()
    for index, hashed in enumerate(codes):
        if _matches(hashed, code):
            return [*codes[:index], *codes[index + 1:]]
    return None


def encode_recovery_codes(codes: Sequence[str]) -> str:
    """Join codes with commas."""
    return ",".join(codes)


def decode_recovery_codes(codes: str) -> list[str]:
    """Split a comma separated string of codes."""
    return codes.split(",")


def count_recovery_codes(codes: str) -> int:
    """Number of codes in a comma separated string; zero when empty."""
    if not codes:
        return 0
    return codes.count(",") + 1