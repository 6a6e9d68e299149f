"""Shapes of request bodies used by the two-factor flows."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class EmailVerifyTokenValuer(Protocol):
    """Body values holding an e-mail verification token."""

    token: str

    def validate(self) -> list[Exception]: ...


@runtime_checkable
class SMSValuer(Protocol):
    """Body values holding an SMS code or a recovery code."""

    code: str
    recovery_code: str

    def validate(self) -> list[Exception]: ...


@runtime_checkable
class SMSPhoneNumberValuer(Protocol):
    """Body values holding a phone number."""

    phone_number: str

    def validate(self) -> list[Exception]: ...


@runtime_checkable
class TOTPCodeValuer(Protocol):
    """Body values holding a TOTP code or a recovery code."""

    code: str
    recovery_code: str

    def validate(self) -> list[Exception]: ...


_T = TypeVar("_T")


def _upgrade(values: Any, protocol: type[_T]) -> _T:
    if isinstance(values, protocol):
        return values
    raise TypeError(
        f"bodyreader returned a type that could not be upgraded to "
        f"{protocol.__name__}: {type(values).__name__}"
    )


def must_have_email_verify_token_values(values: Any) -> EmailVerifyTokenValuer:
    """Return ``values`` if it holds a token, else raise TypeError."""
    return _upgrade(values, EmailVerifyTokenValuer)


def must_have_sms_values(values: Any) -> SMSValuer:
    """Return ``values`` if it holds SMS codes, else raise TypeError."""
    return _upgrade(values, SMSValuer)


def must_have_sms_phone_number_value(values: Any) -> SMSPhoneNumberValuer:
    """Return ``values`` if it holds a phone number, else raise TypeError."""
    return _upgrade(values, SMSPhoneNumberValuer)


def must_have_totp_code_values(values: Any) -> TOTPCodeValuer:
    """Return ``values`` if it holds TOTP codes, else raise TypeError."""
    return _upgrade(values, TOTPCodeValuer)