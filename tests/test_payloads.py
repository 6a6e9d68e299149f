from dataclasses import dataclass

import pytest

from authkeep.twofactor.payloads import (
    must_have_email_verify_token_values,
    must_have_sms_phone_number_value,
    must_have_sms_values,
    must_have_totp_code_values,
)


@dataclass
class Values:
    token: str = ""
    code: str = ""
    recovery_code: str = ""
    phone_number: str = ""

    def validate(self):
        return []


@dataclass
class TokenOnly:
    token: str = ""

    def validate(self):
        return []


@dataclass
class NoValidate:
    token: str = ""
    code: str = ""
    recovery_code: str = ""
    phone_number: str = ""


def test_email_verify_token_values_upgrade():
    values = Values(token="token")
    assert must_have_email_verify_token_values(values) is values


def test_sms_values_upgrade():
    values = Values(code="code")
    upgraded = must_have_sms_values(values)
    assert upgraded is values
    assert upgraded.code == "code"


def test_sms_phone_number_upgrade():
    values = Values(phone_number="number")
    assert must_have_sms_phone_number_value(values).phone_number == "number"


def test_totp_code_values_upgrade():
    values = Values(recovery_code="recovery")
    assert must_have_totp_code_values(values).recovery_code == "recovery"


def test_token_only_is_not_sms_values():
    with pytest.raises(TypeError, match="SMSValuer"):
        must_have_sms_values(TokenOnly())


def test_token_only_is_not_totp_values():
    with pytest.raises(TypeError, match="TOTPCodeValuer"):
        must_have_totp_code_values(TokenOnly())


def test_token_only_lacks_phone_number():
    with pytest.raises(TypeError, match="SMSPhoneNumberValuer"):
        must_have_sms_phone_number_value(TokenOnly())


def test_token_only_has_token():
    values = TokenOnly(token="token")
    assert must_have_email_verify_token_values(values) is values


def test_without_validate_is_rejected():
    with pytest.raises(TypeError, match="EmailVerifyTokenValuer"):
        must_have_email_verify_token_values(NoValidate())


def test_plain_dict_is_rejected():
    with pytest.raises(TypeError, match="dict"):
        must_have_sms_values({"code": "code", "recovery_code": ""})