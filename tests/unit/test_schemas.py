"""Unit tests for request/response schemas."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from banking.models.account import AccountType
from banking.schemas.account import AccountCreateRequest
from banking.schemas.auth import ChangePinRequest, LoginRequest, SignupRequest
from banking.schemas.transaction import ConversionResponse, DepositRequest
from tests.helpers.factories import make_signup_payload


class TestSignupRequest:
    def test_valid(self):
        body = SignupRequest(**make_signup_payload(dni="12345678-z", full_name="  Jane Roe "))
        assert body.dni == "12345678Z"
        assert body.full_name == "Jane Roe"

    def test_camel_case_full_name(self):
        payload = make_signup_payload()
        payload["fullName"] = payload.pop("full_name")
        assert SignupRequest(**payload).full_name == "Jane Roe"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"dni": "12345678A"},
            {"dni": "1234"},
            {"email": "not-an-email"},
            {"full_name": "Jo"},
            {"full_name": "   "},
        ],
    )
    def test_invalid(self, overrides):
        with pytest.raises(ValidationError):
            SignupRequest(**make_signup_payload(**overrides))


def test_login_request_normalizes_dni():
    assert LoginRequest(dni="12345678z", pin="123456").dni == "12345678Z"


def test_change_pin_new_pin_optional():
    assert ChangePinRequest(old_pin="123456").new_pin is None


class TestAccountCreateRequest:
    def test_empty_values_fall_back_to_defaults(self):
        body = AccountCreateRequest(account_type="", currency="")
        assert body.account_type is AccountType.CHECKING
        assert body.currency == "USD"

    def test_currency_uppercased(self):
        assert AccountCreateRequest(currency="eur").currency == "EUR"

    @pytest.mark.parametrize("overrides", [{"currency": "EURO"}, {"account_type": "brokerage"}])
    def test_invalid(self, overrides):
        with pytest.raises(ValidationError):
            AccountCreateRequest(**overrides)


class TestDepositRequest:
    def test_valid(self):
        body = DepositRequest(account_number="0123456789", amount="12.34", currency="usd")
        assert body.amount == Decimal("12.34")
        assert body.currency == "USD"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"amount": "0"},
            {"amount": "-5"},
            {"amount": "1.234"},
            {"currency": "US"},
            {"account_number": ""},
            {"account_number": "01234567890"},
        ],
    )
    def test_invalid(self, overrides):
        data = {"account_number": "0123456789", "amount": "10", "currency": "USD"}
        data.update(overrides)
        with pytest.raises(ValidationError):
            DepositRequest(**data)


def test_conversion_response_uses_from_to_keys():
    body = ConversionResponse(
        source_currency="EUR",
        target_currency="USD",
        amount=Decimal("10"),
        rate=Decimal("1.1"),
        converted_amount=Decimal("11.00"),
    ).model_dump(by_alias=True)
    assert body["from"] == "EUR"
    assert body["to"] == "USD"
