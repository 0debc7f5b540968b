"""Unit tests for auth/tokens.py: token issuance and validation."""

from datetime import timedelta

import pytest
from jose import jwt

from banking.auth.tokens import (
    Claims,
    ExpiredTokenError,
    InvalidTokenError,
    TokenError,
    TokenIssuer,
    TokenType,
)
from banking.config import get_settings
from tests.helpers.clock import FakeClock

SECRET = "unit-test-secret-0123456789abcdef0123"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def issuer(clock) -> TokenIssuer:
    return TokenIssuer(SECRET, clock=clock)


def _raw_claims(token: str) -> dict:
    return jwt.decode(token, SECRET, algorithms=["HS256"], options={"verify_exp": False})


class TestIssue:
    def test_access_token_claims(self, issuer, clock):
        token = issuer.issue_access_token("user-1")
        payload = _raw_claims(token)

        assert payload["sub"] == "user-1"
        assert payload["type"] == "access"
        assert payload["exp"] - payload["iat"] == 15 * 60
        assert payload["iat"] == int(clock.now.timestamp())
        assert payload["jti"]

    def test_refresh_token_lives_seven_days(self, issuer):
        payload = _raw_claims(issuer.issue_refresh_token("user-1"))
        assert payload["type"] == "refresh"
        assert payload["exp"] - payload["iat"] == 7 * 24 * 3600

    def test_pair_tokens_are_distinct(self, issuer):
        pair = issuer.issue_pair("user-1")
        assert pair.access_token
        assert pair.refresh_token
        assert pair.access_token != pair.refresh_token
        assert pair.expires_in == 900

    def test_same_second_tokens_differ(self, issuer):
        assert issuer.issue_access_token("u") != issuer.issue_access_token("u")

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError):
            TokenIssuer("")

    def test_from_settings_uses_configured_lifetimes(self):
        settings = get_settings()
        issuer = TokenIssuer.from_settings(settings)
        assert issuer.access_ttl == timedelta(minutes=settings.jwt_access_token_expire_minutes)
        assert issuer.refresh_ttl == timedelta(minutes=settings.jwt_refresh_token_expire_minutes)


class TestValidate:
    def test_fresh_access_token_validates(self, issuer, clock):
        claims = issuer.validate(issuer.issue_access_token("user-7"))
        assert isinstance(claims, Claims)
        assert claims.user_id == "user-7"
        assert claims.token_type is TokenType.ACCESS
        assert claims.expires_at == clock.now + timedelta(minutes=15)

    def test_access_token_expires(self, issuer, clock):
        token = issuer.issue_access_token("user-7")
        clock.advance(minutes=14, seconds=59)
        issuer.validate(token)

        clock.advance(seconds=2)
        with pytest.raises(ExpiredTokenError):
            issuer.validate(token)

    def test_expired_exactly_at_exp(self, issuer, clock):
        token = issuer.issue_access_token("user-7")
        clock.advance(minutes=15)
        with pytest.raises(ExpiredTokenError):
            issuer.validate(token)

    def test_refresh_token_outlives_access_token(self, issuer, clock):
        access = issuer.issue_access_token("u")
        refresh = issuer.issue_refresh_token("u")
        clock.advance(days=1)

        with pytest.raises(ExpiredTokenError):
            issuer.validate(access)
        assert issuer.validate(refresh).token_type is TokenType.REFRESH

    def test_tampered_token_rejected(self, issuer):
        token = issuer.issue_access_token("user-x")
        tampered = token[:-5] + ("AAAAA" if not token.endswith("AAAAA") else "BBBBB")
        with pytest.raises(InvalidTokenError):
            issuer.validate(tampered)

    def test_garbage_rejected(self, issuer):
        with pytest.raises(InvalidTokenError):
            issuer.validate("not.a.valid.jwt")

    def test_wrong_secret_rejected(self, issuer, clock):
        other = TokenIssuer("a-completely-different-secret-value!!", clock=clock)
        with pytest.raises(InvalidTokenError):
            issuer.validate(other.issue_access_token("user-y"))

    def test_refresh_token_rejected_where_access_expected(self, issuer):
        refresh = issuer.issue_refresh_token("u")
        with pytest.raises(InvalidTokenError):
            issuer.validate(refresh, expected_type=TokenType.ACCESS)

    def test_access_token_rejected_where_refresh_expected(self, issuer):
        access = issuer.issue_access_token("u")
        with pytest.raises(InvalidTokenError):
            issuer.validate(access, expected_type=TokenType.REFRESH)

    def test_missing_subject_rejected(self, issuer, clock):
        exp = int((clock.now + timedelta(hours=1)).timestamp())
        token = jwt.encode({"type": "access", "exp": exp}, SECRET, algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            issuer.validate(token)

    def test_missing_expiry_rejected(self, issuer):
        token = jwt.encode({"sub": "u", "type": "access"}, SECRET, algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            issuer.validate(token)

    def test_unknown_type_rejected(self, issuer, clock):
        exp = int((clock.now + timedelta(hours=1)).timestamp())
        token = jwt.encode({"sub": "u", "type": "admin", "exp": exp}, SECRET, algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            issuer.validate(token)

    def test_both_failures_share_a_base_class(self):
        assert issubclass(InvalidTokenError, TokenError)
        assert issubclass(ExpiredTokenError, TokenError)
