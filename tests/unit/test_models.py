"""Unit tests for ORM models and their enums."""

from banking.models import Account, Transaction, User
from banking.models.account import AccountType
from banking.models.transaction import TransactionType


def test_account_types():
    assert {t.value for t in AccountType} == {"checking", "savings"}


def test_transaction_types():
    assert TransactionType.DEPOSIT == "deposit"


def test_table_names():
    assert User.__tablename__ == "users"
    assert Account.__tablename__ == "accounts"
    assert Transaction.__tablename__ == "transactions"


def test_dni_is_unique():
    assert User.__table__.c.dni.unique


def test_account_number_is_unique():
    assert Account.__table__.c.account_number.unique


def test_balance_cannot_go_negative():
    constraints = {c.name for c in Account.__table__.constraints}
    assert "ck_account_balance_non_negative" in constraints
