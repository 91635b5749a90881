from __future__ import annotations

from decimal import Decimal

import pytest

from bankey.domain.account.account_summary import AccountSummary
from bankey.domain.account.account_type import AccountType
from bankey.domain.monetary.currency_registry import JPY, USD
from bankey.formatting.currency_decomposer import CurrencyDecomposer
from bankey.formatting.errors import InvalidAmount
from bankey.formatting.format_options import FormatOptions, SignPosition


def test_account_type_labels() -> None:
    assert AccountType.BANKING.display_name == "Banking"
    assert AccountType.CREDIT_CARD.display_name == "Credit Card"
    assert AccountType.INVESTMENT.display_name == "Investment"

    assert AccountType.BANKING.balance_label == "Current Balance"
    assert AccountType.CREDIT_CARD.balance_label == "Current Balance"
    assert AccountType.INVESTMENT.balance_label == "Value"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("banking", AccountType.BANKING),
        ("creditCard", AccountType.CREDIT_CARD),
        ("CREDIT_CARD", AccountType.CREDIT_CARD),
        ("credit card", AccountType.CREDIT_CARD),
        ("Investment", AccountType.INVESTMENT),
    ],
)
def test_account_type_from_str(text: str, expected: AccountType) -> None:
    assert AccountType.from_str(text) is expected


def test_account_type_from_str_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown account type"):
        AccountType.from_str("mortgage")


def test_balance_is_converted_to_decimal() -> None:
    account = AccountSummary(AccountType.BANKING, "Basic Savings", "929466.23")
    assert account.balance == Decimal("929466.23")
    assert account.currency == USD
    assert account.balance_label == "Current Balance"


def test_invalid_account_summary_raises() -> None:
    with pytest.raises(ValueError, match="balance"):
        AccountSummary(AccountType.BANKING, "Basic Savings", "lots")
    with pytest.raises(ValueError, match="name"):
        AccountSummary(AccountType.BANKING, "  ", Decimal("1"))
    with pytest.raises(TypeError, match="account_type"):
        AccountSummary("banking", "Basic Savings", Decimal("1"))


def test_formatted_balance_uses_currency_by_default() -> None:
    account = AccountSummary(AccountType.INVESTMENT, "Nikkei Fund", Decimal("1234567.5"), currency=JPY)
    assert account.formatted_balance().segments == ("¥", "1,234,568", "")


def test_formatted_balance_with_explicit_decomposer() -> None:
    account = AccountSummary(AccountType.CREDIT_CARD, "Visa Avion Card", Decimal("-412.83"))
    decomposer = CurrencyDecomposer(FormatOptions(sign_position=SignPosition.BEFORE_SYMBOL))
    assert account.formatted_balance(decomposer).segments == ("-$", "412", "83")


def test_formatted_balance_of_nan_raises() -> None:
    account = AccountSummary(AccountType.BANKING, "Broken", Decimal("NaN"))
    with pytest.raises(InvalidAmount):
        account.formatted_balance()
