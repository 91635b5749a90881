from __future__ import annotations

from decimal import Decimal

from bankey.domain.account.account_summary import AccountSummary
from bankey.domain.account.account_type import AccountType


def demo_accounts() -> list[AccountSummary]:
    """Return the mock accounts shown by the demo account summary.

    Two banking accounts, two credit cards, and two investment accounts, in display order.
    """
    return [
        AccountSummary(AccountType.BANKING, "Basic Savings", Decimal("929466.23")),
        AccountSummary(AccountType.BANKING, "No-Fee All-In Chequing", Decimal("17562.44")),
        AccountSummary(AccountType.CREDIT_CARD, "Visa Avion Card", Decimal("412.83")),
        AccountSummary(AccountType.CREDIT_CARD, "Student Mastercard", Decimal("50.83")),
        AccountSummary(AccountType.INVESTMENT, "Tax-Fee Saver", Decimal("2000.00")),
        AccountSummary(AccountType.INVESTMENT, "Growth Fund", Decimal("15000.00")),
    ]
