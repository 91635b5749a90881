from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from bankey.domain.account.account_type import AccountType
from bankey.domain.monetary.currency import Currency
from bankey.domain.monetary.currency_registry import USD
from bankey.formatting.currency_decomposer import CurrencyDecomposer
from bankey.formatting.format_options import FormatOptions
from bankey.utils.numeric_tools import as_decimal

if TYPE_CHECKING:
    from bankey.domain.monetary.formatted_currency import FormattedCurrency


@dataclass(frozen=True)
class AccountSummary:
    """One row of the account summary: account kind, name, and balance.

    Attributes:
        account_type: Kind of account.
        name: Account name, e.g. "Basic Savings".
        balance: Exact balance. Decimal-like inputs are converted to `Decimal`.
        currency: Currency of the balance (USD by default).
    """

    account_type: AccountType
    name: str
    balance: Decimal
    currency: Currency = field(default=USD)

    def __post_init__(self) -> None:
        if not isinstance(self.account_type, AccountType):
            raise TypeError(f"$account_type must be an AccountType instance, but provided value is: {self.account_type!r}")

        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{self.name}'")

        if not isinstance(self.currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {self.currency!r}")

        # Raise: $balance must be convertible to Decimal
        try:
            balance = as_decimal(self.balance)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot init `AccountSummary` because $balance ({self.balance!r}) cannot be converted to Decimal") from e

        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "balance", balance)

    @property
    def balance_label(self) -> str:
        return self.account_type.balance_label

    def formatted_balance(self, decomposer: CurrencyDecomposer | None = None) -> FormattedCurrency:
        """Return the balance split into display segments.

        Args:
            decomposer: Decomposer to use. When None, one is built from the
                symbol and precision of $currency.

        Raises:
            InvalidAmount: If $balance is not finite.
        """
        if decomposer is None:
            decomposer = CurrencyDecomposer(FormatOptions.for_currency(self.currency))
        return decomposer.format(self.balance)
