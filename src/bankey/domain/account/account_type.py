from __future__ import annotations

from enum import Enum


class AccountType(Enum):
    """Represents the kind of account shown in the account summary.

    Members:
        BANKING: Savings and chequing accounts.
        CREDIT_CARD: Credit card accounts.
        INVESTMENT: Investment accounts, whose balance is shown as "Value".
    """

    BANKING = "banking"
    CREDIT_CARD = "creditCard"
    INVESTMENT = "investment"

    @property
    def display_name(self) -> str:
        """Human readable name, e.g. "Credit Card"."""
        return self.name.replace("_", " ").title()

    @property
    def balance_label(self) -> str:
        """Caption shown above the balance."""
        if self is AccountType.INVESTMENT:
            return "Value"
        return "Current Balance"

    @classmethod
    def from_str(cls, value: str) -> AccountType:
        """Parse an account type from its value ("creditCard") or name ("CREDIT_CARD", "credit card").

        Raises:
            ValueError: If $value does not name an account type.
        """
        if not isinstance(value, str):
            raise TypeError(f"$value must be a string, but provided value is: {value!r}")

        normalized = value.strip()
        for member in cls:
            if normalized == member.value:
                return member

        key = normalized.upper().replace(" ", "_").replace("-", "_")
        if key in cls.__members__:
            return cls[key]

        raise ValueError(f"Unknown account type '{value}'. Available account types: {[m.value for m in cls]}")
