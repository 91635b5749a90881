from __future__ import annotations


class InvalidAmount(ValueError):
    """Raised when an amount is not a finite decimal (NaN, infinity, or unparsable)."""

    def __init__(self, amount: object, reason: str | None = None):
        self.amount = amount
        self.reason = reason

        message = f"Cannot format $amount ({amount!r}) because it is not a finite decimal"
        if reason:
            message += f" - {reason}"

        super().__init__(message)
