from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FormattedCurrency:
    """Display-ready segments of one monetary amount.

    A presentation layer styles each segment on its own, typically a small
    raised symbol, a large integer part, and small raised cents:

        >>> formatted = FormattedCurrency("$", "929,466", "23")
        >>> formatted.segments
        ('$', '929,466', '23')
        >>> str(formatted)
        '$929,466.23'

    Attributes:
        symbol_text: Currency symbol. Carries the minus sign only when the sign
            is configured to go before the symbol.
        integer_text: Grouped whole-number part (e.g. "1,000,000"). Carries the
            minus sign for negative amounts by default.
        fraction_text: Rounded fractional digits, zero padded (e.g. "05").
            Empty when formatting with zero decimal places.
        decimal_separator: Placed between $integer_text and $fraction_text when
            the segments are joined. Not one of the styled segments.
    """

    symbol_text: str
    integer_text: str
    fraction_text: str
    decimal_separator: str = "."

    @property
    def segments(self) -> tuple[str, str, str]:
        """Return ($symbol_text, $integer_text, $fraction_text) in display order."""
        return self.symbol_text, self.integer_text, self.fraction_text

    def to_text(self, decimal_separator: str | None = None) -> str:
        """Join all segments into one conventional currency string.

        Uses $decimal_separator when given, otherwise the separator stored on
        this instance. The separator is omitted when there are no fraction digits.
        """
        separator = self.decimal_separator if decimal_separator is None else decimal_separator
        if not self.fraction_text:
            return f"{self.symbol_text}{self.integer_text}"
        return f"{self.symbol_text}{self.integer_text}{separator}{self.fraction_text}"

    def __str__(self) -> str:
        return self.to_text()
