from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation, ROUND_DOWN, ROUND_HALF_UP, localcontext

from bankey.domain.monetary.formatted_currency import FormattedCurrency
from bankey.formatting.errors import InvalidAmount
from bankey.formatting.format_options import FormatOptions, SignPosition
from bankey.utils.numeric_tools import DecimalLike, as_decimal, decimal_digit_count

logger = logging.getLogger(__name__)


class CurrencyDecomposer:
    """Split monetary amounts into symbol, grouped integer, and fraction segments.

    The split is done on `Decimal` directly, so values like `1.995` are never
    misrounded by a detour through binary floating point. Rounding is
    half-away-from-zero, and a fraction that rounds up to a whole unit carries
    into the integer part (`0.999` -> "1" and "00").

    Example:
        >>> CurrencyDecomposer().format(Decimal("929466.23")).segments
        ('$', '929,466', '23')

    Instances hold only immutable `FormatOptions` and can be shared between threads.
    """

    __slots__ = ("_options",)

    def __init__(self, options: FormatOptions | None = None) -> None:
        # Check: $options must be FormatOptions when provided
        if options is not None and not isinstance(options, FormatOptions):
            raise TypeError(f"$options must be a FormatOptions instance, but provided value is: {options!r}")

        self._options = options if options is not None else FormatOptions()

    @property
    def options(self) -> FormatOptions:
        return self._options

    def format(self, amount: DecimalLike) -> FormattedCurrency:
        """Decompose $amount into display segments.

        Args:
            amount: Decimal-like amount of any sign and magnitude.

        Returns:
            FormattedCurrency: Symbol, grouped integer, and zero-padded fraction segments.

        Raises:
            InvalidAmount: If $amount is not a finite decimal.
        """
        value = self._to_finite_decimal(amount)
        places = self._options.decimal_places

        is_negative = value.is_signed()
        magnitude = value.copy_abs()

        whole, units = self._split(magnitude, places)

        # Negative amounts that round to zero are shown unsigned
        show_minus = is_negative and (whole != 0 or units != 0)

        integer_digits = self._group_digits(whole)
        fraction_text = str(units).zfill(places) if places > 0 else ""

        symbol_text = self._options.currency_symbol
        integer_text = integer_digits
        if show_minus:
            if self._options.sign_position == SignPosition.BEFORE_SYMBOL:
                symbol_text = f"-{symbol_text}"
            else:
                integer_text = f"-{integer_text}"

        return FormattedCurrency(
            symbol_text=symbol_text,
            integer_text=integer_text,
            fraction_text=fraction_text,
            decimal_separator=self._options.decimal_separator,
        )

    def __call__(self, amount: DecimalLike) -> FormattedCurrency:
        return self.format(amount)

    # region Internals

    @staticmethod
    def _to_finite_decimal(amount: DecimalLike) -> Decimal:
        # Raise: $amount must be convertible to Decimal
        try:
            value = as_decimal(amount)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise InvalidAmount(amount, "cannot be converted to Decimal") from e

        # Raise: NaN and infinities have no dollars and cents
        if not value.is_finite():
            raise InvalidAmount(amount)

        return value

    @staticmethod
    def _split(magnitude: Decimal, places: int) -> tuple[Decimal, int]:
        """Return (whole units, rounded fraction scaled to $places digits) of non-negative $magnitude.

        The whole part stays a `Decimal`, so magnitudes beyond the int-to-str digit limit still format.
        """
        with localcontext() as ctx:
            # Precision large enough that subtraction, scaling, and carry below stay exact
            ctx.prec = max(ctx.prec, decimal_digit_count(magnitude) + places + 1)
            whole = magnitude.to_integral_value(rounding=ROUND_DOWN)
            fraction = magnitude - whole
            units = int(fraction.scaleb(places).to_integral_value(rounding=ROUND_HALF_UP))

            # Carry: rounded fraction reached a full unit (e.g. 0.999 -> 100 cents)
            if units == 10**places:
                whole += 1
                units = 0
                logger.debug(f"Rounding of $magnitude ({magnitude}) carried into the integer part")
        return whole, units

    def _group_digits(self, whole: Decimal) -> str:
        # Decimal formatting always groups by 3 with ","; swap in the configured separator
        return format(whole, ",f").replace(",", self._options.grouping_separator)

    # endregion

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._options!r})"


_DEFAULT_DECOMPOSER = CurrencyDecomposer()


def format_currency(amount: DecimalLike, options: FormatOptions | None = None) -> FormattedCurrency:
    """Decompose $amount with $options (default convention: "$", ",", 2 decimal places).

    Raises:
        InvalidAmount: If $amount is not a finite decimal.
    """
    decomposer = _DEFAULT_DECOMPOSER if options is None else CurrencyDecomposer(options)
    return decomposer.format(amount)
