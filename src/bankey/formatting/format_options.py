from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from enum import Enum
from typing import ClassVar, TYPE_CHECKING

from dotenv import dotenv_values

if TYPE_CHECKING:
    from bankey.domain.monetary.currency import Currency

logger = logging.getLogger(__name__)


class SignPosition(Enum):
    """Where the minus sign of a negative amount is placed.

    Members:
        AFTER_SYMBOL: Minus starts the integer segment, e.g. "$" "-1,234" "56".
        BEFORE_SYMBOL: Minus starts the symbol segment, e.g. "-$" "1,234" "56".
    """

    AFTER_SYMBOL = "AFTER_SYMBOL"
    BEFORE_SYMBOL = "BEFORE_SYMBOL"


@dataclass(frozen=True)
class FormatOptions:
    """Fixed formatting convention used by `CurrencyDecomposer`.

    Nothing here is read from the host locale, so the same options always
    produce the same output.

    Attributes:
        grouping_separator: Inserted every 3 integer digits from the right. Empty disables grouping.
        decimal_places: Number of fraction digits (0-18).
        currency_symbol: Text of the symbol segment.
        decimal_separator: Used only when segments are joined into one string.
        sign_position: Placement of the minus sign for negative amounts.
    """

    grouping_separator: str = ","
    decimal_places: int = 2
    currency_symbol: str = "$"
    decimal_separator: str = "."
    sign_position: SignPosition = SignPosition.AFTER_SYMBOL

    ENV_PREFIX: ClassVar[str] = "BANKEY_"

    def __post_init__(self) -> None:
        # Check: separators and symbol are strings without digits, otherwise output cannot be read back
        for field_name in ("grouping_separator", "currency_symbol", "decimal_separator"):
            value = getattr(self, field_name)
            if not isinstance(value, str):
                raise TypeError(f"${field_name} must be a string, but provided value is: {value!r}")
            if any(ch.isdigit() for ch in value):
                raise ValueError(f"${field_name} cannot contain digits, but provided value is: '{value}'")

        if not self.decimal_separator:
            raise ValueError("$decimal_separator cannot be empty")

        if self.decimal_separator == self.grouping_separator:
            raise ValueError(f"$decimal_separator and $grouping_separator must differ, but both are: '{self.decimal_separator}'")

        if not isinstance(self.decimal_places, int) or isinstance(self.decimal_places, bool):
            raise TypeError(f"$decimal_places must be an int, but provided value is: {self.decimal_places!r}")

        if self.decimal_places < 0 or self.decimal_places > 18:
            raise ValueError(f"$decimal_places must be between 0 and 18, but provided value is: {self.decimal_places}")

        if not isinstance(self.sign_position, SignPosition):
            raise TypeError(f"$sign_position must be a SignPosition instance, but provided value is: {self.sign_position!r}")

    @classmethod
    def for_currency(cls, currency: Currency, **overrides) -> FormatOptions:
        """Build options that take symbol and decimal places from $currency.

        Args:
            currency: Currency providing $currency_symbol and $decimal_places.
            **overrides: Any other `FormatOptions` field.

        Returns:
            FormatOptions: New options instance.
        """
        options = cls(currency_symbol=currency.symbol, decimal_places=currency.precision)
        return replace(options, **overrides) if overrides else options

    @classmethod
    def from_env(cls, env_file: str | os.PathLike | None = None, prefix: str = ENV_PREFIX) -> FormatOptions:
        """Load options from environment variables, optionally seeded from a `.env` file.

        Recognized keys (with default $prefix): BANKEY_GROUPING_SEPARATOR,
        BANKEY_DECIMAL_PLACES, BANKEY_CURRENCY_SYMBOL, BANKEY_DECIMAL_SEPARATOR,
        BANKEY_SIGN_POSITION. Process environment wins over the file. The file
        is parsed without touching `os.environ`. Missing keys keep defaults.

        Raises:
            ValueError: If a value cannot be parsed.
        """
        values: dict[str, str | None] = {}
        if env_file is not None:
            values.update(dotenv_values(env_file))
        values.update(os.environ)

        kwargs: dict[str, object] = {}
        for field_name in ("grouping_separator", "currency_symbol", "decimal_separator"):
            raw = values.get(f"{prefix}{field_name.upper()}")
            if raw is not None:
                kwargs[field_name] = raw

        raw_places = values.get(f"{prefix}DECIMAL_PLACES")
        if raw_places is not None:
            try:
                kwargs["decimal_places"] = int(raw_places)
            except ValueError as e:
                raise ValueError(f"Cannot call `from_env` because ${prefix}DECIMAL_PLACES ('{raw_places}') is not an integer") from e

        raw_sign = values.get(f"{prefix}SIGN_POSITION")
        if raw_sign is not None:
            try:
                kwargs["sign_position"] = SignPosition[raw_sign.strip().upper()]
            except KeyError as e:
                allowed = [p.name for p in SignPosition]
                raise ValueError(f"Cannot call `from_env` because ${prefix}SIGN_POSITION ('{raw_sign}') is not one of {allowed}") from e

        options = cls(**kwargs)
        logger.info(f"Loaded FormatOptions from environment (env_file={env_file}): {options}")
        return options
