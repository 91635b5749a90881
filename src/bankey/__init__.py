__version__ = "0.0.1"

from bankey.domain.monetary.formatted_currency import FormattedCurrency
from bankey.formatting.currency_decomposer import CurrencyDecomposer, format_currency
from bankey.formatting.errors import InvalidAmount
from bankey.formatting.format_options import FormatOptions, SignPosition

__all__ = ["CurrencyDecomposer", "FormatOptions", "FormattedCurrency", "InvalidAmount", "SignPosition", "format_currency"]
