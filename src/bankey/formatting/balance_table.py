from __future__ import annotations

# Bulk helpers for account summaries kept in pandas DataFrames.
# Balances are read from their string form so CSV input stays exact.

import logging
from typing import Optional

import pandas as pd

from bankey.domain.account.account_summary import AccountSummary
from bankey.domain.account.account_type import AccountType
from bankey.domain.monetary.currency import Currency
from bankey.domain.monetary.currency_registry import USD
from bankey.formatting.currency_decomposer import CurrencyDecomposer

logger = logging.getLogger(__name__)

REQUIRED_ACCOUNT_COLUMNS = ("account_type", "name", "balance")
SEGMENT_COLUMNS = ("symbol_text", "integer_text", "fraction_text")


def accounts_from_dataframe(df: pd.DataFrame) -> list[AccountSummary]:
    """Build `AccountSummary`(s) from a DataFrame, one per row.

    Input DataFrame has to meet these requirements:
    - Columns: account_type, name, balance. Optional: currency (code like "USD").
    - $balance values should be strings or `Decimal`(s) to stay exact; load CSV
      files with `pd.read_csv(path, dtype=str)`. Floats are accepted and
      converted via their string form.
    - Missing $currency (column or cell) falls back to USD.

    Raises:
        ValueError: If $df is not a DataFrame, a column is missing, or a row is invalid.
    """
    # Check: $df must be a pandas DataFrame
    if not isinstance(df, pd.DataFrame):
        raise ValueError(f"Expected a pandas DataFrame, but received {type(df).__name__}. Please provide your accounts as a pandas DataFrame.")

    # Check: required columns present (currency is optional)
    missing = [c for c in REQUIRED_ACCOUNT_COLUMNS if c not in df.columns]
    if missing:
        missing_cols = ", ".join(sorted(missing))
        raise ValueError(f"The provided DataFrame is missing required columns: {missing_cols}. Please ensure your DataFrame contains these columns: account_type, name, balance. The 'currency' column is optional.")

    has_currency = "currency" in df.columns
    accounts: list[AccountSummary] = []
    for row_number, row in enumerate(df.itertuples(index=False)):
        currency = USD
        if has_currency and not pd.isna(row.currency):
            currency = Currency.from_str(row.currency)

        try:
            account = AccountSummary(
                account_type=AccountType.from_str(row.account_type),
                name=row.name,
                balance=row.balance,
                currency=currency,
            )
        except (ValueError, TypeError) as e:
            raise ValueError(f"Cannot build AccountSummary from DataFrame row #{row_number}: {e}") from e
        accounts.append(account)

    logger.debug(f"Built {len(accounts)} AccountSummary(s) from DataFrame")
    return accounts


def format_balance_column(
    df: pd.DataFrame,
    column: str = "balance",
    decomposer: Optional[CurrencyDecomposer] = None,
) -> pd.DataFrame:
    """Return a copy of $df with `symbol_text`, `integer_text`, `fraction_text` columns added.

    Each value in $column is decomposed with $decomposer (default convention
    when None). The input DataFrame is not mutated.

    Raises:
        ValueError: If $column is missing.
        InvalidAmount: If a value in $column is not a finite decimal.
    """
    # Check: $column must exist in $df
    if column not in df.columns:
        raise ValueError(f"Cannot call `format_balance_column` because $column ('{column}') is not in DataFrame columns: {list(df.columns)}")

    decomposer = decomposer if decomposer is not None else CurrencyDecomposer()

    segments = [decomposer.format(value).segments for value in df[column]]
    result = df.copy()
    for position, name in enumerate(SEGMENT_COLUMNS):
        result[name] = [segment[position] for segment in segments]

    logger.debug(f"Formatted {len(result)} value(s) of column '{column}'")
    return result


def accounts_to_dataframe(accounts: list[AccountSummary], decomposer: Optional[CurrencyDecomposer] = None) -> pd.DataFrame:
    """Flatten $accounts into a display table with one row per account.

    Columns: account_type, name, balance_label, balance, symbol_text,
    integer_text, fraction_text. Each balance uses $decomposer when given,
    otherwise the options of its own currency.
    """
    rows = []
    for account in accounts:
        formatted = account.formatted_balance(decomposer)
        rows.append(
            {
                "account_type": account.account_type.display_name,
                "name": account.name,
                "balance_label": account.balance_label,
                "balance": account.balance,
                "symbol_text": formatted.symbol_text,
                "integer_text": formatted.integer_text,
                "fraction_text": formatted.fraction_text,
            }
        )

    columns = ["account_type", "name", "balance_label", "balance", *SEGMENT_COLUMNS]
    return pd.DataFrame(rows, columns=columns)
