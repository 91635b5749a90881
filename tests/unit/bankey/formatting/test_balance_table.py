from __future__ import annotations

from decimal import Decimal

import pandas as pd
import pytest

from bankey.domain.account.account_type import AccountType
from bankey.domain.monetary.currency_registry import CAD, USD
from bankey.formatting.balance_table import accounts_from_dataframe, accounts_to_dataframe, format_balance_column
from bankey.formatting.currency_decomposer import CurrencyDecomposer
from bankey.formatting.errors import InvalidAmount
from bankey.formatting.format_options import FormatOptions


def test_accounts_from_dataframe_builds_summaries() -> None:
    df = pd.DataFrame(
        {
            "account_type": ["banking", "creditCard"],
            "name": ["Basic Savings", "Visa Avion Card"],
            "balance": ["929466.23", "412.83"],
            "currency": ["CAD", None],
        }
    )

    accounts = accounts_from_dataframe(df)

    assert [a.account_type for a in accounts] == [AccountType.BANKING, AccountType.CREDIT_CARD]
    assert accounts[0].balance == Decimal("929466.23")
    assert accounts[0].currency == CAD
    assert accounts[1].currency == USD


def test_accounts_from_dataframe_missing_columns() -> None:
    df = pd.DataFrame({"name": ["Basic Savings"]})
    with pytest.raises(ValueError, match="account_type, balance"):
        accounts_from_dataframe(df)


def test_accounts_from_dataframe_rejects_non_dataframe() -> None:
    with pytest.raises(ValueError, match="pandas DataFrame"):
        accounts_from_dataframe([{"name": "Basic Savings"}])


def test_accounts_from_dataframe_reports_bad_row() -> None:
    df = pd.DataFrame({"account_type": ["banking", "mortgage"], "name": ["A", "B"], "balance": ["1", "2"]})
    with pytest.raises(ValueError, match="row #1"):
        accounts_from_dataframe(df)


def test_format_balance_column_adds_segments_without_mutating_input() -> None:
    df = pd.DataFrame({"balance": [Decimal("929466.23"), Decimal("0.999"), Decimal("-5")]})

    result = format_balance_column(df)

    assert list(df.columns) == ["balance"]
    assert list(result["integer_text"]) == ["929,466", "1", "-5"]
    assert list(result["fraction_text"]) == ["23", "00", "00"]
    assert set(result["symbol_text"]) == {"$"}


def test_format_balance_column_with_custom_decomposer() -> None:
    df = pd.DataFrame({"amount": ["1234.5"]})
    decomposer = CurrencyDecomposer(FormatOptions(grouping_separator=" ", decimal_separator=",", currency_symbol="€"))

    result = format_balance_column(df, column="amount", decomposer=decomposer)

    assert result.loc[0, "integer_text"] == "1 234"
    assert result.loc[0, "fraction_text"] == "50"


def test_format_balance_column_errors() -> None:
    with pytest.raises(ValueError, match="column"):
        format_balance_column(pd.DataFrame({"x": [1]}))

    with pytest.raises(InvalidAmount):
        format_balance_column(pd.DataFrame({"balance": [Decimal("1"), float("nan")]}))


def test_accounts_to_dataframe_columns() -> None:
    df = pd.DataFrame({"account_type": ["investment"], "name": ["Growth Fund"], "balance": ["15000.00"]})

    table = accounts_to_dataframe(accounts_from_dataframe(df))

    assert list(table.columns) == ["account_type", "name", "balance_label", "balance", "symbol_text", "integer_text", "fraction_text"]
    row = table.iloc[0]
    assert row["account_type"] == "Investment"
    assert row["balance_label"] == "Value"
    assert (row["symbol_text"], row["integer_text"], row["fraction_text"]) == ("$", "15,000", "00")
