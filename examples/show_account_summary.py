# ---
# jupyter:
#   jupytext:
#     formats: ipynb,py:percent
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
#       jupytext_version: 1.17.2
#   kernelspec:
#     display_name: Python 3 (ipykernel)
#     language: python
#     name: python3
# ---

import plotly.graph_objects as go

from bankey.demo.accounts import demo_accounts
from bankey.domain.account.account_summary import AccountSummary
from bankey.formatting.balance_table import accounts_to_dataframe

# %%


def account_summary_table(accounts: list[AccountSummary]):
    # One row per account, balance already split into styled segments
    df = accounts_to_dataframe(accounts)

    # Small symbol and cents, big dollars
    balance_html = [
        f"<sup>{symbol}</sup><b>{integer}</b><sup>{fraction}</sup>"
        for symbol, integer, fraction in zip(df["symbol_text"], df["integer_text"], df["fraction_text"])
    ]

    fig = (
        go.Figure(
            data=[
                go.Table(
                    header=dict(values=["Type", "Account", "", "Balance"]),
                    cells=dict(
                        values=[df["account_type"], df["name"], df["balance_label"], balance_html],
                        align=["left", "left", "right", "right"],
                    ),
                )
            ]
        )
        # Tune table settings
        .update_layout(title="Account Summary", template="plotly_white")
    )

    return fig


# %%

account_summary_table(demo_accounts()).show()
