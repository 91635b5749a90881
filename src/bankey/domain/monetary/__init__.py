"""Monetary domain package.

This package contains the `Currency` definitions used to style account balances
and the `FormattedCurrency` value object produced by the currency decomposer.
"""
