from bankey.domain.account.account_type import AccountType
from bankey.domain.account.account_summary import AccountSummary

__all__ = ["AccountType", "AccountSummary"]
