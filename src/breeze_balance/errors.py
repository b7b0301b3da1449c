"""Exception hierarchy for breeze_balance.

Field-level absence in the balance page is never an error; these cover the
cases where no record can be produced at all.
"""
from typing import Optional


class BalanceError(Exception):
    """Base exception for all breeze_balance errors."""

    pass


class NetworkError(BalanceError):
    """Transport failure or non-success status from the balance endpoint."""

    def __init__(self, message: str, cause: Optional[BaseException] = None, status: Optional[int] = None):
        super().__init__(message)
        self.cause = cause
        self.status = status


class ParseError(BalanceError):
    """The markup could not be parsed into a traversable tree."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class ConfigError(BalanceError):
    """Missing or invalid configuration, raised at startup."""

    pass
