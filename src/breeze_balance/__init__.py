"""
breeze_balance package root.

Retrieves a transit card's balance page from the card portal and turns it
into a CardBalanceRecord.
"""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version("breeze-balance")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

from .errors import BalanceError, ConfigError, NetworkError, ParseError  # noqa: E402
from .models import CardBalanceRecord, StoredValueFragments, YesNo  # noqa: E402
from .extractor import parse_balance_page  # noqa: E402
from .service import BalanceService, configure, get_card_details  # noqa: E402

__all__ = [
    "__version__",
    "BalanceError",
    "BalanceService",
    "CardBalanceRecord",
    "ConfigError",
    "NetworkError",
    "ParseError",
    "StoredValueFragments",
    "YesNo",
    "configure",
    "get_card_details",
    "parse_balance_page",
]
