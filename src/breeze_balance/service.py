# src/breeze_balance/service.py
from typing import Callable, Optional

import aiohttp
from loguru import logger

from breeze_balance.config import Settings, load_settings
from breeze_balance.core.fetcher import BalanceFetcher
from breeze_balance.errors import NetworkError, ParseError
from breeze_balance.extractor import parse_balance_page
from breeze_balance.models import CardBalanceRecord
from breeze_balance.utils import mask_card_number


class BalanceService:
    """Fetch the balance page for a card, then extract its record.

    Idle → Fetching → Parsing → Done; a NetworkError ends the call while
    fetching and a ParseError while parsing. Both propagate unchanged.
    """

    _instance: Optional["BalanceService"] = None

    def __init__(self, fetcher: BalanceFetcher, parser: Callable[[str], CardBalanceRecord] = parse_balance_page):
        self.fetcher = fetcher
        self.parser = parser

    @classmethod
    def from_settings(cls, settings: Settings, session: Optional[aiohttp.ClientSession] = None) -> "BalanceService":
        return cls(BalanceFetcher.from_settings(settings, session=session))

    @classmethod
    def instance(cls) -> "BalanceService":
        if cls._instance is None:
            raise RuntimeError("BalanceService is not configured; call configure() at startup.")
        return cls._instance

    async def get_card_details(self, card_number: str) -> CardBalanceRecord:
        masked = mask_card_number(card_number)

        logger.debug(f"[{masked}] fetching balance page")
        try:
            html = await self.fetcher.fetch_balance(card_number)
        except NetworkError as e:
            logger.error(f"[{masked}] Error fetching card details: {e}")
            raise

        logger.debug(f"[{masked}] parsing balance page ({len(html)} chars)")
        try:
            record = self.parser(html)
        except ParseError as e:
            logger.error(f"[{masked}] Error parsing card details: {e}")
            raise

        logger.debug(f"[{masked}] done")
        return record


async def get_card_details(card_number: str) -> CardBalanceRecord:
    return await BalanceService.instance().get_card_details(card_number)


def configure(
    settings: Optional[Settings] = None, session: Optional[aiohttp.ClientSession] = None
) -> BalanceService:
    """Build the default service once at startup.

    Reads the environment when no settings are given, so missing configuration
    raises ConfigError here rather than during a lookup.
    """
    if settings is None:
        settings = load_settings()
    BalanceService._instance = BalanceService.from_settings(settings, session=session)
    logger.debug(f"Default BalanceService configured for {settings.endpoint_url}")
    return BalanceService._instance
