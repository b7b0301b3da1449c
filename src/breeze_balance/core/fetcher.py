# src/breeze_balance/core/fetcher.py
import asyncio
from typing import Dict, Optional

import aiohttp
from loguru import logger

from breeze_balance.config import (
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    FORM_HEADERS,
    SUBMIT_BUTTON_X,
    SUBMIT_BUTTON_Y,
    Settings,
)
from breeze_balance.errors import NetworkError
from breeze_balance.utils import mask_card_number


class BalanceFetcher:
    """Posts the balance-check form for one card and returns the page HTML.

    Exactly one request per call, no retries. When no session is injected a
    short-lived ClientSession is opened for the call and closed afterwards.
    """

    def __init__(
        self,
        url: str,
        referrer: str,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.url = url
        self.referrer = referrer
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = session

    @classmethod
    def from_settings(cls, settings: Settings, session: Optional[aiohttp.ClientSession] = None) -> "BalanceFetcher":
        return cls(settings.endpoint_url, settings.referrer, timeout=settings.request_timeout, session=session)

    def build_headers(self) -> Dict[str, str]:
        headers = dict(FORM_HEADERS)
        headers["Referer"] = self.referrer
        return headers

    @staticmethod
    def build_form(card_number: str) -> Dict[str, str]:
        return {
            "cardnumber": card_number,
            "submitButton.x": SUBMIT_BUTTON_X,
            "submitButton.y": SUBMIT_BUTTON_Y,
        }

    async def fetch_balance(self, card_number: str) -> str:
        masked = mask_card_number(card_number)
        logger.debug(f"[{masked}] POST {self.url}")
        if self._session is not None and self._session.closed:
            raise NetworkError("Balance endpoint request failed: the injected ClientSession is closed")
        try:
            if self._session is not None:
                return await self._post(self._session, card_number)
            async with aiohttp.ClientSession() as session:
                return await self._post(session, card_number)
        except aiohttp.ClientResponseError as e:
            raise NetworkError(
                f"Balance endpoint responded with HTTP {e.status}", cause=e, status=e.status
            ) from e
        except asyncio.TimeoutError as e:
            raise NetworkError(
                f"Balance endpoint timed out after {self.timeout.total}s", cause=e
            ) from e
        except aiohttp.ClientError as e:
            raise NetworkError(f"Balance endpoint request failed: {e}", cause=e) from e

    async def _post(self, session: aiohttp.ClientSession, card_number: str) -> str:
        async with session.post(
            self.url,
            data=self.build_form(card_number),
            headers=self.build_headers(),
            timeout=self.timeout,
            raise_for_status=True,
        ) as resp:
            logger.debug(f"Balance endpoint answered HTTP {resp.status}")
            return await resp.text(errors="replace")
