"""
Balance page → CardBalanceRecord.

The portal's page has no stable schema, so every field is addressed by
selector + position and falls back to "" on its own when the node is missing.
Only a failure of the parse itself is an error.
"""
from bs4 import BeautifulSoup
from loguru import logger

from breeze_balance.core.parser import parse_document, text_at
from breeze_balance.errors import ParseError
from breeze_balance.models import CardBalanceRecord, StoredValueFragments, YesNo

# ── selectors ────────────────────────────────────────────────
STATUS_CELL = "td.Content_bold"
PRODUCT_CELL = "td.Content_normal_black"
STORED_VALUE_ROW = "tr.Content_bold"
ANY_CELL = "td"

# ── literal phrases on the page ──────────────────────────────
BALANCE_NOT_PROTECTED = "Is your card Balance Protected ? : No"
NOT_HOTLISTED = "Hotlisted Status : No"
EXPIRATION_PREFIX = "Your card will expire on : "


def _negative_phrase_flag(text: str, negative_phrase: str) -> YesNo:
    # Only the explicit negative phrase yields "No"
    return YesNo.NO if negative_phrase in text else YesNo.YES


def stored_value_fragments(doc: BeautifulSoup) -> StoredValueFragments:
    """Label and value fragments for the stored value.

    Fourth bold row + second cell of the page. Irregular markup, kept as is.
    """
    return StoredValueFragments(
        label=text_at(doc, STORED_VALUE_ROW, 3),
        value=text_at(doc, ANY_CELL, 1),
    )


def extract_record(doc: BeautifulSoup) -> CardBalanceRecord:
    status_text = text_at(doc, STATUS_CELL, 0)
    fragments = stored_value_fragments(doc)
    logger.debug(f"Stored value fragments: label={fragments.label!r} value={fragments.value!r}")

    return CardBalanceRecord(
        balance_protected=_negative_phrase_flag(status_text, BALANCE_NOT_PROTECTED),
        hotlisted_status=_negative_phrase_flag(status_text, NOT_HOTLISTED),
        card_expiration_date=text_at(doc, STATUS_CELL, 1).replace(EXPIRATION_PREFIX, "", 1),
        product_name=text_at(doc, PRODUCT_CELL, 0),
        product_expire_date=text_at(doc, PRODUCT_CELL, 1),
        remaining_rides=text_at(doc, PRODUCT_CELL, 2),
        stored_value=fragments.joined(),
    )


def parse_balance_page(html: str) -> CardBalanceRecord:
    try:
        doc = parse_document(html)
    except Exception as e:
        raise ParseError(f"Error parsing HTML content: {e}", cause=e) from e
    return extract_record(doc)
