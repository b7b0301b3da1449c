"""
core subpackage

Shared plumbing for the balance pipeline: the outbound form POST and the
lenient HTML helpers.
"""

# fetcher — async HTTP
from .fetcher import BalanceFetcher

# parser — BeautifulSoup helpers
from .parser import parse_document, text_at

__all__ = [
    "BalanceFetcher",
    "parse_document",
    "text_at",
]
