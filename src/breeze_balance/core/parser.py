# src/breeze_balance/core/parser.py
from bs4 import BeautifulSoup


def parse_document(html: str) -> BeautifulSoup:
    """Lenient parse; unclosed or stray tags are repaired, not rejected."""
    if not isinstance(html, (str, bytes)):
        raise TypeError(f"expected markup text, got {type(html).__name__}")
    return BeautifulSoup(html, "lxml")


def text_at(doc: BeautifulSoup, selector: str, index: int = 0) -> str:
    """Trimmed text of the `index`-th match of `selector`, or "" when there is none."""
    if index < 0:
        return ""
    elems = doc.select(selector)
    if index >= len(elems):
        return ""
    return elems[index].get_text().strip()
