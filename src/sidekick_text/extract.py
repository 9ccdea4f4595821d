from __future__ import annotations
import re
from bs4 import BeautifulSoup, FeatureNotFound

NOISE_TAGS = ["script", "style", "nav", "footer", "header", "aside"]

_SPACE_BEFORE_NEWLINE = re.compile(r"\s+\n")

def make_soup(html: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(html or "", "lxml")
    except FeatureNotFound:
        return BeautifulSoup(html or "", "html.parser")

def extract_main_text(html: str) -> str:
    """Readable text of the page's main content (article, else main, else body)."""
    soup = make_soup(html)
    main = soup.find("article") or soup.find("main") or soup.body or soup
    for node in main.find_all(NOISE_TAGS):
        node.decompose()
    # newline between text nodes so adjacent blocks stay separate sentences
    text = main.get_text("\n")
    return _SPACE_BEFORE_NEWLINE.sub("\n", text).strip()
