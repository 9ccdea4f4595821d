from __future__ import annotations
from typing import Iterator, List
import re

_NEWLINES = re.compile(r"\n+")
# terminal punctuation, whitespace, then something that can open a sentence
_SENT_SPLIT = re.compile(r"(?<=[.!?])\s+(?=[A-Z0-9\"])")

def iter_sentences(text: str) -> Iterator[str]:
    """Yield the sentences of ``text`` in order; every call starts a fresh pass."""
    flat = _NEWLINES.sub(" ", text or "")
    for piece in _SENT_SPLIT.split(flat):
        piece = piece.strip()
        if piece:
            yield piece

def segment(text: str) -> List[str]:
    return list(iter_sentences(text))

def word_count(text: str) -> int:
    return len((text or "").split())
