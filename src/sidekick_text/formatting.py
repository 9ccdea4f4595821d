from __future__ import annotations
from typing import Iterable, Sequence, Union
import re
from .segmenter import iter_sentences

BULLET = "• "

_ITEM_SPLIT = re.compile(r"\n+")

def bulletize(items: Union[str, Iterable[str]]) -> str:
    """One "• " line per non-empty item; a plain string is split on newlines first."""
    if isinstance(items, str):
        items = _ITEM_SPLIT.split(items)
    lines = [BULLET + s.strip() for s in items if s and s.strip()]
    return "\n".join(lines)

def sentence_case(text: str) -> str:
    return " ".join(s[:1].upper() + s[1:] for s in iter_sentences(text))

def render_summary(sentences: Sequence[str]) -> str:
    return bulletize(sentences)

def render_grammar_report(suggestions: Sequence[str], rewrite: str) -> str:
    return f"Suggestions:\n{bulletize(suggestions)}\n\nRephrase:\n{rewrite}"
