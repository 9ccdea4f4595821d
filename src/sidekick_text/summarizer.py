from __future__ import annotations
from typing import List, Tuple
import logging
import re
from collections import Counter
from .segmenter import segment, word_count

log = logging.getLogger(__name__)

_WORD = re.compile(r"[a-z][a-z'-]+")

STOP_WORDS = frozenset("""
a an the and or but if while on in at to from of for with without within
than then so very really just into onto up down over under again further
""".split())

MIN_SENTENCE_WORDS = 5
LENGTH_BONUS = 1.1
BONUS_RANGE = (10, 30)

def tokenize(text: str) -> List[str]:
    return _WORD.findall(text.lower())

def build_frequency_table(text: str) -> Counter:
    return Counter(w for w in tokenize(text) if w not in STOP_WORDS)

def score_sentence(sentence: str, freq: Counter) -> float:
    words = tokenize(sentence)
    score = sum(freq.get(w, 0) for w in words)
    lo, hi = BONUS_RANGE
    if lo <= len(words) <= hi:
        score *= LENGTH_BONUS
    return score

def summarize(text: str, max_sentences: int = 5) -> List[str]:
    """
    Lightweight extractive summary:
    - Split into sentences, drop the ones with four words or fewer
    - Score by raw word frequency (stop words ignored), favour mid-length sentences
    - Return top-N sentences in document order
    """
    if max_sentences < 1:
        return []
    sents = [s for s in segment(text) if word_count(s) >= MIN_SENTENCE_WORDS]
    if len(sents) <= max_sentences:
        return sents

    freq = build_frequency_table(text)
    scores: List[Tuple[int, float]] = [(i, score_sentence(s, freq)) for i, s in enumerate(sents)]
    log.debug("ranking %d candidate sentences for %d slots", len(sents), max_sentences)

    # sorted() is stable, so equal scores keep their input order
    top = sorted(sorted(scores, key=lambda x: x[1], reverse=True)[:max_sentences], key=lambda x: x[0])
    return [sents[i] for i, _ in top]
