"""
Rule-based grammar and style pass for English drafts.

Two independent halves:
- ``suggest`` runs a fixed list of checks and returns human-readable hints
- ``rewrite`` pushes the text through an ordered list of textual transforms

The checks are coarse on purpose (the passive-voice check is just an auxiliary
verb followed by an ``-ed`` word) and the suggestion text embeds their counts,
so keep their behaviour stable.
"""
from __future__ import annotations
from typing import Callable, List, NamedTuple, Optional, Tuple
import logging
import re
from .formatting import sentence_case
from .segmenter import segment, word_count

log = logging.getLogger(__name__)

LONG_SENTENCE_WORDS = 28
ALL_CLEAR = "Looks good overall. Minor polishing applied."

class Correction(NamedTuple):
    suggestions: List[str]
    rewrite: str

# ── checks ───────────────────────────────────────────────────────────────────

_REPEATED_SPACE = re.compile(r"\s{2,}")
_EXCESSIVE_PUNCT = re.compile(r"[!?]{3,}")
_PASSIVE = re.compile(r"\b(was|were|is|are|been|being|be)\s+[a-z]+ed\b", re.I)

def check_repeated_spaces(text: str) -> Optional[str]:
    if _REPEATED_SPACE.search(text):
        return "Remove repeated spaces."
    return None

def check_excessive_punctuation(text: str) -> Optional[str]:
    if _EXCESSIVE_PUNCT.search(text):
        return "Avoid excessive punctuation."
    return None

def check_long_sentences(text: str) -> Optional[str]:
    n = sum(1 for s in segment(text) if word_count(s) > LONG_SENTENCE_WORDS)
    if n:
        return f"Split {n} long sentence(s) (>{LONG_SENTENCE_WORDS} words) for clarity."
    return None

def check_passive_voice(text: str) -> Optional[str]:
    if len(_PASSIVE.findall(text)) > 0:
        return "Prefer active voice where possible."
    return None

CHECKS: Tuple[Callable[[str], Optional[str]], ...] = (
    check_repeated_spaces,
    check_excessive_punctuation,
    check_long_sentences,
    check_passive_voice,
)

def suggest(text: str) -> List[str]:
    out = []
    for check in CHECKS:
        msg = check(text)
        if msg:
            log.debug("%s fired", check.__name__)
            out.append(msg)
    return out or [ALL_CLEAR]

# ── rewrite ──────────────────────────────────────────────────────────────────

_SPACE_BEFORE_PUNCT = re.compile(r"\s+([,.;:!?])")
_NO_SPACE_AFTER_PUNCT = re.compile(r"([,.;:!?])(?!\s|$)")

def _word(pattern: str) -> re.Pattern:
    return re.compile(rf"\b{pattern}\b", re.I)

# applied top to bottom, each on the previous output
SUBSTITUTIONS: Tuple[Tuple[re.Pattern, str], ...] = (
    (re.compile(r"\bi\b"), "I"),
    (_word("im"), "I'm"),
    (_word("dont"), "don't"),
    (_word("cant"), "can't"),
    (_word("wont"), "won't"),
    (_word("doesnt"), "doesn't"),
    (_word("arent"), "aren't"),
    (_word("isnt"), "isn't"),
    (_word("shouldnt"), "shouldn't"),
    (_word("couldnt"), "couldn't"),
    (_word("wasnt"), "wasn't"),
    (_word("werent"), "weren't"),
    (_word("havent"), "haven't"),
    (_word("hasnt"), "hasn't"),
    (_word("hadnt"), "hadn't"),
    (_word("in order to"), "to"),
    (_word("due to the fact that"), "because"),
    (_word("utilize"), "use"),
    (_word("very"), ""),
)

_A_BEFORE_VOWEL = re.compile(r"\b([Aa])\s+([aeiouAEIOU])")
_AN_BEFORE_CONSONANT = re.compile(r"\b([Aa])[Nn]\s+([^aeiouAEIOU\s])")
_TERMINAL = re.compile(r"[.!?]\"?$")

def fix_punctuation_spacing(text: str) -> str:
    text = _SPACE_BEFORE_PUNCT.sub(r"\1", text)
    return _NO_SPACE_AFTER_PUNCT.sub(r"\1 ", text)

def apply_substitutions(text: str) -> str:
    for pattern, replacement in SUBSTITUTIONS:
        text = pattern.sub(replacement, text)
    return text

def fix_articles(text: str) -> str:
    text = _A_BEFORE_VOWEL.sub(lambda m: f"{m.group(1)}n {m.group(2)}", text)
    return _AN_BEFORE_CONSONANT.sub(lambda m: f"{m.group(1)} {m.group(2)}", text)

def ensure_terminal_punctuation(text: str) -> str:
    text = text.strip()
    if not _TERMINAL.search(text):
        text += "."
    return text

REWRITE_STEPS: Tuple[Callable[[str], str], ...] = (
    fix_punctuation_spacing,
    apply_substitutions,
    fix_articles,
    sentence_case,
    ensure_terminal_punctuation,
)

def rewrite(text: str) -> str:
    if not text or not text.strip():
        return ""
    for step in REWRITE_STEPS:
        text = step(text)
    return text

def correct(text: str) -> Correction:
    text = text or ""
    return Correction(suggestions=suggest(text), rewrite=rewrite(text))
