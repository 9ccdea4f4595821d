from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Dict, List, Type
from .config import EngineConfig
from .grammar import Correction, correct
from .segmenter import word_count
from .summarizer import summarize

class TextEngine(ABC):
    """Summarize/correct backend. Implementations are stateless and interchangeable."""

    name: str = ""

    @abstractmethod
    def summarize(self, text: str, max_sentences: int = 5) -> List[str]:
        ...

    @abstractmethod
    def correct(self, text: str) -> Correction:
        ...

class LocalEngine(TextEngine):
    """Offline heuristics: frequency summarizer and rule-based corrector."""

    name = "local"

    def summarize(self, text: str, max_sentences: int = 5) -> List[str]:
        return summarize(text, max_sentences)

    def correct(self, text: str) -> Correction:
        return correct(text)

ENGINES: Dict[str, Type[TextEngine]] = {
    LocalEngine.name: LocalEngine,
}

def get_engine(name: str = "local") -> TextEngine:
    try:
        return ENGINES[name]()
    except KeyError:
        raise ValueError(f"Unknown engine {name!r}") from None

def should_summarize(text: str, cfg: EngineConfig) -> bool:
    return word_count(text) > cfg.summarize_min_words

def should_check_grammar(text: str, cfg: EngineConfig) -> bool:
    return word_count(text) >= cfg.grammar_min_words
