from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Any, Dict
import json
import logging
from pathlib import Path

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

@dataclass
class EngineConfig:
    engine: str = "local"
    summary_sentences: int = 5
    summarize_min_words: int = 400  # only long reads get an automatic summary
    grammar_min_words: int = 40     # only longish drafts get an automatic check
    log_level: str = "INFO"

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "EngineConfig":
        cfg = EngineConfig(
            engine=str(data.get("engine", "local")),
            summary_sentences=int(data.get("summary_sentences", 5)),
            summarize_min_words=int(data.get("summarize_min_words", 400)),
            grammar_min_words=int(data.get("grammar_min_words", 40)),
            log_level=str(data.get("log_level", "INFO")).upper(),
        )
        cfg.validate()
        return cfg

    @staticmethod
    def load(path: Path) -> "EngineConfig":
        return EngineConfig.from_dict(json.loads(Path(path).read_text()))

    @staticmethod
    def load_or_default(path: Path) -> "EngineConfig":
        if Path(path).exists():
            return EngineConfig.load(path)
        return EngineConfig()

    def validate(self) -> None:
        # imported here: engine.py needs this module for its gating helpers
        from .engine import ENGINES
        if self.engine not in ENGINES:
            raise ValueError(f"Unknown engine {self.engine!r} (expected one of: {', '.join(sorted(ENGINES))})")
        if self.summary_sentences < 1:
            raise ValueError("summary_sentences must be at least 1")
        if self.summarize_min_words < 0 or self.grammar_min_words < 0:
            raise ValueError("word thresholds cannot be negative")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log_level {self.log_level!r}")

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level)

    def dump(self) -> str:
        return json.dumps(asdict(self), indent=2)

def write_default_config(path: Path) -> None:
    if path.exists():
        raise FileExistsError(f"{path} already exists")
    path.write_text(EngineConfig().dump())
