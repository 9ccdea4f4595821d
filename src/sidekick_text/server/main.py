from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .models import GrammarRequest, GrammarResponse, SummarizeRequest, SummarizeResponse
from ..config import EngineConfig
from ..engine import get_engine
from ..formatting import render_grammar_report, render_summary
from ..utils import setup_logging
from pathlib import Path
import logging

CONFIG_PATH = Path("sidekick.json")

cfg = EngineConfig.load_or_default(CONFIG_PATH)
setup_logging(cfg.level)
log = logging.getLogger(__name__)
engine = get_engine(cfg.engine)

app = FastAPI(title="Sidekick Text Service", version="0.1")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # the browser extension calls from arbitrary pages
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/health")
def health():
    return {"ok": True, "engine": engine.name}

@app.post("/summarize", response_model=SummarizeResponse)
def summarize(req: SummarizeRequest):
    sentences = engine.summarize(req.text, req.max_sentences or cfg.summary_sentences)
    log.debug("summarize: %d chars -> %d sentences", len(req.text), len(sentences))
    return SummarizeResponse(sentences=sentences, result=render_summary(sentences))

@app.post("/grammar", response_model=GrammarResponse)
def grammar(req: GrammarRequest):
    result = engine.correct(req.text)
    return GrammarResponse(
        suggestions=result.suggestions,
        rewrite=result.rewrite,
        result=render_grammar_report(result.suggestions, result.rewrite),
    )
