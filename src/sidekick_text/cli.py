from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Optional
import typer
from rich.console import Console
from .config import EngineConfig, write_default_config
from .engine import get_engine, should_check_grammar, should_summarize
from .extract import extract_main_text
from .formatting import render_grammar_report, render_summary
from .privacy import PRIVACY_NOTICE, SCROLL_NUDGE, is_sensitive_page, is_social_host
from .utils import read_source, setup_logging

app = typer.Typer(help="Offline summarizer and grammar helper")
console = Console()
log = logging.getLogger(__name__)
_state = {"verbose": False}

def _out(text: str) -> None:
    # user text may contain [brackets]; never treat it as rich markup
    console.print(text, markup=False, highlight=False, soft_wrap=True)

def _load_config(config_path: Path) -> EngineConfig:
    try:
        cfg = EngineConfig.load_or_default(config_path)
    except ValueError as ex:
        console.print(f"[red]Bad config[/red] {config_path}: {ex}")
        raise typer.Exit(code=2)
    setup_logging(logging.DEBUG if _state["verbose"] else cfg.level)
    return cfg

def _read(source: Optional[Path], html: bool) -> str:
    try:
        text = read_source(source)
    except OSError as ex:
        console.print(f"[red]Cannot read[/red] {source}: {ex}")
        raise typer.Exit(code=1)
    return extract_main_text(text) if html else text

@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    _state["verbose"] = verbose
    setup_logging(logging.DEBUG if verbose else logging.WARNING)

@app.command()
def init(
    config_path: Path = typer.Option("sidekick.json", help="Where to create config"),
):
    """Create default config."""
    try:
        write_default_config(config_path)
    except FileExistsError as ex:
        console.print(f"[red]{ex}[/red]")
        raise typer.Exit(code=2)
    console.print(f"[green]Created[/green] {config_path}")

@app.command()
def summarize(
    source: Optional[Path] = typer.Argument(None, help="Text file, or - for stdin"),
    sentences: Optional[int] = typer.Option(None, min=1, help="Number of sentences"),
    html: bool = typer.Option(False, help="Treat input as HTML and summarize its main text"),
    config_path: Path = typer.Option("sidekick.json"),
):
    """Create an extractive summary."""
    cfg = _load_config(config_path)
    text = _read(source, html)
    engine = get_engine(cfg.engine)
    out = engine.summarize(text, sentences or cfg.summary_sentences)
    if not out:
        console.print("[yellow]Nothing to summarize[/yellow]")
        return
    _out(render_summary(out))

@app.command()
def grammar(
    source: Optional[Path] = typer.Argument(None, help="Text file, or - for stdin"),
    as_json: bool = typer.Option(False, "--json", help="Print suggestions and rewrite as JSON"),
    config_path: Path = typer.Option("sidekick.json"),
):
    """Suggest style fixes and print a rewritten draft."""
    cfg = _load_config(config_path)
    text = _read(source, html=False).strip()
    result = get_engine(cfg.engine).correct(text)
    if as_json:
        typer.echo(json.dumps(result._asdict(), indent=2, ensure_ascii=False))
        return
    _out(render_grammar_report(result.suggestions, result.rewrite))

@app.command()
def check(
    source: Optional[Path] = typer.Argument(None, help="Text file, or - for stdin"),
    html: bool = typer.Option(False, help="Treat input as HTML"),
    url: str = typer.Option("", help="Address the input came from"),
    config_path: Path = typer.Option("sidekick.json"),
):
    """Summarize long reads and grammar-check longish drafts."""
    cfg = _load_config(config_path)
    raw = _read(source, html=False)
    if is_sensitive_page(url, raw if html else None):
        console.print(PRIVACY_NOTICE, markup=False)
        return
    if is_social_host(url):
        console.print(SCROLL_NUDGE, markup=False)
    text = (extract_main_text(raw) if html else raw).strip()
    engine = get_engine(cfg.engine)
    did_something = False

    if should_summarize(text, cfg):
        console.print("[bold]Quick Summary:[/bold]")
        _out(render_summary(engine.summarize(text, cfg.summary_sentences)))
        did_something = True
    else:
        log.debug("below %d words, no summary", cfg.summarize_min_words)

    if should_check_grammar(text, cfg):
        result = engine.correct(text)
        if did_something:
            console.print()
        console.print("[bold]Grammar check[/bold]")
        _out(render_grammar_report(result.suggestions, result.rewrite))
        did_something = True

    if not did_something:
        console.print(f"[yellow]Text is too short[/yellow] (fewer than {cfg.grammar_min_words} words)")

def main():
    app()

if __name__ == "__main__":
    main()
