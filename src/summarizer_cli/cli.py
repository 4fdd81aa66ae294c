from __future__ import annotations
import json
import logging
import sys
from pathlib import Path
from typing import Optional
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich import box
from .config import DEFAULT_CONFIG_PATH, SummarizerConfig, write_default_config
from .summarizer import summarize as run_summarize
from .text import text_stats
from .utils import read_text_file, write_summary

app = typer.Typer(help="Extractive text summarizer CLI")
console = Console()

def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )

def _load_config(config_path: Path, verbose: bool) -> SummarizerConfig:
    cfg = SummarizerConfig.load_or_default(config_path)
    _setup_logging("DEBUG" if verbose else cfg.log_level)
    return cfg

def _read_input(text: Optional[str], file: Optional[Path]) -> str:
    if file is not None:
        try:
            return read_text_file(file)
        except ValueError as ex:
            typer.echo(str(ex))
            raise typer.Exit(code=1)
    if text is not None:
        return text
    if not sys.stdin.isatty():
        piped = sys.stdin.read()
        if piped.strip():
            return piped
    typer.echo("Provide TEXT, --file, or pipe text on stdin")
    raise typer.Exit(code=2)

@app.command()
def init(
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="Where to create config"),
):
    """Create default config."""
    write_default_config(config_path)
    console.print(f"[green]Created[/green] {config_path}")

@app.command()
def summarize(
    text: Optional[str] = typer.Argument(None, help="Text to summarize"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True, dir_okay=False, help="UTF-8 .txt file"),
    ratio: Optional[int] = typer.Option(None, "--ratio", "-r", help="Percent of sentences to keep"),
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config"),
    save: bool = typer.Option(False, help="Write summary_<timestamp>.txt"),
    output_dir: Optional[Path] = typer.Option(None, help="Override output_dir in config"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Create an extractive summary."""
    cfg = _load_config(config_path, verbose)
    raw = _read_input(text, file)
    if ratio is None:
        ratio = cfg.default_ratio

    problem = cfg.validate_input(raw) or cfg.validate_ratio(ratio)
    if problem:
        typer.echo(problem)
        raise typer.Exit(code=1)

    result = run_summarize(raw.strip(), ratio)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        if result.error:
            console.print(f"[yellow]{result.error.message}[/yellow]")
        if result.summary_text:
            console.print(Panel(result.summary_text, title="Summary", box=box.ROUNDED))
        if result.metrics:
            m = result.metrics
            table = Table(title="Metrics", box=box.SIMPLE)
            table.add_column("Metric", style="bold")
            table.add_column("Value", justify="right")
            table.add_row("Original", f"{m.original_word_count} words, {m.original_sentence_count} sentences")
            table.add_row("Summary", f"{m.summary_word_count} words, {m.summary_sentence_count} sentences")
            table.add_row("Word reduction", f"{m.word_reduction_percent}%")
            table.add_row("Sentence reduction", f"{m.sentence_reduction_percent}%")
            table.add_row("Compression ratio", f"{m.compression_ratio}%")
            table.add_row("Avg length", f"{m.average_sentence_length} words/sentence")
            console.print(table)

    if not result.summary_text:
        raise typer.Exit(code=1)

    if save:
        out = write_summary(result.summary_text, output_dir or Path(cfg.output_dir))
        console.print(f"[green]Wrote[/green] {out}")

@app.command("stats")
def stats_cmd(
    text: Optional[str] = typer.Argument(None, help="Text to inspect"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True, dir_okay=False),
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config"),
):
    """Show word, sentence and reading-time counts."""
    cfg = _load_config(config_path, False)
    s = text_stats(_read_input(text, file), cfg.words_per_minute)
    table = Table(title="Input Stats", box=box.SIMPLE)
    table.add_column("Metric", style="bold")
    table.add_column("Count", justify="right")
    table.add_row("characters", str(s.characters))
    table.add_row("words", str(s.words))
    table.add_row("sentences", str(s.sentences))
    table.add_row("reading time", f"~{s.reading_minutes} min")
    console.print(table)

@app.command()
def serve(
    host: str = typer.Option("127.0.0.1"),
    port: int = typer.Option(8000),
):
    """Run the HTTP API."""
    import uvicorn
    uvicorn.run("summarizer_cli.server.main:app", host=host, port=port)

def main():
    app()

if __name__ == "__main__":
    main()
