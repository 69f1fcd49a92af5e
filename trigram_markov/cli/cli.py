"""
cli.py - command line front end for the trigram sentence generator
Features:
- Ingest one or more corpus files (one sentence per line, or CR separated)
- Print generated sentences in a Rich table with a model summary panel
- Optional interactive loop: type sentences to teach the model, /gen to generate
- Settings from a JSON config file, overridden by command line flags
"""

import argparse
import sys
from typing import Callable, Iterable, List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich import box

from trigram_markov.core import ConfigError, MarkovModel
from trigram_markov.text.normalizer import LetterCase
from trigram_markov.utils.config_manager import Config
from trigram_markov.utils.logger_utils import DEFAULT_LOG_PATH, Log

EXIT_OK = 0
EXIT_IO = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="trigram-markov",
        description="Generate sentences from a second-order Markov chain built over text corpora.",
    )
    p.add_argument("corpus", nargs="*", help="text files to ingest")
    p.add_argument("-n", "--count", type=int, default=None, help="sentences to generate")
    p.add_argument("-l", "--max-length", type=int, default=None, help="max tokens per sentence (>= 2)")
    p.add_argument("--case", choices=[c.value for c in LetterCase], default=None, help="casing policy")
    p.add_argument("--strip", action="store_true", default=None,
                   help="remove characters that are not letters, digits or whitespace")
    p.add_argument("--filter", dest="filters", action="append", default=None, metavar="REGEX",
                   help="extra removal pattern, repeatable, applied in order")
    p.add_argument("--drop-empty", action="store_true", default=None,
                   help="drop tokens that become empty after normalization")
    p.add_argument("--split", choices=["line", "cr"], default=None,
                   help="sentence separator in corpus files")
    p.add_argument("--seed", type=int, default=None, help="random seed for reproducible output")
    p.add_argument("--config", default=None, help="path to JSON settings file")
    p.add_argument("-i", "--interactive", action="store_true", help="start the interactive prompt")
    p.add_argument("-v", "--verbose", action="store_true", help="echo log lines to the console")
    return p


def split_sentences(text: str, mode: str = "line") -> List[str]:
    if mode == "cr":
        return text.split("\r")
    return text.splitlines()


def read_corpus(paths: Iterable[str], mode: str = "line") -> List[str]:
    """Read every file as UTF-8 and return the concatenated sentence list."""
    sentences: List[str] = []
    for path in paths:
        # newline="" keeps bare CRs so the "cr" mode can see them
        with open(path, "r", encoding="utf-8", newline="") as f:
            sentences.extend(split_sentences(f.read(), mode))
    return sentences


def _merge_args(cfg: Config, args: argparse.Namespace) -> None:
    """Command line flags win over file values."""
    for key in ("count", "max_length", "case", "strip", "filters", "drop_empty", "split"):
        val = getattr(args, key)
        if val is not None:
            cfg.data[key] = val


class CLI:
    """Owns one MarkovModel and renders its output."""

    def __init__(self, model: MarkovModel, cfg: Config,
                 console: Optional[Console] = None,
                 ask: Optional[Callable[[], str]] = None):
        self.model = model
        self.cfg = cfg
        self.console = console or Console()
        self._ask = ask or self._prompt
        self.running = True

    def _prompt(self) -> str:
        return Prompt.ask("[green]>[/green]", console=self.console, default="")

    # BATCH -----------------------------------------------------------------------
    def ingest_files(self, paths: List[str]) -> int:
        sentences = read_corpus(paths, self.cfg.get("split", "line"))
        with Log.time_block("ingest corpus"):
            accepted = self.model.ingest_many(sentences)
        Log.metric("sentences accepted", accepted)
        return accepted

    def generate(self, count: Optional[int] = None) -> List[str]:
        n = self.cfg.get("count") if count is None else count
        return self.model.generate_many(int(n), int(self.cfg.get("max_length")))

    # DISPLAY ---------------------------------------------------------------------
    def show_sentences(self, sentences: List[str]) -> None:
        if not sentences:
            if self.model.is_empty():
                self.console.print("[dim](model is empty, nothing to generate)[/dim]")
            else:
                self.console.print("[dim](no sentences requested)[/dim]")
            return
        table = Table(title="Generated", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Sentence", style="bold")
        table.add_column("Tokens", justify="right", style="magenta")
        for i, s in enumerate(sentences, 1):
            table.add_row(str(i), s, str(len(s.split(" "))))
        self.console.print(table)

    def show_stats(self) -> None:
        st = self.model.stats()
        body = "\n".join(f"{k:12} {v}" for k, v in st.items())
        self.console.print(Panel(body, title="Model", border_style="cyan", expand=False))

    # INTERACTIVE -----------------------------------------------------------------
    def run(self) -> None:
        """
        Main interactive loop:
        - plain text is ingested as one sentence
        - /gen [N], /stats, /quit
        """
        self.console.rule("[bold magenta]Trigram Markov[/bold magenta]")
        self.console.print("Type sentences to teach the model. Commands: /gen [N] /stats /quit\n")

        while self.running:
            try:
                line = self._ask()
            except (EOFError, KeyboardInterrupt):
                self.running = False
                break
            if not line:
                continue
            if line.startswith("/"):
                self._handle_command(line)
                continue
            if self.model.ingest_sentence(line):
                self.console.print("[green]learned[/green]")
            else:
                self.console.print("[yellow]need at least two words[/yellow]")

    def _handle_command(self, cmd: str) -> None:
        parts = cmd.split()
        name = parts[0]

        if name == "/quit":
            self.running = False
            return

        if name == "/stats":
            self.show_stats()
            return

        if name == "/gen":
            count = None
            if len(parts) > 1:
                if not parts[1].isdigit() or int(parts[1]) < 1:
                    self.console.print(f"[red]Not a count:[/red] {parts[1]}")
                    return
                count = int(parts[1])
            self.show_sentences(self.generate(count))
            return

        self.console.print(f"[red]Unknown command:[/red] {name}")


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()
    if Log.log_path() is None:
        Log.configure(path=DEFAULT_LOG_PATH)
    if args.verbose:
        Log.configure(echo=True)

    cfg = Config(args.config)
    _merge_args(cfg, args)

    try:
        if int(cfg.get("max_length")) < 2:
            raise ConfigError(f"max_length must be >= 2, got {cfg.get('max_length')}")
        if int(cfg.get("count")) < 0:
            raise ConfigError(f"count must be >= 0, got {cfg.get('count')}")
        model = MarkovModel(cfg.to_normalizer_config(), seed=args.seed)
    except (ConfigError, TypeError, ValueError) as e:
        Log.error(f"[CLI] bad configuration: {e}")
        console.print(f"[red]Configuration error:[/red] {e}")
        return EXIT_USAGE

    cli = CLI(model, cfg, console=console)
    if args.corpus:
        try:
            cli.ingest_files(args.corpus)
        except OSError as e:
            Log.error(f"[CLI] corpus read failed: {e}")
            console.print(f"[red]Cannot read corpus:[/red] {e}")
            return EXIT_IO
        cli.show_stats()

    if args.interactive:
        cli.run()
        return EXIT_OK

    if not args.corpus:
        console.print("[yellow]No corpus given, use -i for interactive mode.[/yellow]")
        return EXIT_USAGE

    cli.show_sentences(cli.generate())
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
