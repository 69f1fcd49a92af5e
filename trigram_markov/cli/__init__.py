# trigram_markov/cli/__init__.py
from .cli import CLI, main, run

__all__ = ["CLI", "main", "run"]
