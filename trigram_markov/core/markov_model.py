# markov_model.py
# second-order (trigram) Markov sentence model: ingestion + generation facade.

from __future__ import annotations
from typing import Iterable, List, Optional, Sequence
import random

from trigram_markov.text.normalizer import NormalizerConfig
from trigram_markov.text.pipeline import TextPipeline
from trigram_markov.utils.logger_utils import Log

from .chain_table import ChainTable
from .generator import MarkovGenerator
from .protocols import RandomSource, Token


class MarkovModel:
    """
    Trigram sentence model with:
      - a fixed normalization pipeline (filters -> transform -> casing)
      - an append-only ChainTable of seeds and context -> successors
      - an injectable random source for deterministic tests

    Usage:
        model = MarkovModel(NormalizerConfig.build(strip=True), seed=7)
        model.ingest_many(["Hello, how are you?", "What time is it?"])
        model.generate(10)
    """

    def __init__(self,
                 config: Optional[NormalizerConfig] = None,
                 rng: Optional[RandomSource] = None,
                 seed: Optional[int] = None) -> None:
        if rng is not None and seed is not None:
            raise ValueError("pass either rng or seed, not both")
        if rng is None:
            rng = random.Random(seed)
        self.cfg = config or NormalizerConfig()
        self.pipeline = TextPipeline(self.cfg)
        self.table = ChainTable(rng)
        self._generator = MarkovGenerator(self.table)
        Log.debug(
            f"[MarkovModel] created filters={len(self.cfg.filters)} "
            f"transform={self.cfg.transform!r} case={self.cfg.case.value}"
        )

    @property
    def rng(self) -> RandomSource:
        return self.table.rng

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------
    def ingest(self, tokens: Sequence[Token]) -> bool:
        """
        Index one already-normalized sentence.
        Returns False (and changes nothing) when there are fewer than 2 tokens.
        """
        if len(tokens) < 2:
            return False
        self.table.record_seed((tokens[0], tokens[1]))
        for a, b, c in zip(tokens, tokens[1:], tokens[2:]):
            self.table.append_successor((a, b), c)
        return True

    def ingest_sentence(self, sentence: str) -> bool:
        """Tokenize, normalize and index a raw sentence."""
        ok = self.ingest(self.pipeline.process(sentence))
        if not ok:
            Log.debug(f"[MarkovModel] rejected sentence (fewer than 2 tokens): {sentence!r}")
        return ok

    def ingest_many(self, sentences: Iterable[str]) -> int:
        """Ingest each sentence independently, returns how many were accepted."""
        accepted = total = 0
        for s in sentences:
            total += 1
            if self.ingest_sentence(s):
                accepted += 1
        Log.info(f"[MarkovModel] ingested {accepted}/{total} sentences ({self.table.context_count} contexts)")
        return accepted

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    def generate(self, max_length: int) -> Optional[str]:
        """
        Random walk of at most max_length tokens (>= 2).
        Returns None when nothing has been ingested.
        """
        return self._generator.generate(max_length)

    def generate_many(self, count: int, max_length: int) -> List[str]:
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        out: List[str] = []
        for _ in range(count):
            s = self.generate(max_length)
            if s is None:
                break
            out.append(s)
        return out

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    def is_empty(self) -> bool:
        return self.table.is_empty()

    def stats(self) -> dict:
        return self.table.stats()
