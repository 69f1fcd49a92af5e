# chain_table.py
# second-order markov storage: (a, b) context -> successor tokens, plus sentence seeds.

from __future__ import annotations
from typing import Dict, List, Optional, Tuple
import random

from .protocols import Context, RandomSource, Token


def _key(context) -> Optional[Context]:
    """Any 2-item list/tuple is a context, everything else matches nothing."""
    if isinstance(context, (tuple, list)) and len(context) == 2:
        return (context[0], context[1])
    return None


class ChainTable:
    """
    Append-only trigram table.
      - seeds: every sentence-opening context, duplicates kept
      - chain: context -> successor list, duplicates kept

    Duplicates are the weighting: a uniform draw over a list with repeats picks
    frequent openings/transitions proportionally more often.
    Not thread safe, callers need exclusive access.
    """

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        self.rng: RandomSource = rng if rng is not None else random.Random()
        self._seeds: List[Context] = []
        self._chain: Dict[Context, List[Token]] = {}
        self._transitions: int = 0

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def record_seed(self, context: Context) -> None:
        self._seeds.append((context[0], context[1]))

    def append_successor(self, context: Context, token: Token) -> None:
        key = (context[0], context[1])
        succ = self._chain.get(key)
        if succ is None:
            self._chain[key] = [token]
        else:
            succ.append(token)
        self._transitions += 1

    # ------------------------------------------------------------------
    # Lookup + sampling
    # ------------------------------------------------------------------
    def has_context(self, context: Context) -> bool:
        return _key(context) in self._chain

    def sample_successor(self, context: Context) -> Optional[Token]:
        succ = self._chain.get(_key(context))
        if not succ:
            return None
        return succ[self.rng.randrange(len(succ))]

    def pick_random_seed(self) -> Optional[Context]:
        if not self._seeds:
            return None
        return self._seeds[self.rng.randrange(len(self._seeds))]

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    @property
    def seeds(self) -> Tuple[Context, ...]:
        return tuple(self._seeds)

    def successors(self, context: Context) -> Tuple[Token, ...]:
        return tuple(self._chain.get(_key(context), ()))

    def contexts(self) -> List[Context]:
        return list(self._chain)

    @property
    def seed_count(self) -> int:
        return len(self._seeds)

    @property
    def context_count(self) -> int:
        return len(self._chain)

    @property
    def transition_count(self) -> int:
        return self._transitions

    def is_empty(self) -> bool:
        return not self._seeds

    def stats(self) -> Dict[str, int]:
        return {
            "seeds": self.seed_count,
            "contexts": self.context_count,
            "transitions": self.transition_count,
        }

    def __len__(self) -> int:
        return len(self._chain)

    def __contains__(self, context) -> bool:
        return self.has_context(context)

    def __repr__(self) -> str:
        return f"<ChainTable seeds={self.seed_count} contexts={self.context_count}>"
