# generator.py
# random walk over a ChainTable

from __future__ import annotations
from typing import List, Optional

from .chain_table import ChainTable
from .protocols import Token


def _check_length(max_length) -> int:
    if isinstance(max_length, bool) or not isinstance(max_length, int):
        raise ValueError(f"max_length must be an int, got {type(max_length).__name__}")
    if max_length < 2:
        raise ValueError(f"max_length must be >= 2, got {max_length}")
    return max_length


class MarkovGenerator:
    """
    Walks the table starting from a random seed:
      (w0, w1) -> sample successor of (w[-2], w[-1]) -> ... until max_length
    tokens are produced or a context has no successors (normal early stop).
    Never mutates the table.
    """

    def __init__(self, table: ChainTable) -> None:
        self.table = table

    def walk(self, max_length: int) -> Optional[List[Token]]:
        max_length = _check_length(max_length)
        seed = self.table.pick_random_seed()
        if seed is None:
            return None

        words: List[Token] = [seed[0], seed[1]]
        for _ in range(max_length - 2):
            nxt = self.table.sample_successor((words[-2], words[-1]))
            if nxt is None:
                break
            words.append(nxt)
        return words

    def generate(self, max_length: int) -> Optional[str]:
        words = self.walk(max_length)
        if words is None:
            return None
        return " ".join(words)
