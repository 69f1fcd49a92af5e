# tests/test_generator.py
# random walk mechanics with a scripted random source

import pytest

from trigram_markov.core.chain_table import ChainTable
from trigram_markov.core.generator import MarkovGenerator


def _table(rng):
    t = ChainTable(rng)
    t.record_seed(("the", "cat"))
    t.append_successor(("the", "cat"), "sat")
    t.append_successor(("the", "cat"), "ran")
    t.append_successor(("cat", "sat"), "down")
    t.append_successor(("cat", "ran"), "away")
    return t


def test_walk_uses_last_two_tokens_as_context(scripted):
    # seed pick, then index 1 -> "ran", then ("cat","ran") -> "away"
    gen = MarkovGenerator(_table(scripted([0, 1, 0])))
    assert gen.walk(10) == ["the", "cat", "ran", "away"]


def test_walk_stops_at_max_length(scripted):
    gen = MarkovGenerator(_table(scripted([0, 0])))
    assert gen.walk(3) == ["the", "cat", "sat"]


def test_max_length_two_returns_only_seed(scripted):
    rng = scripted([0])
    gen = MarkovGenerator(_table(rng))
    assert gen.generate(2) == "the cat"
    # no successor draws happen
    assert rng.calls == [1]


def test_empty_table_gives_none():
    assert MarkovGenerator(ChainTable()).generate(5) is None


@pytest.mark.parametrize("bad", [1, 0, -3, 2.5, "10", True])
def test_invalid_max_length(bad):
    with pytest.raises(ValueError):
        MarkovGenerator(ChainTable()).generate(bad)
