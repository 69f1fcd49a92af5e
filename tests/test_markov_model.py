# tests/test_markov_model.py
# ingestion + generation behaviour of the public MarkovModel facade

import random

import pytest

from trigram_markov import MarkovModel, NormalizerConfig
from trigram_markov.core.errors import ConfigError
from trigram_markov.utils.logger_utils import Log

CORPUS = [
    "the quick brown fox jumps over the lazy dog",
    "the quick red fox runs past the sleepy dog",
    "a lazy dog sleeps in the sun",
    "the dog jumps over the quick fox",
    "what time is it",
]


def _snapshot(model):
    t = model.table
    return t.seeds, {c: t.successors(c) for c in t.contexts()}


def test_empty_model_generates_nothing():
    m = MarkovModel(seed=1)
    assert m.is_empty()
    assert m.generate(10) is None
    assert m.generate(2) is None
    assert m.generate_many(3, 10) == []


def test_single_sentence_round_trip():
    m = MarkovModel(seed=3)
    assert m.ingest_sentence("A B C D") is True
    assert m.generate(10) == "A B C D"


def test_cycle_runs_until_max_length():
    m = MarkovModel(seed=3)
    m.ingest_sentence("who what when where why who what")
    assert m.generate(10) == "who what when where why who what when where why"


def test_strip_filter_output():
    m = MarkovModel(NormalizerConfig.build(strip=True), seed=5)
    m.ingest_many(["Hello, how are you?"])
    assert m.generate(10) == "Hello how are you"


def test_strip_filter_seed():
    m = MarkovModel(NormalizerConfig.build(strip=True))
    m.ingest_many(["Hello, how are you?", "What are you going to wear tonight?", "What time is it?"])
    assert ("Hello", "how") in m.table.seeds
    assert m.generate(10) is not None


def test_lower_casing_seed():
    m = MarkovModel(NormalizerConfig(case="lower"))
    m.ingest_sentence("Hello How Are You")
    assert m.table.seeds == (("hello", "how"),)


def test_ingest_indexes_every_trigram():
    m = MarkovModel()
    assert m.ingest(["a", "b", "c", "b", "c", "d"]) is True
    t = m.table
    assert t.seeds == (("a", "b"),)
    assert t.successors(("a", "b")) == ("c",)
    assert t.successors(("b", "c")) == ("b", "d")
    assert t.successors(("c", "b")) == ("c",)
    assert t.transition_count == 4


def test_two_token_sentence_seeds_without_transitions():
    m = MarkovModel(seed=0)
    assert m.ingest_sentence("hello there") is True
    assert m.stats() == {"seeds": 1, "contexts": 0, "transitions": 0}
    assert m.generate(5) == "hello there"


@pytest.mark.parametrize("sentence", ["", "   ", "lonely", "\tword\n"])
def test_short_sentences_are_rejected_without_mutation(sentence):
    m = MarkovModel()
    m.ingest_sentence("some prior sentence here")
    before = _snapshot(m)
    assert m.ingest_sentence(sentence) is False
    assert _snapshot(m) == before


def test_sentence_emptied_by_normalization_is_rejected_with_drop_empty():
    m = MarkovModel(NormalizerConfig.build(strip=True, drop_empty=True))
    assert m.ingest_sentence("!!! ok") is False
    assert m.is_empty()


def test_each_accepted_sentence_adds_exactly_one_seed():
    m = MarkovModel()
    for i, s in enumerate(CORPUS, 1):
        contexts = m.table.context_count
        transitions = m.table.transition_count
        assert m.ingest_sentence(s)
        assert m.table.seed_count == i
        assert m.table.context_count >= contexts
        assert m.table.transition_count > transitions


def test_ingest_many_counts_and_keeps_going_after_rejects():
    m = MarkovModel()
    accepted = m.ingest_many(["one", "two words", "", "three little words"])
    assert accepted == 2
    assert m.table.seeds == (("two", "words"), ("three", "little"))


def test_ingest_many_accepts_generators():
    m = MarkovModel()
    assert m.ingest_many(s for s in CORPUS) == len(CORPUS)


def test_generate_does_not_mutate_model():
    m = MarkovModel(seed=11)
    m.ingest_many(CORPUS)
    before = _snapshot(m)
    for _ in range(50):
        m.generate(12)
    assert _snapshot(m) == before


@pytest.mark.parametrize("max_length", range(2, 16))
def test_length_bound(max_length):
    m = MarkovModel(seed=max_length)
    m.ingest_many(CORPUS)
    for _ in range(20):
        out = m.generate(max_length)
        assert 2 <= len(out.split(" ")) <= max_length


def test_same_seed_same_output():
    a = MarkovModel(seed=42)
    b = MarkovModel(rng=random.Random(42))
    a.ingest_many(CORPUS)
    b.ingest_many(CORPUS)
    assert a.generate_many(10, 12) == b.generate_many(10, 12)


def test_generated_text_only_uses_seen_transitions():
    m = MarkovModel(seed=9)
    m.ingest_many(CORPUS)
    for _ in range(30):
        words = m.generate(15).split(" ")
        assert tuple(words[:2]) in m.table.seeds
        for a, b, c in zip(words, words[1:], words[2:]):
            assert c in m.table.successors((a, b))


def test_custom_transform_flows_into_the_table():
    m = MarkovModel(NormalizerConfig(transform=str.title))
    m.ingest_sentence("hello world again")
    assert m.table.seeds == (("Hello", "World"),)
    assert m.table.successors(("Hello", "World")) == ("Again",)


def test_rng_and_seed_are_exclusive():
    with pytest.raises(ValueError):
        MarkovModel(rng=random.Random(1), seed=1)


def test_bad_config_fails_before_ingestion():
    with pytest.raises(ConfigError):
        MarkovModel(NormalizerConfig(filters=("[unclosed",)))


def test_generate_many_rejects_negative_count():
    m = MarkovModel()
    with pytest.raises(ValueError):
        m.generate_many(-1, 5)


def test_log_write_failure_does_not_break_ingestion(tmp_path, monkeypatch):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory", encoding="utf-8")
    monkeypatch.setattr(Log, "path", str(blocker / "sub" / "x.log"))
    m = MarkovModel(seed=0)
    assert m.ingest_sentence("solo") is False
    assert m.ingest_many(["a b c", "d"]) == 1
    assert m.generate(5) == "a b c"


def test_library_use_creates_no_log_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(Log, "path", None)
    monkeypatch.delenv("TRIGRAM_MARKOV_LOG", raising=False)
    m = MarkovModel()
    m.ingest_many(["one two three", "x"])
    assert list(tmp_path.iterdir()) == []
