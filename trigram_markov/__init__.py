"""
trigram_markov

Second-order Markov sentence generator.
Feed it sentences, it indexes every (word, word) -> next word transition and
random-walks the table to produce new sentences.

    from trigram_markov import MarkovModel, NormalizerConfig
    model = MarkovModel(NormalizerConfig.build(strip=True, case="lower"))
    model.ingest_many(open("corpus.txt").read().splitlines())
    print(model.generate(20))
"""

# core must load before text (text imports core.errors/core.protocols)
from .core import ChainTable, ConfigError, MarkovGenerator, MarkovModel, TokenTransform
from .text import STRIP_NON_ALNUM, FilterRule, LetterCase, NormalizerConfig, TextPipeline

__all__ = [
    "ChainTable",
    "ConfigError",
    "MarkovGenerator",
    "MarkovModel",
    "TokenTransform",
    "STRIP_NON_ALNUM",
    "FilterRule",
    "LetterCase",
    "NormalizerConfig",
    "TextPipeline",
]

__version__ = "0.1.0"
