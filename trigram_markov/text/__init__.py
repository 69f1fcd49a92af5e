# trigram_markov/text/__init__.py
# tokenizing and normalizing raw sentences before they reach the chain table

from .tokenizer import simple_tokenize  # whitespace tokenizer
from .normalizer import (
    STRIP_NON_ALNUM,
    FilterRule,
    LetterCase,
    NormalizerConfig,
    TextNormalizer,
)  # filter -> transform -> case
from .pipeline import TextPipeline  # tokenizer + normalizer in one call

__all__ = [
    "simple_tokenize",
    "STRIP_NON_ALNUM",
    "FilterRule",
    "LetterCase",
    "NormalizerConfig",
    "TextNormalizer",
    "TextPipeline",
]
