"""
trigram_markov.core

The engine behind sentence generation.
Contains:
 - capability protocols (TokenTransform, RandomSource)
 - the append-only ChainTable (seeds + context -> successors)
 - MarkovGenerator, the random walk
 - MarkovModel, ingestion + generation facade
"""

# protocols/errors first, the text package imports them while core is still loading
from .errors import ConfigError
from .protocols import Context, FunctionTransform, RandomSource, Token, TokenTransform
from .chain_table import ChainTable
from .generator import MarkovGenerator
from .markov_model import MarkovModel

__all__ = [
    "ConfigError",
    "Context",
    "FunctionTransform",
    "RandomSource",
    "Token",
    "TokenTransform",
    "ChainTable",
    "MarkovGenerator",
    "MarkovModel",
]
