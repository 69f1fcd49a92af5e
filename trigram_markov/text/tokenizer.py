# trigram_markov/text/tokenizer.py
# whitespace tokenizer feeding the normalizer

from typing import List


def simple_tokenize(s: str) -> List[str]:
    """
    Return list of tokens split on runs of whitespace (space, tab, newline, CR).
    No quoting or escaping, empty/all-whitespace input gives [].
    """
    if not s:
        return []
    return s.split()
