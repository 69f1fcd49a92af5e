# trigram_markov/text/pipeline.py
# raw sentence -> normalized tokens

from typing import Dict, Any, List, Optional

from .normalizer import NormalizerConfig, TextNormalizer
from .tokenizer import simple_tokenize


class TextPipeline:
    """
    Small pipeline object:
     - process(text) -> normalized token list
     - bundle(text) -> dict with intermediate stages (handy for debugging a config)
    """

    def __init__(self, config: Optional[NormalizerConfig] = None):
        self.normalizer = TextNormalizer(config)

    @property
    def config(self) -> NormalizerConfig:
        return self.normalizer.cfg

    def process(self, raw_text: str) -> List[str]:
        return self.normalizer.normalize(simple_tokenize(raw_text or ""))

    def bundle(self, raw_text: str) -> Dict[str, Any]:
        raw_tokens = simple_tokenize(raw_text or "")
        tokens = self.normalizer.normalize(raw_tokens)
        return {
            "text": raw_text,
            "raw_tokens": raw_tokens,
            "tokens": tokens,
            "accepted": len(tokens) >= 2,
        }
