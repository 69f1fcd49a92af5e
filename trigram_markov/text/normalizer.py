# trigram_markov/text/normalizer.py
"""
Token normalization applied before ingestion.

Per token, in fixed order:
  1. filter rules (regex removal) in registration order
  2. optional custom transform
  3. casing policy
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Pattern, Sequence, Tuple, Union
import re

from trigram_markov.core.errors import ConfigError
from trigram_markov.core.protocols import TokenTransform, TransformLike, as_transform

PatternLike = Union[str, Pattern]

# everything except ASCII letters, digits and whitespace
STRIP_NON_ALNUM = r"[^A-Za-z0-9\s]"


class LetterCase(str, Enum):
    UPPER = "upper"  # all letters made upper case
    LOWER = "lower"  # all letters made lower case
    ANY = "any"      # letters left alone

    @classmethod
    def parse(cls, value: Union[str, "LetterCase"]) -> "LetterCase":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(c.value for c in cls)
            raise ConfigError(f"unknown casing policy {value!r} (expected one of: {allowed})") from None


class FilterRule:
    """One pattern-removal rule: every match of the pattern is deleted from a token."""

    __slots__ = ("pattern",)

    def __init__(self, pattern: PatternLike) -> None:
        if isinstance(pattern, FilterRule):
            pattern = pattern.pattern
        if isinstance(pattern, str):
            try:
                pattern = re.compile(pattern)
            except re.error as e:
                raise ConfigError(f"invalid filter pattern {pattern!r}: {e}") from e
        elif not isinstance(pattern, re.Pattern):
            raise ConfigError(f"filter must be a regex string or compiled pattern, got {type(pattern).__name__}")
        if isinstance(pattern.pattern, bytes):
            raise ConfigError(f"filter pattern must be text, not bytes: {pattern.pattern!r}")
        self.pattern: Pattern = pattern

    @classmethod
    def strip_non_alnum(cls) -> "FilterRule":
        return cls(STRIP_NON_ALNUM)

    def apply(self, token: str) -> str:
        return self.pattern.sub("", token)

    def __eq__(self, other) -> bool:
        return isinstance(other, FilterRule) and self.pattern == other.pattern

    def __hash__(self) -> int:
        return hash(self.pattern)

    def __repr__(self) -> str:
        return f"FilterRule({self.pattern.pattern!r})"


@dataclass(frozen=True)
class NormalizerConfig:
    """
    Normalization knobs fixed at model construction.
    filters: ordered regex removal rules (str, compiled pattern or FilterRule)
    transform: optional token -> token function or TokenTransform
    case: LetterCase or its string value
    drop_empty: discard tokens that normalize to ""
    """
    filters: Tuple[FilterRule, ...] = field(default_factory=tuple)
    transform: Optional[TokenTransform] = None
    case: LetterCase = LetterCase.ANY
    drop_empty: bool = False

    def __post_init__(self) -> None:
        # validate + coerce eagerly so ingestion never sees a bad config
        filters = self.filters
        if isinstance(filters, (str, re.Pattern, FilterRule)):
            filters = (filters,)
        object.__setattr__(self, "filters", tuple(FilterRule(p) for p in filters))
        if self.transform is not None:
            try:
                object.__setattr__(self, "transform", as_transform(self.transform))
            except TypeError as e:
                raise ConfigError(str(e)) from e
        object.__setattr__(self, "case", LetterCase.parse(self.case))
        object.__setattr__(self, "drop_empty", bool(self.drop_empty))

    @classmethod
    def build(cls,
              filters: Iterable[PatternLike] = (),
              transform: Optional[TransformLike] = None,
              case: Union[str, LetterCase] = LetterCase.ANY,
              strip: bool = False,
              drop_empty: bool = False) -> "NormalizerConfig":
        """Convenience constructor, strip=True prepends the built-in STRIP_NON_ALNUM rule."""
        if isinstance(filters, (str, re.Pattern, FilterRule)):
            filters = (filters,)
        rules = list(filters)
        if strip:
            rules.insert(0, STRIP_NON_ALNUM)
        return cls(filters=tuple(rules), transform=transform, case=case, drop_empty=drop_empty)


class TextNormalizer:
    """Applies a NormalizerConfig to token sequences, returning new lists."""

    def __init__(self, config: Optional[NormalizerConfig] = None) -> None:
        self.cfg = config or NormalizerConfig()

    def normalize_token(self, token: str) -> str:
        for rule in self.cfg.filters:
            token = rule.apply(token)
        if self.cfg.transform is not None:
            token = self.cfg.transform.transform(token)
        if self.cfg.case is LetterCase.UPPER:
            token = token.upper()
        elif self.cfg.case is LetterCase.LOWER:
            token = token.lower()
        return token

    def normalize(self, tokens: Sequence[str]) -> List[str]:
        out = [self.normalize_token(t) for t in tokens]
        if self.cfg.drop_empty:
            out = [t for t in out if t]
        return out
