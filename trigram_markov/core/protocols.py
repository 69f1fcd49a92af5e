# trigram_markov/core/protocols.py
"""
Protocol interfaces for the pluggable capabilities of the markov engine.

The engine depends on these small Protocols rather than concrete classes so a
token transform can be a plain function, a bound method or a class instance, and
tests can swap the random source for a scripted one.
"""

from __future__ import annotations

from typing import Callable, Protocol, Tuple, Union, runtime_checkable

Token = str
Context = Tuple[Token, Token]


@runtime_checkable
class TokenTransform(Protocol):
    """Anything that maps one token to one token (must not introduce whitespace)."""

    def transform(self, token: Token) -> Token:
        ...


@runtime_checkable
class RandomSource(Protocol):
    """Minimal randomness interface, random.Random satisfies it."""

    def randrange(self, n: int) -> int:
        """Return an int drawn uniformly from [0, n)."""
        ...


TransformLike = Union[TokenTransform, Callable[[Token], Token]]


class FunctionTransform:
    """Adapts a plain callable to the TokenTransform protocol."""

    def __init__(self, fn: Callable[[Token], Token]) -> None:
        self.fn = fn

    def transform(self, token: Token) -> Token:
        return self.fn(token)

    def __repr__(self) -> str:
        name = getattr(self.fn, "__name__", self.fn.__class__.__name__)
        return f"<FunctionTransform {name}>"


def as_transform(obj: TransformLike) -> TokenTransform:
    """
    Coerce obj into a TokenTransform.
    Objects with a callable .transform are used as-is, other callables are wrapped.
    Raises TypeError for anything else.
    """
    if isinstance(obj, TokenTransform) and callable(getattr(obj, "transform", None)):
        return obj
    if callable(obj):
        return FunctionTransform(obj)
    raise TypeError(f"token transform must be callable or define transform(), got {type(obj).__name__}")
