"""Tokens of an arithmetic expression in one variable."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenId(Enum):
    """Kinds of token an expression can hold."""

    NUM = auto()
    X = auto()
    PLUS = auto()
    MINUS = auto()
    MULT = auto()
    DIV = auto()
    L_BRACE = auto()
    R_BRACE = auto()
    SIN = auto()
    COS = auto()
    TAN = auto()
    CTG = auto()
    SQRT = auto()
    LN = auto()


_BINARY_PRIORITIES = {
    TokenId.PLUS: 0,
    TokenId.MINUS: 0,
    TokenId.MULT: 1,
    TokenId.DIV: 1,
}

_FUNCTIONS = frozenset(
    {TokenId.SIN, TokenId.COS, TokenId.TAN, TokenId.CTG, TokenId.SQRT, TokenId.LN}
)


@dataclass(frozen=True)
class Token:
    """A single token; ``num`` carries the value of a number token."""

    id: TokenId
    num: float = 0.0

    def is_binary_operator(self) -> bool:
        return self.id in _BINARY_PRIORITIES

    def is_function(self) -> bool:
        return self.id in _FUNCTIONS

    def is_num_or_x(self) -> bool:
        return self.id in (TokenId.NUM, TokenId.X)

    @property
    def priority(self) -> int:
        """Precedence of a binary operator; higher binds tighter."""
        try:
            return _BINARY_PRIORITIES[self.id]
        except KeyError:
            raise ValueError(f"{self.id.name} is not a binary operator") from None