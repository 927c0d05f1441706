"""
Operator binding powers for the Monkey Pratt parser.

Author: xwest
"""

from enum import IntEnum
from typing import Dict

from ..lexer.tokens import TokenType


class Precedence(IntEnum):
    """Operator precedence levels, lowest binding first."""
    LOWEST = 1
    EQUALS = 2          # ==, !=
    LESS_GREATER = 3    # <, >
    SUM = 4             # +, -
    PRODUCT = 5         # *, /
    PREFIX = 6          # -x, !x
    CALL = 7            # f(x)


# Operator precedence table; anything missing binds at LOWEST
PRECEDENCES: Dict[TokenType, Precedence] = {
    TokenType.EQ: Precedence.EQUALS,
    TokenType.NOT_EQ: Precedence.EQUALS,
    TokenType.LT: Precedence.LESS_GREATER,
    TokenType.GT: Precedence.LESS_GREATER,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.ASTERISK: Precedence.PRODUCT,
    TokenType.SLASH: Precedence.PRODUCT,
    TokenType.LPAREN: Precedence.CALL,
}


def precedence_of(token_type: TokenType) -> Precedence:
    """Get precedence for a token type."""
    return PRECEDENCES.get(token_type, Precedence.LOWEST)
