"""
Token definitions for the Monkey lexer.

This module defines every token type the Monkey scanner can produce:
- Special tokens (end of input, illegal characters)
- Identifiers and integer literals
- Operators and delimiters
- Keywords

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass


class TokenType(Enum):
    """
    Enumeration of all token types in Monkey.

    Organized by category, mirroring the lookup tables below.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    ILLEGAL = auto()                # Unrecognized character
    EOF = auto()                    # End of input

    # ========================================================================
    # Identifiers and Literals
    # ========================================================================
    IDENT = auto()                  # add, foobar, x, y
    INT = auto()                    # 1343456

    # ========================================================================
    # Operators
    # ========================================================================
    ASSIGN = auto()                 # =
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    BANG = auto()                   # !
    ASTERISK = auto()               # *
    SLASH = auto()                  # /
    LT = auto()                     # <
    GT = auto()                     # >
    EQ = auto()                     # ==
    NOT_EQ = auto()                 # !=

    # ========================================================================
    # Delimiters
    # ========================================================================
    COMMA = auto()                  # ,
    SEMICOLON = auto()              # ;
    LPAREN = auto()                 # (
    RPAREN = auto()                 # )
    LBRACE = auto()                 # {
    RBRACE = auto()                 # }

    # ========================================================================
    # Keywords
    # ========================================================================
    FUNCTION = auto()               # fn
    LET = auto()                    # let
    TRUE = auto()                   # true
    FALSE = auto()                  # false
    IF = auto()                     # if
    ELSE = auto()                   # else
    RETURN = auto()                 # return


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Monkey language.

    The (type, literal) pair is the token's identity; line, column and
    offset only feed diagnostics.
    """
    type: TokenType
    literal: str                    # Exact source slice
    line: int = 1
    column: int = 1
    offset: int = 0

    def __str__(self) -> str:
        return f"{self.type.name}({self.literal!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.literal!r}, "
                f"{self.line}:{self.column})")

    @property
    def location(self) -> str:
        return f"{self.line}:{self.column}"

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORDS.values()

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator."""
        return self.type in OPERATOR_TYPES


# Lookup tables used by the lexer for keyword/operator recognition

KEYWORDS = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}

# Two-character operators are checked before single characters (maximal munch)
TWO_CHAR_OPERATORS = {
    "==": TokenType.EQ,
    "!=": TokenType.NOT_EQ,
}

SINGLE_CHAR_TOKENS = {
    # Operators
    "=": TokenType.ASSIGN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "!": TokenType.BANG,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LT,
    ">": TokenType.GT,

    # Delimiters
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

OPERATOR_TYPES = frozenset({
    TokenType.ASSIGN, TokenType.PLUS, TokenType.MINUS, TokenType.BANG,
    TokenType.ASTERISK, TokenType.SLASH, TokenType.LT, TokenType.GT,
    TokenType.EQ, TokenType.NOT_EQ,
})

WHITESPACE = frozenset(" \t\r\n")


def lookup_identifier(ident: str) -> TokenType:
    """Map an identifier-shaped run of text to its keyword or IDENT."""
    return KEYWORDS.get(ident, TokenType.IDENT)
