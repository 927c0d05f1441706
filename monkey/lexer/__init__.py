"""
Monkey Lexer Package

Implements the hand-written scanner for the Monkey language.

Key Features:
- Pull-based: the parser asks for one token at a time
- Maximal munch for '==' and '!='
- Illegal characters become ILLEGAL tokens instead of aborting
- Line/column tracking for diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, KEYWORDS, lookup_identifier
from .lexer import Lexer, tokenize_string
from .errors import Diagnostic

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "KEYWORDS",
    "lookup_identifier",
    "tokenize_string",
    "Diagnostic",
]
