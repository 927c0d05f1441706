"""
Monkey Parser Package

Implements a Pratt parser for the Monkey language.

Key Features:
- Top-down operator precedence (Pratt parsing)
- Two-token lookahead over a pull-based lexer
- Immutable AST built from frozen dataclasses
- Error-tolerant statement parsing with collected diagnostics

Author: xwest
"""

from .ast_nodes import *
from .parser import Parser, parse_string
from .precedence import Precedence, precedence_of
from .errors import ParseError, ParseFailure

__all__ = [
    # Core parser
    "Parser", "parse_string",
    "Precedence", "precedence_of",

    # AST nodes
    "Program", "Statement", "Expression",
    "Let", "Return", "Block", "ExpressionStatement",
    "IntegerLiteral", "BooleanLiteral", "Identifier", "Prefix", "Infix",
    "If", "FunctionLiteral", "Call",

    # Error handling
    "ParseError", "ParseFailure",
]
