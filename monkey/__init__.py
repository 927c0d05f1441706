"""
Monkey Interpreter Package

A hand-written front-end and tree-walking evaluator for the Monkey
scripting language.

Architecture:
    monkey/
    ├── lexer/           # Tokenization
    ├── parser/          # Pratt parser and AST
    ├── evaluator/       # Tree-walking interpreter
    ├── config.py        # Interpreter configuration
    └── cli.py           # Command line front-end

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType
from .parser import Parser, Program, parse_string
from .evaluator import Evaluator, eval_program, evaluate_string, inspect
from .config import InterpreterConfig

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "Parser",
    "Program",
    "Evaluator",
    "InterpreterConfig",

    # Convenience functions
    "parse_string",
    "eval_program",
    "evaluate_string",
    "inspect",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
