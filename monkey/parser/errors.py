"""
Error handling for the Monkey parser.

The parser never raises these while parsing: each one is appended to
``Parser.errors`` and the offending statement is skipped. ``str()`` of a
ParseError is the plain message, e.g.
``expected next token to be IDENT, got INT instead``.

Author: xwest
"""

from typing import List, Optional

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    A syntax diagnostic collected by the parser.

    Contains the diagnostic record and the token that triggered it.
    """

    def __init__(
        self,
        message: str,
        token: Optional[Token] = None,
        code: Optional[str] = None,
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            line=token.line if token else 0,
            column=token.column if token else 0,
            severity="error",
            code=code,
        )
        self.token = token

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return self.diagnostic.message


class ParseFailure(Exception):
    """Raised by strict helpers when a parse produced any diagnostics."""

    def __init__(self, errors: List[ParseError]):
        self.errors = list(errors)
        super().__init__("\n".join(str(e) for e in self.errors))


# Helper functions for creating common parser errors

def create_unexpected_token_error(expected: TokenType, found: Token) -> ParseError:
    """Create an error for a lookahead token of the wrong kind."""
    return ParseError(
        message=f"expected next token to be {expected.name}, got {found.type.name} instead",
        token=found,
        code="P001",
    )


def create_no_prefix_rule_error(found: Token) -> ParseError:
    """Create an error for a token that cannot start an expression."""
    return ParseError(
        message=f"no prefix parse function for {found.type.name} found",
        token=found,
        code="P002",
    )


def create_nesting_too_deep_error(found: Token) -> ParseError:
    """Create an error for an expression nested past the parser's limit."""
    return ParseError(
        message="expression nested too deeply",
        token=found,
        code="P004",
    )


def create_invalid_integer_error(found: Token) -> ParseError:
    """Create an error for an integer literal outside the int64 range."""
    return ParseError(
        message=f"could not parse {found.literal} as integer",
        token=found,
        code="P003",
    )
