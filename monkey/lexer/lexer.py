"""
Monkey Lexer - turns source text into a pull-based stream of tokens.

The scanner walks the source one character at a time with a single
character of lookahead. It is what the parser pulls from; nothing is
buffered beyond the character currently under the cursor.

xwest
"""

import logging
from typing import Iterator, List

from .tokens import (
    Token, TokenType, SINGLE_CHAR_TOKENS, TWO_CHAR_OPERATORS, WHITESPACE,
    lookup_identifier
)
from .errors import Diagnostic, create_illegal_character_diagnostic

logger = logging.getLogger(__name__)


class Lexer:
    """
    Monkey lexical analyzer.

    Call ``next_token()`` repeatedly; once the input is exhausted every
    further call returns an EOF token with an empty literal.
    """

    def __init__(self, source: str):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
        """
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self.diagnostics: List[Diagnostic] = []

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return

    def next_token(self) -> Token:
        """Scan and return the next token."""
        self._skip_whitespace()

        start_pos = self.pos
        start_line = self.line
        start_column = self.column

        if self.pos >= len(self.source):
            return Token(TokenType.EOF, "", start_line, start_column, start_pos)

        current_char = self.source[self.pos]

        # Identifiers and keywords
        if self._is_identifier_start(current_char):
            literal = self._read_identifier()
            return Token(lookup_identifier(literal), literal,
                         start_line, start_column, start_pos)

        # Integers (no sign, the parser handles unary minus)
        if self._is_digit(current_char):
            literal = self._read_number()
            return Token(TokenType.INT, literal, start_line, start_column, start_pos)

        # Two-character operators first
        pair = current_char + self._peek()
        if pair in TWO_CHAR_OPERATORS:
            self._advance_by(2)
            return Token(TWO_CHAR_OPERATORS[pair], pair,
                         start_line, start_column, start_pos)

        if current_char in SINGLE_CHAR_TOKENS:
            self._advance()
            return Token(SINGLE_CHAR_TOKENS[current_char], current_char,
                         start_line, start_column, start_pos)

        # Anything else is reported and skipped; recovery is the parser's job
        self._advance()
        diagnostic = create_illegal_character_diagnostic(current_char, start_line, start_column)
        self.diagnostics.append(diagnostic)
        logger.debug("%s at %d:%d", diagnostic.message, start_line, start_column)
        return Token(TokenType.ILLEGAL, current_char, start_line, start_column, start_pos)

    def _read_identifier(self) -> str:
        start_pos = self.pos
        while self.pos < len(self.source) and self._is_identifier_continue(self.source[self.pos]):
            self._advance()
        return self.source[start_pos:self.pos]

    def _read_number(self) -> str:
        start_pos = self.pos
        while self.pos < len(self.source) and self._is_digit(self.source[self.pos]):
            self._advance()
        return self.source[start_pos:self.pos]

    @staticmethod
    def _is_identifier_start(char: str) -> bool:
        """Check if character can start an identifier."""
        return char.isalpha() or char == '_'

    @staticmethod
    def _is_identifier_continue(char: str) -> bool:
        """Check if character can continue an identifier."""
        return char.isalnum() or char == '_'

    @staticmethod
    def _is_digit(char: str) -> bool:
        # ASCII only; str.isdigit() accepts superscripts and other scripts
        return '0' <= char <= '9'

    def _skip_whitespace(self):
        while self.pos < len(self.source) and self.source[self.pos] in WHITESPACE:
            self._advance()

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _advance_by(self, count: int):
        for _ in range(count):
            self._advance()

    def _peek(self, offset: int = 1) -> str:
        """Peek at character ahead without advancing."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return '\0'

    def has_errors(self) -> bool:
        """Check if the lexer met any illegal characters."""
        return len(self.diagnostics) > 0


def tokenize_string(source: str) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string

    Returns:
        List of tokens ending with the EOF token
    """
    return list(Lexer(source))
