"""
Monkey Pratt Parser Implementation

Implements a top-down operator precedence (Pratt) parser for Monkey.
The parser pulls tokens from the lexer on demand and keeps exactly two
of them: the token under the cursor and the one after it.

Parsing is error tolerant. A statement that fails to parse records a
diagnostic and is dropped; the main loop steps past it and carries on,
so one pass reports as many problems as it can.

Author: xwest
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from ..lexer.lexer import Lexer
from ..lexer.tokens import Token, TokenType
from .ast_nodes import (
    Block, BooleanLiteral, Call, Expression, ExpressionStatement,
    FunctionLiteral, Identifier, If, Infix, IntegerLiteral, Let, Prefix,
    Program, Return, Statement,
)
from .errors import (
    ParseError, ParseFailure, create_invalid_integer_error,
    create_nesting_too_deep_error, create_no_prefix_rule_error,
    create_unexpected_token_error,
)
from .precedence import Precedence, precedence_of

logger = logging.getLogger(__name__)

INT64_MAX = 2 ** 63 - 1

# Deepest chain of nested sub-expressions accepted in one statement
MAX_NESTING_DEPTH = 64

PrefixParser = Callable[[], Optional[Expression]]
InfixParser = Callable[[Expression], Optional[Expression]]


class Parser:
    """
    Monkey Pratt parser.

    ``parse_program()`` always runs to the end of input and returns a
    Program; problems are collected in ``self.errors``.
    """

    def __init__(self, lexer: Lexer):
        """
        Initialize parser and prime the two-token lookahead window.

        Args:
            lexer: Lexer positioned at the start of the source
        """
        self.lexer = lexer
        self.errors: List[ParseError] = []
        self._depth = 0

        self.current_token: Token = Token(TokenType.EOF, "")
        self.peek_token: Token = Token(TokenType.EOF, "")

        self._init_parsing_tables()

        self.next_token()
        self.next_token()

    def _init_parsing_tables(self):
        """Initialize the prefix and infix parsing function tables."""

        # Prefix parsing functions (for tokens that can start expressions)
        self.prefix_parsers: Dict[TokenType, PrefixParser] = {
            TokenType.IDENT: self._parse_identifier,
            TokenType.INT: self._parse_integer_literal,
            TokenType.TRUE: self._parse_boolean_literal,
            TokenType.FALSE: self._parse_boolean_literal,
            TokenType.BANG: self._parse_prefix_expression,
            TokenType.PLUS: self._parse_prefix_expression,
            TokenType.MINUS: self._parse_prefix_expression,
            TokenType.LPAREN: self._parse_grouped_expression,
            TokenType.IF: self._parse_if_expression,
            TokenType.FUNCTION: self._parse_function_literal,
        }

        # Infix parsing functions (binary operators and calls)
        self.infix_parsers: Dict[TokenType, InfixParser] = {
            TokenType.PLUS: self._parse_infix_expression,
            TokenType.MINUS: self._parse_infix_expression,
            TokenType.ASTERISK: self._parse_infix_expression,
            TokenType.SLASH: self._parse_infix_expression,
            TokenType.EQ: self._parse_infix_expression,
            TokenType.NOT_EQ: self._parse_infix_expression,
            TokenType.LT: self._parse_infix_expression,
            TokenType.GT: self._parse_infix_expression,
            TokenType.LPAREN: self._parse_call_expression,
        }

    # Token window

    def next_token(self):
        """Shift the lookahead window by one token."""
        self.current_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def current_token_is(self, token_type: TokenType) -> bool:
        return self.current_token.type == token_type

    def peek_token_is(self, token_type: TokenType) -> bool:
        return self.peek_token.type == token_type

    def expect_peek(self, token_type: TokenType) -> bool:
        """Advance if the next token has the given type, else record an error."""
        if self.peek_token_is(token_type):
            self.next_token()
            return True
        self._record(create_unexpected_token_error(token_type, self.peek_token))
        return False

    def peek_precedence(self) -> Precedence:
        return precedence_of(self.peek_token.type)

    def current_precedence(self) -> Precedence:
        return precedence_of(self.current_token.type)

    def _record(self, error: ParseError):
        logger.debug("parse error at %s: %s", error.token.location if error.token else "?", error)
        self.errors.append(error)

    def error_messages(self) -> List[str]:
        """Plain diagnostic strings, in the order they were recorded."""
        return [str(e) for e in self.errors]

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    # Statements

    def parse_program(self) -> Program:
        """
        Parse the whole token stream into a Program.

        Returns:
            Program with every statement that parsed successfully
        """
        statements: List[Statement] = []

        while not self.current_token_is(TokenType.EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                statements.append(stmt)
            self.next_token()

        logger.debug("parsed %d statements with %d errors", len(statements), len(self.errors))
        return Program(tuple(statements))

    def parse_statement(self) -> Optional[Statement]:
        """Dispatch on the current token."""
        if self.current_token_is(TokenType.LET):
            return self.parse_let_statement()
        if self.current_token_is(TokenType.RETURN):
            return self.parse_return_statement()
        return self.parse_expression_statement()

    def parse_let_statement(self) -> Optional[Let]:
        """Parse ``let IDENT = EXPR ;``."""
        if not self.expect_peek(TokenType.IDENT):
            return None

        name = Identifier(self.current_token.literal)

        if not self.expect_peek(TokenType.ASSIGN):
            return None

        self.next_token()

        value = self.parse_expression(Precedence.LOWEST)
        if value is None:
            return None

        if self.peek_token_is(TokenType.SEMICOLON):
            self.next_token()

        return Let(name, value)

    def parse_return_statement(self) -> Optional[Return]:
        """Parse ``return EXPR ;``."""
        self.next_token()

        value = self.parse_expression(Precedence.LOWEST)
        if value is None:
            return None

        if self.peek_token_is(TokenType.SEMICOLON):
            self.next_token()

        return Return(value)

    def parse_expression_statement(self) -> Optional[ExpressionStatement]:
        expression = self.parse_expression(Precedence.LOWEST)
        if expression is None:
            return None

        if self.peek_token_is(TokenType.SEMICOLON):
            self.next_token()

        return ExpressionStatement(expression)

    def parse_block_statement(self) -> Block:
        """
        Parse statements after ``{`` up to the matching ``}``.

        An unterminated block stops at EOF.
        """
        statements: List[Statement] = []
        self.next_token()

        while not self.current_token_is(TokenType.RBRACE) and not self.current_token_is(TokenType.EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                statements.append(stmt)
            self.next_token()

        return Block(tuple(statements))

    # Expressions

    def parse_expression(self, precedence: Precedence) -> Optional[Expression]:
        """Parse an expression whose operators bind tighter than ``precedence``."""
        if self._depth >= MAX_NESTING_DEPTH:
            self._record(create_nesting_too_deep_error(self.current_token))
            self._skip_statement()
            return None

        self._depth += 1
        try:
            return self._parse_expression(precedence)
        finally:
            self._depth -= 1

    def _skip_statement(self):
        """Discard tokens through the next semicolon, or up to EOF."""
        while not self.current_token_is(TokenType.SEMICOLON) and not self.peek_token_is(TokenType.EOF):
            self.next_token()

    def _parse_expression(self, precedence: Precedence) -> Optional[Expression]:
        prefix_parser = self.prefix_parsers.get(self.current_token.type)
        if prefix_parser is None:
            self._record(create_no_prefix_rule_error(self.current_token))
            return None

        left = prefix_parser()
        if left is None:
            return None

        while not self.peek_token_is(TokenType.SEMICOLON) and precedence < self.peek_precedence():
            infix_parser = self.infix_parsers.get(self.peek_token.type)
            if infix_parser is None:
                return left

            self.next_token()
            left = infix_parser(left)
            if left is None:
                return None

        return left

    # Prefix parsers

    def _parse_identifier(self) -> Identifier:
        return Identifier(self.current_token.literal)

    def _parse_integer_literal(self) -> Optional[IntegerLiteral]:
        value = int(self.current_token.literal)
        if value > INT64_MAX:
            self._record(create_invalid_integer_error(self.current_token))
            return None
        return IntegerLiteral(value)

    def _parse_boolean_literal(self) -> BooleanLiteral:
        return BooleanLiteral(self.current_token_is(TokenType.TRUE))

    def _parse_prefix_expression(self) -> Prefix:
        """Parse ``!x`` / ``-x`` / ``+x``; a missing operand leaves a placeholder."""
        operator = self.current_token.literal
        self.next_token()
        operand = self.parse_expression(Precedence.PREFIX)
        return Prefix(operator, operand)

    def _parse_grouped_expression(self) -> Optional[Expression]:
        self.next_token()

        expression = self.parse_expression(Precedence.LOWEST)
        if expression is None:
            return None

        if not self.expect_peek(TokenType.RPAREN):
            return None
        return expression

    def _parse_if_expression(self) -> Optional[If]:
        """Parse ``if ( COND ) { BLOCK } [ else { BLOCK } ]``."""
        if not self.expect_peek(TokenType.LPAREN):
            return None

        self.next_token()
        condition = self.parse_expression(Precedence.LOWEST)
        if condition is None:
            return None

        if not self.expect_peek(TokenType.RPAREN):
            return None
        if not self.expect_peek(TokenType.LBRACE):
            return None

        consequence = self.parse_block_statement()

        alternative = None
        if self.peek_token_is(TokenType.ELSE):
            self.next_token()
            if not self.expect_peek(TokenType.LBRACE):
                return None
            alternative = self.parse_block_statement()

        return If(condition, consequence, alternative)

    def _parse_function_literal(self) -> Optional[FunctionLiteral]:
        """Parse ``fn ( params ) { BLOCK }``."""
        if not self.expect_peek(TokenType.LPAREN):
            return None

        parameters = self._parse_function_parameters()
        if parameters is None:
            return None

        if not self.expect_peek(TokenType.LBRACE):
            return None

        body = self.parse_block_statement()
        return FunctionLiteral(parameters, body)

    def _parse_function_parameters(self) -> Optional[Tuple[Identifier, ...]]:
        parameters: List[Identifier] = []

        if self.peek_token_is(TokenType.RPAREN):
            self.next_token()
            return ()

        if not self.expect_peek(TokenType.IDENT):
            return None
        parameters.append(Identifier(self.current_token.literal))

        while self.peek_token_is(TokenType.COMMA):
            self.next_token()
            if not self.expect_peek(TokenType.IDENT):
                return None
            parameters.append(Identifier(self.current_token.literal))

        if not self.expect_peek(TokenType.RPAREN):
            return None

        return tuple(parameters)

    # Infix parsers

    def _parse_infix_expression(self, left: Expression) -> Optional[Infix]:
        """Parse a binary operator; equal precedence folds to the left."""
        operator = self.current_token.literal
        precedence = self.current_precedence()
        self.next_token()

        right = self.parse_expression(precedence)
        if right is None:
            return None
        return Infix(operator, left, right)

    def _parse_call_expression(self, function: Expression) -> Optional[Call]:
        arguments = self._parse_expression_list(TokenType.RPAREN)
        if arguments is None:
            return None
        return Call(function, arguments)

    def _parse_expression_list(self, end: TokenType) -> Optional[Tuple[Expression, ...]]:
        """Parse comma separated expressions up to ``end``."""
        items: List[Expression] = []

        if self.peek_token_is(end):
            self.next_token()
            return ()

        self.next_token()
        item = self.parse_expression(Precedence.LOWEST)
        if item is None:
            return None
        items.append(item)

        while self.peek_token_is(TokenType.COMMA):
            self.next_token()
            self.next_token()
            item = self.parse_expression(Precedence.LOWEST)
            if item is None:
                return None
            items.append(item)

        if not self.expect_peek(end):
            return None

        return tuple(items)


def parse_string(source: str, strict: bool = False) -> Tuple[Program, List[str]]:
    """
    Convenience function to parse a source string.

    Args:
        source: Source code string
        strict: Raise instead of returning diagnostics

    Returns:
        The Program and the list of diagnostic messages

    Raises:
        ParseFailure: If strict and any diagnostic was recorded
    """
    parser = Parser(Lexer(source))
    program = parser.parse_program()

    if strict and parser.errors:
        raise ParseFailure(parser.errors)

    return program, parser.error_messages()
