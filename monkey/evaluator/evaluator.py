"""
Tree-walking evaluator for Monkey.

Evaluation is strict, depth-first and post-order: children are reduced
before their parent combines them. A sub-result of ``None`` means the
sub-expression had no value (wrong operand types, unknown operator,
division by zero or an unsupported construct); the caller stops
evaluating that expression and passes ``None`` up.

``return`` is not an exception. It produces a ReturnValue that every
block, ``if`` and operator checks for and forwards unchanged until
``eval_program`` unwraps it.

Author: xwest
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from ..config import InterpreterConfig
from ..parser.ast_nodes import (
    Block, BooleanLiteral, Call, ExpressionStatement, FunctionLiteral,
    Identifier, If, Infix, IntegerLiteral, Let, Prefix, Program, Return,
)
from ..lexer.lexer import Lexer
from ..parser.errors import ParseError, ParseFailure
from ..parser.parser import Parser
from .errors import (
    EvaluationError, create_nesting_too_deep_error, create_unsupported_construct_error,
)
from .objects import (
    NULL, TRUE, FALSE, Boolean, Integer, Null, Object, ReturnValue,
    inspect, is_truthy, native_bool_to_boolean, wrap_int64,
)

logger = logging.getLogger(__name__)

# Deepest node chain walked before giving up on a sub-expression
MAX_EVAL_DEPTH = 256


def _truncated_div(left: int, right: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


INTEGER_OPERATORS: Dict[str, Callable[[int, int], Object]] = {
    "+": lambda l, r: Integer(wrap_int64(l + r)),
    "-": lambda l, r: Integer(wrap_int64(l - r)),
    "*": lambda l, r: Integer(wrap_int64(l * r)),
    "/": lambda l, r: Integer(wrap_int64(_truncated_div(l, r))),
    "<": lambda l, r: native_bool_to_boolean(l < r),
    ">": lambda l, r: native_bool_to_boolean(l > r),
    "==": lambda l, r: native_bool_to_boolean(l == r),
    "!=": lambda l, r: native_bool_to_boolean(l != r),
}


class Evaluator:
    """
    Reduces AST nodes to runtime values.

    Constructs outside the evaluated subset are recorded on ``errors`` and
    yield ``None``; evaluation never raises for user input.
    """

    def __init__(self):
        self.errors: List[EvaluationError] = []
        self._depth = 0

        self._handlers: Dict[type, Callable[..., Optional[Object]]] = {
            # Statements
            ExpressionStatement: self._eval_expression_statement,
            Return: self._eval_return,
            Block: self._eval_block,
            Let: self._reject,

            # Expressions
            IntegerLiteral: self._eval_integer,
            BooleanLiteral: self._eval_boolean,
            Prefix: self._eval_prefix,
            Infix: self._eval_infix,
            If: self._eval_if,
            Identifier: self._reject,
            FunctionLiteral: self._reject,
            Call: self._reject,
        }

    def eval(self, node) -> Optional[Object]:
        """
        Evaluate a statement or expression node.

        A tree nested deeper than MAX_EVAL_DEPTH yields no value and
        records a diagnostic instead of exhausting the call stack.
        """
        handler = self._handlers.get(type(node))
        if handler is None:
            raise TypeError(f"not a Monkey AST node: {node!r}")

        if self._depth >= MAX_EVAL_DEPTH:
            error = create_nesting_too_deep_error(node)
            logger.debug("%s", error)
            self.errors.append(error)
            return None

        self._depth += 1
        try:
            return handler(node)
        finally:
            self._depth -= 1

    def eval_program(self, program: Program) -> Object:
        """
        Evaluate every statement in order and return the last value.

        A ReturnValue stops evaluation and is unwrapped; an absent final
        result becomes Null.
        """
        result: Optional[Object] = None

        for stmt in program.statements:
            result = self.eval(stmt)
            if isinstance(result, ReturnValue):
                return result.value

        return NULL if result is None else result

    # Statements

    def _eval_expression_statement(self, node: ExpressionStatement) -> Optional[Object]:
        return self.eval(node.expression)

    def _eval_return(self, node: Return) -> ReturnValue:
        value = self.eval(node.value)
        if isinstance(value, ReturnValue):
            return value
        return ReturnValue(NULL if value is None else value)

    def _eval_block(self, node: Block) -> Object:
        result: Object = NULL

        for stmt in node.statements:
            value = self.eval(stmt)
            if isinstance(value, ReturnValue):
                return value
            if value is None:
                continue
            result = value

        return result

    # Expressions

    def _eval_integer(self, node: IntegerLiteral) -> Integer:
        return Integer(node.value)

    def _eval_boolean(self, node: BooleanLiteral) -> Boolean:
        return native_bool_to_boolean(node.value)

    def _eval_prefix(self, node: Prefix) -> Optional[Object]:
        if node.operand is None:
            logger.debug("prefix %r has no operand", node.operator)
            return None

        operand = self.eval(node.operand)
        if operand is None or isinstance(operand, ReturnValue):
            return operand

        if node.operator == "!":
            return self._eval_bang(operand)
        if node.operator == "-":
            return self._eval_minus(operand)

        logger.debug("unknown prefix operator %r", node.operator)
        return None

    @staticmethod
    def _eval_bang(operand: Object) -> Boolean:
        if isinstance(operand, Boolean):
            return FALSE if operand.value else TRUE
        if isinstance(operand, Null):
            return TRUE
        # Integers are truthy
        return FALSE

    @staticmethod
    def _eval_minus(operand: Object) -> Optional[Integer]:
        if isinstance(operand, Integer):
            return Integer(wrap_int64(-operand.value))
        logger.debug("unary '-' is not defined for %s", type(operand).__name__)
        return None

    def _eval_infix(self, node: Infix) -> Optional[Object]:
        left = self.eval(node.left)
        if left is None or isinstance(left, ReturnValue):
            return left

        right = self.eval(node.right)
        if right is None or isinstance(right, ReturnValue):
            return right

        if not (isinstance(left, Integer) and isinstance(right, Integer)):
            logger.debug("%r is not defined for %s and %s",
                         node.operator, type(left).__name__, type(right).__name__)
            return None

        operation = INTEGER_OPERATORS.get(node.operator)
        if operation is None:
            logger.debug("unknown infix operator %r", node.operator)
            return None

        if node.operator == "/" and right.value == 0:
            logger.debug("division by zero")
            return None

        return operation(left.value, right.value)

    def _eval_if(self, node: If) -> Optional[Object]:
        condition = self.eval(node.condition)
        if condition is None or isinstance(condition, ReturnValue):
            return condition

        if is_truthy(condition):
            return self.eval(node.consequence)
        if node.alternative is not None:
            return self.eval(node.alternative)
        return NULL

    def _reject(self, node) -> None:
        error = create_unsupported_construct_error(node)
        logger.debug("%s", error)
        self.errors.append(error)
        return None


@dataclass
class EvaluationResult:
    """Outcome of running a source string end to end."""
    value: Object
    program: Program = field(default_factory=Program)
    parse_errors: List[ParseError] = field(default_factory=list)
    eval_errors: List[EvaluationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.parse_errors and not self.eval_errors

    @property
    def parse_messages(self) -> List[str]:
        return [str(e) for e in self.parse_errors]

    @property
    def eval_messages(self) -> List[str]:
        return [str(e) for e in self.eval_errors]

    def render(self, null_sentinel: str = "nil") -> str:
        return inspect(self.value, null_sentinel)


def eval_node(node) -> Optional[Object]:
    """Evaluate a single statement or expression with a fresh Evaluator."""
    return Evaluator().eval(node)


def eval_program(program: Program) -> Object:
    """Evaluate a whole program with a fresh Evaluator."""
    return Evaluator().eval_program(program)


def evaluate_string(source: str, config: Optional[InterpreterConfig] = None) -> EvaluationResult:
    """
    Lex, parse and evaluate a source string.

    Statements that failed to parse are skipped; the rest still run.

    Raises:
        ParseFailure: If ``config.strict`` and the parse reported problems
    """
    config = config or InterpreterConfig()

    parser = Parser(Lexer(source))
    program = parser.parse_program()
    if config.strict and parser.errors:
        raise ParseFailure(parser.errors)

    evaluator = Evaluator()
    value = evaluator.eval_program(program)

    return EvaluationResult(
        value=value,
        program=program,
        parse_errors=list(parser.errors),
        eval_errors=list(evaluator.errors),
    )
