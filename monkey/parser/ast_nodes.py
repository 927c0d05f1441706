"""
Abstract Syntax Tree node definitions for Monkey.

Nodes are frozen dataclasses grouped into two closed unions, ``Statement``
and ``Expression``. Consumers dispatch on the concrete type; there is no
shared base class and no visitor. Child sequences are tuples so a tree
cannot be mutated once the parser has built it.

``str(node)`` renders the fully parenthesized form used by the tests and
the ``monkey parse`` command.

Author: xwest
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


# ============================================================================
# Expressions
# ============================================================================

@dataclass(frozen=True)
class IntegerLiteral:
    """Signed 64-bit integer literal."""
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BooleanLiteral:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Identifier:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Prefix:
    """
    Prefix operation such as ``-x`` or ``!x``.

    ``operand`` is None only when the operand failed to parse; such a node
    is a placeholder and never a valid evaluation input.
    """
    operator: str
    operand: Optional['Expression']

    def __str__(self) -> str:
        if self.operand is None:
            return f"({self.operator}None)"
        return f"{self.operator}{self.operand}"


@dataclass(frozen=True)
class Infix:
    """Binary operation: left op right."""
    operator: str
    left: 'Expression'
    right: 'Expression'

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


@dataclass(frozen=True)
class If:
    condition: 'Expression'
    consequence: 'Block'
    alternative: Optional['Block'] = None

    def __str__(self) -> str:
        text = f"if {self.condition} {{ {self.consequence} }}"
        if self.alternative is not None:
            text += f" else {{ {self.alternative} }}"
        return text


@dataclass(frozen=True)
class FunctionLiteral:
    """``fn (a, b) { ... }``. Parsed, but not evaluated."""
    parameters: Tuple[Identifier, ...]
    body: 'Block'

    def __str__(self) -> str:
        params = " , ".join(str(p) for p in self.parameters)
        return f"fn ({params}) {{ {self.body} }}"


@dataclass(frozen=True)
class Call:
    """``callee(args...)``. Parsed, but not evaluated."""
    function: 'Expression'
    arguments: Tuple['Expression', ...] = ()

    def __str__(self) -> str:
        args = ", ".join(str(a) for a in self.arguments)
        return f"{self.function}({args})"


Expression = Union[
    IntegerLiteral, BooleanLiteral, Identifier, Prefix, Infix, If,
    FunctionLiteral, Call,
]


# ============================================================================
# Statements
# ============================================================================

@dataclass(frozen=True)
class Let:
    name: Identifier
    value: Expression

    def __str__(self) -> str:
        return f"let {self.name} = {self.value};"


@dataclass(frozen=True)
class Return:
    value: Expression

    def __str__(self) -> str:
        return f"return {self.value};"


@dataclass(frozen=True)
class Block:
    """Ordered statements between braces; order is source order."""
    statements: Tuple['Statement', ...] = ()

    def __str__(self) -> str:
        return "".join(str(s) for s in self.statements)

    def __len__(self) -> int:
        return len(self.statements)


@dataclass(frozen=True)
class ExpressionStatement:
    """A bare expression used as a statement."""
    expression: Expression

    def __str__(self) -> str:
        return str(self.expression)


Statement = Union[Let, Return, Block, ExpressionStatement]


# ============================================================================
# Top-level
# ============================================================================

@dataclass(frozen=True)
class Program:
    """Root node: the parse unit and evaluation root."""
    statements: Tuple[Statement, ...] = ()

    def __str__(self) -> str:
        return "\n".join(str(s) for s in self.statements)

    def __len__(self) -> int:
        return len(self.statements)

    def __iter__(self):
        return iter(self.statements)

