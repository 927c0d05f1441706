"""
Evaluation diagnostics for Monkey.

Type mismatches are not errors here: they surface as an absent result.
These diagnostics cover syntax the evaluator deliberately does not run
(bindings, identifiers, functions and calls) and trees nested too deeply
to walk.

Author: xwest
"""

from typing import Optional

from ..lexer.errors import Diagnostic


class EvaluationError(Exception):
    """
    A construct the evaluator rejected.

    Collected on ``Evaluator.errors``; never raised by ``eval_program``.
    """

    def __init__(self, message: str, node: Optional[object] = None, code: Optional[str] = None):
        super().__init__(message)
        self.diagnostic = Diagnostic(message=message, severity="error", code=code)
        self.node = node

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return self.diagnostic.message


def create_unsupported_construct_error(node: object) -> EvaluationError:
    """Create an error for a node outside the evaluated subset."""
    kind = type(node).__name__
    return EvaluationError(
        message=f"unsupported construct: {kind}",
        node=node,
        code="E001",
    )


def create_nesting_too_deep_error(node: object) -> EvaluationError:
    """Create an error for a tree nested past the evaluator's limit."""
    return EvaluationError(
        message="expression nested too deeply",
        node=node,
        code="E002",
    )
