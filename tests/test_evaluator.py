"""
Test suite for the Monkey tree-walking evaluator.

Tests cover:
- Integer arithmetic, wrapping and truncating division
- Boolean comparisons and the bang operator
- if / else truthiness
- return propagation through nested blocks
- Rejection of constructs outside the evaluated subset

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from monkey.config import InterpreterConfig
from monkey.evaluator import (
    Evaluator, EvaluationResult, eval_node, eval_program, evaluate_string,
    Integer, Boolean, Null, ReturnValue, NULL, TRUE, FALSE, inspect, is_truthy,
)
from monkey.evaluator.objects import INT64_MAX, INT64_MIN, wrap_int64
from monkey.parser import (
    Block, BooleanLiteral, ExpressionStatement, If, IntegerLiteral, Prefix,
    ParseFailure, Return, parse_string,
)


def run(source: str):
    program, messages = parse_string(source)
    assert messages == [], messages
    return eval_program(program)


class TestIntegerEvaluation(unittest.TestCase):
    """Test cases for integer expressions."""

    def test_arithmetic(self):
        cases = [
            ("5", 5),
            ("10", 10),
            ("-5", -5),
            ("-10", -10),
            ("5 + 5 + 5 + 5 - 10", 10),
            ("2 * 2 * 2 * 2 * 2", 32),
            ("-50 + 100 + -50", 0),
            ("5 * 2 + 10", 20),
            ("5 + 2 * 10", 25),
            ("20 + 2 * -10", 0),
            ("50 / 2 * 2 + 10", 60),
            ("2 * (5 + 10)", 30),
            ("3 * 3 * 3 + 10", 37),
            ("3 * (3 * 3) + 10", 37),
            ("(5 + 10 * 2 + 15 / 3) * 2 + -10", 50),
        ]
        for source, expected in cases:
            with self.subTest(source=source):
                self.assertEqual(run(source), Integer(expected))

    def test_division_truncates_toward_zero(self):
        cases = [
            ("7 / 2", 3),
            ("-7 / 2", -3),
            ("7 / -2", -3),
            ("-7 / -2", 3),
            ("-8 / 2", -4),
        ]
        for source, expected in cases:
            with self.subTest(source=source):
                self.assertEqual(run(source), Integer(expected))

    def test_division_by_zero_has_no_value(self):
        self.assertEqual(run("1 / 0"), NULL)
        self.assertEqual(run("5; 10 / (5 - 5)"), NULL)

    def test_overflow_wraps(self):
        self.assertEqual(run("9223372036854775807 + 1"), Integer(INT64_MIN))
        self.assertEqual(run("-9223372036854775807 - 2"), Integer(INT64_MAX))
        self.assertEqual(run("4611686018427387904 * 2"), Integer(INT64_MIN))

    def test_wrap_int64(self):
        self.assertEqual(wrap_int64(0), 0)
        self.assertEqual(wrap_int64(INT64_MAX), INT64_MAX)
        self.assertEqual(wrap_int64(INT64_MAX + 1), INT64_MIN)
        self.assertEqual(wrap_int64(INT64_MIN - 1), INT64_MAX)
        self.assertEqual(wrap_int64(-(INT64_MIN)), INT64_MIN)

    def test_minus_requires_integer(self):
        self.assertEqual(run("-true"), NULL)
        self.assertEqual(run("-(1 < 2)"), NULL)

    def test_unary_plus_has_no_value(self):
        self.assertEqual(run("+5"), NULL)
        self.assertEqual(run("1; +5"), NULL)


class TestBooleanEvaluation(unittest.TestCase):
    """Test cases for comparisons and negation."""

    def test_comparisons(self):
        cases = [
            ("true", True),
            ("false", False),
            ("1 < 2", True),
            ("1 > 2", False),
            ("1 < 1", False),
            ("1 > 1", False),
            ("1 == 1", True),
            ("1 != 1", False),
            ("1 == 2", False),
            ("1 != 2", True),
        ]
        for source, expected in cases:
            with self.subTest(source=source):
                self.assertEqual(run(source), Boolean(expected))

    def test_boolean_operands_have_no_value(self):
        """Comparison operators are only defined for two integers."""
        for source in ["true == true", "(1 < 2) == true", "true != false", "1 + true"]:
            with self.subTest(source=source):
                self.assertEqual(run(source), NULL)

    def test_bang_operator(self):
        cases = [
            ("!true", False),
            ("!false", True),
            ("!5", False),
            ("!!true", True),
            ("!!false", False),
            ("!!5", True),
            ("!0", False),
        ]
        for source, expected in cases:
            with self.subTest(source=source):
                self.assertEqual(run(source), Boolean(expected))

    def test_bang_of_null_is_true(self):
        self.assertEqual(run("!if (false) { 1 }"), TRUE)

    def test_bang_of_absent_operand_has_no_value(self):
        self.assertEqual(run("!(1 / 0)"), NULL)

    def test_booleans_are_singletons(self):
        self.assertIs(run("1 < 2"), TRUE)
        self.assertIs(run("!true"), FALSE)


class TestControlFlow(unittest.TestCase):
    """Test cases for if / else and return."""

    def test_if_else_expressions(self):
        cases = [
            ("if (true) { 10 }", Integer(10)),
            ("if (false) { 10 }", NULL),
            ("if (1) { 10 }", Integer(10)),
            ("if (1 < 2) { 10 }", Integer(10)),
            ("if (1 > 2) { 10 }", NULL),
            ("if (1 > 2) { 10 } else { 20 }", Integer(20)),
            ("if (1 < 2) { 10 } else { 20 }", Integer(10)),
            ("if (true) {}", NULL),
        ]
        for source, expected in cases:
            with self.subTest(source=source):
                self.assertEqual(run(source), expected)

    def test_if_with_absent_condition(self):
        self.assertEqual(run("if (1 / 0) { 10 } else { 20 }"), NULL)

    def test_false_if_without_else_is_null(self):
        node = If(BooleanLiteral(False), Block((ExpressionStatement(IntegerLiteral(10)),)))
        self.assertIs(Evaluator().eval(node), NULL)

    def test_return_statements(self):
        cases = [
            ("return 10;", 10),
            ("return 10; 9;", 10),
            ("return 2 * 5; 9;", 10),
            ("9; return 2 * 5; 9;", 10),
            ("if (10 > 1) { return 10; }", 10),
        ]
        for source, expected in cases:
            with self.subTest(source=source):
                self.assertEqual(run(source), Integer(expected))

    def test_nested_return_unwinds_outer_block(self):
        source = "if (10 > 1) { if (10 > 1) { return 10; } 129; return 1; }"
        self.assertEqual(run(source), Integer(10))

    def test_nested_return_skips_trailing_statements_multiline(self):
        source = """
        if (10 > 1) {
            if (10 > 1) {
                return 10;
            }
            129;
            return 1;
        }
        """
        self.assertEqual(run(source), Integer(10))

    def test_return_escapes_operators(self):
        self.assertEqual(run("1 + if (true) { return 5; }"), Integer(5))
        self.assertEqual(run("-if (true) { return 5; }; 7"), Integer(5))

    def test_return_of_absent_value(self):
        self.assertEqual(run("return 1 / 0; 5"), NULL)

    def test_block_yields_return_value_unchanged(self):
        block = Block((
            ExpressionStatement(IntegerLiteral(1)),
            Return(IntegerLiteral(2)),
            ExpressionStatement(IntegerLiteral(3)),
        ))
        self.assertEqual(Evaluator().eval(block), ReturnValue(Integer(2)))

    def test_program_result_is_last_statement(self):
        self.assertEqual(run("1; 2; 3"), Integer(3))
        self.assertEqual(run("1; 2 / 0"), NULL)

    def test_empty_program_is_null(self):
        self.assertEqual(run(""), NULL)


class TestUnsupportedConstructs(unittest.TestCase):
    """Test cases for syntax that parses but does not evaluate."""

    def _evaluate(self, source: str):
        program, messages = parse_string(source)
        self.assertEqual(messages, [])
        evaluator = Evaluator()
        return evaluator.eval_program(program), [str(e) for e in evaluator.errors]

    def test_let_is_rejected(self):
        value, errors = self._evaluate("let x = 5;")
        self.assertEqual(value, NULL)
        self.assertEqual(errors, ["unsupported construct: Let"])

    def test_identifier_is_rejected(self):
        value, errors = self._evaluate("5; x; 7")
        self.assertEqual(value, Integer(7))
        self.assertEqual(errors, ["unsupported construct: Identifier"])

    def test_functions_and_calls_are_rejected(self):
        _, errors = self._evaluate("fn(x) { x }; add(1, 2)")
        self.assertEqual(errors, [
            "unsupported construct: FunctionLiteral",
            "unsupported construct: Call",
        ])

    def test_identifier_inside_operator(self):
        value, errors = self._evaluate("1 + x")
        self.assertEqual(value, NULL)
        self.assertEqual(len(errors), 1)

    def test_error_code(self):
        evaluator = Evaluator()
        evaluator.eval_program(parse_string("y")[0])
        self.assertEqual(evaluator.errors[0].diagnostic.code, "E001")

    def test_prefix_placeholder_has_no_value(self):
        self.assertIsNone(eval_node(Prefix("-", None)))

    def test_non_ast_input_is_a_type_error(self):
        with self.assertRaises(TypeError):
            Evaluator().eval(42)


class TestNestingLimits(unittest.TestCase):
    """Test cases for very deep expressions."""

    def test_deep_source_reports_instead_of_crashing(self):
        result = evaluate_string("1" + " + (1" * 300 + ")" * 300)
        self.assertEqual(result.parse_messages, ["expression nested too deeply"])
        self.assertEqual(result.value, NULL)

    def test_deep_prefix_chain_from_source(self):
        result = evaluate_string("-" * 600 + "5")
        self.assertEqual(result.parse_messages, ["expression nested too deeply"])
        self.assertEqual(result.render(), "nil")

    def test_moderate_nesting_still_evaluates(self):
        self.assertEqual(run("-" * 50 + "5"), Integer(5))
        self.assertEqual(run("(" * 40 + "2 * 3" + ")" * 40), Integer(6))

    def test_deep_tree_has_no_value(self):
        node = IntegerLiteral(1)
        for _ in range(5000):
            node = Prefix("-", node)

        evaluator = Evaluator()
        self.assertIsNone(evaluator.eval(node))
        self.assertEqual([str(e) for e in evaluator.errors], ["expression nested too deeply"])
        self.assertEqual(evaluator.errors[0].diagnostic.code, "E002")

    def test_evaluator_is_reusable_after_hitting_the_limit(self):
        node = IntegerLiteral(1)
        for _ in range(5000):
            node = Prefix("-", node)

        evaluator = Evaluator()
        evaluator.eval(node)
        self.assertEqual(evaluator.eval(Prefix("-", IntegerLiteral(3))), Integer(-3))


class TestInspect(unittest.TestCase):
    """Test cases for rendering values."""

    def test_inspect(self):
        self.assertEqual(inspect(Integer(-3)), "-3")
        self.assertEqual(inspect(TRUE), "true")
        self.assertEqual(inspect(FALSE), "false")
        self.assertEqual(inspect(NULL), "nil")

    def test_custom_null_sentinel(self):
        self.assertEqual(inspect(NULL, "null"), "null")
        self.assertEqual(inspect(Integer(1), "null"), "1")

    def test_return_value_is_unwrapped(self):
        self.assertEqual(inspect(ReturnValue(Integer(3))), "3")
        self.assertEqual(inspect(ReturnValue(NULL), "none"), "none")

    def test_truthiness(self):
        self.assertTrue(is_truthy(Integer(0)))
        self.assertTrue(is_truthy(TRUE))
        self.assertFalse(is_truthy(FALSE))
        self.assertFalse(is_truthy(Null()))


class TestEvaluateString(unittest.TestCase):
    """Test cases for the end-to-end helper."""

    def test_success(self):
        result = evaluate_string("if (1 > 2) { 10 } else { 20 }")
        self.assertIsInstance(result, EvaluationResult)
        self.assertTrue(result.ok)
        self.assertEqual(result.value, Integer(20))
        self.assertEqual(result.render(), "20")
        self.assertEqual(str(result.program), "if (1 > 2) { 10 } else { 20 }")

    def test_null_rendering(self):
        result = evaluate_string("if (1 > 2) { 10 }")
        self.assertEqual(result.render(), "nil")
        self.assertEqual(result.render("null"), "null")

    def test_parse_errors_are_reported_and_rest_runs(self):
        result = evaluate_string("let = 5; 7")
        self.assertFalse(result.ok)
        self.assertEqual(len(result.parse_errors), 2)
        self.assertEqual(result.value, Integer(7))

    def test_eval_errors_are_reported(self):
        result = evaluate_string("x")
        self.assertFalse(result.ok)
        self.assertEqual(result.eval_messages, ["unsupported construct: Identifier"])

    def test_strict_mode_raises(self):
        with self.assertRaises(ParseFailure):
            evaluate_string("let = 5;", InterpreterConfig(strict=True))


if __name__ == "__main__":
    unittest.main()
