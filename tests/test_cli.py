"""
Test suite for the monkey command line tool.

Author: xwest
"""

import unittest
import sys
import os

from click.testing import CliRunner

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from monkey.cli import main


class TestCli(unittest.TestCase):
    """Test cases for the tokens / parse / eval commands."""

    def setUp(self):
        self.runner = CliRunner()

    def invoke(self, *args):
        return self.runner.invoke(main, list(args))

    def test_eval_expression(self):
        result = self.invoke("eval", "-e", "(5 + 10 * 2 + 15 / 3) * 2 + -10")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("50", result.output)

    def test_eval_boolean(self):
        result = self.invoke("eval", "-e", "!!5")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("true", result.output)

    def test_eval_null_sentinel(self):
        result = self.invoke("eval", "-e", "if (1 > 2) { 10 }")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("nil", result.output)

        result = self.invoke("--null-sentinel", "null", "eval", "-e", "if (1 > 2) { 10 }")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("null", result.output)

    def test_eval_show_ast(self):
        result = self.invoke("eval", "--show-ast", "-e", "1 + 2 * 3")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("(1 + (2 * 3))", result.output)
        self.assertIn("7", result.output)

    def test_eval_parse_error(self):
        result = self.invoke("eval", "-e", "let x 5;")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("expected next token to be ASSIGN, got INT instead", result.output)

    def test_eval_unsupported_construct(self):
        result = self.invoke("eval", "-e", "let x = 5;")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("unsupported construct: Let", result.output)

    def test_eval_file(self):
        with self.runner.isolated_filesystem():
            with open("program.monkey", "w", encoding="utf-8") as f:
                f.write("if (10 > 1) {\n  if (10 > 1) { return 10; }\n  return 1;\n}\n")
            result = self.invoke("eval", "program.monkey")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("10", result.output)

    def test_missing_source(self):
        result = self.invoke("eval")
        self.assertEqual(result.exit_code, 2)

    def test_parse(self):
        result = self.invoke("parse", "-e", "5 * 5 * 2 + 10 * 5 - 2;")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("((((5 * 5) * 2) + (10 * 5)) - 2)", result.output)

    def test_parse_errors(self):
        result = self.invoke("parse", "-e", "(5 + 5")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("parser errors:", result.output)
        self.assertIn("expected next token to be RPAREN, got EOF instead", result.output)

    def test_strict_parse(self):
        result = self.invoke("--strict", "parse", "-e", "let = 1;")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("expected next token to be IDENT, got ASSIGN instead", result.output)

    def test_verbose_parse_errors_show_code_and_position(self):
        result = self.invoke("--verbose", "parse", "-e", "let x 5;")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("ERROR[P001] 1:7: expected next token to be ASSIGN, got INT instead", result.output)

    def test_verbose_eval_errors_show_code(self):
        result = self.invoke("-v", "eval", "-e", "x")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("ERROR[E001]: unsupported construct: Identifier", result.output)

    def test_deeply_nested_source(self):
        result = self.invoke("eval", "-e", "-" * 600 + "5")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("expression nested too deeply", result.output)

    def test_tokens(self):
        result = self.invoke("tokens", "-e", "let x = 5;")
        self.assertEqual(result.exit_code, 0)
        for line in ["LET 'let'", "IDENT 'x'", "ASSIGN '='", "INT '5'", "SEMICOLON ';'"]:
            self.assertIn(line, result.output)
        self.assertNotIn("EOF", result.output)

    def test_tokens_illegal(self):
        result = self.invoke("tokens", "-e", "@")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("ILLEGAL '@'", result.output)


if __name__ == "__main__":
    unittest.main()
