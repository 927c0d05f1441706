"""
Command line front-end for Monkey.

Runs a whole file or an ``-e`` snippet through one stage of the
pipeline. There is no interactive shell.

Author: xwest
"""

import logging
import sys
from typing import Optional, TextIO

import click

from .config import InterpreterConfig
from .evaluator import evaluate_string
from .lexer import Lexer, TokenType
from .parser import ParseFailure, Parser

logger = logging.getLogger(__name__)


def _read_source(source_file: Optional[TextIO], expression: Optional[str]) -> str:
    if expression is not None:
        return expression
    if source_file is None:
        raise click.UsageError("Provide a SOURCE_FILE or -e EXPRESSION.")
    return source_file.read()


def _describe(error, verbose: bool) -> str:
    """Plain message, or severity, code and position when verbose."""
    return error.diagnostic.format() if verbose else str(error)


def _report_parse_errors(errors, verbose: bool = False) -> None:
    click.echo("parser errors:", err=True)
    for error in errors:
        click.echo(f"\t{_describe(error, verbose)}", err=True)


source_argument = click.argument("source_file", type=click.File("r", encoding="utf-8"), required=False)
expression_option = click.option("-e", "--expression", help="Source text to use instead of a file.")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log pipeline details to stderr.")
@click.option("--null-sentinel", default=None, help="Text printed for the null value.")
@click.option("--strict", is_flag=True, help="Fail when the parse reports any diagnostic.")
@click.pass_context
def main(ctx: click.Context, verbose: bool, null_sentinel: Optional[str], strict: bool):
    """Monkey language tools."""
    config = InterpreterConfig.from_env()
    if verbose:
        config.log_level = "DEBUG"
        config.verbose = True
    if null_sentinel is not None:
        config.null_sentinel = null_sentinel
    if strict:
        config.strict = True

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger.debug("config: %s", config)
    ctx.obj = config


@main.command()
@source_argument
@expression_option
def tokens(source_file, expression):
    """Print the token stream."""
    lexer = Lexer(_read_source(source_file, expression))
    for token in lexer:
        if token.type == TokenType.EOF:
            break
        click.echo(f"{token.type.name} {token.literal!r}")


@main.command()
@source_argument
@expression_option
@click.pass_obj
def parse(config: InterpreterConfig, source_file, expression):
    """Print the parsed program in fully parenthesized form."""
    parser = Parser(Lexer(_read_source(source_file, expression)))
    program = parser.parse_program()

    if parser.errors:
        _report_parse_errors(parser.errors, config.verbose)
        sys.exit(1)

    click.echo(str(program))


@main.command(name="eval")
@source_argument
@expression_option
@click.option("--show-ast", is_flag=True, help="Print the parsed program before its value.")
@click.pass_obj
def eval_command(config: InterpreterConfig, source_file, expression, show_ast: bool):
    """Evaluate the program and print its value."""
    source = _read_source(source_file, expression)
    config.show_ast = config.show_ast or show_ast

    try:
        result = evaluate_string(source, config)
    except ParseFailure as failure:
        _report_parse_errors(failure.errors, config.verbose)
        sys.exit(1)

    if result.parse_errors:
        _report_parse_errors(result.parse_errors, config.verbose)
        sys.exit(1)

    if config.show_ast:
        click.echo(str(result.program))

    for error in result.eval_errors:
        click.echo(f"evaluation error: {_describe(error, config.verbose)}", err=True)

    click.echo(result.render(config.null_sentinel))


if __name__ == "__main__":
    main()
