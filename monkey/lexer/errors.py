"""
Diagnostics shared by every Monkey front-end stage.

The lexer never aborts: an unrecognized character becomes an ILLEGAL
token and a diagnostic is noted here so callers can report it.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """A single message produced while lexing, parsing or evaluating."""
    message: str
    line: int = 0
    column: int = 0
    severity: str = "error"  # "error", "warning"
    code: Optional[str] = None

    def __str__(self) -> str:
        return self.message

    def format(self) -> str:
        """Render with severity, code and location, for terminal output."""
        prefix = self.severity.upper()
        if self.code:
            prefix += f"[{self.code}]"
        if self.line:
            return f"{prefix} {self.line}:{self.column}: {self.message}"
        return f"{prefix}: {self.message}"


def create_illegal_character_diagnostic(char: str, line: int, column: int) -> Diagnostic:
    """Create a warning for a character the lexer does not recognize."""
    if char.isprintable():
        message = f"illegal character {char!r}"
    else:
        message = f"illegal character U+{ord(char):04X}"
    return Diagnostic(message, line, column, severity="warning", code="L001")
