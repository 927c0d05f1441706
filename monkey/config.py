"""
Interpreter configuration.

Author: xwest
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

TRUTHY_ENV_VALUES = {"1", "true", "yes", "on"}


@dataclass
class InterpreterConfig:
    """Configuration parameters for running Monkey source."""

    # Display
    null_sentinel: str = "nil"
    show_ast: bool = False

    # Diagnostics
    strict: bool = False            # Treat parse diagnostics as fatal
    log_level: str = "WARNING"
    verbose: bool = False           # Show codes and positions on diagnostics

    def __post_init__(self):
        self.log_level = self.log_level.upper()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "InterpreterConfig":
        """Build a config from MONKEY_* environment variables."""
        env = os.environ if environ is None else environ
        config = cls()
        if "MONKEY_NULL_SENTINEL" in env:
            config.null_sentinel = env["MONKEY_NULL_SENTINEL"]
        if "MONKEY_STRICT" in env:
            config.strict = env["MONKEY_STRICT"].strip().lower() in TRUTHY_ENV_VALUES
        if "MONKEY_LOG_LEVEL" in env:
            config.log_level = env["MONKEY_LOG_LEVEL"].upper()
        return config
