"""
Source formatting for generated models.

Generated code is piped through prettier by default. A basic formatter
that only normalises whitespace is available for environments without
Node.js.
"""

import re
import subprocess
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from .errors import RenderFailure
from .naming import InvalidConfiguration
from ...logging_config import get_logger

logger = get_logger(__name__)

PRETTIER_COMMAND = ("npx", "prettier")

# Options that are on by default in prettier and can only be turned off
_NEGATABLE_OPTIONS = {
    "semi",
    "bracket-spacing",
    "config",
    "editorconfig",
    "color",
    "error-on-unmatched-pattern",
    "plugin-search",
}


class FormatterError(RenderFailure):
    """Exception raised when the formatter rejects generated code."""

    pass


class CodeFormatter(ABC):
    """Formats generated source text."""

    @abstractmethod
    def format(self, code: str) -> str:
        pass


class BasicFormatter(CodeFormatter):
    """Strips trailing whitespace and collapses blank lines."""

    def format(self, code: str) -> str:
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:  # Allow max 1 consecutive blank line
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"


class PrettierFormatter(CodeFormatter):
    """Runs prettier on the generated code via its CLI."""

    def __init__(
        self,
        options: Optional[Dict[str, Any]] = None,
        command: Sequence[str] = PRETTIER_COMMAND,
        timeout: int = 60,
    ):
        self.options = dict(options or {})
        self.command = list(command)
        self.timeout = timeout

        for key, value in self.options.items():
            if isinstance(value, dict):
                raise InvalidConfiguration(
                    f"Formatter option '{key}' cannot be passed to prettier on the command line"
                )

    def build_args(self) -> List[str]:
        """Translate prettier API options into CLI arguments."""
        args = list(self.command)
        for key, value in self.options.items():
            flag = _to_kebab_case(key)
            if value is True:
                args.append(f"--{flag}")
            elif value is False:
                if flag in _NEGATABLE_OPTIONS:
                    args.append(f"--no-{flag}")
                else:
                    # Off is the prettier default for every other boolean flag
                    logger.debug("Formatter option '%s' is off by default", key)
            elif isinstance(value, (list, tuple)):
                args.extend(f"--{flag}={item}" for item in value)
            elif value is not None:
                args.append(f"--{flag}={value}")
        return args

    def format(self, code: str) -> str:
        args = self.build_args()
        logger.debug("Running formatter: %s", " ".join(args))

        try:
            result = subprocess.run(
                args,
                input=code,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise FormatterError(
                f"Formatter executable '{self.command[0]}' not found. "
                "Install Node.js and prettier or use the basic formatter."
            ) from e
        except subprocess.TimeoutExpired as e:
            raise FormatterError(f"Formatter timed out after {self.timeout}s") from e

        if result.returncode != 0:
            raise FormatterError(
                f"Formatter failed with exit code {result.returncode}: "
                f"{result.stderr.strip()}"
            )

        return result.stdout


def _to_kebab_case(name: str) -> str:
    return re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", name).replace("_", "-").lower()


def create_formatter(name: str, options: Optional[Dict[str, Any]] = None) -> CodeFormatter:
    """
    Create the formatter selected in the configuration.

    Args:
        name: 'prettier' or 'basic'
        options: Prettier options, ignored by the basic formatter

    Returns:
        Formatter instance
    """
    if name == "basic":
        return BasicFormatter()
    return PrettierFormatter(options)
