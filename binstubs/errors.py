"""binstubs.errors

Exception types raised by the scanner, directive parser and generator.

Every failure is fatal to the run. These classes exist so the single
top-level handler in :mod:`binstubs.cli` can tell a clean "nothing to do"
exit (:class:`NoDeclarationsFound`) apart from a real abort. Filesystem
problems are left as the standard :class:`OSError`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class BinstubsError(Exception):
    """Base class for all binstubs errors."""


class ConfigError(BinstubsError):
    """The YAML config file is malformed."""


class DirectiveSyntaxError(BinstubsError):
    """A ``binstub:`` comment uses an unknown keyword or lacks a required value."""

    def __init__(self, comment: str, reason: str, *, line_no: Optional[int] = None) -> None:
        self.comment = comment
        self.reason = reason
        self.line_no = line_no
        where = f" on line {line_no}" if line_no else ""
        super().__init__(f"bad syntax for comment{where}: {comment!r} ({reason})")


class InvalidModulePathError(BinstubsError):
    """A module path has no final segment to name the stub after."""

    def __init__(self, module_path: str) -> None:
        self.module_path = module_path
        super().__init__(f"cannot derive a binstub name from module path {module_path!r}")


class NoDeclarationsFound(BinstubsError):
    """The declaration file contained no import lines."""

    def __init__(self, tools_file: Union[str, Path]) -> None:
        self.tools_file = tools_file
        super().__init__(f"no imports found in {tools_file}")
