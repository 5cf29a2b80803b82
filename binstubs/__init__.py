"""binstubs

Generate ``bin/`` shell stubs for the Go tools a project pins in ``tools.go``.

Layout
------
* :mod:`binstubs.scanner` - find blank-import lines in the declaration file
* :mod:`binstubs.directives` - parse ``binstub:`` trailing comments
* :mod:`binstubs.generator` - render and write one stub per import
* :mod:`binstubs.config` / :mod:`binstubs.cli` - the composition root

Parsing and generation never print or exit; only :func:`binstubs.cli.main`
turns errors into messages and exit codes.
"""

from __future__ import annotations

from .errors import (
    BinstubsError,
    ConfigError,
    DirectiveSyntaxError,
    InvalidModulePathError,
    NoDeclarationsFound,
)
from .generator import generate_all, generate_binstub, run
from .models import BinstubsConfig, GenerationResult, GeneratorOption, ImportDeclaration

__all__ = [
    "BinstubsConfig",
    "BinstubsError",
    "ConfigError",
    "DirectiveSyntaxError",
    "GenerationResult",
    "GeneratorOption",
    "ImportDeclaration",
    "InvalidModulePathError",
    "NoDeclarationsFound",
    "generate_all",
    "generate_binstub",
    "run",
]

__version__ = "0.1.0"
