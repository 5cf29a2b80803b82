"""binstubs.models

Small value types passed between the scanner, the directive parser and the
generator. None of them outlive a single run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


DEFAULT_TOOLS_FILE = Path("tools.go")
DEFAULT_OUTPUT_DIR = Path("bin")
DEFAULT_GO_RUN = "go run"


@dataclass(frozen=True)
class ImportDeclaration:
    """One blank-import line from the declaration file."""

    module_path: str
    trailing_comment: str = ""
    line_no: int = 0

    def __post_init__(self) -> None:
        if not self.module_path:
            raise ValueError("module_path must be non-empty")


@dataclass(frozen=True)
class GeneratorOption:
    """Generator options parsed from a trailing ``binstub:`` comment."""

    skip: bool = False
    extra_args: str = ""


@dataclass(frozen=True)
class TemplateArgs:
    run_command: str
    module_path: str


@dataclass(frozen=True)
class BinstubsConfig:
    """Where to read declarations from and where to write stubs.

    Relative paths are resolved against the current working directory.
    """

    tools_file: Path = DEFAULT_TOOLS_FILE
    output_dir: Path = DEFAULT_OUTPUT_DIR
    go_run: str = DEFAULT_GO_RUN


@dataclass
class GenerationResult:
    """Outcome of one run.

    ``matched`` counts every import line, including the skipped ones.
    """

    matched: int = 0
    written: List[Path] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
