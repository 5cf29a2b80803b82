"""binstubs.generator

Turn import declarations into executable stubs under the output directory.

The run is strictly sequential: one declaration in, at most one file out, in
file order. The first error aborts the run; stubs written before it stay on
disk. Re-running after fixing the input regenerates everything identically.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Iterable, Optional

from .directives import parse_comment
from .errors import InvalidModulePathError, NoDeclarationsFound
from .fs import write_text_executable
from .models import BinstubsConfig, GenerationResult, ImportDeclaration, TemplateArgs
from .scanner import scan_file
from .template import build_run_command, render_binstub

logger = logging.getLogger(__name__)


def binstub_name(module_path: str) -> str:
    """Final path segment of *module_path*.

    Examples
    --------
    "github.com/org/tool/cmd/foo" -> "foo"
    "github.com/org/tool/" -> "tool"
    """
    name = PurePosixPath(module_path).name
    if not name or name in {".", ".."}:
        raise InvalidModulePathError(module_path)
    return name


def generate_binstub(decl: ImportDeclaration, config: BinstubsConfig) -> Optional[Path]:
    """Write the stub for *decl* and return its path.

    Returns ``None`` when the declaration carries ``binstub:ignore``.
    """
    options = parse_comment(decl.trailing_comment, line_no=decl.line_no or None)
    if options.skip:
        logger.debug("skipping %s (binstub:ignore)", decl.module_path)
        return None

    path = Path(config.output_dir) / binstub_name(decl.module_path)
    args = TemplateArgs(
        run_command=build_run_command(options.extra_args, go_run=config.go_run),
        module_path=decl.module_path,
    )
    write_text_executable(path, render_binstub(args))
    logger.info("wrote %s", path)
    return path


def generate_all(declarations: Iterable[ImportDeclaration], config: BinstubsConfig) -> GenerationResult:
    """Generate a stub for every declaration.

    Raises :class:`NoDeclarationsFound` if *declarations* is empty.
    """
    Path(config.output_dir).mkdir(parents=True, exist_ok=True)

    result = GenerationResult()
    for decl in declarations:
        result.matched += 1
        path = generate_binstub(decl, config)
        if path is None:
            result.skipped.append(decl.module_path)
        else:
            result.written.append(path)

    if result.matched == 0:
        raise NoDeclarationsFound(config.tools_file)
    return result


def run(config: BinstubsConfig) -> GenerationResult:
    """Scan ``config.tools_file`` and generate every stub it declares."""
    with scan_file(config.tools_file) as declarations:
        return generate_all(declarations, config)
