"""binstubs.scanner

Find blank-import declarations in a ``tools.go`` style file.

A declaration line looks like::

    _ "github.com/golang-migrate/migrate/v4/cmd/migrate" // binstub:args="-tags postgres"

Anything else (package clause, ``import (``, plain comments, blank lines) is
not an import and is skipped without error.
"""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from .models import ImportDeclaration

logger = logging.getLogger(__name__)

# Anchored at line start so commented-out imports (`// _ "x"`) never match.
# A leading `import` keyword is allowed for the single-line form. Trailing
# text is only accepted after a `//` marker.
LINE_RE = re.compile(r'^\s*(?:import\s+)?_\s+"([^"]+)"\s*(?://\s*(.*?))?\s*$')


def match_line(line: str, line_no: int = 0) -> Optional[ImportDeclaration]:
    """Return the declaration on *line*, or ``None`` if it is not an import."""
    m = LINE_RE.match(line.rstrip("\r\n"))
    if m is None:
        return None
    return ImportDeclaration(module_path=m.group(1), trailing_comment=m.group(2) or "", line_no=line_no)


def scan_lines(lines: Iterable[str]) -> Iterator[ImportDeclaration]:
    """Yield one :class:`ImportDeclaration` per matching line, in order."""
    for line_no, line in enumerate(lines, start=1):
        decl = match_line(line, line_no)
        if decl is not None:
            logger.debug("line %d: import %s", line_no, decl.module_path)
            yield decl


@contextmanager
def scan_file(path: Union[str, Path]) -> Iterator[Iterator[ImportDeclaration]]:
    """Open the declaration file at *path* and yield a lazy scan over it.

    The file is closed when the ``with`` block exits, however it exits.
    Undecodable bytes are replaced, so a stray non-UTF-8 byte in an unrelated
    comment does not stop the scan.
    """
    with Path(path).open("r", encoding="utf-8", errors="replace") as f:
        yield scan_lines(f)
