"""binstubs.directives

Parse the ``binstub:`` directive out of an import line's trailing comment.

Recognised forms::

    // binstub:ignore
    // binstub:args="-tags postgres"
    // binstub:args=-race

Comments without ``binstub:`` are ordinary comments and yield the defaults.
Unknown keywords are rejected rather than ignored, so a typo such as
``binstub:arg=...`` fails loudly instead of silently generating the wrong stub.
"""

from __future__ import annotations

import re
from typing import Optional

from .errors import DirectiveSyntaxError
from .models import GeneratorOption

DIRECTIVE_PREFIX = "binstub:"

# keyword, then an optional `=value` that is either quoted (closing quote
# optional) or bare, running to the end of the comment.
COMMENT_RE = re.compile(r'binstub:(\w+)(?:=(?:"([^"]*)"?|(.*\S)))?')

IGNORE = "ignore"
ARGS = "args"


def parse_comment(comment: str, *, line_no: Optional[int] = None) -> GeneratorOption:
    """Return the :class:`GeneratorOption` encoded in *comment*.

    Raises :class:`DirectiveSyntaxError` for an unknown keyword, or for
    ``args`` without a non-empty value.
    """
    m = COMMENT_RE.search(comment or "")
    if m is None:
        if DIRECTIVE_PREFIX in (comment or ""):
            raise DirectiveSyntaxError(comment, "missing directive keyword", line_no=line_no)
        return GeneratorOption()

    keyword = m.group(1)
    value = m.group(2) if m.group(2) is not None else m.group(3)

    if keyword == IGNORE:
        return GeneratorOption(skip=True)

    if keyword == ARGS:
        if not value or not value.strip():
            raise DirectiveSyntaxError(comment, "args requires a value", line_no=line_no)
        return GeneratorOption(extra_args=value.strip())

    raise DirectiveSyntaxError(comment, f"unknown directive {keyword!r}", line_no=line_no)
